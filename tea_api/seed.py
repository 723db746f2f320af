"""Demo data for a fresh store.

Loaded at startup when SEED_DEMO_DATA is set, so a generated API spec can
be checked against non-empty list responses.
"""

import logging
from datetime import timedelta

from tea_api.models import (
    Brew,
    BrewStatus,
    CaffeineLevel,
    Steep,
    Tea,
    Teapot,
    TeapotMaterial,
    TeapotStyle,
    TeaType,
)
from tea_api.models.mixins import new_id, utcnow
from tea_api.store import MemoryStore

logger = logging.getLogger(__name__)


def seed_demo_data(store: MemoryStore) -> dict[str, int]:
    """Create a few teapots, teas, one finished brew and its steeps."""
    now = utcnow()

    def at(minutes_ago: int):
        return now - timedelta(minutes=minutes_ago)

    teapots = [
        Teapot(
            id=new_id(),
            name="Classic English Teapot",
            material=TeapotMaterial.CERAMIC,
            capacity_ml=1200,
            style=TeapotStyle.ENGLISH,
            description="A traditional English teapot",
            created_at=at(60),
            updated_at=at(60),
        ),
        Teapot(
            id=new_id(),
            name="My Kyusu",
            material=TeapotMaterial.CLAY,
            capacity_ml=350,
            style=TeapotStyle.KYUSU,
            created_at=at(50),
            updated_at=at(50),
        ),
    ]
    teas = [
        Tea(
            id=new_id(),
            name="Dragon Well",
            type=TeaType.GREEN,
            origin="Hangzhou, China",
            caffeine_level=CaffeineLevel.MEDIUM,
            steep_temp_celsius=80,
            steep_time_seconds=120,
            created_at=at(40),
            updated_at=at(40),
        ),
        Tea(
            id=new_id(),
            name="Earl Grey",
            type=TeaType.BLACK,
            origin="England",
            caffeine_level=CaffeineLevel.HIGH,
            steep_temp_celsius=95,
            steep_time_seconds=240,
            created_at=at(30),
            updated_at=at(30),
        ),
    ]
    for teapot in teapots:
        store.create_teapot(teapot)
    for tea in teas:
        store.create_tea(tea)

    kyusu, dragon_well = teapots[1], teas[0]
    brew = Brew(
        id=new_id(),
        teapot_id=kyusu.id,
        tea_id=dragon_well.id,
        status=BrewStatus.SERVED,
        water_temp_celsius=dragon_well.steep_temp_celsius,
        notes="Using filtered water",
        started_at=at(20),
        completed_at=at(10),
        created_at=at(20),
        updated_at=at(10),
    )
    store.create_brew(brew)

    for number, (duration, rating) in enumerate([(30, 4), (45, 5), (60, 3)], start=1):
        store.create_steep(
            Steep(
                id=new_id(),
                brew_id=brew.id,
                steep_number=number,
                duration_seconds=duration,
                rating=rating,
                created_at=at(20 - number * 3),
            )
        )

    counts = store.counts()
    logger.info(f"Seeded demo data: {counts}")
    return counts
