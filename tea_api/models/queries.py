"""List query parameters passed to the store."""

from dataclasses import dataclass

from tea_api.models.enums import BrewStatus, CaffeineLevel, TeapotMaterial, TeapotStyle, TeaType


@dataclass
class PageQuery:
    """Page window for a list call. Both values are already defaulted and bounded."""

    page: int = 1
    limit: int = 20


@dataclass
class TeapotQuery(PageQuery):
    material: TeapotMaterial | None = None
    style: TeapotStyle | None = None


@dataclass
class TeaQuery(PageQuery):
    type: TeaType | None = None
    caffeine_level: CaffeineLevel | None = None


@dataclass
class BrewQuery(PageQuery):
    status: BrewStatus | None = None
    teapot_id: str | None = None
    tea_id: str | None = None
