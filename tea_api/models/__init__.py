"""Entity records and list queries."""

from tea_api.models.brew import Brew
from tea_api.models.enums import (
    BrewStatus,
    CaffeineLevel,
    HealthStatus,
    TeapotMaterial,
    TeapotStyle,
    TeaType,
)
from tea_api.models.queries import BrewQuery, PageQuery, TeapotQuery, TeaQuery
from tea_api.models.steep import Steep
from tea_api.models.tea import Tea
from tea_api.models.teapot import Teapot

__all__ = [
    "Teapot",
    "Tea",
    "Brew",
    "Steep",
    "TeapotMaterial",
    "TeapotStyle",
    "TeaType",
    "CaffeineLevel",
    "BrewStatus",
    "HealthStatus",
    "PageQuery",
    "TeapotQuery",
    "TeaQuery",
    "BrewQuery",
]
