"""Enums for model fields."""

from enum import StrEnum


class TeapotMaterial(StrEnum):
    """Materials a teapot can be made of."""

    CERAMIC = "ceramic"
    CAST_IRON = "cast-iron"
    GLASS = "glass"
    PORCELAIN = "porcelain"
    CLAY = "clay"
    STAINLESS_STEEL = "stainless-steel"


class TeapotStyle(StrEnum):
    """Teapot styles."""

    KYUSU = "kyusu"
    GAIWAN = "gaiwan"
    ENGLISH = "english"
    MOROCCAN = "moroccan"
    TURKISH = "turkish"
    YIXING = "yixing"


class TeaType(StrEnum):
    """Tea types."""

    GREEN = "green"
    BLACK = "black"
    OOLONG = "oolong"
    WHITE = "white"
    PUERH = "puerh"
    HERBAL = "herbal"
    ROOIBOS = "rooibos"


class CaffeineLevel(StrEnum):
    """Caffeine content levels."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class BrewStatus(StrEnum):
    """Status of a brewing session."""

    PREPARING = "preparing"
    STEEPING = "steeping"
    READY = "ready"
    SERVED = "served"
    COLD = "cold"


class HealthStatus(StrEnum):
    """Health check outcome."""

    OK = "ok"
    DEGRADED = "degraded"
    DOWN = "down"
