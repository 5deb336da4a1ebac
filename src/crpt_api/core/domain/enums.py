from __future__ import annotations

from enum import Enum
from typing import Optional


class TimeUnit(Enum):
    MILLISECONDS = "MILLISECONDS"
    SECONDS = "SECONDS"
    MINUTES = "MINUTES"
    HOURS = "HOURS"
    DAYS = "DAYS"

    @property
    def seconds(self) -> float:
        """Length of one unit in seconds (the limiter window is one unit long)."""
        return _UNIT_SECONDS[self]

    @classmethod
    def from_str(cls, value: str) -> Optional["TimeUnit"]:
        """Parse a unit name, case-insensitive, accepting singular forms ("minute")."""
        s = value.strip().upper()
        if not s:
            return None
        if not s.endswith("S"):
            s += "S"
        try:
            return cls(s)
        except ValueError:
            return None


_UNIT_SECONDS = {
    TimeUnit.MILLISECONDS: 0.001,
    TimeUnit.SECONDS: 1.0,
    TimeUnit.MINUTES: 60.0,
    TimeUnit.HOURS: 3600.0,
    TimeUnit.DAYS: 86400.0,
}


class ProductGroup(str, Enum):
    """Product group codes accepted by the registry."""

    CLOTHES = "clothes"
    SHOES = "shoes"
    TOBACCO = "tobacco"
    PERFUMERY = "perfumery"
    TIRES = "tires"
    ELECTRONICS = "electronics"
    PHARMA = "pharma"
    MILK = "milk"
    BICYCLE = "bicycle"
    WHEELCHAIRS = "wheelchairs"


class DocumentFormat(str, Enum):
    MANUAL = "MANUAL"


class DocumentType(str, Enum):
    LP_INTRODUCE_GOODS = "LP_INTRODUCE_GOODS"
