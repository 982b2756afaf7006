"""
Canonical data models for the rate, ZIP and target tables.

All records are immutable; they are built once from input rows and only read
afterwards.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, order=True)
class RatingAreaKey:
    """State-scoped rating area identifier.

    Compared and hashed field-wise, so ("G", "A7") and ("GA", "7") are
    different areas even though their concatenations match.
    """
    state: str
    rate_area: str

    def __str__(self) -> str:
        return f"{self.state}{self.rate_area}"


@dataclass(frozen=True)
class PlanRecord:
    """One row of the plans table."""
    plan_id: str
    state: str
    metal_level: str
    rate: Decimal
    rate_area: str

    @property
    def rating_area(self) -> RatingAreaKey:
        return RatingAreaKey(self.state, self.rate_area)


@dataclass(frozen=True)
class ZipRecord:
    """One row of the ZIP-to-rating-area table."""
    zip_code: str
    state: str
    county_code: str
    county_name: str
    rate_area: str

    @property
    def rating_area(self) -> RatingAreaKey:
        return RatingAreaKey(self.state, self.rate_area)


@dataclass(frozen=True)
class TargetZip:
    """A ZIP code requested in the target list."""
    zip_code: str
    line_number: int = 0
