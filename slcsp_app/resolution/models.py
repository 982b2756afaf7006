"""Resolution result models."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from ..data.models import RatingAreaKey


class ResolutionOutcome(str, Enum):
    """Why a ZIP did or did not get a rate."""
    RESOLVED = "resolved"
    UNKNOWN_ZIP = "unknown_zip"            # ZIP absent from the rating area table
    AMBIGUOUS_ZIP = "ambiguous_zip"        # ZIP maps to more than one rating area
    NO_RATES = "no_rates"                  # no plans of the metal level in the area
    SINGLE_RATE = "single_rate"            # only one distinct rate in the area


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one target ZIP."""
    zip_code: str
    outcome: ResolutionOutcome
    rating_area: Optional[RatingAreaKey] = None
    rate: Optional[Decimal] = None

    @property
    def resolved(self) -> bool:
        return self.outcome is ResolutionOutcome.RESOLVED
