"""Rating area -> plan rates index."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional

import structlog

from ..data.models import PlanRecord, RatingAreaKey

logger = structlog.get_logger(__name__)


class RateIndex:
    """
    Multiset of plan rates per rating area.

    Duplicate rates are kept: two plans priced the same in one area are two
    entries. Distinctness is only applied when ranking.
    """

    def __init__(self, rates: Optional[dict[RatingAreaKey, list[Decimal]]] = None):
        self._rates: dict[RatingAreaKey, tuple[Decimal, ...]] = {
            key: tuple(values) for key, values in (rates or {}).items()
        }

    @classmethod
    def build(cls, plans: Iterable[PlanRecord], metal_level: Optional[str] = "Silver") -> "RateIndex":
        """
        Build the index from plan records.

        Args:
            plans: Plan records, in any order
            metal_level: Only plans of this level contribute; None keeps all

        Returns:
            Populated RateIndex
        """
        grouped: dict[RatingAreaKey, list[Decimal]] = defaultdict(list)
        count = 0

        for plan in plans:
            if metal_level is not None and plan.metal_level != metal_level:
                continue
            grouped[plan.rating_area].append(plan.rate)
            count += 1

        index = cls(grouped)
        logger.info(
            "Rate index built",
            rating_areas=len(index),
            rates=count,
            metal_level=metal_level
        )
        return index

    def lookup(self, key: RatingAreaKey) -> tuple[Decimal, ...]:
        """Rates available in a rating area; empty when the area is unknown."""
        return self._rates.get(key, ())

    def keys(self) -> list[RatingAreaKey]:
        return list(self._rates)

    def __contains__(self, key: object) -> bool:
        return key in self._rates

    def __len__(self) -> int:
        return len(self._rates)
