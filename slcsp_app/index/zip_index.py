"""ZIP code -> rating areas index."""

from collections import defaultdict
from typing import Iterable, Optional

import structlog

from ..data.models import RatingAreaKey, ZipRecord

logger = structlog.get_logger(__name__)


class ZipIndex:
    """
    Set of distinct rating areas per ZIP code.

    A ZIP spanning several counties appears on several rows; rows naming the
    same rating area collapse into one entry. More than one entry means the
    ZIP is ambiguous.
    """

    def __init__(self, areas: Optional[dict[str, set[RatingAreaKey]]] = None):
        self._areas: dict[str, frozenset[RatingAreaKey]] = {
            zip_code: frozenset(keys) for zip_code, keys in (areas or {}).items()
        }

    @classmethod
    def build(cls, zips: Iterable[ZipRecord]) -> "ZipIndex":
        """Build the index from ZIP records (header already removed)."""
        grouped: dict[str, set[RatingAreaKey]] = defaultdict(set)
        count = 0

        for record in zips:
            grouped[record.zip_code].add(record.rating_area)
            count += 1

        index = cls(grouped)
        logger.info(
            "ZIP index built",
            zip_codes=len(index),
            records=count,
            ambiguous_zip_codes=sum(1 for areas in index._areas.values() if len(areas) > 1)
        )
        return index

    def lookup(self, zip_code: str) -> frozenset[RatingAreaKey]:
        """Rating areas of a ZIP code; empty when the ZIP is unknown."""
        return self._areas.get(zip_code, frozenset())

    def __contains__(self, zip_code: object) -> bool:
        return zip_code in self._areas

    def __len__(self) -> int:
        return len(self._areas)
