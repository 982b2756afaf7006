"""
Data quality error classifications for input table processing.

Raised while turning raw rows of the plans, zips and target tables into
records. The pipeline does not attempt per-row recovery.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for problems with the content of an input source."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MalformedRecordError(DataQualityError):
    """A row is too short or carries a field that cannot be parsed."""

    def __init__(self, message: str, source: Optional[str] = None,
                 line_number: Optional[int] = None, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.line_number = line_number
        self.raw_data = raw_data
        self.expected_format = expected_format

    def __str__(self) -> str:
        base = super().__str__()
        if self.source is not None and self.line_number is not None:
            return f"{self.source}:{self.line_number}: {base}"
        return base
