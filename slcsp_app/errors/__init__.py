"""
Error classification for the SLCSP pipeline.

Every error defined here is fatal to a run: the pipeline stops and produces
no output. Unknown or ambiguous ZIPs and rating areas with too few rates are
not errors; they resolve to an empty rate.
"""

from .data_quality import (
    DataQualityError,
    MalformedRecordError,
)
from .system_failures import (
    SystemFailureError,
    SourceUnavailableError,
    ConfigurationError,
    DeliveryError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedRecordError",
    # System Failures
    "SystemFailureError",
    "SourceUnavailableError",
    "ConfigurationError",
    "DeliveryError",
]
