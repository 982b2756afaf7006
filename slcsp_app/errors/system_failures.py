"""
System failure error classifications.

These represent failures of the environment around the computation (missing
files, bad configuration, an unwritable sink) rather than bad row content.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class SourceUnavailableError(SystemFailureError):
    """An input source cannot be opened or read."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source


class ConfigurationError(SystemFailureError):
    """Configuration could not be loaded or failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class DeliveryError(SystemFailureError):
    """Result lines could not be written to their destination."""

    def __init__(self, message: str, delivery_method: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.delivery_method = delivery_method
        self.target = target
