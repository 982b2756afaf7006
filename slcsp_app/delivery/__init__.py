"""
Result delivery module.

Sinks that write the rendered result lines: stdout or a file.
"""

from ..config.delivery import DeliveryDestination, DeliveryMethod
from .base import BaseLineDelivery, DeliveryResult, DeliveryStatus
from .file_delivery import FileLineDelivery
from .stdout_delivery import StdoutLineDelivery


def create_delivery(destination: DeliveryDestination) -> BaseLineDelivery:
    """Instantiate the sink for a delivery destination."""
    if destination.method is DeliveryMethod.FILE_OUTPUT:
        return FileLineDelivery(destination.name, destination.config)
    return StdoutLineDelivery(destination.name, destination.config)


__all__ = [
    "BaseLineDelivery",
    "DeliveryResult",
    "DeliveryStatus",
    "FileLineDelivery",
    "StdoutLineDelivery",
    "create_delivery",
]
