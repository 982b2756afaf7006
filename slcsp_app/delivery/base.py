"""Base classes for result line delivery."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

import structlog


class DeliveryStatus(Enum):
    """Result delivery status."""
    SUCCESS = "success"


@dataclass
class DeliveryResult:
    """Result of a delivery attempt."""
    status: DeliveryStatus
    message: Optional[str] = None
    line_count: int = 0


class BaseLineDelivery(ABC):
    """Base class for result line sinks."""

    def __init__(self, name: str, config: Any):
        self.name = name
        self.config = config
        self.logger = structlog.get_logger(f"slcsp.delivery.{name}")
        self._delivery_count = 0
        self._line_count = 0
        self._error_count = 0

    @abstractmethod
    def deliver(self, lines: Sequence[str]) -> DeliveryResult:
        """
        Write all lines to the configured destination.

        Args:
            lines: Output lines without line terminators

        Returns:
            Delivery result

        Raises:
            DeliveryError: If the destination cannot be written
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if delivery mechanism is writable."""
        pass

    def write_lines(self, lines: Sequence[str]) -> DeliveryResult:
        """Deliver lines and record statistics."""
        try:
            result = self.deliver(lines)
        except Exception:
            self._error_count += 1
            raise

        self._delivery_count += 1
        self._line_count += result.line_count
        return result

    def get_stats(self) -> dict[str, Any]:
        """Get delivery statistics."""
        return {
            "name": self.name,
            "delivery_count": self._delivery_count,
            "line_count": self._line_count,
            "error_count": self._error_count,
        }
