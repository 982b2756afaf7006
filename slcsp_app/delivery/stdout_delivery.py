"""Standard output result delivery."""

import sys
from typing import Optional, Sequence, TextIO

from ..config.delivery import StdoutDeliveryConfig
from ..errors import DeliveryError
from .base import BaseLineDelivery, DeliveryResult, DeliveryStatus


class StdoutLineDelivery(BaseLineDelivery):
    """Writes result lines to a text stream, stdout by default."""

    def __init__(self, name: str = "stdout", config: Optional[StdoutDeliveryConfig] = None,
                 stream: Optional[TextIO] = None):
        config = config or StdoutDeliveryConfig()
        super().__init__(name, config)
        self.config: StdoutDeliveryConfig = config
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Looked up lazily so redirected stdout (pytest capture) is honoured
        return self._stream if self._stream is not None else sys.stdout

    def deliver(self, lines: Sequence[str]) -> DeliveryResult:
        """Deliver lines to the stream."""
        try:
            for line in lines:
                self.stream.write(f"{line}\n")
            if self.config.flush:
                self.stream.flush()
        except (OSError, ValueError) as e:
            self.logger.error(
                "Failed to write results to stdout",
                delivery_name=self.name,
                error=str(e)
            )
            raise DeliveryError(
                f"Stdout error: {e}",
                delivery_method="stdout"
            ) from e

        self.logger.info(
            "Results written to stdout",
            delivery_name=self.name,
            lines=len(lines)
        )
        return DeliveryResult(
            status=DeliveryStatus.SUCCESS,
            message="Printed to stdout",
            line_count=len(lines)
        )

    def health_check(self) -> bool:
        """Check if the stream is available."""
        try:
            return self.stream.writable()
        except (OSError, ValueError):
            return False
