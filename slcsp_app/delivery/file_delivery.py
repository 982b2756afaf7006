"""File-based result delivery."""

import os
import tempfile
from pathlib import Path
from typing import Sequence

from ..config.delivery import FileDeliveryConfig
from ..errors import DeliveryError
from .base import BaseLineDelivery, DeliveryResult, DeliveryStatus


class FileLineDelivery(BaseLineDelivery):
    """
    Writes result lines to a file.

    Lines go to a temporary file in the target directory that replaces the
    target only once fully written, so readers never see a partial result.
    """

    def __init__(self, name: str, config: FileDeliveryConfig):
        super().__init__(name, config)
        self.config: FileDeliveryConfig = config
        self.output_path = Path(config.output_path)

    def deliver(self, lines: Sequence[str]) -> DeliveryResult:
        """Deliver lines to the output file."""
        tmp_path = None
        try:
            if self.config.create_dirs:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)

            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.output_path.name}.",
                suffix=".tmp",
                dir=self.output_path.parent
            )
            tmp_path = Path(tmp_name)
            with os.fdopen(fd, "w", encoding=self.config.encoding, newline="\n") as f:
                for line in lines:
                    f.write(f"{line}\n")
            # mkstemp creates the file owner-only
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, self.output_path)
            tmp_path = None

        except OSError as e:
            self.logger.error(
                "Failed to write results file",
                delivery_name=self.name,
                output_path=str(self.output_path),
                error=str(e)
            )
            raise DeliveryError(
                f"File system error: {e}",
                delivery_method="file",
                target=str(self.output_path)
            ) from e

        finally:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()

        self.logger.info(
            "Results written to file",
            delivery_name=self.name,
            output_path=str(self.output_path),
            lines=len(lines)
        )
        return DeliveryResult(
            status=DeliveryStatus.SUCCESS,
            message=f"Written to {self.output_path}",
            line_count=len(lines)
        )

    def health_check(self) -> bool:
        """Check if the output directory is writable."""
        directory = self.output_path.parent
        if directory.exists():
            return os.access(directory, os.W_OK)
        return self.config.create_dirs
