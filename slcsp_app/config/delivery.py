"""Configuration for result line delivery."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .defaults import OutputParams


class DeliveryMethod(Enum):
    """Supported result delivery methods."""
    STDOUT = "stdout"
    FILE_OUTPUT = "file"


@dataclass(frozen=True)
class StdoutDeliveryConfig:
    """Configuration for stdout delivery."""
    flush: bool = True


@dataclass(frozen=True)
class FileDeliveryConfig:
    """Configuration for file-based delivery."""
    output_path: str
    encoding: str = "utf-8"
    create_dirs: bool = True


@dataclass(frozen=True)
class DeliveryDestination:
    """Single result delivery destination."""
    name: str
    method: DeliveryMethod
    config: Any  # StdoutDeliveryConfig | FileDeliveryConfig


def destination_from_output(output: OutputParams) -> DeliveryDestination:
    """Build the delivery destination described by the output parameters."""
    method = DeliveryMethod(output.destination)

    if method is DeliveryMethod.FILE_OUTPUT:
        return DeliveryDestination(
            name="file",
            method=method,
            config=FileDeliveryConfig(
                output_path=output.output_path,
                create_dirs=output.create_dirs,
            ),
        )

    return DeliveryDestination(
        name="stdout",
        method=method,
        config=StdoutDeliveryConfig(),
    )
