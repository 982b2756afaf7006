"""
Main pipeline coordinator.

Orchestrates the SLCSP computation:
Plans + Zips -> Indices -> Per-ZIP Resolution -> Result Lines -> Delivery

Every input is read and every line rendered before anything is delivered,
so a fatal error leaves no partial output behind.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import AppConfig
from .config.delivery import destination_from_output
from .config.loader import ConfigLoader
from .data.models import TargetZip
from .data.parsers import load_plans, load_targets, load_zips
from .delivery import BaseLineDelivery, DeliveryResult, create_delivery
from .errors import DataQualityError, DeliveryError, SystemFailureError
from .index import RateIndex, ZipIndex
from .logging.config import configure_logging
from .resolution import Resolution, ResolutionOutcome, render_lines, resolve_all

logger = structlog.get_logger(__name__)


@dataclass
class RunReport:
    """Summary of one pipeline run."""
    lines: list[str]
    resolutions: list[Resolution]
    outcome_counts: dict[str, int] = field(default_factory=dict)
    delivery: Optional[DeliveryResult] = None

    @property
    def resolved_count(self) -> int:
        return self.outcome_counts.get(ResolutionOutcome.RESOLVED.value, 0)


class SlcspEngine:
    """
    Coordinator for the second lowest cost Silver plan computation.

    Builds the rate and ZIP indices from the configured sources, resolves
    the target ZIPs in input order and hands the rendered lines to the
    configured delivery.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
        delivery: Optional[BaseLineDelivery] = None,
    ) -> None:
        """Initialize the engine from an explicit config or the config loader."""
        self.logger = logger
        self.config = config if config is not None else ConfigLoader.create(config_dir).load(overrides)
        if not structlog.is_configured():
            # structlog falls back to printing on stdout, which carries results
            configure_logging(
                level=self.config.logging.level,
                format_json=self.config.logging.format_json,
                include_timestamp=self.config.logging.include_timestamp,
            )
        self.delivery = delivery if delivery is not None else create_delivery(
            destination_from_output(self.config.output)
        )

        self.logger.info(
            "SLCSP engine initialized",
            plans_path=self.config.sources.plans_path,
            zips_path=self.config.sources.zips_path,
            targets_path=self.config.sources.targets_path,
            destination=self.config.output.destination,
            strict_legacy_format=self.config.output.strict_legacy_format
        )

    def build_rate_index(self) -> RateIndex:
        """Read the plans table and index its rates by rating area."""
        src = self.config.sources
        metal_level = self.config.rates.metal_level
        plans = load_plans(
            src.plans_path,
            metal_level=metal_level,
            delimiter=src.delimiter,
            encoding=src.encoding,
        )
        return RateIndex.build(plans, metal_level=metal_level)

    def build_zip_index(self) -> ZipIndex:
        """Read the zips table and index rating areas by ZIP code."""
        src = self.config.sources
        zips = load_zips(src.zips_path, delimiter=src.delimiter, encoding=src.encoding)
        return ZipIndex.build(zips)

    def load_targets(self) -> list[TargetZip]:
        """Read the ordered target ZIP list."""
        src = self.config.sources
        return load_targets(src.targets_path, delimiter=src.delimiter, encoding=src.encoding)

    def compute(self) -> RunReport:
        """
        Compute all result lines without delivering them.

        Returns:
            RunReport with the rendered lines and per-ZIP resolutions

        Raises:
            DataQualityError: On the first malformed input row
            SystemFailureError: If an input source cannot be read
        """
        try:
            rate_index = self.build_rate_index()
            zip_index = self.build_zip_index()
            targets = self.load_targets()
        except (DataQualityError, SystemFailureError) as e:
            self.logger.error(
                "Input loading failed",
                error=str(e),
                error_type=type(e).__name__,
                context=e.context
            )
            raise

        resolutions = resolve_all(
            targets,
            zip_index,
            rate_index,
            workers=self.config.resolution.workers,
        )
        lines = render_lines(
            resolutions,
            header=self.config.output.header,
            strict_legacy_format=self.config.output.strict_legacy_format,
            places=self.config.rates.decimal_places,
        )

        counts = Counter(r.outcome.value for r in resolutions)
        report = RunReport(
            lines=lines,
            resolutions=resolutions,
            outcome_counts=dict(counts),
        )

        self.logger.info(
            "Target ZIPs resolved",
            targets=len(targets),
            **{outcome.value: counts.get(outcome.value, 0) for outcome in ResolutionOutcome}
        )
        return report

    def run(self) -> RunReport:
        """
        Compute the result lines and deliver them.

        Raises:
            DeliveryError: If the destination is not writable or the write fails
        """
        report = self.compute()

        if not self.delivery.health_check():
            self.logger.error(
                "Delivery destination unavailable",
                delivery_name=self.delivery.name
            )
            raise DeliveryError(
                f"Destination not writable: {self.delivery.name}",
                delivery_method=self.delivery.name
            )

        report.delivery = self.delivery.write_lines(report.lines)
        self.logger.info("Run complete", **self.delivery.get_stats())
        return report
