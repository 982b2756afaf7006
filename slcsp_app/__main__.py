"""
Process entry point.

Runs the pipeline with the configured sources; there are no command line
flags. Exit status: 0 on success, 1 on an input or delivery failure, 2 on
invalid configuration. On failure nothing is written to stdout.
"""

import sys
from typing import Optional

import structlog

from .config.loader import ConfigLoader
from .engine import SlcspEngine
from .errors import ConfigurationError, DataQualityError, SystemFailureError
from .logging.config import configure_logging

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def main() -> int:
    """Run the SLCSP pipeline once."""
    try:
        config = ConfigLoader.create().load()
    except ConfigurationError as e:
        configure_logging()
        structlog.get_logger(__name__).error("Configuration failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json,
        include_timestamp=config.logging.include_timestamp,
    )
    logger = structlog.get_logger(__name__)

    try:
        report = SlcspEngine(config=config).run()
    except (DataQualityError, SystemFailureError) as e:
        logger.error("Run aborted", error=str(e), error_type=type(e).__name__)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    logger.info(
        "Run complete",
        lines=len(report.lines),
        resolved=report.resolved_count
    )
    return EXIT_OK


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
