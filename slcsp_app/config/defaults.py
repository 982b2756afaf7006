"""Default configuration parameters for the SLCSP resolver."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourceParams:
    """Input table locations and layout."""
    plans_path: str = "data/plans.csv"               # plan_id,state,metal_level,rate,rate_area
    zips_path: str = "data/zips.csv"                 # zipcode,state,county_code,name,rate_area
    targets_path: str = "data/slcsp.csv"             # zipcode[,rate]
    delimiter: str = ","
    encoding: str = "utf-8"


@dataclass(frozen=True)
class RateParams:
    """Rate selection and formatting parameters."""
    metal_level: str = "Silver"
    decimal_places: int = 2


@dataclass(frozen=True)
class OutputParams:
    """Output line format and destination."""
    # True: "<zip><rate>" with no separator, as existing consumers expect.
    # False: "<zip>,<rate>" on every row.
    strict_legacy_format: bool = True
    header: str = "zipcode,rate"
    destination: str = "stdout"                      # stdout | file
    output_path: Optional[str] = None
    create_dirs: bool = True


@dataclass(frozen=True)
class ResolutionParams:
    """Per-ZIP resolution parameters."""
    workers: int = 1                                 # >1 resolves on a thread pool


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    sources: SourceParams
    rates: RateParams
    output: OutputParams
    resolution: ResolutionParams
    logging: LoggingParams


def get_default_config() -> AppConfig:
    """Get the default configuration instance."""
    return AppConfig(
        sources=SourceParams(),
        rates=RateParams(),
        output=OutputParams(),
        resolution=ResolutionParams(),
        logging=LoggingParams(),
    )
