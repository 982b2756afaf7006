"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from typing import Callable, Dict, List

import pytest

from slcsp_app.logging.config import configure_logging


@pytest.fixture(autouse=True)
def _stderr_logging() -> None:
    """Keep log output off stdout, which carries result lines.

    Reconfigured per test so the handler writes to the stderr that is
    current for this test.
    """
    configure_logging(level="WARNING", stream=sys.stderr)


@pytest.fixture
def plan_lines() -> List[str]:
    """Sample plans table, header included."""
    return [
        "plan_id,state,metal_level,rate,rate_area",
        "74449NR9870320,GA,Silver,298.62,7",
        "26325VH2723968,GA,Silver,312.45,7",
        "92479KL5541011,GA,Silver,298.62,7",
        "40205TB3427791,GA,Gold,345.17,7",
        "68493CI2346016,GA,Silver,287.30,8",
        "81823RR4506129,MO,Silver,245.20,3",
        "20459QV7845522,MO,Silver,251.08,3",
        "39311HH4930066,MO,Bronze,205.98,3",
        "56811TT6542970,AL,Silver,315.68,11",
        "34131DN9163071,WI,Silver,290.05,1",
        "43290SJ3960114,WI,Silver,265.82,1",
        "05127LB9123384,WI,Silver,290.05,1",
    ]


@pytest.fixture
def zip_lines() -> List[str]:
    """Sample zips table, header included."""
    return [
        "zipcode,state,county_code,name,rate_area",
        "30313,GA,13121,Fulton,7",
        "31210,GA,13021,Bibb,8",
        "31210,GA,13169,Jones,7",
        "64148,MO,29095,Jackson,3",
        "64148,MO,29095,Jackson,3",
        "36749,AL,01001,Autauga,11",
        "54923,WI,55047,Green Lake,1",
        "54923,WI,55139,Winnebago,1",
        "35004,TX,48001,Anderson,9",
    ]


@pytest.fixture
def target_lines() -> List[str]:
    """Sample target list with the legacy trailing delimiter."""
    return [
        "zipcode,rate",
        "30313,",
        "31210,",
        "64148,",
        "36749,",
        "54923,",
        "99999,",
        "35004,",
    ]


@pytest.fixture
def expected_legacy_lines() -> List[str]:
    """Result lines for the sample tables in legacy format."""
    return [
        "zipcode,rate",
        "30313312.45",
        "31210",
        "64148251.08",
        "36749",
        "54923290.05",
        "99999",
        "35004",
    ]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, List[str]], Path]:
    """Write lines to a file under tmp_path and return its path."""
    def _write(name: str, lines: List[str]) -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_sources(write_csv, plan_lines, zip_lines, target_lines) -> Dict[str, Path]:
    """The three sample tables on disk."""
    return {
        "plans": write_csv("plans.csv", plan_lines),
        "zips": write_csv("zips.csv", zip_lines),
        "targets": write_csv("slcsp.csv", target_lines),
    }


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Empty config directory, so only defaults and overrides apply."""
    path = tmp_path / "config"
    path.mkdir()
    return path


@pytest.fixture
def source_overrides(sample_sources) -> Dict[str, Dict[str, str]]:
    """Config overrides pointing at the sample tables."""
    return {
        "sources": {
            "plans_path": str(sample_sources["plans"]),
            "zips_path": str(sample_sources["zips"]),
            "targets_path": str(sample_sources["targets"]),
        }
    }
