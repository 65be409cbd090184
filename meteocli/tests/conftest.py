"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import yaml

from meteocli.config.schema import CliConfig
from meteocli.models.precipitation import PrecipitationSeries, TwoResolutionGraph

# Fixed reference time so results do not depend on when tests run.
ANCHOR = datetime(2026, 2, 20, 12, 0, tzinfo=UTC)
HI = timedelta(minutes=10)
LO = timedelta(minutes=60)

TEST_BASE_URL = "https://test-meteoswiss.example.com/v1"


@pytest.fixture
def anchor() -> datetime:
    return ANCHOR


@pytest.fixture
def make_graph() -> Callable[..., TwoResolutionGraph]:
    """Build a graph with 10-min slots from ANCHOR, then 60-min slots.

    The low-resolution track starts right where the high-resolution one
    ends unless ``lo_start`` is given.
    """

    def _make(
        hi: list[float],
        lo: list[float] | None = None,
        lo_start: datetime | None = None,
    ) -> TwoResolutionGraph:
        high_res = PrecipitationSeries(start=ANCHOR, slot_width=HI, values=tuple(hi))
        low_res = None
        if lo:
            start = lo_start if lo_start is not None else ANCHOR + len(hi) * HI
            low_res = PrecipitationSeries(start=start, slot_width=LO, values=tuple(lo))
        return TwoResolutionGraph(high_res=high_res, low_res=low_res)

    return _make


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def plz_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "plz_detail_8000.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> CliConfig:
    return CliConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a config pointing at the test backend and return its path."""
    data = {
        "api": {"base_url": TEST_BASE_URL, "timeout_seconds": 5},
        "rain": {"default_within_minutes": 30},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
