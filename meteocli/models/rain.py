"""Rain check result model."""

from dataclasses import dataclass
from enum import StrEnum


class RainDataSource(StrEnum):
    GRAPH = "graph"  # 10-min / 1-h precipitation graph
    DAILY = "daily"  # today's forecast total
    NONE = "none"


@dataclass(frozen=True)
class RainCheckResult:
    plz: int
    within_minutes: int
    rain_expected: bool
    max_rain_mm: float
    message: str
    source: RainDataSource = RainDataSource.NONE
