"""Models for the MeteoSwiss plzDetail response."""

from dataclasses import dataclass, field
from datetime import datetime

from meteocli.models.precipitation import TwoResolutionGraph


@dataclass(frozen=True)
class CurrentWeather:
    time: datetime | None
    icon: int
    temperature: float


@dataclass(frozen=True)
class DayForecast:
    day_date: str  # YYYY-MM-DD
    icon_day: int
    temperature_max: float
    temperature_min: float
    precipitation: float
    precipitation_min: float = 0.0
    precipitation_max: float = 0.0


@dataclass(frozen=True)
class WeatherWarning:
    warn_type: int
    warn_level: int
    valid_from: str = ""
    valid_to: str = ""
    regions: tuple[str, ...] = ()
    headline: str = ""
    body: str = ""


@dataclass(frozen=True)
class PLZDetail:
    current_weather: CurrentWeather | None = None
    forecast: list[DayForecast] = field(default_factory=list)
    warnings: list[WeatherWarning] = field(default_factory=list)
    graph: TwoResolutionGraph | None = None
