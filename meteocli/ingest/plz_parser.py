"""Parse the plzDetail JSON payload into models.

Every section of the payload is optional; missing or null sections become
None or empty lists rather than errors.
"""

import logging
from datetime import timedelta

from meteocli.models.common import from_unix_ms
from meteocli.models.plz import CurrentWeather, DayForecast, PLZDetail, WeatherWarning
from meteocli.models.precipitation import PrecipitationSeries, TwoResolutionGraph

logger = logging.getLogger(__name__)


def parse_plz_detail(
    raw: dict, high_res_slot_minutes: int = 10, low_res_slot_minutes: int = 60
) -> PLZDetail:
    return PLZDetail(
        current_weather=_parse_current(raw.get("currentWeather")),
        forecast=[_parse_day(d) for d in raw.get("forecast") or []],
        warnings=[_parse_warning(w) for w in raw.get("warnings") or []],
        graph=parse_graph(
            raw.get("graph"), high_res_slot_minutes, low_res_slot_minutes
        ),
    )


def parse_graph(
    raw: dict | None, high_res_slot_minutes: int = 10, low_res_slot_minutes: int = 60
) -> TwoResolutionGraph | None:
    """Build the two-resolution graph; a zero start means that track is absent."""
    if not raw:
        return None

    high_res = _series(
        raw.get("start"), raw.get("precipitation10m"), high_res_slot_minutes
    )
    low_res = _series(
        raw.get("startLowResolution"), raw.get("precipitation1h"), low_res_slot_minutes
    )
    if high_res is None and low_res is None:
        logger.info("Graph present but carries no usable series")
        return None
    return TwoResolutionGraph(high_res=high_res, low_res=low_res)


def _series(
    start_ms: int | None, values: list | None, slot_minutes: int
) -> PrecipitationSeries | None:
    start = from_unix_ms(start_ms)
    if start is None:
        return None
    return PrecipitationSeries(
        start=start,
        slot_width=timedelta(minutes=slot_minutes),
        values=tuple(_float(v) for v in values or []),
    )


def _parse_current(raw: dict | None) -> CurrentWeather | None:
    if not raw:
        return None
    return CurrentWeather(
        time=from_unix_ms(raw.get("time")),
        icon=int(raw.get("icon") or 0),
        temperature=_float(raw.get("temperature")),
    )


def _parse_day(raw: dict) -> DayForecast:
    return DayForecast(
        day_date=raw.get("dayDate") or "",
        icon_day=int(raw.get("iconDay") or 0),
        temperature_max=_float(raw.get("temperatureMax")),
        temperature_min=_float(raw.get("temperatureMin")),
        precipitation=_float(raw.get("precipitation")),
        precipitation_min=_float(raw.get("precipitationMin")),
        precipitation_max=_float(raw.get("precipitationMax")),
    )


def _parse_warning(raw: dict) -> WeatherWarning:
    return WeatherWarning(
        warn_type=int(raw.get("warnType") or 0),
        warn_level=int(raw.get("warnLevel") or 0),
        valid_from=raw.get("validFrom") or "",
        valid_to=raw.get("validTo") or "",
        regions=tuple(raw.get("regions") or ()),
        headline=raw.get("headline") or "",
        body=raw.get("body") or "",
    )


def _float(v) -> float:
    return float(v) if v is not None else 0.0
