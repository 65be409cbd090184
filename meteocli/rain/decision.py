"""Rain check: graph-based answer with a daily-forecast fallback."""

import logging
from datetime import datetime, timedelta

from meteocli.models.plz import DayForecast
from meteocli.models.precipitation import TwoResolutionGraph
from meteocli.models.rain import RainCheckResult, RainDataSource
from meteocli.rain.window import rain_in_window

logger = logging.getLogger(__name__)


def check_rain(
    plz: int,
    within_minutes: int,
    graph: TwoResolutionGraph | None,
    forecast: list[DayForecast] | None,
    now: datetime,
) -> RainCheckResult:
    """Decide whether rain is expected in the next ``within_minutes``.

    Order of preference:
      1. the precipitation graph, when it has high-resolution data and the
         window overlaps it (a dry answer here is final);
      2. today's daily precipitation total, flagged as lower confidence;
      3. an "unavailable" result.

    Never raises: missing data is reported in the result.
    """
    if graph is not None and graph.has_high_res:
        max_mm, found = rain_in_window(
            graph, now, timedelta(minutes=within_minutes)
        )
        if found:
            rain_expected = max_mm > 0
            if rain_expected:
                message = (
                    f"Rain expected: up to {max_mm:.1f} mm "
                    f"in the next {within_minutes} min"
                )
            else:
                message = f"No rain expected in the next {within_minutes} min"
            logger.debug(
                "PLZ %d: graph max %.1f mm in %d min window",
                plz, max_mm, within_minutes,
            )
            return RainCheckResult(
                plz=plz,
                within_minutes=within_minutes,
                rain_expected=rain_expected,
                max_rain_mm=max_mm,
                message=message,
                source=RainDataSource.GRAPH,
            )
        logger.info(
            "PLZ %d: window starting %s is outside graph coverage",
            plz, now.isoformat(),
        )

    if forecast:
        today = forecast[0]
        rain_expected = today.precipitation > 0
        if rain_expected:
            message = (
                f"Rain possible today: {today.precipitation:.1f} mm forecast "
                "(hourly data unavailable)"
            )
        else:
            message = "No rain expected today (hourly data unavailable)"
        logger.debug("PLZ %d: falling back to daily forecast", plz)
        return RainCheckResult(
            plz=plz,
            within_minutes=within_minutes,
            rain_expected=rain_expected,
            max_rain_mm=today.precipitation,
            message=message,
            source=RainDataSource.DAILY,
        )

    logger.debug("PLZ %d: no graph or forecast data", plz)
    return RainCheckResult(
        plz=plz,
        within_minutes=within_minutes,
        rain_expected=False,
        max_rain_mm=0.0,
        message="Rain data unavailable",
        source=RainDataSource.NONE,
    )
