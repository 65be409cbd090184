"""Maximum precipitation over a look-ahead window across graph series."""

from datetime import datetime, timedelta

from meteocli.models.precipitation import PrecipitationSeries, TwoResolutionGraph


def rain_in_window(
    graph: TwoResolutionGraph | None, now: datetime, duration: timedelta
) -> tuple[float, bool]:
    """Return (max_mm, found) over all slots overlapping [now, now + duration].

    A slot overlaps when it starts at or before the window end and ends
    strictly after ``now``. So a slot ending exactly at ``now`` is excluded
    and a slot starting exactly at ``now + duration`` is included.

    ``found`` is True as soon as any slot overlaps, including dry ones:
    a 0.0 maximum with found=True means "no rain", whereas found=False
    means the window lies outside the available data.

    Each series is scanned on absolute time, so gaps or overlaps between
    the high- and low-resolution tracks need no special handling.
    """
    max_mm = 0.0
    found = False
    if graph is None:
        return max_mm, found

    end = now + duration
    for series in graph.series():
        series_max, series_found = _scan_series(series, now, end)
        if series_found:
            found = True
            if series_max > max_mm:
                max_mm = series_max
    return max_mm, found


def _scan_series(
    series: PrecipitationSeries, now: datetime, end: datetime
) -> tuple[float, bool]:
    max_mm = 0.0
    found = False
    for slot_start, slot_end, mm in series.slots():
        if slot_start > end:
            break
        if slot_end <= now:
            continue
        found = True
        if mm > max_mm:
            max_mm = mm
    return max_mm, found
