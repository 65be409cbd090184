"""Text and JSON formatters for CLI output."""

import dataclasses
import json
from datetime import datetime, timedelta
from typing import Any

from meteocli.models.labels import (
    icon_description,
    icon_emoji,
    warn_level_label,
    warn_type_label,
)
from meteocli.models.plz import DayForecast, PLZDetail, WeatherWarning
from meteocli.models.rain import RainCheckResult


def sep(width: int) -> str:
    return "─" * width


def truncate(s: str, n: int) -> str:
    """Shorten s to at most n characters, marking the cut with an ellipsis."""
    if len(s) <= n:
        return s
    return s[: n - 1] + "…"


def _json_default(obj: Any) -> Any:
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, timedelta):
        return obj.total_seconds()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _to_plain(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (list, tuple)):
        return [_to_plain(o) for o in obj]
    return obj


def to_json(obj: Any) -> str:
    """Serialise a model (or list of models) as indented JSON."""
    return json.dumps(
        _to_plain(obj), indent=2, ensure_ascii=False, default=_json_default
    )


def format_error_json(err: Exception | str) -> str:
    return json.dumps({"error": str(err)}, indent=2)


def format_current_text(plz: int, detail: PLZDetail) -> str:
    lines = [sep(44), f"  Weather for PLZ {plz}", sep(44)]
    cw = detail.current_weather
    if cw is None:
        lines.append("  Current conditions unavailable")
    else:
        lines.append(f"  {icon_description(cw.icon)} ({icon_emoji(cw.icon)})")
        lines.append(f"  Temperature : {cw.temperature:.1f} °C")
        if cw.time is not None:
            observed = cw.time.astimezone().strftime("%Y-%m-%d %H:%M")
            lines.append(f"  Observed at : {observed}")
    lines.append(sep(44))

    if detail.forecast:
        today = detail.forecast[0]
        lines.append(
            f"  Today       : {today.temperature_min:.1f} / "
            f"{today.temperature_max:.1f} °C  rain {today.precipitation:.1f} mm"
        )
        lines.append(sep(44))
    return "\n".join(lines)


def format_forecast_text(plz: int, days: list[DayForecast]) -> str:
    lines = [
        sep(60),
        f"  {len(days)}-day forecast for PLZ {plz}",
        sep(60),
        f"  {'Date':<12} {'Conditions':<22} {'Min°C':>6} {'Max°C':>6}  {'Rain mm':>8}",
        sep(60),
    ]
    for day in days:
        label = f"{icon_description(day.icon_day)} ({icon_emoji(day.icon_day)})"
        lines.append(
            f"  {day.day_date:<12} {truncate(label, 22):<22} "
            f"{day.temperature_min:>6.1f} {day.temperature_max:>6.1f}  "
            f"{day.precipitation:>8.1f}"
        )
    lines.append(sep(60))
    return "\n".join(lines)


def format_warnings_text(warnings: list[WeatherWarning]) -> str:
    if not warnings:
        return "No active weather warnings."

    lines = [sep(60), f"  {len(warnings)} active warning(s)", sep(60)]
    for i, w in enumerate(warnings, start=1):
        lines.append(
            f"  [{i}] {warn_type_label(w.warn_type)} — {warn_level_label(w.warn_level)}"
        )
        if w.headline:
            lines.append(f"      {w.headline}")
        if w.valid_from or w.valid_to:
            lines.append(f"      {w.valid_from} → {w.valid_to}")
        if w.regions:
            lines.append(f"      Regions: {', '.join(w.regions)}")
        if i < len(warnings):
            lines.append("")
    lines.append(sep(60))
    return "\n".join(lines)


def format_rain_text(r: RainCheckResult) -> str:
    icon = "🌧️" if r.rain_expected else "☀️"
    return "\n".join([
        sep(50),
        f"  Rain check for PLZ {r.plz}  (next {r.within_minutes} min)",
        sep(50),
        f"  {icon}  {r.message}",
        sep(50),
    ])
