"""CLI entry point for meteocli."""

import argparse
import logging
import sys

from pydantic import ValidationError

from meteocli import __version__
from meteocli.config.loader import ConfigError, get_config_value, load_config
from meteocli.config.schema import CliConfig
from meteocli.ingest.meteoswiss_client import MeteoSwissClient, MeteoSwissError
from meteocli.models.common import utc_now
from meteocli.rain.decision import check_rain
from meteocli.reporting.formatters import (
    format_current_text,
    format_error_json,
    format_forecast_text,
    format_rain_text,
    format_warnings_text,
    to_json,
)

logger = logging.getLogger(__name__)

MIN_PLZ, MAX_PLZ = 1000, 9999
MAX_WITHIN_MINUTES = 1440
MAX_FORECAST_DAYS = 10


class UsageError(Exception):
    """Invalid option value detected before any request is made."""


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except (ConfigError, ValidationError) as e:
        _print_error(args, e)
        return 1

    _configure_logging(config, args.verbose)

    try:
        return _COMMANDS[args.command](config, args)
    except (UsageError, MeteoSwissError) as e:
        logger.debug("Command %s failed: %s", args.command, e)
        _print_error(args, e)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meteocli",
        description=(
            "Weather data from MeteoSwiss, right in your terminal: current "
            "conditions, multi-day forecasts, warnings and short-term rain "
            "checks for Swiss postal codes."
        ),
    )
    parser.add_argument(
        "--json", action="store_true", help="Output JSON instead of text"
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log more (-v info, -vv debug)",
    )
    parser.add_argument(
        "--version", action="version", version=f"meteocli {__version__}"
    )

    # --json is also accepted after the subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--json", action="store_true", default=argparse.SUPPRESS,
        help="Output JSON instead of text",
    )

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser(
        "weather", parents=[common],
        help="Current weather for a Swiss postal code",
    )
    _add_zip(weather_p)

    # forecast
    forecast_p = sub.add_parser(
        "forecast", parents=[common],
        help="Multi-day forecast for a Swiss postal code",
    )
    _add_zip(forecast_p)
    forecast_p.add_argument(
        "--days", type=int, default=None,
        help=f"Number of days to show (1-{MAX_FORECAST_DAYS}, default from config)",
    )

    # warnings
    warnings_p = sub.add_parser(
        "warnings", parents=[common],
        help="Active weather warnings for a Swiss postal code",
    )
    _add_zip(warnings_p)
    warnings_p.add_argument(
        "--min-level", type=int, default=1,
        help="Minimum warning level to show (1=Minor ... 5=Very high)",
    )

    # rain
    rain_p = sub.add_parser(
        "rain", parents=[common],
        help="Check if rain is expected within a time window",
    )
    _add_zip(rain_p)
    rain_p.add_argument(
        "--within", type=int, default=None,
        help=f"Look-ahead window in minutes (1-{MAX_WITHIN_MINUTES}, default from config)",
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    show_p = config_sub.add_parser("show", help="Display effective config")
    show_p.add_argument(
        "key", nargs="?", default=None,
        help="Dotted key to show, e.g. rain.default_within_minutes",
    )

    # version
    sub.add_parser("version", help="Print the version number")

    return parser


def _add_zip(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--zip", type=int, required=True, dest="plz",
        help="Swiss postal code (e.g. 8000 for Zurich)",
    )


def _configure_logging(config: CliConfig, verbose: int) -> None:
    level = logging.getLevelName(config.logging.level)
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = min(level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _print_error(args: argparse.Namespace, err: Exception) -> None:
    if getattr(args, "json", False):
        print(format_error_json(err), file=sys.stderr)
    else:
        print(f"Error: {err}", file=sys.stderr)


def require_plz(plz: int) -> None:
    """Validate that a postal code looks like a Swiss PLZ."""
    if plz < MIN_PLZ or plz > MAX_PLZ:
        raise UsageError(
            f"invalid Swiss postal code {plz}: must be between {MIN_PLZ} and {MAX_PLZ}"
        )


def _client(config: CliConfig) -> MeteoSwissClient:
    return MeteoSwissClient(
        base_url=config.api.base_url,
        user_agent=config.api.user_agent,
        timeout=config.api.timeout_seconds,
        high_res_slot_minutes=config.rain.high_res_slot_minutes,
        low_res_slot_minutes=config.rain.low_res_slot_minutes,
    )


def _cmd_weather(config: CliConfig, args: argparse.Namespace) -> int:
    require_plz(args.plz)
    detail = _client(config).fetch_plz_detail(args.plz)
    if args.json:
        print(to_json(detail.current_weather or {}))
    else:
        print(format_current_text(args.plz, detail))
    return 0


def _cmd_forecast(config: CliConfig, args: argparse.Namespace) -> int:
    days = args.days if args.days is not None else config.forecast.default_days
    if days < 1 or days > MAX_FORECAST_DAYS:
        raise UsageError(f"--days must be between 1 and {MAX_FORECAST_DAYS}")
    require_plz(args.plz)

    detail = _client(config).fetch_plz_detail(args.plz)
    forecast = detail.forecast[:days]
    if args.json:
        print(to_json(forecast))
    else:
        print(format_forecast_text(args.plz, forecast))
    return 0


def _cmd_warnings(config: CliConfig, args: argparse.Namespace) -> int:
    if args.min_level < 1 or args.min_level > 5:
        raise UsageError("--min-level must be between 1 and 5")
    require_plz(args.plz)

    detail = _client(config).fetch_plz_detail(args.plz)
    filtered = [w for w in detail.warnings if w.warn_level >= args.min_level]
    if args.json:
        print(to_json(filtered))
    else:
        print(format_warnings_text(filtered))
    return 0


def _cmd_rain(config: CliConfig, args: argparse.Namespace) -> int:
    within = (
        args.within if args.within is not None
        else config.rain.default_within_minutes
    )
    require_plz(args.plz)
    if within < 1 or within > MAX_WITHIN_MINUTES:
        raise UsageError(f"--within must be between 1 and {MAX_WITHIN_MINUTES} minutes")

    detail = _client(config).fetch_plz_detail(args.plz)
    result = check_rain(args.plz, within, detail.graph, detail.forecast, utc_now())
    if args.json:
        print(to_json(result))
    else:
        print(format_rain_text(result))
    return 0


def _cmd_config(config: CliConfig, args: argparse.Namespace) -> int:
    if args.config_command == "show":
        if args.key is None:
            print(config.model_dump_json(indent=2))
            return 0
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            raise UsageError(f"unknown config key {args.key!r}") from e
        if hasattr(value, "model_dump_json"):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    print("Use: config show [key]")
    return 1


def _cmd_version(config: CliConfig, args: argparse.Namespace) -> int:
    print(f"meteocli {__version__}")
    return 0


_COMMANDS = {
    "weather": _cmd_weather,
    "forecast": _cmd_forecast,
    "warnings": _cmd_warnings,
    "rain": _cmd_rain,
    "config": _cmd_config,
    "version": _cmd_version,
}
