"""Command line entry point: ``waybar-openweathermap <longitude> <latitude> <api-key>``."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from . import __version__
from .entities import Coordinates
from .exceptions import ArgumentParseError, WeatherBarError
from .providers.base import RequestConfig
from .providers.openweather import OpenWeatherProvider
from .services.report import WeatherReportService, serialize
from .settings import DEFAULT_CONFIG_NAME, Settings


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="waybar-openweathermap",
        description="Print current OpenWeatherMap conditions as JSON for a waybar custom module.",
    )
    parser.add_argument("longitude", help="Longitude in decimal degrees")
    parser.add_argument("latitude", help="Latitude in decimal degrees")
    parser.add_argument("api_key", metavar="api-key", help="OpenWeatherMap API key")
    parser.add_argument(
        "--config",
        help=f"config file (default is $HOME/{DEFAULT_CONFIG_NAME})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_coordinates(longitude: str, latitude: str) -> Coordinates:
    """Parse the two positional coordinates; longitude comes first on the command line."""
    lon = _parse_float("longitude", longitude)
    lat = _parse_float("latitude", latitude)
    return Coordinates(latitude=lat, longitude=lon)


def _parse_float(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ArgumentParseError(f"parse {name} {raw}: {exc}") from exc


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO if verbose else logging.WARNING,
        stream=sys.stderr,
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def run(args: argparse.Namespace, stdout: TextIO) -> None:
    coordinates = parse_coordinates(args.longitude, args.latitude)
    settings = Settings.load(args.config)
    provider = OpenWeatherProvider(
        args.api_key,
        lang=settings.lang,
        base_url=settings.base_url,
        request_config=RequestConfig(timeout=settings.timeout),
    )
    service = WeatherReportService(provider=provider, css_class=settings.css_class, tz=settings.tzinfo)
    payload = serialize(service.report(coordinates))
    stdout.write(payload)
    stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        run(args, sys.stdout)
    except WeatherBarError as exc:
        logger.error("%s: %s", exc.__class__.__name__, exc)
        return 1
    return 0


__all__ = ["build_parser", "parse_coordinates", "configure_logging", "run", "main"]
