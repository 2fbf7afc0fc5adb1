"""Command-line front end: show the forecast and manage location and units."""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Sequence

from .localization import Language, LocalizedStrings
from .presentation import Presenter, choose_icon
from .weather import SettingsStore, WeatherClient, WeatherError

_HOURLY_ROWS = 7
_LANGUAGES = {"en": Language.EN, "es": Language.ES, "de": Language.DE, "fr": Language.FR}


def _default_settings_path() -> Path:
    return Path.home() / ".aura" / "settings.json"


def _day_label(iso_date: str, text: LocalizedStrings) -> str:
    try:
        day = date.fromisoformat(iso_date)
    except ValueError:
        return iso_date
    return text.weekdays[(day.weekday() + 1) % 7]


def _hour_label(stamp: str, presenter: Presenter) -> str:
    try:
        return presenter.format_time(datetime.fromisoformat(stamp).hour)
    except ValueError:
        return presenter.strings().invalid_hour


def _presenter(store: SettingsStore) -> Presenter:
    settings = store.load()
    return Presenter(settings.language, settings.use_fahrenheit, settings.use_24_hour)


def _forecast(store: SettingsStore, args: argparse.Namespace) -> int:
    client = WeatherClient(store)
    if not client.settings.latitude or not client.settings.longitude:
        print("error: no location set; use 'set-location' first", file=sys.stderr)
        return 1
    data = client.fetch_weather()
    presenter = _presenter(store)
    text = presenter.strings()
    fmt = presenter.format_temperature

    print(data.location_name or client.settings.latitude + ", " + client.settings.longitude)
    print(
        f"{fmt(data.current_temp)}  {presenter.feels_like_text(data.feels_like)}  "
        f"[{choose_icon(data.weather_code, data.is_day)}]"
    )
    print()
    print(text.seven_day_forecast)
    for index, (day, high, low, code) in enumerate(
        zip(data.daily_days, data.daily_high, data.daily_low, data.daily_codes)
    ):
        label = text.today if index == 0 else _day_label(day, text)
        print(f"  {label:<12} {fmt(high):>6} {fmt(low):>6}  {choose_icon(code, True)}")
    print()
    print(text.hourly_forecast)
    rows = zip(data.hourly_times, data.hourly_temps, data.hourly_precipitation, data.hourly_codes)
    for stamp, temp, precipitation, code in list(rows)[:_HOURLY_ROWS]:
        print(
            f"  {_hour_label(stamp, presenter):<8} {fmt(temp):>6} {precipitation:>3}%"
            f"  {choose_icon(code, True)}"
        )
    return 0


def _search(store: SettingsStore, args: argparse.Namespace) -> int:
    client = WeatherClient(store)
    for place in client.search_locations(" ".join(args.query)):
        region = ", ".join(
            str(place[key]) for key in ("name", "admin1", "country") if place.get(key)
        )
        print(f"{region} ({place.get('latitude')}, {place.get('longitude')})")
    return 0


def _set_location(store: SettingsStore, args: argparse.Namespace) -> int:
    client = WeatherClient(store)
    client.update_location(args.latitude, args.longitude, " ".join(args.name))
    settings = client.settings
    print(f"Location set to {settings.location} ({settings.latitude}, {settings.longitude})")
    return 0


def _configure(store: SettingsStore, args: argparse.Namespace) -> int:
    settings = store.load()
    if args.units is not None:
        settings.use_fahrenheit = args.units == "f"
    if args.clock is not None:
        settings.use_24_hour = args.clock == "24"
    if args.language is not None:
        settings.language = _LANGUAGES[args.language]
    store.save(settings)
    print("Settings saved")
    return 0


def _show(store: SettingsStore, args: argparse.Namespace) -> int:
    settings = store.load()
    print(f"Location: {settings.location}")
    print(f"Latitude: {settings.latitude}")
    print(f"Longitude: {settings.longitude}")
    print(f"Units: {'°F' if settings.use_fahrenheit else '°C'}")
    print(f"Clock: {'24h' if settings.use_24_hour else '12h'}")
    print(f"Language: {settings.language.name.lower()}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aurawx", description="Weather forecast display.")
    parser.add_argument("--settings", type=Path, default=None, help="settings file")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("forecast", help="show current weather and forecast").set_defaults(
        handler=_forecast
    )

    search = commands.add_parser("search", help="search for a location by name")
    search.add_argument("query", nargs="+")
    search.set_defaults(handler=_search)

    location = commands.add_parser("set-location", help="store the forecast location")
    location.add_argument("latitude")
    location.add_argument("longitude")
    location.add_argument("name", nargs="+")
    location.set_defaults(handler=_set_location)

    configure = commands.add_parser("configure", help="change units, clock and language")
    configure.add_argument("--units", choices=("c", "f"))
    configure.add_argument("--clock", choices=("12", "24"))
    configure.add_argument("--language", choices=tuple(_LANGUAGES))
    configure.set_defaults(handler=_configure)

    commands.add_parser("show", help="print stored settings").set_defaults(handler=_show)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    store = SettingsStore(args.settings or _default_settings_path())
    try:
        return args.handler(store, args)
    except WeatherError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())