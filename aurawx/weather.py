"""Forecast retrieval from Open-Meteo, response parsing and persisted settings."""

from __future__ import annotations

import json
import time
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .localization import Language

WEATHER_API = "https://api.open-meteo.com/v1/forecast"
GEOCODING_API = "https://geocoding-api.open-meteo.com/v1/search"
USER_AGENT = "Aura Weather Display"
DAILY_DAYS = 7
HOURLY_HOURS = 24
COORDINATE_MAX_LENGTH = 15
REQUEST_TIMEOUT = 15.0


class WeatherError(Exception):
    """Fetching or decoding weather or location data failed."""


@dataclass
class WeatherData:
    """Current conditions plus daily and hourly forecasts."""

    current_temp: float = 0.0
    feels_like: float = 0.0
    weather_code: int = 0
    is_day: bool = False
    location_name: str = ""
    description: str = ""
    daily_high: list[float] = field(default_factory=list)
    daily_low: list[float] = field(default_factory=list)
    daily_codes: list[int] = field(default_factory=list)
    daily_days: list[str] = field(default_factory=list)
    hourly_temps: list[float] = field(default_factory=list)
    hourly_codes: list[int] = field(default_factory=list)
    hourly_precipitation: list[int] = field(default_factory=list)
    hourly_times: list[str] = field(default_factory=list)


@dataclass
class Settings:
    """User preferences; coordinates are kept as text, at most 15 characters."""

    latitude: str = ""
    longitude: str = ""
    location: str = ""
    use_fahrenheit: bool = False
    use_24_hour: bool = False
    language: Language = Language.EN

    def __post_init__(self) -> None:
        self.latitude = str(self.latitude)[:COORDINATE_MAX_LENGTH]
        self.longitude = str(self.longitude)[:COORDINATE_MAX_LENGTH]
        self.language = _language(self.language)


def _language(value: Any) -> Language:
    if isinstance(value, bool):
        return Language.EN
    try:
        return Language(value)
    except (ValueError, TypeError):
        return Language.EN


def build_weather_url(latitude: str, longitude: str) -> str:
    """Forecast request URL for the given coordinates."""
    return (
        f"{WEATHER_API}?latitude={latitude}&longitude={longitude}"
        "&current=temperature_2m,apparent_temperature,is_day,weather_code"
        "&daily=temperature_2m_max,temperature_2m_min,weather_code"
        "&hourly=temperature_2m,weather_code,precipitation_probability"
        "&timezone=auto&forecast_days=7"
    )


def build_geocoding_url(query: str) -> str:
    """Place-name search URL returning up to ten matches."""
    name = urllib.parse.quote(query, safe="")
    return f"{GEOCODING_API}?name={name}&count=10&language=en&format=json"


def _number(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


def _integer(value: Any) -> int:
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _object(doc: dict, key: str) -> Optional[dict]:
    value = doc.get(key)
    return value if isinstance(value, dict) else None


def _array(obj: dict, key: str) -> list:
    value = obj.get(key)
    return value if isinstance(value, list) else []


def _item(values: list, index: int) -> Any:
    return values[index] if index < len(values) else None


def _load_json(text: Union[str, bytes], what: str) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError) as exc:
        raise WeatherError(f"failed to parse {what} JSON: {exc}") from exc


def parse_weather_response(text: Union[str, bytes], location_name: str) -> WeatherData:
    """Decode a forecast response; absent sections leave their defaults."""
    doc = _load_json(text, "weather")
    if not isinstance(doc, dict):
        doc = {}
    data = WeatherData(location_name=location_name)

    current = _object(doc, "current")
    if current is not None:
        data.current_temp = _number(current.get("temperature_2m"))
        data.feels_like = _number(current.get("apparent_temperature"))
        data.weather_code = _integer(current.get("weather_code"))
        data.is_day = bool(_integer(current.get("is_day")))

    daily = _object(doc, "daily")
    if daily is not None:
        lows = _array(daily, "temperature_2m_min")
        codes = _array(daily, "weather_code")
        times = _array(daily, "time")
        for i, high in enumerate(_array(daily, "temperature_2m_max")[:DAILY_DAYS]):
            data.daily_high.append(_number(high))
            data.daily_low.append(_number(_item(lows, i)))
            data.daily_codes.append(_integer(_item(codes, i)))
            data.daily_days.append(_text(_item(times, i)))

    hourly = _object(doc, "hourly")
    if hourly is not None:
        codes = _array(hourly, "weather_code")
        precipitation = _array(hourly, "precipitation_probability")
        times = _array(hourly, "time")
        for i, temp in enumerate(_array(hourly, "temperature_2m")[:HOURLY_HOURS]):
            data.hourly_temps.append(_number(temp))
            data.hourly_codes.append(_integer(_item(codes, i)))
            data.hourly_precipitation.append(_integer(_item(precipitation, i)))
            data.hourly_times.append(_text(_item(times, i)))

    return data


def parse_geocoding_response(text: Union[str, bytes]) -> list[dict]:
    """Return the ``results`` list of a place search."""
    doc = _load_json(text, "geocoding")
    results = doc.get("results") if isinstance(doc, dict) else None
    if not isinstance(results, list):
        raise WeatherError("no location results found in response")
    return results


def _http_get(url: str) -> str:
    request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(request, timeout=REQUEST_TIMEOUT) as response:
            status = getattr(response, "status", 200)
            body = response.read()
    except urllib.error.HTTPError as exc:
        raise WeatherError(f"HTTP request failed with code: {exc.code}") from exc
    if status != 200:
        raise WeatherError(f"HTTP request failed with code: {status}")
    return body.decode("utf-8")


class SettingsStore:
    """Settings kept as a JSON document at ``path``."""

    def __init__(self, path: Union[str, Path], defaults: Optional[Settings] = None) -> None:
        self.path = Path(path)
        self.defaults = defaults if defaults is not None else Settings()

    def load(self) -> Settings:
        """Read stored settings; missing or unreadable values take the defaults."""
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError):
            raw = {}
        if not isinstance(raw, dict):
            raw = {}
        base = self.defaults

        def pick(key: str, kind: type, default: Any) -> Any:
            value = raw.get(key)
            return value if isinstance(value, kind) else default

        return Settings(
            latitude=pick("latitude", str, base.latitude),
            longitude=pick("longitude", str, base.longitude),
            location=pick("location", str, base.location),
            use_fahrenheit=pick("use_fahrenheit", bool, base.use_fahrenheit),
            use_24_hour=pick("use_24_hour", bool, base.use_24_hour),
            language=_language(raw.get("language", base.language)),
        )

    def save(self, settings: Settings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        document = {
            "latitude": settings.latitude,
            "longitude": settings.longitude,
            "location": settings.location,
            "use_fahrenheit": settings.use_fahrenheit,
            "use_24_hour": settings.use_24_hour,
            "language": int(settings.language),
        }
        self.path.write_text(
            json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )


class WeatherClient:
    """Fetches forecasts for the stored location.

    ``fetch`` takes a URL and returns the response body; it raises
    :class:`OSError` or :class:`WeatherError` on failure.
    """

    def __init__(
        self, store: SettingsStore, fetch: Optional[Callable[[str], str]] = None
    ) -> None:
        self.store = store
        self._fetch = fetch or _http_get
        self.settings = store.load()
        self.current = WeatherData()
        self.data_valid = False
        self.last_update: Optional[float] = None

    def _request(self, url: str) -> str:
        try:
            body = self._fetch(url)
        except OSError as exc:
            raise WeatherError(f"request failed: {exc}") from exc
        if not body:
            raise WeatherError("empty response")
        return body

    def fetch_weather(self) -> WeatherData:
        """Download and decode the forecast for the stored location."""
        url = build_weather_url(self.settings.latitude, self.settings.longitude)
        data = parse_weather_response(self._request(url), self.settings.location)
        self.current = data
        self.data_valid = True
        self.last_update = time.monotonic()
        return data

    def update_location(self, latitude: str, longitude: str, name: str) -> None:
        """Store a new location and mark the current forecast stale."""
        self.settings = replace(
            self.settings, latitude=latitude, longitude=longitude, location=name
        )
        self.store.save(self.settings)
        self.data_valid = False

    def search_locations(self, query: str) -> list[dict]:
        """Places matching ``query``, as returned by the geocoding service."""
        return parse_geocoding_response(self._request(build_geocoding_url(query)))