"""Weather artwork selection and display-text formatting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from .localization import Language, LocalizedStrings, strings_for

# WMO weather code -> (artwork for day, artwork for night)
_ARTWORK: dict[int, tuple[str, str]] = {
    0: ("sunny", "clear_night"),
    1: ("mostly_sunny", "mostly_clear_night"),
    2: ("partly_cloudy", "partly_cloudy_night"),
    3: ("cloudy", "cloudy"),
    45: ("haze_fog_dust_smoke", "haze_fog_dust_smoke"),
    48: ("haze_fog_dust_smoke", "haze_fog_dust_smoke"),
    51: ("drizzle", "drizzle"),
    53: ("drizzle", "drizzle"),
    55: ("drizzle", "drizzle"),
    56: ("sleet_hail", "sleet_hail"),
    57: ("sleet_hail", "sleet_hail"),
    61: ("scattered_showers_day", "scattered_showers_night"),
    63: ("showers_rain", "showers_rain"),
    65: ("heavy_rain", "heavy_rain"),
    66: ("wintry_mix_rain_snow", "wintry_mix_rain_snow"),
    67: ("wintry_mix_rain_snow", "wintry_mix_rain_snow"),
    71: ("snow_showers_snow", "snow_showers_snow"),
    73: ("snow_showers_snow", "snow_showers_snow"),
    75: ("snow_showers_snow", "snow_showers_snow"),
    85: ("snow_showers_snow", "snow_showers_snow"),
    77: ("flurries", "flurries"),
    80: ("scattered_showers_day", "scattered_showers_night"),
    81: ("scattered_showers_day", "scattered_showers_night"),
    82: ("heavy_rain", "heavy_rain"),
    86: ("heavy_snow", "heavy_snow"),
    95: ("isolated_scattered_tstorms_day", "isolated_scattered_tstorms_night"),
    96: ("strong_tstorms", "strong_tstorms"),
    99: ("strong_tstorms", "strong_tstorms"),
}
_FALLBACK = ("mostly_cloudy_day", "mostly_cloudy_night")


def _artwork(wmo_code: int, is_day: Union[bool, int]) -> str:
    day, night = _ARTWORK.get(wmo_code, _FALLBACK)
    return day if is_day else night


def choose_image(wmo_code: int, is_day: Union[bool, int]) -> str:
    """Name of the full-size background image for a WMO weather code."""
    return "image_" + _artwork(wmo_code, is_day)


def choose_icon(wmo_code: int, is_day: Union[bool, int]) -> str:
    """Name of the small icon for a WMO weather code."""
    return "icon_" + _artwork(wmo_code, is_day)


@dataclass
class Presenter:
    """Formats temperatures and times according to user preferences."""

    language: Language = Language.EN
    use_fahrenheit: bool = False
    use_24_hour: bool = False

    def strings(self) -> LocalizedStrings:
        return strings_for(self.language)

    def format_time(self, hour: int) -> str:
        """Label for a whole hour, e.g. ``"7:00"`` or ``"7AM"``."""
        if self.use_24_hour:
            return f"{hour}:00"
        text = self.strings()
        if hour == 0:
            return "12" + text.am
        if hour == 12:
            return text.noon
        if hour < 12:
            return f"{hour}{text.am}"
        return f"{hour - 12}{text.pm}"

    def format_temperature(self, temp: float) -> str:
        """Whole-degree temperature with unit; input is in Celsius."""
        if self.use_fahrenheit:
            return f"{int(temp * 9.0 / 5.0 + 32)}°F"
        return f"{int(temp)}°C"

    def feels_like_text(self, feels_like: float) -> str:
        return f"{self.strings().feels_like_temp} {self.format_temperature(feels_like)}"

    def clock_text(self, moment: datetime) -> str:
        """Clock label for ``moment`` in 24-hour or 12-hour form."""
        if self.use_24_hour:
            return moment.strftime("%H:%M")
        suffix = "AM" if moment.hour < 12 else "PM"
        return f"{moment.strftime('%I:%M')} {suffix}"