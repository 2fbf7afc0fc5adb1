from datetime import datetime

import pytest

from aurawx.localization import Language, strings_for
from aurawx.presentation import Presenter, choose_icon, choose_image


@pytest.mark.parametrize(
    "code,is_day,expected",
    [
        (0, True, "icon_sunny"),
        (0, False, "icon_clear_night"),
        (3, False, "icon_cloudy"),
        (48, True, "icon_haze_fog_dust_smoke"),
        (81, False, "icon_scattered_showers_night"),
        (86, True, "icon_heavy_snow"),
        (95, 1, "icon_isolated_scattered_tstorms_day"),
        (99, 0, "icon_strong_tstorms"),
        (42, True, "icon_mostly_cloudy_day"),
        (42, False, "icon_mostly_cloudy_night"),
    ],
)
def test_choose_icon(code, is_day, expected):
    assert choose_icon(code, is_day) == expected


def test_choose_image_matches_icon_names():
    for code in range(0, 101):
        for is_day in (True, False):
            icon = choose_icon(code, is_day)
            image = choose_image(code, is_day)
            assert image == "image_" + icon[len("icon_"):]


def test_choose_image_values():
    assert choose_image(65, True) == "image_heavy_rain"
    assert choose_image(82, False) == "image_heavy_rain"
    assert choose_image(77, True) == "image_flurries"


def test_format_temperature_celsius_truncates():
    p = Presenter()
    assert p.format_temperature(22.7) == "22°C"
    assert p.format_temperature(-3.9) == "-3°C"


def test_format_temperature_fahrenheit():
    p = Presenter(use_fahrenheit=True)
    assert p.format_temperature(0) == "32°F"
    assert p.format_temperature(-40) == "-40°F"


def test_format_time_twelve_hour_english():
    p = Presenter(Language.EN)
    assert p.format_time(0) == "12AM"
    assert p.format_time(12) == "12PM"
    assert p.format_time(9) == "9AM"
    assert p.format_time(13) == "1PM"


def test_format_time_german_uses_noon_and_empty_suffixes():
    p = Presenter(Language.DE)
    assert p.format_time(12) == "12:00"
    assert p.format_time(15) == "3"
    assert p.format_time(0) == "12"


def test_format_time_24_hour():
    p = Presenter(use_24_hour=True)
    assert p.format_time(7) == "7:00"
    assert p.format_time(23) == "23:00"


def test_strings_follow_language():
    for language in Language:
        assert Presenter(language).strings() == strings_for(language)


def test_feels_like_text():
    assert Presenter(Language.EN).feels_like_text(22.4) == "Feels Like 22°C"
    assert Presenter(Language.FR).feels_like_text(22.4) == "Ressenti 22°C"


def test_clock_text():
    moment = datetime(2024, 1, 15, 14, 30, 45)
    assert Presenter(use_24_hour=True).clock_text(moment) == "14:30"
    assert Presenter().clock_text(moment) == "02:30 PM"
    assert Presenter().clock_text(datetime(2024, 1, 15, 0, 5)).endswith("AM")