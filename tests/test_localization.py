from dataclasses import FrozenInstanceError, fields

import pytest

from aurawx.localization import Language, LocalizedStrings, strings_for


def test_english_pinned_values():
    strings = strings_for(Language.EN)
    assert strings.feels_like_temp == "Feels Like"
    assert strings.seven_day_forecast == "7 day forecast"
    assert strings.noon == "12PM"
    assert strings.weekdays == ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def test_spanish_pinned_values():
    strings = strings_for(Language.ES)
    assert strings.feels_like_temp == "Se siente como"
    assert strings.weekdays[3] == "Mié"
    assert strings.reset_confirmation == "¿Reiniciar configuración WiFi?"


def test_german_has_no_am_pm():
    strings = strings_for(Language.DE)
    assert strings.am == ""
    assert strings.pm == ""
    assert strings.noon == "12:00"
    assert strings.close == "Schließen"


def test_french_pinned_values():
    strings = strings_for(Language.FR)
    assert strings.today == "Aujourd'hui"
    assert strings.weekdays[0] == "Dim"
    assert strings.noon == "12:00"


@pytest.mark.parametrize("value", [99, -1, "xx", None])
def test_unknown_language_falls_back_to_english(value):
    assert strings_for(value) is strings_for(Language.EN)


def test_integer_values_select_same_table_as_enum():
    for language in Language:
        assert strings_for(int(language)) is strings_for(language)


@pytest.mark.parametrize("language", list(Language))
def test_every_language_has_seven_weekdays(language):
    weekdays = strings_for(language).weekdays
    assert len(weekdays) == 7
    assert len(set(weekdays)) == 7


@pytest.mark.parametrize("language", list(Language))
def test_shared_symbols_are_identical(language):
    strings = strings_for(language)
    assert strings.temp_placeholder == "22°C"
    assert strings.use_fahrenheit == "°F"
    assert strings.use_24hr == "24H"
    assert strings.invalid_hour == "??"


@pytest.mark.parametrize("language", list(Language))
def test_all_texts_except_am_pm_are_nonempty(language):
    strings = strings_for(language)
    empty = [
        field.name
        for field in fields(strings)
        if field.name not in ("am", "pm", "weekdays") and getattr(strings, field.name) == ""
    ]
    assert empty == []


def test_languages_are_distinct():
    titles = {strings_for(language).aura_settings for language in Language}
    assert len(titles) == len(Language)


def test_strings_are_immutable():
    strings = strings_for(Language.EN)
    with pytest.raises(FrozenInstanceError):
        strings.save = "changed"
    assert strings_for(Language.EN).save == "Save"


def test_weekdays_must_have_seven_entries():
    base = strings_for(Language.EN)
    values = {f.name: getattr(base, f.name) for f in fields(base)}
    values["weekdays"] = ("Sun", "Mon")
    with pytest.raises(ValueError):
        LocalizedStrings(**values)


def test_language_integer_values_round_trip():
    for language in Language:
        assert Language(int(language)) is language
    assert Language.EN == 0