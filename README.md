# aurawx

The core of a small weather display, with no hardware attached. It provides:

- `aurawx.weather`: builds Open-Meteo forecast and place-search URLs, parses the responses into a `WeatherData`, and keeps user `Settings` in a JSON file through `SettingsStore`. `WeatherClient` ties these together.
- `aurawx.presentation`: `choose_image` and `choose_icon` give the name of the image or icon for a WMO weather code, by day or by night. `Presenter` formats temperatures, hours, the "feels like" line and the clock.
- `aurawx.localization`: the interface text in English, Spanish, German and French (`Language`, `LocalizedStrings`, `strings_for`).
- `aurawx.touch`: maps raw touch-controller readings to coordinates on a 240x320 screen and checks redraw areas.
- `aurawx.hostname`: derives a stable hostname from a MAC address.
- `aurawx.logsys`: tagged, levelled logging with timestamps and a small command language for changing log levels at run time.
- `aurawx.cli`: the `aurawx` command.

No third-party libraries are needed.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
aurawx --help
aurawx set-location 51.5072 -0.1276 London
aurawx configure --units c --clock 24 --language en
aurawx show
aurawx forecast
aurawx search Paris
```

- `forecast` fetches and prints the current conditions, the daily forecast and the next seven hours for the saved location. It fails with an error if no location has been set.
- `search QUERY...` lists matching places with their coordinates.
- `set-location LATITUDE LONGITUDE NAME...` saves the location.
- `configure` changes `--units` (`c` or `f`), `--clock` (`12` or `24`) and `--language` (`en`, `es`, `de`, `fr`).
- `show` prints the saved settings.

Settings live in `~/.aura/settings.json` unless `--settings PATH` is given before the subcommand. Network and parsing errors are printed to standard error, and the command exits with status 1.

## Library use

Presentation:

```python
from aurawx.localization import Language
from aurawx.presentation import Presenter, choose_icon

presenter = Presenter(Language.EN, use_fahrenheit=False, use_24_hour=True)
presenter.format_temperature(21.7)   # "21°C": temperatures are truncated, not rounded
presenter.feels_like_text(19.2)      # "Feels Like 19°C"
presenter.format_time(7)             # "7:00"
choose_icon(61, is_day=True)         # "icon_scattered_showers_day"
```

Codes that are not in the table get the "mostly cloudy" artwork for day or night.

Forecasts:

```python
from aurawx.weather import SettingsStore, WeatherClient, build_weather_url, parse_weather_response

url = build_weather_url("51.5072", "-0.1276")
# data = parse_weather_response(response_text, "London")

client = WeatherClient(SettingsStore("settings.json"), fetch=my_fetch)
```

`fetch` takes a URL and returns the response body. Without it, `urllib` is used. Failures raise `WeatherError`. `parse_weather_response` keeps at most 7 daily and 24 hourly entries. `update_location` saves the new location and marks the current forecast as stale.

Touch and hostnames:

```python
from aurawx.touch import Area, map_touch, read_touch
from aurawx.hostname import parse_mac, unique_hostname

map_touch(200, 240)            # (0, 0)
read_touch(None)               # released reading at (0, 0)
Area(0, 0, 239, 29).size()     # (240, 30)

unique_hostname("aura", parse_mac("02:00:00:00:00:01"))   # "aura-" and five letters or digits
```

Logging:

```python
from aurawx.logsys import LogSystem

logs = LogSystem()
logs.init()
logs.handle_command("log_level debug")
logs.handle_command("log_component WEATHER verbose")
logs.handle_command("log_help")
```

`handle_command` understands these commands:

- `log_level <level>`
- `log_component <tag> <level>`
- `log_status`
- `log_timezone <timezone>`
- `log_sntp <server>`
- `log_help` (or `help`)

Levels are `error`, `warn`, `info`, `debug` and `verbose`. `handle_command` returns `True` when a command was applied. Problems are logged as warnings.

Emitted records are kept in `LogSystem.records` and also passed to the standard `logging` module under `aurawx.<TAG>`. Timestamps show the time of day as `HH:MM:SS`. Until the clock reads a year of 2020 or later, they show uptime instead, as `UP:hh:mm:ss`. Unknown timezone names behave as UTC.

## What it does not do

- It draws nothing on a screen. Presentation gives text and artwork names only.
- It talks to no touch controller. `aurawx.touch` only converts readings you supply.
- It does not manage Wi-Fi connections.
- `enable_sntp` records the time servers but does not synchronise the clock.