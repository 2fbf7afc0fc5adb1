[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aurawx"
version = "0.1.0"
description = "Weather display core: Open-Meteo forecasts, localized presentation, touch mapping, hostnames and tagged logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["weather", "forecast", "open-meteo", "wmo", "logging", "localization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aurawx = "aurawx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aurawx"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
