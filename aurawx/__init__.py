"""Weather display core: forecasts, settings, presentation, touch mapping, hostnames and logging."""

__version__ = "0.1.0"

__all__ = ["__version__"]