"""Tagged, levelled logging with timestamps and a serial-style command interface."""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from enum import IntEnum
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

TAG_MAIN = "MAIN"
TAG_DISPLAY = "DISPLAY"
TAG_UI = "UI"
TAG_WEATHER = "WEATHER"
TAG_WIFI = "WIFI"
TAG_CONFIG = "CONFIG"

COMPONENT_TAGS = (TAG_MAIN, TAG_DISPLAY, TAG_UI, TAG_WEATHER, TAG_WIFI, TAG_CONFIG)

DEFAULT_NTP_SERVERS = ("pool.ntp.org", "time.nist.gov", "time.google.com")

TIMESTAMP_ENABLED = True
TIMESTAMP_DATE_TIME = False
TIMEZONE_MAX_LENGTH = 31
_TAG_TOKEN_LENGTH = 15
_VALID_YEAR = 2020


class LogLevel(IntEnum):
    """Log verbosity, from NONE (nothing) to VERBOSE (everything)."""

    NONE = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    VERBOSE = 5

    @classmethod
    def parse(cls, name: str) -> "LogLevel":
        """Return the level for a command-line name such as ``"debug"``."""
        levels = {
            "error": cls.ERROR,
            "warn": cls.WARN,
            "info": cls.INFO,
            "debug": cls.DEBUG,
            "verbose": cls.VERBOSE,
        }
        try:
            return levels[name]
        except KeyError:
            raise ValueError(f"invalid log level: {name!r}") from None

    @property
    def letter(self) -> str:
        return "-EWIDV"[self.value]


_PY_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.VERBOSE: 5,
}


@dataclass(frozen=True)
class LogRecord:
    """One emitted log line."""

    level: LogLevel
    tag: str
    message: str
    uptime_ms: int
    timestamp: Optional[str] = None

    def __str__(self) -> str:
        body = self.message if self.timestamp is None else f"[{self.timestamp}] {self.message}"
        return f"{self.level.letter} ({self.uptime_ms}) {self.tag}: {body}"


def _resolve_zone(name: str) -> tzinfo:
    if name == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return timezone.utc


class LogSystem:
    """Per-component log levels, timestamps and runtime control commands.

    ``clock`` returns seconds since the epoch; ``uptime`` returns milliseconds
    since start. Emitted records are kept in ``records`` and forwarded to the
    standard :mod:`logging` module.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], float]] = None,
        uptime: Optional[Callable[[], int]] = None,
    ) -> None:
        self._clock = clock or time.time
        if uptime is None:
            started = time.monotonic()
            uptime = lambda: int((time.monotonic() - started) * 1000)  # noqa: E731
        self._uptime = uptime
        self.initialized = False
        self.time_initialized = False
        self.timezone = "UTC"
        self._zone: tzinfo = timezone.utc
        self.default_level = LogLevel.INFO
        self._tag_levels: dict[str, LogLevel] = {}
        self.ntp_servers: tuple[str, ...] = ()
        self.sntp_running = False
        self.records: list[LogRecord] = []

    # ------------------------------------------------------------------ levels

    def init(self) -> None:
        """Set default levels, start the time system and announce readiness."""
        if self.initialized:
            return
        self.default_level = LogLevel.INFO
        self._tag_levels.clear()
        for tag in COMPONENT_TAGS:
            self._tag_levels[tag] = LogLevel.INFO
        self.init_time()
        self.initialized = True
        self.log(TAG_MAIN, LogLevel.INFO, "Logging system initialized with timestamp support")
        self.log(TAG_MAIN, LogLevel.INFO, "Default log level: INFO")
        self.log(TAG_MAIN, LogLevel.INFO, "Available log levels: ERROR, WARN, INFO, DEBUG, VERBOSE")
        self.log(
            TAG_MAIN,
            LogLevel.INFO,
            "Timestamp format: " + ("Date and Time" if TIMESTAMP_DATE_TIME else "Time Only"),
        )

    def level_for(self, tag: str) -> LogLevel:
        """Return the effective level for ``tag``."""
        return self._tag_levels.get(tag, self.default_level)

    def is_enabled(self, tag: str, level: LogLevel) -> bool:
        level = LogLevel(level)
        return level != LogLevel.NONE and level <= self.level_for(tag)

    def log(self, tag: str, level: LogLevel, message: str) -> Optional[LogRecord]:
        """Emit a timestamped message; return the record, or None if filtered out."""
        stamp = self.timestamp() if TIMESTAMP_ENABLED else None
        return self._emit(tag, LogLevel(level), message, stamp)

    def _emit(
        self, tag: str, level: LogLevel, message: str, stamp: Optional[str] = None
    ) -> Optional[LogRecord]:
        if not self.is_enabled(tag, level):
            return None
        record = LogRecord(level, tag, message, int(self._uptime()), stamp)
        self.records.append(record)
        logging.getLogger(f"aurawx.{tag}").log(_PY_LEVELS[level], str(record))
        return record

    def set_level(self, level: LogLevel) -> None:
        """Set the global level; component overrides are cleared."""
        if not self.initialized:
            self.init()
        level = LogLevel(level)
        self.default_level = level
        self._tag_levels.clear()
        self._emit(TAG_MAIN, LogLevel.INFO, f"Global log level set to: {level.name}")

    def set_component_level(self, tag: str, level: LogLevel) -> None:
        if not self.initialized:
            self.init()
        level = LogLevel(level)
        self._tag_levels[tag] = level
        self._emit(TAG_MAIN, LogLevel.INFO, f"Log level for component {tag} set to: {level.name}")

    # ---------------------------------------------------------------- commands

    def handle_command(self, command: Optional[str]) -> bool:
        """Run a ``log_*`` control command.

        Returns True when the command was recognised and applied; problems
        are reported as warnings in the log, as on the serial console.
        """
        if not command:
            return False
        if command.startswith("log_level "):
            name = command[len("log_level "):]
            try:
                level = LogLevel.parse(name)
            except ValueError:
                self._info_warn(
                    f"Invalid log level: {name}",
                    "Available levels: error, warn, info, debug, verbose",
                )
                return False
            self.set_level(level)
            return True
        if command.startswith("log_component "):
            tokens = command[len("log_component "):].split()
            if len(tokens) < 2:
                self._info_warn(
                    "Invalid component command format",
                    "Usage: log_component <COMPONENT> <level>",
                    "Example: log_component DISPLAY debug",
                )
                return False
            component, name = (t[:_TAG_TOKEN_LENGTH] for t in tokens[:2])
            try:
                level = LogLevel.parse(name)
            except ValueError:
                self.log(TAG_MAIN, LogLevel.WARN, f"Invalid level {name} for component {component}")
                return False
            self.set_component_level(component, level)
            return True
        if command == "log_status":
            self.print_status()
            return True
        if command.startswith("log_timezone "):
            zone = command[len("log_timezone "):]
            if not zone:
                self._info_warn(
                    "Invalid timezone command format",
                    "Usage: log_timezone <timezone>",
                    "Example: log_timezone EST5EDT",
                )
                return False
            self.set_timezone(zone)
            return True
        if command.startswith("log_sntp "):
            server = command[len("log_sntp "):]
            if not server:
                self._info_warn(
                    "Invalid SNTP command format",
                    "Usage: log_sntp <server>",
                    "Example: log_sntp pool.ntp.org",
                )
                return False
            self.enable_sntp(server)
            return True
        if command in ("log_help", "help"):
            for line in (
                "=== Logging Commands ===",
                "log_level <level>           - Set global log level",
                "log_component <tag> <level> - Set component log level",
                "log_status                  - Show current log configuration",
                "log_timezone <timezone>     - Set timezone (e.g., EST5EDT, UTC)",
                "log_sntp <server>           - Set NTP server for time sync",
                "log_help                    - Show this help",
                "",
                "Available levels: error, warn, info, debug, verbose",
                "Available components: " + ", ".join(COMPONENT_TAGS),
                "Timestamp format: " + ("ENABLED" if TIMESTAMP_ENABLED else "DISABLED"),
            ):
                self.log(TAG_MAIN, LogLevel.INFO, line)
            return True
        return False

    def _info_warn(self, warning: str, *infos: str) -> None:
        self.log(TAG_MAIN, LogLevel.WARN, warning)
        for line in infos:
            self.log(TAG_MAIN, LogLevel.INFO, line)

    def print_status(self) -> None:
        """Log a summary of the logging configuration."""
        yes_no = lambda flag: "YES" if flag else "NO"  # noqa: E731
        for line in (
            "=== Logging System Status ===",
            f"Initialized: {yes_no(self.initialized)}",
            f"Time Initialized: {yes_no(self.time_initialized)}",
            "ESP-IDF Log Version: 2",
            "Timestamp Support: " + ("ENABLED" if TIMESTAMP_ENABLED else "DISABLED"),
            f"Current Timezone: {self.timezone}",
            f"Time Set: {yes_no(self.is_time_set())}",
            "",
            "Component Tags:",
            "  MAIN     - Main application",
            "  DISPLAY  - Display and touch handling",
            "  UI       - User interface logic",
            "  WEATHER  - Weather data fetching",
            "  WIFI     - WiFi connection management",
            "  CONFIG   - Configuration management",
            "",
            "Memory Status:",
            f"Allocated blocks: {sys.getallocatedblocks()}",
            "=== End Status ===",
        ):
            self.log(TAG_MAIN, LogLevel.INFO, line)

    # -------------------------------------------------------------------- time

    def init_time(self) -> None:
        if self.time_initialized:
            return
        self.timezone = "UTC"
        self._zone = timezone.utc
        self.time_initialized = True
        self._emit(TAG_MAIN, LogLevel.INFO, "Time system initialized (SNTP deferred until WiFi ready)")

    def set_timezone(self, timezone: Optional[str]) -> None:
        """Use ``timezone`` for timestamps; unknown zones behave as UTC."""
        if timezone is None:
            return
        self.timezone = timezone[:TIMEZONE_MAX_LENGTH]
        self._zone = _resolve_zone(timezone)
        self.log(TAG_MAIN, LogLevel.INFO, f"Timezone set to: {timezone}")

    def _local_now(self) -> datetime:
        return datetime.fromtimestamp(self._clock(), self._zone)

    def timestamp(self) -> str:
        """Wall-clock time, or ``UP:hh:mm:ss`` uptime while the clock is unset."""
        now = self._local_now()
        if now.year < _VALID_YEAR:
            seconds = int(self._uptime()) // 1000
            minutes = seconds // 60
            hours = minutes // 60
            return f"UP:{hours % 24:02d}:{minutes % 60:02d}:{seconds % 60:02d}"
        if TIMESTAMP_DATE_TIME:
            return now.strftime("%Y-%m-%d %H:%M:%S")
        return now.strftime("%H:%M:%S")

    def is_time_set(self) -> bool:
        return self._local_now().year >= _VALID_YEAR

    def enable_sntp(self, server: Optional[str]) -> None:
        """Configure time synchronisation with ``server`` as the primary source."""
        if server is None:
            return
        self.ntp_servers = (server, DEFAULT_NTP_SERVERS[1], DEFAULT_NTP_SERVERS[2])
        self.sntp_running = True
        self.log(TAG_MAIN, LogLevel.INFO, f"SNTP initialized with server: {server}")