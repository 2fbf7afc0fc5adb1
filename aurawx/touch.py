"""Touch calibration and flush-area checks for the 240x320 panel."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 320
BUFFER_LINES = 30
BUFFER_SIZE = SCREEN_WIDTH * BUFFER_LINES

RAW_X_RANGE = (200, 3700)
RAW_Y_RANGE = (240, 3800)

_log = logging.getLogger("aurawx.DISPLAY")


def _linear_map(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Integer linear rescale that truncates toward zero."""
    numerator = (value - in_min) * (out_max - out_min)
    denominator = in_max - in_min
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient + out_min


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def map_touch(raw_x: int, raw_y: int) -> tuple[int, int]:
    """Convert raw touch-controller readings to screen pixel coordinates."""
    x = _linear_map(int(raw_x), *RAW_X_RANGE, 0, SCREEN_WIDTH - 1)
    y = _linear_map(int(raw_y), *RAW_Y_RANGE, 0, SCREEN_HEIGHT - 1)
    return _clamp(x, 0, SCREEN_WIDTH - 1), _clamp(y, 0, SCREEN_HEIGHT - 1)


class TouchState(Enum):
    """Whether the pointer is currently down."""

    RELEASED = "released"
    PRESSED = "pressed"


@dataclass(frozen=True)
class TouchReading:
    """Pointer state and screen position reported to the UI."""

    state: TouchState
    x: int = 0
    y: int = 0


def read_touch(point: Optional[tuple[int, int]]) -> TouchReading:
    """Build a pointer reading from a raw touch point, or ``None`` when untouched."""
    if point is None:
        return TouchReading(TouchState.RELEASED, 0, 0)
    raw_x, raw_y = point
    x, y = map_touch(raw_x, raw_y)
    _log.debug("Touch detected: raw(%d,%d) -> screen(%d,%d)", raw_x, raw_y, x, y)
    return TouchReading(TouchState.PRESSED, x, y)


@dataclass(frozen=True)
class Area:
    """Inclusive rectangle of screen pixels to be redrawn."""

    x1: int
    y1: int
    x2: int
    y2: int

    def is_valid(self) -> bool:
        """True when the rectangle lies within the screen."""
        return (
            self.x1 >= 0
            and self.y1 >= 0
            and self.x2 < SCREEN_WIDTH
            and self.y2 < SCREEN_HEIGHT
        )

    def size(self) -> tuple[int, int]:
        """Width and height in pixels."""
        return self.x2 - self.x1 + 1, self.y2 - self.y1 + 1