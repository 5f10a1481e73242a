"""
BSD-style severity levels.

Lower numbers are more urgent. The emit rule used by the Logger is:

    message.level <= threshold  →  message is written

Level assignments:
    ←── urgent ─────────────────────────────────── verbose ──→
    -1     0      1      2     3    4        5       6     7
    NULL   EMERG  ALERT  CRIT  ERR  WARNING  NOTICE  INFO  DEBUG

NULL has no name. It is only meaningful as a threshold, where it
suppresses everything.
"""

import functools
import math


NULL = -1          # Threshold only: discard all output
EMERG = 0          # System is unusable
ALERT = 1          # Action must be taken immediately
CRIT = 2           # Critical conditions
ERR = 3            # Error conditions
WARNING = 4        # Warning conditions
NOTICE = 5         # Normal but significant condition
INFO = 6           # Informational
DEBUG = 7          # Debug-level messages

LEVEL_NAMES = (
    "EMERG",
    "ALERT",
    "CRIT",
    "ERR",
    "WARNING",
    "NOTICE",
    "INFO",
    "DEBUG",
)

MAX_LEVEL = len(LEVEL_NAMES) - 1


class InvalidLevelError(ValueError):
    """Raised for a level that is out of bounds or cannot be parsed.

    ``level`` carries the best-effort value the caller supplied: the
    rejected number for numeric input, NULL for anything else.
    """

    def __init__(self, level=NULL, message="log level invalid or out of bounds"):
        super().__init__(message)
        self.level = level


def level_name(level) -> str:
    """Return the canonical name for ``level``, or ``"INVALID"``."""
    if isinstance(level, bool) or not isinstance(level, int):
        return "INVALID"
    if level < 0 or level > MAX_LEVEL:
        return "INVALID"
    return LEVEL_NAMES[level]


@functools.singledispatch
def parse_level(value) -> int:
    """Parse a level from a name (any case) or a number in [0, 7].

    Raises InvalidLevelError for unknown names, out-of-range numbers
    and unsupported types. For out-of-range numbers the exception's
    ``level`` attribute holds the rejected value.
    """
    raise InvalidLevelError(NULL)


@parse_level.register(str)
def _parse_name(value: str) -> int:
    wanted = value.upper()
    for i, name in enumerate(LEVEL_NAMES):
        if name == wanted:
            return i
    raise InvalidLevelError(NULL)


@parse_level.register(bool)
def _parse_bool(value: bool) -> int:
    raise InvalidLevelError(NULL)


@parse_level.register(int)
def _parse_int(value: int) -> int:
    if value < 0 or value > MAX_LEVEL:
        raise InvalidLevelError(value)
    return value


@parse_level.register(float)
def _parse_float(value: float) -> int:
    if not math.isfinite(value):
        raise InvalidLevelError(NULL)
    if value < 0 or value > MAX_LEVEL:
        raise InvalidLevelError(int(value))
    return int(value)


def from_text(text: str):
    """Convert command-line or config text to a level spec.

    "4" and "-1" become ints, "4.0" a float, anything else stays a
    name. The result is meant for parse_level() or check_threshold().
    """
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def check_threshold(level) -> int:
    """Validate a configured threshold and return it as an int.

    Thresholds may be NULL (suppress everything) in addition to the
    eight named levels. Names and numeric strings are accepted.
    """
    if isinstance(level, str):
        level = from_text(level)
        if isinstance(level, str):
            return parse_level(level)
    if isinstance(level, float) and level.is_integer():
        level = int(level)
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevelError(NULL)
    if level < NULL or level > MAX_LEVEL:
        raise InvalidLevelError(level)
    return level


def clamp_threshold(level: int) -> int:
    """Clamp an arbitrary int into the [NULL, DEBUG] threshold range."""
    return max(NULL, min(MAX_LEVEL, level))
