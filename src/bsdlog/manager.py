"""
Process-wide default Logger.

Applications (and the bsdlog CLI itself) call init_logger() once at
startup and get_logger() everywhere else. The threshold is composed
from verbose/quiet counts around a NOTICE default:

    ←── quieter ──────────── default ──────────── louder ──→
    -1    0     1     2    3    4        5       6     7
    NULL  EMERG ALERT CRIT ERR  WARNING  NOTICE  INFO  DEBUG

    -v raises the threshold by one, -Q lowers it. They compose:
    -vv -Q = INFO. The result is clamped to [NULL, DEBUG].
"""

from typing import Any, Optional, TextIO

from .levels import NOTICE, check_threshold, clamp_threshold
from .logger import Logger
from .writer import STD_FLAGS


DEFAULT_LEVEL = NOTICE


def compose_level(verbosity: int = 0, quiet: int = 0,
                  base: int = DEFAULT_LEVEL) -> int:
    """Apply -v/-Q counts to ``base`` and clamp to a valid threshold."""
    return clamp_threshold(base + (verbosity or 0) - (quiet or 0))


# =============================================================================
# Module-level singleton
# =============================================================================

_logger: Optional[Logger] = None


def init_logger(verbosity: int = 0, quiet: int = 0, level: Any = None,
                include_level: bool = True, out: Optional[TextIO] = None,
                prefix: str = "", flags: int = STD_FLAGS) -> Logger:
    """Initialize the module-level default Logger.

    Call once at program startup after parsing CLI arguments.

    Args:
        verbosity: Number of -v flags
        quiet: Number of -Q flags
        level: Explicit threshold; when given, verbosity/quiet are ignored
        include_level: Write the level name before each line
        out: Text stream (default: stderr)
        prefix: Line prefix
        flags: Writer header flags

    Returns:
        The initialized Logger instance
    """
    global _logger

    if level is None:
        threshold = compose_level(verbosity, quiet)
    else:
        threshold = check_threshold(level)

    _logger = Logger(threshold, include_level, out, prefix, flags)
    return _logger


def get_logger() -> Logger:
    """Get the module-level Logger, creating a default if needed."""
    global _logger
    if _logger is None:
        _logger = Logger(DEFAULT_LEVEL, True, None, "", 0)
    return _logger


def reset_logger() -> None:
    """Drop the module-level Logger so the next get_logger() rebuilds it."""
    global _logger
    _logger = None
