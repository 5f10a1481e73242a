"""bsdlog — BSD-style leveled logging with queue fan-out.

Severity levels EMERG..DEBUG (plus NULL to silence everything), a
threshold you can change at runtime, and optional delivery of every
message to consumer queues with a bounded wait per put.

Public API:
    Logger          — leveled logger over a Writer
    new             — plain logger (threshold DEBUG, no level names)
    new_level       — logger with an explicit threshold
    Message         — value delivered to consumer queues
    Writer          — header-prefixed line sink
    parse_level     — level from a name or a number
    level_name      — display name for a level
    init_logger     — initialize the default logger
    get_logger      — access the default logger
"""

from bsdlog._version import __version__, __app_name__
from bsdlog.levels import (
    NULL, EMERG, ALERT, CRIT, ERR, WARNING, NOTICE, INFO, DEBUG,
    LEVEL_NAMES, MAX_LEVEL, InvalidLevelError, level_name, parse_level,
)
from bsdlog.message import Message
from bsdlog.writer import (
    DATE, TIME, MICROSECONDS, LONG_FILE, SHORT_FILE, STD_FLAGS, Writer,
)
from bsdlog.logger import LogPanic, Logger, new, new_level
from bsdlog.manager import init_logger, get_logger

__all__ = [
    "__version__", "__app_name__",
    "NULL", "EMERG", "ALERT", "CRIT", "ERR", "WARNING", "NOTICE", "INFO", "DEBUG",
    "LEVEL_NAMES", "MAX_LEVEL", "InvalidLevelError", "level_name", "parse_level",
    "Message",
    "DATE", "TIME", "MICROSECONDS", "LONG_FILE", "SHORT_FILE", "STD_FLAGS", "Writer",
    "LogPanic", "Logger", "new", "new_level",
    "init_logger", "get_logger",
]
