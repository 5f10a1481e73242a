"""
Logger — leveled logging with queue fan-out.

Every severity-named call funnels into Logger._dispatch(), which
decides who receives the message:

    1. "all" consumers       every message, before any filtering
    2. level check           level > threshold  →  stop here
    3. "filtered" consumers  only messages that passed the check
    4. writer                the line itself, optionally "NAME text"

Consumers are queues (anything with ``put(item, timeout=...)`` that
raises ``queue.Full``). Each put waits at most ``timeout`` seconds;
a put that times out is dropped and counted in ``missed_messages``.
Nothing is retried.

Usage::

    log = new_level(ERR, True, sys.stderr, "", STD_FLAGS)
    q = queue.Queue(maxsize=100)
    log.split(q, send_all=True)
    log.warning("disk low")     # q gets it, stderr does not
    log.err("disk full")        # both get it: "ERR disk full"
"""

import math
import queue
import sys
import threading
from collections.abc import Mapping
from typing import Any, List, Optional, TextIO

from .levels import (
    EMERG, ALERT, CRIT, ERR, WARNING, NOTICE, INFO, DEBUG,
    check_threshold, level_name, parse_level,
)
from .message import Message
from .writer import STD_FLAGS, Writer


# Frames between Writer.output() and the code that called a severity
# method: output <- _dispatch <- info() <- caller.
CALL_DEPTH = 3

DEFAULT_TIMEOUT = 1.0


class LogPanic(RuntimeError):
    """Raised by the panic*() calls after the message is dispatched."""


def _concat(values) -> str:
    return "".join(str(v) for v in values)


def _line(values) -> str:
    return " ".join(str(v) for v in values) + "\n"


def _format(fmt: str, args) -> str:
    if not args:
        return fmt
    # A single mapping feeds named conversions: "%(host)s"
    if len(args) == 1 and isinstance(args[0], Mapping):
        return fmt % args[0]
    return fmt % args


class Logger:
    """A writer-backed logger with a runtime-adjustable threshold.

    Args:
        level: Initial threshold, NULL..DEBUG, as an int or a name
        include_level: Prefix written lines with the level name
        out: Text stream for the writer (default: stderr)
        prefix: Writer line prefix
        flags: Writer header flags (DATE, TIME, SHORT_FILE, ...)

    Raises:
        InvalidLevelError: if ``level`` is outside [NULL, DEBUG]
    """

    def __init__(
        self,
        level: Any = DEBUG,
        include_level: bool = False,
        out: Optional[TextIO] = None,
        prefix: str = "",
        flags: int = STD_FLAGS,
    ):
        self._level = check_threshold(level)
        self.include_level = include_level
        self._timeout = DEFAULT_TIMEOUT
        self._missed = 0
        self._all_consumers: List[Any] = []
        self._level_consumers: List[Any] = []
        self._lock = threading.Lock()
        self.writer = Writer(out, prefix, flags)

    # -----------------------------------------------------------------
    # Configuration
    # -----------------------------------------------------------------
    @property
    def level(self) -> int:
        """Current threshold. Messages above it are suppressed."""
        return self._level

    @level.setter
    def level(self, value: Any) -> None:
        value = check_threshold(value)
        with self._lock:
            self._level = value

    @property
    def timeout(self) -> float:
        """Seconds each consumer put may block before the message is dropped."""
        return self._timeout

    @timeout.setter
    def timeout(self, value: float) -> None:
        value = float(value)
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"timeout must be a finite number >= 0, got {value}")
        with self._lock:
            self._timeout = value

    @property
    def missed_messages(self) -> int:
        """Number of consumer puts that timed out since construction."""
        with self._lock:
            return self._missed

    def split(self, consumer: "queue.Queue[Message]", send_all: bool = False) -> None:
        """Register a consumer queue.

        With ``send_all`` the consumer receives every message regardless
        of the threshold; otherwise only messages that pass it.
        """
        with self._lock:
            if send_all:
                self._all_consumers.append(consumer)
            else:
                self._level_consumers.append(consumer)

    # -----------------------------------------------------------------
    # Dispatch
    # -----------------------------------------------------------------
    def _deliver(self, consumers, message: Message, timeout: float) -> None:
        for consumer in consumers:
            try:
                consumer.put(message, timeout=timeout)
            except queue.Full:
                with self._lock:
                    self._missed += 1

    def _dispatch(self, level: int, text: str) -> None:
        with self._lock:
            all_consumers = list(self._all_consumers)
            level_consumers = list(self._level_consumers)
            timeout = self._timeout
        message = Message(level, text)

        self._deliver(all_consumers, message, timeout)

        if level > self._level:
            return

        self._deliver(level_consumers, message, timeout)

        if self.include_level:
            self.writer.output(CALL_DEPTH, level_name(level) + " " + text)
        else:
            self.writer.output(CALL_DEPTH, text)

    # -----------------------------------------------------------------
    # Unleveled output (plain logger compatibility)
    # -----------------------------------------------------------------
    def print(self, *values: Any) -> None:
        self.writer.output(2, _concat(values))

    def println(self, *values: Any) -> None:
        self.writer.output(2, _line(values))

    def printf(self, fmt: str, *args: Any) -> None:
        self.writer.output(2, _format(fmt, args))

    # -----------------------------------------------------------------
    # Severity-named calls
    # -----------------------------------------------------------------
    def debug(self, *values: Any) -> None:
        self._dispatch(DEBUG, _concat(values))

    def info(self, *values: Any) -> None:
        self._dispatch(INFO, _concat(values))

    def notice(self, *values: Any) -> None:
        self._dispatch(NOTICE, _concat(values))

    def warning(self, *values: Any) -> None:
        self._dispatch(WARNING, _concat(values))

    def err(self, *values: Any) -> None:
        self._dispatch(ERR, _concat(values))

    def crit(self, *values: Any) -> None:
        self._dispatch(CRIT, _concat(values))

    def alert(self, *values: Any) -> None:
        self._dispatch(ALERT, _concat(values))

    def emerg(self, *values: Any) -> None:
        self._dispatch(EMERG, _concat(values))

    def fatal(self, *values: Any) -> None:
        """Dispatch at EMERG, then exit the process with status 1."""
        self._dispatch(EMERG, _concat(values))
        sys.exit(1)

    def panic(self, *values: Any) -> None:
        """Dispatch at EMERG, then raise LogPanic with the text."""
        text = _concat(values)
        self._dispatch(EMERG, text)
        raise LogPanic(text)

    def debugln(self, *values: Any) -> None:
        self._dispatch(DEBUG, _line(values))

    def infoln(self, *values: Any) -> None:
        self._dispatch(INFO, _line(values))

    def noticeln(self, *values: Any) -> None:
        self._dispatch(NOTICE, _line(values))

    def warningln(self, *values: Any) -> None:
        self._dispatch(WARNING, _line(values))

    def errln(self, *values: Any) -> None:
        self._dispatch(ERR, _line(values))

    def critln(self, *values: Any) -> None:
        self._dispatch(CRIT, _line(values))

    def alertln(self, *values: Any) -> None:
        self._dispatch(ALERT, _line(values))

    def emergln(self, *values: Any) -> None:
        self._dispatch(EMERG, _line(values))

    def fatalln(self, *values: Any) -> None:
        self._dispatch(EMERG, _line(values))
        sys.exit(1)

    def panicln(self, *values: Any) -> None:
        text = _line(values)
        self._dispatch(EMERG, text)
        raise LogPanic(text)

    def debugf(self, fmt: str, *args: Any) -> None:
        self._dispatch(DEBUG, _format(fmt, args))

    def infof(self, fmt: str, *args: Any) -> None:
        self._dispatch(INFO, _format(fmt, args))

    def noticef(self, fmt: str, *args: Any) -> None:
        self._dispatch(NOTICE, _format(fmt, args))

    def warningf(self, fmt: str, *args: Any) -> None:
        self._dispatch(WARNING, _format(fmt, args))

    def errf(self, fmt: str, *args: Any) -> None:
        self._dispatch(ERR, _format(fmt, args))

    def critf(self, fmt: str, *args: Any) -> None:
        self._dispatch(CRIT, _format(fmt, args))

    def alertf(self, fmt: str, *args: Any) -> None:
        self._dispatch(ALERT, _format(fmt, args))

    def emergf(self, fmt: str, *args: Any) -> None:
        self._dispatch(EMERG, _format(fmt, args))

    def fatalf(self, fmt: str, *args: Any) -> None:
        self._dispatch(EMERG, _format(fmt, args))
        sys.exit(1)

    def panicf(self, fmt: str, *args: Any) -> None:
        text = _format(fmt, args)
        self._dispatch(EMERG, text)
        raise LogPanic(text)

    def log(self, level: Any, text: str) -> None:
        """Dispatch pre-formatted ``text`` at an explicit ``level``.

        ``level`` may be a name or a number and must be one of the eight
        named levels; InvalidLevelError is raised otherwise.
        """
        self._dispatch(parse_level(level), text)


def new(out: Optional[TextIO] = None, prefix: str = "",
        flags: int = STD_FLAGS) -> Logger:
    """Create a Logger that behaves like a plain, unleveled logger.

    Threshold is DEBUG and no level name is written, so every call
    produces output exactly as the text was given.
    """
    return Logger(DEBUG, False, out, prefix, flags)


def new_level(level: Any, include_level: bool, out: Optional[TextIO] = None,
              prefix: str = "", flags: int = STD_FLAGS) -> Logger:
    """Create a Logger with the given threshold.

    Raises:
        InvalidLevelError: if ``level`` is outside [NULL, DEBUG]
    """
    return Logger(level, include_level, out, prefix, flags)
