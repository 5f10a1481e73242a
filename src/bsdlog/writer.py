"""
Writer — the sequential text sink underneath a Logger.

Each call to output() writes exactly one line, preceded by an optional
prefix and a header selected by the flag bitmask:

    <prefix>2009/01/23 01:23:23.123123 /a/b/c/d.py:23: message

Flags are OR'ed together. There is no control over the order the
header fields appear in (the order listed here).
"""

import os
import sys
import threading
from datetime import datetime
from typing import Optional, TextIO


DATE = 1            # the date: 2009/01/23
TIME = 2            # the time: 01:23:23
MICROSECONDS = 4    # microsecond resolution: 01:23:23.123123. assumes TIME
LONG_FILE = 8       # full file name and line number: /a/b/c/d.py:23
SHORT_FILE = 16     # final file name element and line number: d.py:23. overrides LONG_FILE
STD_FLAGS = DATE | TIME

FLAG_NAMES = {
    'date': DATE,
    'time': TIME,
    'microseconds': MICROSECONDS,
    'long_file': LONG_FILE,
    'short_file': SHORT_FILE,
    'std': STD_FLAGS,
}


def parse_flags(spec) -> int:
    """Turn a flag spec into a bitmask.

    Accepts an int (returned as is), a list of flag names, or a string
    of names separated by ``|`` or ``,`` (e.g. ``"date|short_file"``).
    """
    if isinstance(spec, int) and not isinstance(spec, bool):
        return spec
    if isinstance(spec, str):
        spec = spec.replace(',', '|').split('|')
    flags = 0
    for name in spec:
        name = str(name).strip().lower()
        if not name:
            continue
        if name.isdigit():
            flags |= int(name)
            continue
        if name not in FLAG_NAMES:
            raise ValueError(f"unknown writer flag: {name!r}")
        flags |= FLAG_NAMES[name]
    return flags


class Writer:
    """Write header-prefixed lines to a text stream.

    Writes are serialized with an internal lock so concurrent callers
    never interleave partial lines. Errors raised by the stream are
    left to propagate.
    """

    def __init__(self, out: Optional[TextIO] = None, prefix: str = "",
                 flags: int = STD_FLAGS):
        self.out = out if out is not None else sys.stderr
        self.prefix = prefix
        self.flags = flags
        self._lock = threading.Lock()

    def format_header(self, now: datetime, filename: str, lineno: int) -> str:
        parts = [self.prefix]
        if self.flags & DATE:
            parts.append(now.strftime("%Y/%m/%d "))
        if self.flags & (TIME | MICROSECONDS):
            stamp = now.strftime("%H:%M:%S")
            if self.flags & MICROSECONDS:
                stamp += f".{now.microsecond:06d}"
            parts.append(stamp + " ")
        if self.flags & (SHORT_FILE | LONG_FILE):
            if self.flags & SHORT_FILE:
                filename = os.path.basename(filename)
            parts.append(f"{filename}:{lineno}: ")
        return "".join(parts)

    def output(self, calldepth: int, text: str) -> None:
        """Write one line of output.

        ``calldepth`` counts frames to skip when reporting file and
        line: 1 is the caller of output(), 2 its caller, and so on.
        """
        now = datetime.now()
        filename, lineno = "???", 0
        if self.flags & (SHORT_FILE | LONG_FILE):
            try:
                frame = sys._getframe(calldepth)
            except ValueError:
                frame = None
            if frame is not None:
                filename = frame.f_code.co_filename
                lineno = frame.f_lineno
        line = self.format_header(now, filename, lineno) + text
        if not line.endswith("\n"):
            line += "\n"
        with self._lock:
            self.out.write(line)
