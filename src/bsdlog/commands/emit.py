"""bsdlog emit — write a message through a configured Logger.

Builds a Logger from the resolved config (CLI flags, .bsdlog.json,
~/.bsdlog/config.json) writing to stdout, then dispatches MESSAGE at
the requested priority. With no MESSAGE, every line read from stdin
is dispatched separately::

    bsdlog emit --level ERR --include-level -p WARNING "disk low"   # nothing
    bsdlog emit --level ERR --include-level -p ERR "disk full"      # ERR disk full
    tail -f app.out | bsdlog emit -p INFO --prefix "app: "
"""

import argparse
import sys

from bsdlog.config import logger_from_config, resolve_config
from bsdlog.levels import NOTICE, from_text, level_name, parse_level
from bsdlog.output import get_logger, print_warn


def register(subparsers, parents):
    """Register the 'emit' subcommand."""
    p = subparsers.add_parser(
        "emit",
        parents=parents,
        help="Write a message at a given priority",
        description=(
            "Dispatch a message through a logger configured by --level,\n"
            "--include-level, --prefix, --flags and the config files.\n"
            "Messages less urgent than the threshold are suppressed."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "-p", "--priority", metavar="LEVEL", default=level_name(NOTICE),
        help="Message level: name or number 0..7 (default: NOTICE)",
    )
    p.add_argument(
        "message", nargs="*",
        help="Message text (default: read lines from stdin)",
    )
    p.set_defaults(func=run)


def run(args):
    """Execute the emit command."""
    diag = get_logger()
    priority = parse_level(from_text(args.priority))

    resolved = resolve_config(args, config_path=getattr(args, "config", None))
    log = logger_from_config(resolved, out=sys.stdout)
    diag.debugf("emit: threshold=%s priority=%s include_level=%s",
                level_name(log.level), level_name(priority), log.include_level)

    if args.message:
        log.log(priority, " ".join(args.message))
        return 0

    if sys.stdin.isatty():
        print_warn("no MESSAGE given; reading lines from stdin (Ctrl-D to end)")

    count = 0
    for line in sys.stdin:
        log.log(priority, line.rstrip("\n"))
        count += 1
    diag.infof("emit: dispatched %d line(s) from stdin", count)
    return 0
