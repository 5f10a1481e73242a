"""Main CLI entry point for bsdlog.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--verbose, --quiet, --config)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  bsdlog -v emit "disk full"      # works
  bsdlog emit "disk full" -v      # also works

Global -v/-Q adjust the CLI's own diagnostics (stderr). The shared
--level/--prefix/... flags configure the logger a command writes with.

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from bsdlog._version import VERSION


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "More diagnostics on stderr (-v, -vv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Fewer diagnostics on stderr (-Q ... -QQQQQQ=silent)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.bsdlog/config.json)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for logger settings.

    Every option defaults to None so that unset flags fall through to
    the project and global config files.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--level", metavar="LEVEL",
                        help="Threshold: name (WARNING) or number (-1..7)")
    common.add_argument("--include-level", dest="include_level",
                        action="store_true", default=None,
                        help="Write the level name before each line")
    common.add_argument("--no-include-level", dest="include_level",
                        action="store_false",
                        help="Write lines without the level name")
    common.add_argument("--prefix", metavar="TEXT",
                        help="Text written at the start of every line")
    common.add_argument("--flags", metavar="FLAGS",
                        help="Header fields, e.g. 'date|time|short_file' or 3")
    common.add_argument("--timeout", metavar="SECONDS", type=float,
                        help="Per-consumer delivery timeout")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in bsdlog.commands must export:
      register(subparsers, parents) — add itself to the subparser
      run(args) — execute the command
    """
    from bsdlog.commands import emit, levels
    return [emit, levels]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="bsdlog",
        description="bsdlog — BSD-style leveled logging",
        epilog=(
            "Run 'bsdlog <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--verbose, --quiet, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"bsdlog {VERSION}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for bsdlog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success, 2 = bad level or option).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    from bsdlog.manager import init_logger
    init_logger(verbosity=global_args.verbose, quiet=global_args.quiet,
                flags=0)

    # Pass 2: parse subcommand + shared/specific args
    common_parser = _build_common_parser()
    commands = _discover_commands()
    parser = _build_parser(commands, common_parser)

    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    from bsdlog.output import print_error
    try:
        return args.func(args) or 0
    except ValueError as e:
        print_error(str(e))
        return 2
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
