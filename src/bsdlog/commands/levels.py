"""bsdlog levels — list the level table or check level values.

    bsdlog levels              # table of names and numbers
    bsdlog levels warning 3    # WARNING (4), ERR (3)
"""

import argparse

from bsdlog.levels import LEVEL_NAMES, NULL, InvalidLevelError, from_text, parse_level
from bsdlog.output import print_error, print_ok


def register(subparsers, parents):
    """Register the 'levels' subcommand."""
    p = subparsers.add_parser(
        "levels",
        parents=parents,
        help="List levels or parse level values",
        description=(
            "With no arguments, list every level with its number.\n"
            "Otherwise parse each VALUE (a name in any case, or a number\n"
            "0..7) and print the level it resolves to."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("values", nargs="*", metavar="VALUE",
                   help="Level names or numbers to check")
    p.set_defaults(func=run)


def format_level_table() -> str:
    """Format the level table for display."""
    width = max(len(name) for name in LEVEL_NAMES)
    lines = [f"  {'(none)':<{width}}  {NULL}   threshold only, suppresses everything"]
    for i, name in enumerate(LEVEL_NAMES):
        lines.append(f"  {name:<{width}}  {i}")
    return "\n".join(lines)


def run(args):
    """Execute the levels command."""
    if not args.values:
        print_ok(format_level_table())
        return 0

    failed = False
    for value in args.values:
        try:
            level = parse_level(from_text(value))
        except InvalidLevelError as e:
            print_error(f"{value}: {e}")
            failed = True
            continue
        print_ok(f"{value} -> {LEVEL_NAMES[level]} ({level})")
    return 2 if failed else 0
