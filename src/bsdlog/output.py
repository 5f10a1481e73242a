"""Output helpers for the bsdlog CLI.

Consistent message formatting across all commands. Results go to
stdout; warnings and errors are routed through the default Logger so
they respect -v/-Q like everything else.

Also re-exports the logger API for convenience imports.
"""

# Re-export the public API — one-stop import for commands
from bsdlog.manager import init_logger, get_logger   # noqa: F401
from bsdlog.levels import InvalidLevelError          # noqa: F401


def print_ok(msg):
    """Print a result line to stdout."""
    print(msg)


def print_warn(msg):
    """Emit a warning through the default Logger (level WARNING)."""
    get_logger().warning(msg)


def print_error(msg):
    """Emit an error through the default Logger (level ERR).

    Shown unless the threshold has been lowered below ERR (-QQQ and
    quieter).
    """
    get_logger().err(msg)
