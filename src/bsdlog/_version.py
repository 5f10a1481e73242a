"""
Version information for bsdlog.

This file is the canonical source for version numbers.
"""

# Version components - edit these for version bumps
MAJOR = 1
MINOR = 5
PATCH = 0

__version__ = f"{MAJOR}.{MINOR}.{PATCH}"
__app_name__ = "bsdlog"


def get_version():
    """Return the MAJOR.MINOR.PATCH version string."""
    return __version__


# For convenience in imports
VERSION = get_version()
