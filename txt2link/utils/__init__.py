"""txt2link utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .configure_logging import configure_logging
from .display_path import display_path
from .get_package_version import get_package_version
from .os_error_text import os_error_text

__all__ = [
    "configure_logging",
    "display_path",
    "get_package_version",
    "os_error_text",
]
