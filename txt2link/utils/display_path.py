"""Render a filesystem path for report lines."""

import os
from pathlib import Path


def display_path(path: str | Path) -> str:
    """Return ``path`` as printable text.

    Undecodable bytes in file names become U+FFFD instead of lone
    surrogates, which no UTF-8 stream can encode.
    """
    return os.fsencode(path).decode("utf-8", "replace")
