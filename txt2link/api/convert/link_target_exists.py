"""Resolve whether a candidate link target exists."""

import os
from pathlib import Path


def link_target_exists(file_path: Path, link: str) -> bool:
    """Check if ``link`` names an existing path as seen from ``file_path``.

    The link is tried relative to the file's parent directory first, then
    as given (absolute, or relative to the working directory). A file path
    with no parent component only gets the second check.
    """
    parent = os.path.dirname(os.fspath(file_path))
    if parent and os.path.exists(os.path.join(parent, link)):
        return True
    return os.path.exists(link)
