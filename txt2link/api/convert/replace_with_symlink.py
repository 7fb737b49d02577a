"""Replace a file with a symlink without losing it on failure."""

import logging
import os
import secrets
from contextlib import suppress
from pathlib import Path

logger = logging.getLogger(__name__)


def replace_with_symlink(file_path: Path, target: str) -> None:
    """Atomically swap ``file_path`` for a symlink pointing at ``target``.

    The link is created under a hidden fixed-length temporary name in the
    same directory and then renamed over the original, so the original
    survives any failure and names up to the filesystem limit still work.

    Raises:
        OSError: If the link cannot be created or renamed into place
    """
    tmp_path = file_path.with_name(f".txt2link-{secrets.token_hex(8)}.tmp")
    os.symlink(target, tmp_path)
    try:
        os.replace(tmp_path, file_path)
    except OSError:
        with suppress(FileNotFoundError):
            os.unlink(tmp_path)
        raise
    logger.debug("Replaced %s with symlink to %r", file_path, target)
