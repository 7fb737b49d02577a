"""Interactive yes/no prompt before converting a file."""

import logging
import sys
from pathlib import Path
from typing import TextIO

from ...display.Display import Display
from ...utils.display_path import display_path

logger = logging.getLogger(__name__)

YES = frozenset("yY")
NO = frozenset("nN")


def ask_for_confirmation(file_path: Path, link: str, display: Display, stdin: TextIO | None = None) -> bool:
    """Ask the user whether to convert ``file_path`` into a symlink to ``link``.

    Reads one character at a time until a y/n answer arrives. Any other
    character prints a retry hint, except whitespace: it is skipped silently,
    a deliberate departure from re-prompting on every non-y/n character, so
    the newline left by a line-buffered terminal does not trigger a retry.
    End of input is treated as "no".

    Args:
        file_path: File about to be converted
        link: Intended symlink target
        display: Display used for the question and retry hint
        stdin: Stream to read answers from (defaults to ``sys.stdin``)

    Returns:
        True to proceed, False to leave the file alone
    """
    stream = stdin if stdin is not None else sys.stdin
    display.status(f"Convert '{display_path(file_path)}' file into symlink '{link}'?")
    while True:
        char = stream.read(1)
        if not char:
            logger.debug("End of input while confirming %s, treating as no", file_path)
            return False
        if char in YES:
            return True
        if char in NO:
            return False
        if char.isspace():
            continue
        display.warning("y/n only please.")
