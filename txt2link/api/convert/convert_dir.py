"""Recursive directory walk."""

import logging
import os
from pathlib import Path
from typing import TextIO

from ...display.Display import Display
from ...utils.os_error_text import os_error_text
from .ConversionOutcome import ConversionOutcome
from .ConvertConfig import ConvertConfig
from .convert_file import convert_file
from .EntryKind import EntryKind
from .OutcomeKind import OutcomeKind
from .report_outcome import report_outcome

logger = logging.getLogger(__name__)


def convert_dir(
    dir_path: Path,
    config: ConvertConfig,
    display: Display,
    stdin: TextIO | None = None,
) -> list[ConversionOutcome]:
    """Walk ``dir_path`` depth-first and convert every qualifying file.

    Entries are visited in the order the filesystem lists them. Symlinks are
    never followed. A directory that cannot be listed is reported once and
    skipped; a single entry whose metadata cannot be read is reported and
    the walk moves on.
    """
    outcomes: list[ConversionOutcome] = []

    def _report(outcome: ConversionOutcome) -> None:
        report_outcome(outcome, config, display)
        outcomes.append(outcome)

    try:
        names = os.listdir(dir_path)
    except OSError as exc:
        _report(ConversionOutcome(OutcomeKind.ERROR, dir_path, reason=os_error_text(exc)))
        return outcomes

    logger.debug("Walking %s (%d entries)", dir_path, len(names))

    for name in names:
        entry_path = dir_path / name
        try:
            kind = EntryKind.classify(entry_path)
        except OSError as exc:
            _report(ConversionOutcome(OutcomeKind.ERROR, entry_path, reason=os_error_text(exc)))
            continue

        if kind is EntryKind.DIRECTORY:
            outcomes.extend(convert_dir(entry_path, config, display, stdin))
        elif kind is EntryKind.FILE:
            outcomes.append(convert_file(entry_path, config, display, stdin))
        elif kind is EntryKind.SYMLINK:
            try:
                current = os.readlink(entry_path)
            except OSError:
                current = ""
            _report(ConversionOutcome(OutcomeKind.SKIPPED_SYMLINK, entry_path, target=current))
        else:
            _report(
                ConversionOutcome(OutcomeKind.ERROR, entry_path, reason="Not a directory or a file or a symlink")
            )

    return outcomes
