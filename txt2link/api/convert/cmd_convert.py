"""Convert API function.

Converts a file, or a directory tree with ``recursive``, replacing text files
whose content is an existing path with symlinks to that path.
Matches CLI: txt2link <path> [options]
"""

import logging
from typing import TextIO

from ...display.Display import Display
from ...utils.os_error_text import os_error_text
from .ConversionOutcome import ConversionOutcome
from .ConvertConfig import ConvertConfig
from .convert_dir import convert_dir
from .convert_file import convert_file
from .ConvertSummary import ConvertSummary
from .EntryKind import EntryKind
from .OutcomeKind import OutcomeKind
from .report_outcome import report_outcome

logger = logging.getLogger(__name__)


def cmd_convert(config: ConvertConfig, display: Display, stdin: TextIO | None = None) -> ConvertSummary:
    """Run one conversion pass over ``config.path``.

    The root is classified following symlinks. Problems with the root are
    reported like any other error and end the run early.
    """
    summary = ConvertSummary()
    root = config.path

    def _fail(reason: str) -> ConvertSummary:
        outcome = ConversionOutcome(OutcomeKind.ERROR, root, reason=reason)
        report_outcome(outcome, config, display)
        summary.outcomes.append(outcome)
        return summary

    try:
        kind = EntryKind.classify(root, follow_symlinks=True)
    except OSError as exc:
        return _fail(os_error_text(exc))

    if kind is EntryKind.DIRECTORY:
        if not config.recursive:
            return _fail("Is a directory. Please specify 'recursive' flag")
        summary.outcomes.extend(convert_dir(root, config, display, stdin))
    elif kind is EntryKind.FILE:
        summary.outcomes.append(convert_file(root, config, display, stdin))
    else:
        return _fail("Not a directory or file")

    logger.info(
        "Processed %s: %d converted, %d skipped, %d errors",
        root,
        summary.converted,
        summary.skipped,
        summary.errors,
    )
    return summary
