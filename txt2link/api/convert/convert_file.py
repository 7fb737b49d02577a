"""Evaluate a single candidate file and convert it when it qualifies."""

import logging
from pathlib import Path
from typing import TextIO

from ...display.Display import Display
from ...utils.os_error_text import os_error_text
from .ask_for_confirmation import ask_for_confirmation
from .ConversionOutcome import ConversionOutcome
from .ConvertConfig import ConvertConfig
from .is_symlinkable import is_symlinkable
from .link_target_exists import link_target_exists
from .OutcomeKind import OutcomeKind
from .replace_with_symlink import replace_with_symlink
from .report_outcome import report_outcome

logger = logging.getLogger(__name__)


def convert_file(
    file_path: Path,
    config: ConvertConfig,
    display: Display,
    stdin: TextIO | None = None,
) -> ConversionOutcome:
    """Convert ``file_path`` into a symlink to its own content if it qualifies.

    The outcome is reported before returning, so interactive prompts and
    report lines stay in order.
    """
    outcome = _evaluate(file_path, config, display, stdin)
    report_outcome(outcome, config, display)
    return outcome


def _evaluate(
    file_path: Path,
    config: ConvertConfig,
    display: Display,
    stdin: TextIO | None,
) -> ConversionOutcome:
    try:
        size = file_path.stat().st_size
    except OSError as exc:
        return ConversionOutcome(OutcomeKind.ERROR, file_path, reason=os_error_text(exc))

    if size > config.max_len:
        return ConversionOutcome(OutcomeKind.SKIPPED_TOO_LARGE, file_path, size=size, limit=config.max_len)

    # Content is the link verbatim; no newline translation or trimming
    try:
        link = file_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s as text: %s", file_path, exc)
        return ConversionOutcome(OutcomeKind.SKIPPED_UNREADABLE, file_path)

    if not is_symlinkable(link):
        return ConversionOutcome(OutcomeKind.SKIPPED_NOT_SYMLINKABLE, file_path, target=link)

    if not link_target_exists(file_path, link):
        return ConversionOutcome(OutcomeKind.SKIPPED_TARGET_MISSING, file_path, target=link)

    if config.interactive and not ask_for_confirmation(file_path, link, display, stdin):
        return ConversionOutcome(OutcomeKind.SKIPPED_DECLINED, file_path, target=link)

    try:
        replace_with_symlink(file_path, link)
    except OSError as exc:
        return ConversionOutcome(OutcomeKind.ERROR, file_path, target=link, reason=os_error_text(exc))

    return ConversionOutcome(OutcomeKind.CONVERTED, file_path, target=link)
