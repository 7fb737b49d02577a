"""Route a conversion outcome to the display."""

import logging

from ...display.Display import Display
from .ConversionOutcome import ConversionOutcome
from .ConvertConfig import ConvertConfig
from .OutcomeKind import OutcomeKind

logger = logging.getLogger(__name__)

# Reported only with --verbose
VERBOSE_KINDS = frozenset(
    {
        OutcomeKind.SKIPPED_TOO_LARGE,
        OutcomeKind.SKIPPED_TARGET_MISSING,
        OutcomeKind.SKIPPED_NOT_SYMLINKABLE,
        OutcomeKind.SKIPPED_SYMLINK,
    }
)


def report_outcome(outcome: ConversionOutcome, config: ConvertConfig, display: Display) -> None:
    """Show an outcome according to the silent/verbose settings."""
    message = outcome.describe()
    logger.debug("%s: %s", outcome.kind.value, message)

    if outcome.kind is OutcomeKind.ERROR:
        display.error(message)
    elif outcome.kind is OutcomeKind.CONVERTED:
        if not config.silent:
            display.success(message)
    elif outcome.kind in VERBOSE_KINDS and config.verbose:
        display.info(message)
