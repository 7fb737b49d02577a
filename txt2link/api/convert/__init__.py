"""Text-file to symlink conversion."""

from .cmd_convert import cmd_convert
from .ConversionOutcome import ConversionOutcome
from .ConvertConfig import DEFAULT_MAX_LEN, ConvertConfig
from .ConvertSummary import ConvertSummary
from .EntryKind import EntryKind
from .OutcomeKind import OutcomeKind

__all__ = [
    "DEFAULT_MAX_LEN",
    "ConversionOutcome",
    "ConvertConfig",
    "ConvertSummary",
    "EntryKind",
    "OutcomeKind",
    "cmd_convert",
]
