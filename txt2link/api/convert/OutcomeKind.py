"""Outcome kind enum for file conversion."""

from enum import Enum


class OutcomeKind(str, Enum):
    CONVERTED = "converted"
    SKIPPED_TOO_LARGE = "skipped_too_large"
    SKIPPED_TARGET_MISSING = "skipped_target_missing"
    SKIPPED_NOT_SYMLINKABLE = "skipped_not_symlinkable"
    SKIPPED_SYMLINK = "skipped_symlink"
    SKIPPED_UNREADABLE = "skipped_unreadable"
    SKIPPED_DECLINED = "skipped_declined"
    ERROR = "error"
