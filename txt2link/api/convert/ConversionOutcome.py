"""Per-path result of a conversion attempt."""

from dataclasses import dataclass
from pathlib import Path

from ...utils.display_path import display_path
from .OutcomeKind import OutcomeKind


@dataclass(frozen=True)
class ConversionOutcome:
    """What happened to one path during a run.

    ``target`` holds the file content (or the existing symlink target for
    skipped symlinks). ``size`` and ``limit`` are only set for files that
    were too large. ``reason`` is only set for errors.
    """

    kind: OutcomeKind
    path: Path
    target: str | None = None
    reason: str = ""
    size: int | None = None
    limit: int | None = None

    def describe(self) -> str:
        """Render the report line for this outcome."""
        path = display_path(self.path)
        if self.kind is OutcomeKind.CONVERTED:
            return f"Converted to symlink: {path} -> {self.target}"
        if self.kind is OutcomeKind.SKIPPED_TOO_LARGE:
            return f"File {path} is too big to be considered as symlink({self.size} > {self.limit})"
        if self.kind is OutcomeKind.SKIPPED_TARGET_MISSING:
            return f"Symlink target {path} -> {self.target} does not exist"
        if self.kind is OutcomeKind.SKIPPED_NOT_SYMLINKABLE:
            return f"Content of {path} cannot be used as a symlink target"
        if self.kind is OutcomeKind.SKIPPED_SYMLINK:
            return f"Skipped symlink {path} -> {display_path(self.target or '')}"
        if self.kind is OutcomeKind.SKIPPED_UNREADABLE:
            return f"Skipped {path}: content is not readable text"
        if self.kind is OutcomeKind.SKIPPED_DECLINED:
            return f"Skipped {path}: declined by user"
        return f"Cannot convert '{path}': {self.reason}"
