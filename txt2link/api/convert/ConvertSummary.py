"""Aggregate of all outcomes from one run."""

from dataclasses import dataclass, field

from .ConversionOutcome import ConversionOutcome
from .OutcomeKind import OutcomeKind


@dataclass
class ConvertSummary:
    outcomes: list[ConversionOutcome] = field(default_factory=list)

    @property
    def converted(self) -> int:
        return sum(1 for o in self.outcomes if o.kind is OutcomeKind.CONVERTED)

    @property
    def errors(self) -> int:
        return sum(1 for o in self.outcomes if o.kind is OutcomeKind.ERROR)

    @property
    def skipped(self) -> int:
        return len(self.outcomes) - self.converted - self.errors

    def count(self, kind: OutcomeKind) -> int:
        """Number of outcomes of the given kind."""
        return sum(1 for o in self.outcomes if o.kind is kind)
