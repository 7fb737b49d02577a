"""Unit tests for txt2link.api.convert.report_outcome module."""

from pathlib import Path

import pytest

from txt2link.api.convert.ConversionOutcome import ConversionOutcome
from txt2link.api.convert.OutcomeKind import OutcomeKind
from txt2link.api.convert.report_outcome import report_outcome


class RecordingDisplay:
    """Collects (method, message) pairs instead of printing."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    def __getattr__(self, name):
        return lambda message, **kwargs: self.calls.append((name, message))


CONVERTED = ConversionOutcome(OutcomeKind.CONVERTED, Path("l"), target="t")
ERROR = ConversionOutcome(OutcomeKind.ERROR, Path("d"), reason="boom")
TOO_LARGE = ConversionOutcome(OutcomeKind.SKIPPED_TOO_LARGE, Path("b"), size=2, limit=1)
DECLINED = ConversionOutcome(OutcomeKind.SKIPPED_DECLINED, Path("n"), target="t")
UNREADABLE = ConversionOutcome(OutcomeKind.SKIPPED_UNREADABLE, Path("u"))


@pytest.mark.parametrize(
    ("outcome", "options", "expected"),
    [
        (CONVERTED, {}, [("success", "Converted to symlink: l -> t")]),
        (CONVERTED, {"silent": True}, []),
        (CONVERTED, {"verbose": True}, [("success", "Converted to symlink: l -> t")]),
        (ERROR, {"silent": True}, [("error", "Cannot convert 'd': boom")]),
        (TOO_LARGE, {}, []),
        (TOO_LARGE, {"verbose": True}, [("info", "File b is too big to be considered as symlink(2 > 1)")]),
        (DECLINED, {"verbose": True}, []),
        (UNREADABLE, {"verbose": True}, []),
    ],
)
def test_report_rules(outcome, options, expected, make_config):
    display = RecordingDisplay()
    report_outcome(outcome, make_config(**options), display)
    assert display.calls == expected
