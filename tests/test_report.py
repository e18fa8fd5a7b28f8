"""Tests for run reports and the exit policy."""

import pytest

from idt.models import Outcome, OutcomeKind, RunReport, ToolReport
from idt.report import (
    EXIT_INSTALL_FAILED,
    EXIT_SUCCESS,
    aggregate,
    exit_code,
    format_failure_summary,
    panic_payload,
)


def _report(*pairs: tuple[str, Outcome]) -> RunReport:
    return RunReport(entries=[ToolReport(name, outcome) for name, outcome in pairs])


class TestOutcome:
    """Outcome constructors."""

    def test_success(self):
        outcome = Outcome.success()
        assert outcome.kind == OutcomeKind.SUCCESS
        assert not outcome.is_failure

    def test_failure_keeps_detail(self):
        outcome = Outcome.failure("error downloading url=x")
        assert outcome.kind == OutcomeKind.FAILURE
        assert outcome.detail == "error downloading url=x"
        assert outcome.is_failure

    def test_panic_is_a_failure(self):
        assert Outcome.panic("RuntimeError: x").is_failure


class TestAggregate:
    """Pairing installers with executor results."""

    def test_outcomes_recorded_as_is(self, make_installer):
        installers = [make_installer("a"), make_installer("b")]
        report = aggregate(installers, [Outcome.success(), Outcome.failure("nope")])
        assert report.entries == [
            ToolReport("a", Outcome.success()),
            ToolReport("b", Outcome.failure("nope")),
        ]

    def test_exception_becomes_panic_with_payload(self, make_installer, capsys):
        report = aggregate([make_installer("a")], [KeyError("missing")])

        outcome = report.entries[0].outcome
        assert outcome.kind == OutcomeKind.PANIC
        assert outcome.detail == "KeyError: 'missing'"
        assert "💥 a installer panicked: KeyError: 'missing'" in capsys.readouterr().err

    def test_panic_payload_format(self):
        assert panic_payload(ValueError("bad")) == "ValueError: bad"


class TestExitPolicy:
    """Exit status and failure summary."""

    def test_exit_zero_when_all_succeed(self):
        report = _report(("a", Outcome.success()), ("b", Outcome.success()))
        assert exit_code(report) == EXIT_SUCCESS == 0

    def test_exit_zero_for_empty_report(self):
        assert exit_code(RunReport()) == EXIT_SUCCESS

    @pytest.mark.parametrize(
        "outcome", [Outcome.failure("x"), Outcome.panic("RuntimeError: x")]
    )
    def test_exit_nonzero_on_any_failure(self, outcome):
        report = _report(("a", Outcome.success()), ("b", outcome))
        assert exit_code(report) == EXIT_INSTALL_FAILED != 0

    def test_failure_summary(self):
        report = _report(
            ("a", Outcome.failure("x")),
            ("b", Outcome.success()),
            ("c", Outcome.panic("RuntimeError: y")),
        )
        assert report.failure_count == 2
        assert report.failed_tools == ["a", "c"]
        assert format_failure_summary(report) == (
            "❌ 2 tools failed to install, namely: a, c"
        )
