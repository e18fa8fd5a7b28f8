"""Data models for a single installation run."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

ToolName = str


class OutcomeKind(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    PANIC = "panic"


@dataclass(frozen=True)
class Outcome:
    """Result of one installer: success, an error, or an abnormal termination."""
    kind: OutcomeKind
    detail: str = ""

    @classmethod
    def success(cls) -> "Outcome":
        return cls(OutcomeKind.SUCCESS)

    @classmethod
    def failure(cls, detail: str) -> "Outcome":
        return cls(OutcomeKind.FAILURE, detail)

    @classmethod
    def panic(cls, payload: str) -> "Outcome":
        return cls(OutcomeKind.PANIC, payload)

    @property
    def is_failure(self) -> bool:
        return self.kind != OutcomeKind.SUCCESS


@dataclass(frozen=True)
class ToolReport:
    tool_name: ToolName
    outcome: Outcome


@dataclass
class RunReport:
    """One entry per selected installer, in selection order."""
    entries: list[ToolReport] = field(default_factory=list)

    @property
    def failure_count(self) -> int:
        return sum(1 for entry in self.entries if entry.outcome.is_failure)

    @property
    def failed_tools(self) -> list[ToolName]:
        return [entry.tool_name for entry in self.entries if entry.outcome.is_failure]


@dataclass
class CleanupReport:
    removed: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


__all__ = [
    "ToolName",
    "OutcomeKind",
    "Outcome",
    "ToolReport",
    "RunReport",
    "CleanupReport",
]
