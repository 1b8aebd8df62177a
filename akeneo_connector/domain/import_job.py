"""
Domain model for import jobs.

An ImportJob is a named, externally-defined job identified by its code.
A RunRequest is the ordered list of codes asked for by one command
invocation, and a RunRecord is what the executor remembers about one run.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Tuple

CODE_SEPARATOR = ","


class MissingRunnerError(ValueError):
    pass


class RunStatus(Enum):
    """Outcome of one import run."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ImportJob:
    """
    Descriptor of a known import job.

    `runner` performs the actual import. It is resolved lazily so that listing
    jobs never imports the code behind them.
    """

    code: str
    description: str = ""
    runner: Optional[Callable[[], Callable[[], None]]] = None

    def run(self) -> None:
        if self.runner is None:
            raise MissingRunnerError(
                "import job %r has no runner" % self.code)
        target = self.runner()
        target()


@dataclass(frozen=True)
class RunRequest:
    """Ordered job codes for a single command invocation."""

    codes: Tuple[str, ...]

    @classmethod
    def fromOption(cls, raw: str) -> RunRequest:
        # No trimming or deduplication, empty segments are passed through.
        return cls(codes=tuple(raw.split(CODE_SEPARATOR)))

    def isMultiple(self) -> bool:
        return len(self.codes) > 1


@dataclass
class RunRecord:
    """A finished import run."""

    code: str
    status: RunStatus
    started: datetime
    finished: datetime
    error: Optional[str] = None

    def succeeded(self) -> bool:
        return self.status == RunStatus.SUCCESS
