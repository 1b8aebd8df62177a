"""
Domain models for akeneo-connector.

This package contains the import job descriptors and per-invocation values,
with no knowledge of how jobs are discovered or executed.
"""

from .import_job import (
    ImportJob,
    MissingRunnerError,
    RunRecord,
    RunRequest,
    RunStatus,
)

__all__ = [
    "ImportJob",
    "MissingRunnerError",
    "RunRecord",
    "RunRequest",
    "RunStatus",
]
