"""
Runs import jobs by code.

The executor resolves a code against the import repository and runs the
matching job. It performs no retries: a failing job is recorded in the run
history and the failure is raised to the caller.
"""

import logging
from typing import Optional

from .domain import ImportJob, RunStatus
from .history import RunHistory
from .repository import ImportRepository
from .utils import durationStr, utcNow

LOG = logging.getLogger(__name__)


class ImportJobError(Exception):
    pass


class UnknownImportJobError(ImportJobError):
    def __init__(self, code, available):
        self.code = code
        self.available = list(available)
        super().__init__(
            "Unknown import code {!r}.  Available codes: {}".format(
                code, ", ".join(self.available) or "(none)"))


class ImportJobNotRunnableError(ImportJobError):
    def __init__(self, code):
        self.code = code
        super().__init__("Import job {!r} has nothing to run".format(code))


class ImportJobFailedError(ImportJobError):
    def __init__(self, code, error):
        self.code = code
        self.error = error
        super().__init__("Import {!r} failed: {}".format(code, error))


class JobExecutor(object):
    def __init__(self, repository: ImportRepository,
                 history: Optional[RunHistory] = None):
        self._repository = repository
        self._history = history

    def findJob(self, code: str) -> ImportJob:
        job = self._repository.get(code) if code else None
        if job is None:
            raise UnknownImportJobError(code, self._repository.codes())
        if job.runner is None:
            raise ImportJobNotRunnableError(code)
        return job

    def execute(self, code: str) -> None:
        job = self.findJob(code)
        LOG.info("start import %r", code)
        started = utcNow()
        try:
            job.run()
        except Exception as error:
            finished = utcNow()
            LOG.debug("import %r failed", code, exc_info=True)
            self._record(code, RunStatus.ERROR, started, finished, str(error))
            raise ImportJobFailedError(code, error) from error
        finished = utcNow()
        LOG.info("import %r finished in %s", code,
                 durationStr(started, finished))
        self._record(code, RunStatus.SUCCESS, started, finished)

    def _record(self, code, status, started, finished, error=None):
        if self._history is None:
            return
        try:
            self._history.record(code, status, started, finished, error)
        except IOError:
            LOG.warning("could not record %r run in %s", code,
                        self._history.fileName, exc_info=True)
