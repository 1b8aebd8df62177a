"""
Repository interface for import job descriptors.

This module defines the abstract interface that all repository
implementations must follow.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from akeneo_connector.domain import ImportJob


class ImportRepository(ABC):
    """
    Read-only, ordered catalog of import jobs.
    """

    @abstractmethod
    def getList(self) -> List[ImportJob]:
        """
        Get every known import job.

        Returns:
            Jobs in their run order. The first entry is the one used in
            usage examples.
        """

    def get(self, code: str) -> Optional[ImportJob]:
        """
        Get an import job by code.

        Args:
            code: The import code

        Returns:
            The job if known, None otherwise
        """
        for job in self.getList():
            if job.code == code:
                return job
        return None

    def codes(self) -> List[str]:
        return [job.code for job in self.getList()]


class ListImportRepository(ImportRepository):
    """In-memory repository keeping the order it was given."""

    def __init__(self, jobs: Iterable[ImportJob] = ()):
        self._jobs = list(jobs)

    def getList(self) -> List[ImportJob]:
        return list(self._jobs)
