"""
Import jobs discovered from installed packages.

Packages provide import jobs by registering a callable under the
akeneo_connector.jobs entry point group; the entry point name is the import
code:

    entry_points={
        "akeneo_connector.jobs": [
            "product = mypkg.jobs:importProducts",
        ],
    }

The callable takes no arguments. It is only loaded when the job runs.
"""

import logging
from typing import Iterable, List, Optional

from akeneo_connector.compat import get_plugins
from akeneo_connector.config import DEFAULT_IMPORT_ORDER
from akeneo_connector.domain import ImportJob

from .interface import ImportRepository

LOG = logging.getLogger(__name__)

JOB_ENTRY_POINT_GROUP = "akeneo_connector.jobs"


def _description(entryPoint) -> str:
    dist = getattr(entryPoint, "dist", None)
    if dist is None:
        return entryPoint.value
    return "{} ({})".format(entryPoint.value, dist.name)


class EntryPointImportRepository(ImportRepository):
    """
    Jobs registered as entry points, sorted by the configured import order.

    Codes listed in `order` come first, in that order. Any other registered
    code follows, sorted by name.
    """

    def __init__(self, order: Optional[Iterable[str]] = None,
                 group: str = JOB_ENTRY_POINT_GROUP):
        self._order = list(DEFAULT_IMPORT_ORDER if order is None else order)
        self._group = group
        self._jobs: Optional[List[ImportJob]] = None

    @classmethod
    def fromConfig(cls, config):
        return cls(config.importOrder)

    def _discover(self) -> List[ImportJob]:
        jobs = {}
        for entryPoint in get_plugins(self._group):
            if entryPoint.name in jobs:
                LOG.warning("duplicate import job %r from %s ignored",
                            entryPoint.name, entryPoint.value)
                continue
            jobs[entryPoint.name] = ImportJob(
                code=entryPoint.name,
                description=_description(entryPoint),
                runner=entryPoint.load,
            )
        LOG.debug("discovered import jobs: %r", sorted(jobs))

        rank = {}
        for idx, code in enumerate(self._order):
            rank.setdefault(code, idx)
        unranked = len(self._order)
        return sorted(
            jobs.values(),
            key=lambda job: (rank.get(job.code, unranked), job.code))

    def getList(self) -> List[ImportJob]:
        if self._jobs is None:
            self._jobs = self._discover()
        return list(self._jobs)
