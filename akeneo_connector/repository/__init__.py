"""
Repository layer for import job descriptors.

This package contains the interface used by the import command and
executor to enumerate known import jobs, and its implementations.
"""

from .entry_points import JOB_ENTRY_POINT_GROUP, EntryPointImportRepository
from .interface import ImportRepository, ListImportRepository

__all__ = [
    "EntryPointImportRepository",
    "ImportRepository",
    "JOB_ENTRY_POINT_GROUP",
    "ListImportRepository",
]
