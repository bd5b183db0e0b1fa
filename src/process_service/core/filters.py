"""Filtering and statistics over a process collection.

Both functions are pure: they never mutate the input and never do I/O.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel

from process_service.models.process import (
    ActivityType,
    CaseType,
    ProcessStatus,
    ProcessStats,
)


class ProcessFilter(BaseModel):
    """Filter spec; omitted fields impose no constraint."""

    case_type: Optional[CaseType] = None
    status: Optional[ProcessStatus] = None
    activity_type: Optional[ActivityType] = None
    department: Optional[str] = None
    municipality: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())

    def matches(self, process) -> bool:
        """True when the process satisfies every supplied predicate."""
        if self.case_type is not None and process.case_type != self.case_type:
            return False
        if self.status is not None and process.status != self.status:
            return False
        if self.activity_type is not None and process.activity_type != self.activity_type:
            return False
        if self.department is not None and process.location.department != self.department:
            return False
        if self.municipality is not None and process.location.municipality != self.municipality:
            return False

        if self.date_from is not None or self.date_to is not None:
            occurred_at = _as_utc(process.occurred_at)
            if self.date_from is not None and occurred_at < _as_utc(self.date_from):
                return False
            if self.date_to is not None and occurred_at > _as_utc(self.date_to):
                return False

        return True


def _as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def filter_processes(processes: Iterable, filters: Optional[ProcessFilter] = None) -> List:
    """Return the processes matching all predicates, in their original order."""
    if filters is None or filters.is_empty:
        return list(processes)
    return [process for process in processes if filters.matches(process)]


def compute_stats(processes: Sequence) -> ProcessStats:
    """Count processes by type, status and activity in a single pass."""
    stats = ProcessStats()
    for process in processes:
        stats.total += 1
        stats.by_type[CaseType(process.case_type)] += 1
        stats.by_status[process.status] += 1
        stats.by_activity[process.activity_type] += 1
    return stats
