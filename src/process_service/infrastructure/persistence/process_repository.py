"""Process Repository for enforcement case persistence.

This module provides the repository pattern for the Process domain model.
It abstracts storage so the service layer holds no module-level state and
can be tested against the in-memory implementation.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import TypeAdapter
from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from process_service.core.exceptions import (
    ConcurrentModificationError,
    PersistenceError,
    ProcessNotFoundError,
)
from process_service.core.filters import ProcessFilter, filter_processes
from process_service.infrastructure.database.models import ProcessDB
from process_service.models.process import Process

logger = logging.getLogger(__name__)

_process_adapter: TypeAdapter = TypeAdapter(Process)


def _utc(value: datetime) -> datetime:
    """Stored timestamps are UTC; SQLite hands them back naive."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# ============================================================
# Repository Interface
# ============================================================

class ProcessRepository(ABC):
    """
    Abstract repository interface for Process persistence.

    Implementations:
    - SQLProcessRepository: SQLite/PostgreSQL via async SQLAlchemy
    - InMemoryProcessRepository: Testing, development and demo mode
    """

    @abstractmethod
    async def create(self, process) -> Any:
        """
        Store a new process.

        Raises:
            PersistenceError: If the id already exists or the write fails
        """
        pass

    @abstractmethod
    async def get(self, process_id: str) -> Optional[Any]:
        """
        Retrieve process by ID.

        Returns:
            Process if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(
        self,
        filters: Optional[ProcessFilter] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[List[Any], int]:
        """
        List processes in creation order.

        Returns:
            Tuple of (processes, total_count)
        """
        pass

    @abstractmethod
    async def update(self, process, expected_updated_at: Optional[datetime] = None) -> Any:
        """
        Replace a stored process.

        When ``expected_updated_at`` is given the write only succeeds if the
        stored process still carries that timestamp (compare-and-swap).

        Raises:
            ProcessNotFoundError: If the process does not exist
            ConcurrentModificationError: If the stored timestamp differs
        """
        pass


# ============================================================
# In-Memory Implementation
# ============================================================

class InMemoryProcessRepository(ProcessRepository):
    """
    In-memory process repository for testing, development and demo mode.

    Data stored in a dictionary, not persistent across restarts. Listing
    follows creation order like the SQL store. Copies go in and out so
    callers never alias stored state.
    """

    def __init__(self, processes: Optional[List[Any]] = None):
        """Initialize store, optionally pre-seeded."""
        self._processes: Dict[str, Any] = {}
        for process in processes or []:
            self._processes[process.id] = process.model_copy(deep=True)

    async def create(self, process) -> Any:
        if process.id in self._processes:
            raise PersistenceError(f"Process {process.id} already exists")
        self._processes[process.id] = process.model_copy(deep=True)
        return process

    async def get(self, process_id: str) -> Optional[Any]:
        process = self._processes.get(process_id)
        return process.model_copy(deep=True) if process else None

    async def list(
        self,
        filters: Optional[ProcessFilter] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[List[Any], int]:
        ordered = sorted(self._processes.values(), key=lambda p: (_utc(p.created_at), p.id))
        filtered = filter_processes(ordered, filters)
        total_count = len(filtered)
        end = None if limit is None else offset + limit
        return [p.model_copy(deep=True) for p in filtered[offset:end]], total_count

    async def update(self, process, expected_updated_at: Optional[datetime] = None) -> Any:
        stored = self._processes.get(process.id)
        if stored is None:
            raise ProcessNotFoundError(process.id)

        if expected_updated_at is not None and _utc(stored.updated_at) != _utc(expected_updated_at):
            logger.warning(f"Stale write rejected for process {process.id}")
            raise ConcurrentModificationError(process.id, expected_updated_at, stored.updated_at)

        self._processes[process.id] = process.model_copy(deep=True)
        return process

    def clear(self):
        """Clear all processes (testing utility)."""
        self._processes.clear()


# ============================================================
# SQL Implementation
# ============================================================

class SQLProcessRepository(ProcessRepository):
    """
    SQL process repository for production use.

    Uses SQLAlchemy async sessions. Nested parts of a process are stored as
    JSON columns; filterable fields are plain indexed columns.
    """

    def __init__(self, db_session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            db_session: SQLAlchemy async session
        """
        self.db = db_session

    async def create(self, process) -> Any:
        try:
            self.db.add(ProcessDB(**self._process_to_row(process)))
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise PersistenceError(f"Process {process.id} already exists") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(f"Failed to create process {process.id}: {e}") from e
        return process

    async def get(self, process_id: str) -> Optional[Any]:
        try:
            row = await self.db.get(ProcessDB, process_id, populate_existing=True)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to load process {process_id}: {e}") from e
        return self._row_to_process(row) if row is not None else None

    async def list(
        self,
        filters: Optional[ProcessFilter] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[List[Any], int]:
        conditions = self._conditions(filters or ProcessFilter())

        count_query = select(func.count()).select_from(ProcessDB).where(*conditions)
        data_query = (
            select(ProcessDB)
            .where(*conditions)
            .order_by(ProcessDB.created_at, ProcessDB.id)
            .offset(offset)
            .execution_options(populate_existing=True)
        )
        if limit is not None:
            data_query = data_query.limit(limit)

        try:
            total_count = (await self.db.execute(count_query)).scalar_one()
            rows = (await self.db.execute(data_query)).scalars().all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to list processes: {e}") from e

        return [self._row_to_process(row) for row in rows], total_count

    async def update(self, process, expected_updated_at: Optional[datetime] = None) -> Any:
        row_data = self._process_to_row(process)
        row_data.pop("id")

        query = update(ProcessDB).where(ProcessDB.id == process.id)
        if expected_updated_at is not None:
            query = query.where(ProcessDB.updated_at == _utc(expected_updated_at))
        query = query.values(**row_data).execution_options(synchronize_session=False)

        try:
            result = await self.db.execute(query)
            if result.rowcount == 0:
                await self.db.rollback()
                current = await self.db.get(ProcessDB, process.id, populate_existing=True)
                if current is None:
                    raise ProcessNotFoundError(process.id)
                logger.warning(f"Stale write rejected for process {process.id}")
                raise ConcurrentModificationError(
                    process.id, expected_updated_at, _utc(current.updated_at)
                )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(f"Failed to update process {process.id}: {e}") from e

        return process

    @staticmethod
    def _conditions(filters: ProcessFilter) -> List:
        conditions = []
        if filters.case_type is not None:
            conditions.append(ProcessDB.case_type == filters.case_type.value)
        if filters.status is not None:
            conditions.append(ProcessDB.status == filters.status.value)
        if filters.activity_type is not None:
            conditions.append(ProcessDB.activity_type == filters.activity_type.value)
        if filters.department is not None:
            conditions.append(ProcessDB.department == filters.department)
        if filters.municipality is not None:
            conditions.append(ProcessDB.municipality == filters.municipality)
        if filters.date_from is not None:
            conditions.append(ProcessDB.occurred_at >= _utc(filters.date_from))
        if filters.date_to is not None:
            conditions.append(ProcessDB.occurred_at <= _utc(filters.date_to))
        return conditions

    @staticmethod
    def _process_to_row(process) -> Dict[str, Any]:
        """Flatten a process into column values."""
        data = process.model_dump(mode="json")
        return {
            "id": process.id,
            "case_type": data["case_type"],
            "activity_type": data["activity_type"],
            "status": data["status"],
            "department": process.location.department,
            "municipality": process.location.municipality,
            "occurred_at": _utc(process.occurred_at),
            "narrative": process.narrative,
            "location": data["location"],
            "reporter": data["reporter"],
            "details": data["details"],
            "status_history": data["status_history"],
            "created_by": process.created_by,
            "created_at": _utc(process.created_at),
            "updated_at": _utc(process.updated_at),
        }

    @staticmethod
    def _row_to_process(row: ProcessDB) -> Any:
        """Convert database row to Process domain model."""
        return _process_adapter.validate_python({
            "id": row.id,
            "case_type": row.case_type,
            "activity_type": row.activity_type,
            "status": row.status,
            "occurred_at": _utc(row.occurred_at),
            "location": row.location,
            "narrative": row.narrative,
            "reporter": row.reporter,
            "details": row.details,
            "status_history": row.status_history or [],
            "created_by": row.created_by,
            "created_at": _utc(row.created_at),
            "updated_at": _utc(row.updated_at),
        })
