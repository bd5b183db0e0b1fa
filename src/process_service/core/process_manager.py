"""Process business logic manager - Repository Pattern."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple
from uuid import uuid4

from process_service.config import settings
from process_service.core.assembly import build_process
from process_service.core.exceptions import (
    IllegalTransitionError,
    ProcessNotFoundError,
    ProcessValidationError,
    StoreTimeoutError,
)
from process_service.core.filters import ProcessFilter, compute_stats
from process_service.core.identity import UserIdentity
from process_service.core.lifecycle import check_transition
from process_service.core.validation import ValidationErrors, validate
from process_service.infrastructure.persistence import ProcessRepository
from process_service.models.drafts import DraftBase
from process_service.models.process import CaseType, ProcessStats, ProcessStatus, StatusTransition

logger = logging.getLogger(__name__)


def generate_process_id(case_type: CaseType) -> str:
    """FL-/FA- prefix plus 12 hex digits of a random UUID."""
    return f"{case_type.id_prefix}-{uuid4().hex[:12].upper()}"


def _next_timestamp(previous: datetime) -> datetime:
    """Current time, forced strictly past ``previous`` so every mutation is observable."""
    now = datetime.now(timezone.utc)
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


class ProcessManager:
    """Business logic for enforcement process operations.

    This class implements the service layer using the Repository pattern.
    It validates drafts, enforces the custody lifecycle and delegates
    persistence to a ProcessRepository. Every store call is bounded by
    ``timeout`` seconds.
    """

    def __init__(self, repository: ProcessRepository, timeout: Optional[float] = None):
        """Initialize process manager with repository.

        Args:
            repository: ProcessRepository implementation (InMemory or SQL)
            timeout: Seconds allowed per store call (defaults to settings)
        """
        self.repository = repository
        self.timeout = timeout if timeout is not None else settings.store_timeout_seconds

    async def _call_store(self, operation: str, awaitable):
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Store operation {operation} timed out after {self.timeout}s")
            raise StoreTimeoutError(operation, self.timeout) from e

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def validate(draft: DraftBase) -> ValidationErrors:
        """Field-level validation without touching the store."""
        return validate(draft)

    # ------------------------------------------------------------------
    # Create / read
    # ------------------------------------------------------------------

    async def create_process(self, draft: DraftBase, identity: UserIdentity):
        """Create a new process from a validated draft.

        Args:
            draft: Flora or fauna draft as submitted
            identity: Acting user, stamped as ``created_by``

        Returns:
            Stored process in the INITIATED state

        Raises:
            ProcessValidationError: If any field rule fails (store not called)
            PersistenceError: If the store rejects the write
        """
        errors = validate(draft)
        if errors:
            raise ProcessValidationError(errors)

        case_type = CaseType(draft.case_type)
        process = build_process(
            draft,
            process_id=generate_process_id(case_type),
            created_by=identity.id,
            now=datetime.now(timezone.utc),
        )

        saved = await self._call_store("create", self.repository.create(process))

        logger.info(f"Created {case_type.value} process {saved.id} for user {identity.id}")

        return saved

    async def get_process(self, process_id: str):
        """Get a process by ID.

        Raises:
            ProcessNotFoundError: If no process has that ID
        """
        process = await self._call_store("get", self.repository.get(process_id))
        if process is None:
            raise ProcessNotFoundError(process_id)
        return process

    async def list_processes(
        self,
        filters: Optional[ProcessFilter] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[List, int]:
        """List processes in creation order.

        Returns:
            Tuple of (page, total matching count)
        """
        return await self._call_store("list", self.repository.list(filters, limit, offset))

    async def get_stats(self, filters: Optional[ProcessFilter] = None) -> ProcessStats:
        processes, _ = await self.list_processes(filters)
        return compute_stats(processes)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def update_status(
        self,
        process_id: str,
        new_status: ProcessStatus,
        actor: UserIdentity,
        expected_updated_at: Optional[datetime] = None,
        reason: str = "",
    ):
        """Move a process along the custody lifecycle.

        Args:
            process_id: Process identifier
            new_status: Target status
            actor: User requesting the change
            expected_updated_at: ``updated_at`` the caller last saw, if any
            reason: Free-text note kept in the status history

        Raises:
            ProcessNotFoundError: If the process does not exist
            IllegalTransitionError: If the lifecycle forbids the change
            ConcurrentModificationError: If the process changed since it was read
        """
        process = await self.get_process(process_id)
        old_status = process.status

        try:
            check_transition(old_status, new_status)
        except IllegalTransitionError:
            logger.warning(
                f"User {actor.id} attempted invalid transition on {process_id}: "
                f"{old_status.value} -> {new_status.value}"
            )
            raise

        loaded_at = process.updated_at
        now = _next_timestamp(loaded_at)
        process.status = new_status
        process.status_history = process.status_history + [
            StatusTransition(
                from_status=old_status,
                to_status=new_status,
                triggered_at=now,
                triggered_by=actor.id,
                reason=reason,
            )
        ]
        process.updated_at = now

        await self._call_store(
            "update_status",
            self.repository.update(process, expected_updated_at=expected_updated_at or loaded_at),
        )

        logger.info(
            f"Process {process_id} status changed: {old_status.value} -> {new_status.value} "
            f"by user {actor.id}"
        )

        return process

    async def update_details(
        self,
        process_id: str,
        draft: DraftBase,
        actor: UserIdentity,
        expected_updated_at: Optional[datetime] = None,
    ):
        """Replace the descriptive content of an open process.

        Case type and activity type are fixed at creation. Identity, status,
        history and creation stamps are carried over.

        Raises:
            ProcessNotFoundError: If the process does not exist
            ProcessValidationError: If the draft fails validation or changes a fixed field
            IllegalTransitionError: If the process is closed
            ConcurrentModificationError: If the process changed since it was read
        """
        errors = validate(draft)
        process = await self.get_process(process_id)

        if draft.case_type != process.case_type:
            errors["case_type"] = "Case type cannot be changed"
        if draft.activity_type is not None and draft.activity_type != process.activity_type:
            errors["activity_type"] = "Activity type cannot be changed"
        if errors:
            raise ProcessValidationError(errors)

        if process.is_terminal:
            raise IllegalTransitionError(
                process.status, process.status, f"{process.status.value} is terminal"
            )

        loaded_at = process.updated_at
        now = _next_timestamp(loaded_at)
        updated = build_process(draft, process_id=process.id, created_by=process.created_by, now=now)
        if draft.occurred_at is None:
            updated.occurred_at = process.occurred_at
        updated.status = process.status
        updated.status_history = process.status_history
        updated.created_at = process.created_at

        await self._call_store(
            "update_details",
            self.repository.update(updated, expected_updated_at=expected_updated_at or loaded_at),
        )

        logger.info(f"Process {process_id} details updated by user {actor.id}")

        return updated
