"""Process API routes."""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, Query, status

from process_service.config import settings
from process_service.core.exceptions import ProcessValidationError
from process_service.core.filters import ProcessFilter
from process_service.core.identity import DemoIdentityProvider, HeaderIdentityProvider, UserIdentity
from process_service.core.process_manager import ProcessManager
from process_service.core.validation import parse_draft, validate_payload
from process_service.infrastructure.database import get_db_client
from process_service.infrastructure.persistence import (
    InMemoryProcessRepository,
    ProcessRepository,
    SQLProcessRepository,
    demo_processes,
)
from process_service.models import (
    ActivityType,
    CaseType,
    Process,
    ProcessListResponse,
    ProcessStats,
    ProcessStatus,
    ProcessStatusUpdateRequest,
    ProcessUpdateRequest,
    ValidationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/processes", tags=["processes"])


# Global singleton in-memory repository (persists across requests)
_inmemory_repository: Optional[InMemoryProcessRepository] = None


async def get_process_repository():
    """Dependency to get process repository.

    Returns the implementation selected by ``settings.storage_type``:
    - inmemory (default): InMemoryProcessRepository singleton, seeded with
      the demo processes when ``seed_demo_data`` is set
    - sql: SQLProcessRepository bound to a request-scoped session
    """
    if settings.storage_type == "sql":
        async for session in get_db_client().get_session():
            yield SQLProcessRepository(session)
    else:
        global _inmemory_repository
        if _inmemory_repository is None:
            seed = demo_processes() if settings.seed_demo_data else []
            _inmemory_repository = InMemoryProcessRepository(seed)
            logger.info(f"In-memory process store initialized with {len(seed)} processes")
        yield _inmemory_repository


async def get_process_manager(
    repository: ProcessRepository = Depends(get_process_repository),
) -> ProcessManager:
    """Dependency to get process manager with repository."""
    return ProcessManager(repository)


async def get_current_user(
    x_user_id: Optional[str] = Header(None, alias="X-User-ID"),
    x_user_name: Optional[str] = Header(None, alias="X-User-Name"),
    x_user_email: Optional[str] = Header(None, alias="X-User-Email"),
    x_user_role: Optional[str] = Header(None, alias="X-User-Role"),
) -> UserIdentity:
    """Resolve the acting user from X-User-* headers set by the API gateway.

    In demo mode a request without X-User-ID acts as the demo user.

    Raises:
        HTTPException: 401 in live mode when X-User-ID is missing
    """
    provider = HeaderIdentityProvider(
        x_user_id,
        name=x_user_name,
        email=x_user_email,
        role=x_user_role,
        live_mode=not settings.demo_mode,
        fallback=DemoIdentityProvider().current_user(),
    )
    user = provider.current_user()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-ID header required (should be added by API Gateway)",
        )
    return user


def _parse_or_raise(payload: Dict[str, Any]):
    draft, _ = parse_draft(payload)
    if draft is None:
        raise ProcessValidationError(validate_payload(payload))
    return draft


# =============================================================================
# Validation
# =============================================================================

@router.post(
    "/validate",
    response_model=ValidationResponse,
    summary="Validate a process draft",
    description="""
Runs every field rule against a flora or fauna draft without storing anything.

**Request Body Example**:
```json
{
  "case_type": "flora",
  "department": "Antioquia",
  "municipality": "Medellín",
  "narrative": "Seized at checkpoint",
  "common_name": "Cedro",
  "scientific_name": "Cedrela odorata",
  "reporter_type": "natural_person",
  "reporter_name": "Carlos Rodríguez",
  "reporter_document": "43567890",
  "reporter_contact": "3001234567"
}
```

**Response Example**:
```json
{"valid": false, "errors": {"unit_count": "Unit count is required"}}
```
    """,
)
async def validate_process_draft(payload: Dict[str, Any] = Body(...)):
    """Validate a draft; all problems are reported at once."""
    errors = validate_payload(payload)
    return ValidationResponse(valid=not errors, errors=errors)


# =============================================================================
# Core CRUD Endpoints
# =============================================================================

@router.post(
    "",
    response_model=Process,
    status_code=status.HTTP_201_CREATED,
    summary="Open a new enforcement process",
    description="""
Creates a flora or fauna process from a field draft.

**Workflow**:
1. Draft validated; any failure returns 422 with the full `errors` mapping
2. Process stored in `initiated` status with a generated ID (`FL-…` / `FA-…`)
3. `created_by` stamped from the X-User-ID header (demo user in demo mode)
    """,
    responses={
        201: {"description": "Process created successfully"},
        401: {"description": "Unauthorized - missing X-User-ID header in live mode"},
        422: {"description": "Draft failed validation"},
        503: {"description": "Store unavailable"},
        504: {"description": "Store did not answer in time"},
    },
)
async def create_process(
    payload: Dict[str, Any] = Body(...),
    user: UserIdentity = Depends(get_current_user),
    process_manager: ProcessManager = Depends(get_process_manager),
):
    """Create a new process."""
    draft = _parse_or_raise(payload)
    return await process_manager.create_process(draft, user)


@router.get(
    "",
    response_model=ProcessListResponse,
    summary="List processes",
    description="""
Lists processes in creation order. Every filter is optional and all supplied
filters must match. `date_from` / `date_to` bound `occurred_at` inclusively;
naive datetimes are read as UTC.
    """,
)
async def list_processes(
    case_type: Optional[CaseType] = Query(None),
    status_filter: Optional[ProcessStatus] = Query(None, alias="status"),
    activity_type: Optional[ActivityType] = Query(None),
    department: Optional[str] = Query(None),
    municipality: Optional[str] = Query(None),
    date_from: Optional[datetime] = Query(None),
    date_to: Optional[datetime] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    process_manager: ProcessManager = Depends(get_process_manager),
):
    """List processes with filtering and pagination."""
    filters = ProcessFilter(
        case_type=case_type,
        status=status_filter,
        activity_type=activity_type,
        department=department,
        municipality=municipality,
        date_from=date_from,
        date_to=date_to,
    )

    # Convert page-based pagination to offset-based pagination
    offset = (page - 1) * page_size
    processes, total = await process_manager.list_processes(filters, limit=page_size, offset=offset)

    return ProcessListResponse(
        processes=processes,
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get(
    "/stats",
    response_model=ProcessStats,
    summary="Process statistics",
    description="Counts by case type, status and activity type. Every key is present, zero-filled.",
)
async def get_process_stats(
    case_type: Optional[CaseType] = Query(None),
    department: Optional[str] = Query(None),
    process_manager: ProcessManager = Depends(get_process_manager),
):
    """Aggregate counts over the (optionally filtered) processes."""
    return await process_manager.get_stats(ProcessFilter(case_type=case_type, department=department))


@router.get(
    "/{process_id}",
    response_model=Process,
    summary="Get process by ID",
    responses={404: {"description": "Process not found"}},
)
async def get_process(
    process_id: str,
    process_manager: ProcessManager = Depends(get_process_manager),
):
    """Get a process by ID."""
    return await process_manager.get_process(process_id)


@router.post(
    "/{process_id}/status",
    response_model=Process,
    summary="Change process status",
    description="""
Moves a process along the custody lifecycle:

`initiated → pending_pickup | temporary_custody`,
`pending_pickup → temporary_custody | legal_process`,
`temporary_custody → legal_process | closed_released | closed_final_disposition`,
`legal_process → closed_released | closed_final_disposition`.

Closed statuses are terminal. Any other change returns 409. When
`expected_updated_at` is sent and the process changed since, 409 is returned
instead of overwriting.
    """,
    responses={
        404: {"description": "Process not found"},
        409: {"description": "Illegal transition or stale expected_updated_at"},
    },
)
async def update_process_status(
    process_id: str,
    request: ProcessStatusUpdateRequest,
    user: UserIdentity = Depends(get_current_user),
    process_manager: ProcessManager = Depends(get_process_manager),
):
    """Change the status of a process."""
    return await process_manager.update_status(
        process_id,
        request.status,
        user,
        expected_updated_at=request.expected_updated_at,
        reason=request.reason,
    )


@router.put(
    "/{process_id}",
    response_model=Process,
    summary="Edit process details",
    description="""
Replaces the descriptive content of an open process with a new draft.
Case type and activity type cannot change; closed processes cannot be edited.
    """,
    responses={
        404: {"description": "Process not found"},
        409: {"description": "Process is closed or was modified concurrently"},
        422: {"description": "Draft failed validation"},
    },
)
async def update_process(
    process_id: str,
    request: ProcessUpdateRequest,
    user: UserIdentity = Depends(get_current_user),
    process_manager: ProcessManager = Depends(get_process_manager),
):
    """Edit the details of a process."""
    draft = _parse_or_raise(request.draft)
    return await process_manager.update_details(
        process_id,
        draft,
        user,
        expected_updated_at=request.expected_updated_at,
    )
