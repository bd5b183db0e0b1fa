"""Models package."""

from .drafts import DraftBase, FaunaProcessDraft, FloraProcessDraft, ProcessDraft
from .process import (
    ActivityType,
    CaseType,
    FaunaProcess,
    FloraProcess,
    Process,
    ProcessStats,
    ProcessStatus,
    StatusTransition,
)
from .requests import (
    HealthResponse,
    ProcessListResponse,
    ProcessStatusUpdateRequest,
    ProcessUpdateRequest,
    ValidationResponse,
)

__all__ = [
    "ActivityType",
    "CaseType",
    "DraftBase",
    "FaunaProcess",
    "FaunaProcessDraft",
    "FloraProcess",
    "FloraProcessDraft",
    "Process",
    "ProcessDraft",
    "ProcessStats",
    "ProcessStatus",
    "StatusTransition",
    "HealthResponse",
    "ProcessListResponse",
    "ProcessStatusUpdateRequest",
    "ProcessUpdateRequest",
    "ValidationResponse",
]
