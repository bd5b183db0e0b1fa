"""API request and response models."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .process import Process, ProcessStatus


class ProcessStatusUpdateRequest(BaseModel):
    """Request to move a process to another status."""

    status: ProcessStatus
    expected_updated_at: Optional[datetime] = Field(
        None, description="updated_at the client last saw; stale values are rejected"
    )
    reason: str = Field(default="", max_length=500)


class ProcessUpdateRequest(BaseModel):
    """Request to replace the descriptive content of a process."""

    draft: Dict[str, Any] = Field(description="Flora or fauna draft, tagged by case_type")
    expected_updated_at: Optional[datetime] = None


class ProcessListResponse(BaseModel):
    """Response containing a page of processes."""

    processes: List[Process]
    total: int
    page: int
    page_size: int


class ValidationResponse(BaseModel):
    """Result of validating a draft without creating it."""

    valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    storage: str
    mode: str
