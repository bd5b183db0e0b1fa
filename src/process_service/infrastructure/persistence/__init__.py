"""Process persistence layer - Repository Pattern implementation."""

from process_service.infrastructure.persistence.demo_data import demo_processes
from process_service.infrastructure.persistence.process_repository import (
    InMemoryProcessRepository,
    ProcessRepository,
    SQLProcessRepository,
)

__all__ = [
    "ProcessRepository",
    "InMemoryProcessRepository",
    "SQLProcessRepository",
    "demo_processes",
]
