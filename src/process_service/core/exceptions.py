"""Process service exceptions."""

from typing import Dict, Optional


class ProcessServiceError(Exception):
    """Base exception for process service errors."""
    pass


class ProcessValidationError(ProcessServiceError):
    """One or more field rules violated.

    Carries the complete field -> message mapping so every problem can be
    shown at once.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Process draft is invalid: {fields}")


class ProcessNotFoundError(ProcessServiceError):
    """Referenced process does not exist."""

    def __init__(self, process_id: str):
        self.process_id = process_id
        super().__init__(f"Process {process_id} not found")


class PersistenceError(ProcessServiceError):
    """Store unreachable or write rejected. Retryable by the caller."""
    pass


class StoreTimeoutError(PersistenceError):
    """Store call did not complete within the configured timeout."""

    def __init__(self, operation: str, timeout: float):
        self.operation = operation
        self.timeout = timeout
        super().__init__(f"Store operation '{operation}' timed out after {timeout}s")


class IllegalTransitionError(ProcessServiceError):
    """Requested status change is not allowed by the lifecycle."""

    def __init__(self, from_status, to_status, detail: Optional[str] = None):
        self.from_status = from_status
        self.to_status = to_status
        message = f"Invalid transition: {from_status.value} → {to_status.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ConcurrentModificationError(ProcessServiceError):
    """Process changed since the caller last read it."""

    def __init__(self, process_id: str, expected_updated_at, actual_updated_at):
        self.process_id = process_id
        self.expected_updated_at = expected_updated_at
        self.actual_updated_at = actual_updated_at
        super().__init__(
            f"Process {process_id} was modified at {actual_updated_at.isoformat()}, "
            f"expected {expected_updated_at.isoformat()}"
        )
