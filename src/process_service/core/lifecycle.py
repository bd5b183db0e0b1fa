"""Process status state machine.

Valid Transitions:
- INITIATED → PENDING_PICKUP | TEMPORARY_CUSTODY
- PENDING_PICKUP → TEMPORARY_CUSTODY | LEGAL_PROCESS
- TEMPORARY_CUSTODY → LEGAL_PROCESS | CLOSED_RELEASED | CLOSED_FINAL_DISPOSITION
- LEGAL_PROCESS → CLOSED_RELEASED | CLOSED_FINAL_DISPOSITION

Invalid:
- CLOSED_* → * (terminal)
- any backward move, and re-setting the current status
"""

from typing import Dict, FrozenSet

from process_service.core.exceptions import IllegalTransitionError
from process_service.models.process import ProcessStatus

VALID_TRANSITIONS: Dict[ProcessStatus, FrozenSet[ProcessStatus]] = {
    ProcessStatus.INITIATED: frozenset({
        ProcessStatus.PENDING_PICKUP,
        ProcessStatus.TEMPORARY_CUSTODY,
    }),
    ProcessStatus.PENDING_PICKUP: frozenset({
        ProcessStatus.TEMPORARY_CUSTODY,
        ProcessStatus.LEGAL_PROCESS,
    }),
    ProcessStatus.TEMPORARY_CUSTODY: frozenset({
        ProcessStatus.LEGAL_PROCESS,
        ProcessStatus.CLOSED_RELEASED,
        ProcessStatus.CLOSED_FINAL_DISPOSITION,
    }),
    ProcessStatus.LEGAL_PROCESS: frozenset({
        ProcessStatus.CLOSED_RELEASED,
        ProcessStatus.CLOSED_FINAL_DISPOSITION,
    }),
    ProcessStatus.CLOSED_RELEASED: frozenset(),  # Terminal
    ProcessStatus.CLOSED_FINAL_DISPOSITION: frozenset(),  # Terminal
}


def is_valid_transition(from_status: ProcessStatus, to_status: ProcessStatus) -> bool:
    """Validate status transition against the adjacency table."""
    return to_status in VALID_TRANSITIONS.get(from_status, frozenset())


def allowed_next(status: ProcessStatus) -> FrozenSet[ProcessStatus]:
    return VALID_TRANSITIONS.get(status, frozenset())


def check_transition(from_status: ProcessStatus, to_status: ProcessStatus) -> None:
    """Raise IllegalTransitionError unless from_status → to_status is allowed."""
    if is_valid_transition(from_status, to_status):
        return

    if from_status.is_terminal:
        detail = f"{from_status.value} is terminal"
    elif from_status == to_status:
        detail = "process is already in that status"
    else:
        options = sorted(s.value for s in allowed_next(from_status))
        detail = f"allowed: {', '.join(options)}"
    raise IllegalTransitionError(from_status, to_status, detail)
