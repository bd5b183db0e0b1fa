"""Unit tests for the process status state machine."""

import pytest

from process_service.core.exceptions import IllegalTransitionError
from process_service.core.lifecycle import (
    VALID_TRANSITIONS,
    allowed_next,
    check_transition,
    is_valid_transition,
)
from process_service.models import ProcessStatus


@pytest.mark.unit
class TestTransitions:
    """Adjacency table"""

    @pytest.mark.parametrize("from_status,to_status", [
        (ProcessStatus.INITIATED, ProcessStatus.PENDING_PICKUP),
        (ProcessStatus.INITIATED, ProcessStatus.TEMPORARY_CUSTODY),
        (ProcessStatus.PENDING_PICKUP, ProcessStatus.LEGAL_PROCESS),
        (ProcessStatus.TEMPORARY_CUSTODY, ProcessStatus.LEGAL_PROCESS),
        (ProcessStatus.TEMPORARY_CUSTODY, ProcessStatus.CLOSED_RELEASED),
        (ProcessStatus.LEGAL_PROCESS, ProcessStatus.CLOSED_FINAL_DISPOSITION),
    ])
    def test_forward_moves_allowed(self, from_status, to_status):
        assert is_valid_transition(from_status, to_status)
        check_transition(from_status, to_status)

    def test_legal_process_only_from_custody_or_pickup(self):
        sources = {s for s, targets in VALID_TRANSITIONS.items() if ProcessStatus.LEGAL_PROCESS in targets}
        assert sources == {ProcessStatus.TEMPORARY_CUSTODY, ProcessStatus.PENDING_PICKUP}

    @pytest.mark.parametrize("closed", [
        ProcessStatus.CLOSED_RELEASED,
        ProcessStatus.CLOSED_FINAL_DISPOSITION,
    ])
    def test_closed_statuses_are_terminal(self, closed):
        assert closed.is_terminal
        assert allowed_next(closed) == frozenset()
        for target in ProcessStatus:
            with pytest.raises(IllegalTransitionError, match="terminal"):
                check_transition(closed, target)

    def test_backward_move_rejected(self):
        with pytest.raises(IllegalTransitionError) as exc_info:
            check_transition(ProcessStatus.LEGAL_PROCESS, ProcessStatus.INITIATED)
        assert exc_info.value.from_status == ProcessStatus.LEGAL_PROCESS
        assert exc_info.value.to_status == ProcessStatus.INITIATED
        assert "allowed" in str(exc_info.value)

    def test_same_status_rejected(self):
        with pytest.raises(IllegalTransitionError, match="already in that status"):
            check_transition(ProcessStatus.INITIATED, ProcessStatus.INITIATED)

    def test_every_status_has_an_entry(self):
        assert set(VALID_TRANSITIONS) == set(ProcessStatus)
