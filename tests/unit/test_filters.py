"""Unit tests for filtering and statistics."""

from datetime import datetime, timezone

import pytest

from process_service.core.filters import ProcessFilter, compute_stats, filter_processes
from process_service.infrastructure.persistence import demo_processes
from process_service.models import ActivityType, CaseType, ProcessStatus


@pytest.fixture
def processes():
    return demo_processes()


@pytest.mark.unit
class TestFilterProcesses:

    def test_no_filter_returns_copy_of_everything(self, processes):
        result = filter_processes(processes)
        assert [p.id for p in result] == ["FL001", "FL002", "FA001", "FA002", "FA003"]
        assert result is not processes

    def test_case_type_subset_is_stable(self, processes):
        result = filter_processes(processes, ProcessFilter(case_type=CaseType.FAUNA))
        assert [p.id for p in result] == ["FA001", "FA002", "FA003"]

    def test_idempotent(self, processes):
        filters = ProcessFilter(status=ProcessStatus.TEMPORARY_CUSTODY)
        first = filter_processes(processes, filters)
        second = filter_processes(processes, filters)
        assert [p.id for p in first] == [p.id for p in second] == ["FL001", "FA003"]

    def test_predicates_combine(self, processes):
        filters = ProcessFilter(case_type=CaseType.FAUNA, activity_type=ActivityType.SEIZURE)
        assert [p.id for p in filter_processes(processes, filters)] == ["FA001", "FA003"]

        filters = ProcessFilter(department="Amazonas", municipality="Leticia")
        assert [p.id for p in filter_processes(processes, filters)] == ["FA002"]

    def test_date_range_inclusive(self, processes):
        filters = ProcessFilter(
            date_from=datetime(2024, 1, 18, 14, 20, tzinfo=timezone.utc),
            date_to=datetime(2024, 1, 25, 8, 45),  # naive: read as UTC
        )
        assert [p.id for p in filter_processes(processes, filters)] == ["FL002", "FA001", "FA002"]

    def test_no_match(self, processes):
        assert filter_processes(processes, ProcessFilter(department="Vaupés")) == []


@pytest.mark.unit
class TestComputeStats:

    def test_demo_collection(self, processes):
        stats = compute_stats(processes)

        assert stats.total == 5
        assert stats.by_type == {CaseType.FLORA: 2, CaseType.FAUNA: 3}
        assert stats.by_status == {
            ProcessStatus.INITIATED: 0,
            ProcessStatus.PENDING_PICKUP: 0,
            ProcessStatus.TEMPORARY_CUSTODY: 2,
            ProcessStatus.LEGAL_PROCESS: 1,
            ProcessStatus.CLOSED_RELEASED: 1,
            ProcessStatus.CLOSED_FINAL_DISPOSITION: 1,
        }
        assert stats.by_activity == {
            ActivityType.SEIZURE: 3,
            ActivityType.VOLUNTARY_SURRENDER: 1,
            ActivityType.RESTITUTION: 1,
        }

    def test_empty_collection_zero_filled(self):
        stats = compute_stats([])
        assert stats.total == 0
        assert set(stats.by_status) == set(ProcessStatus)
        assert set(stats.by_activity) == set(ActivityType)
        assert all(count == 0 for count in stats.by_status.values())
