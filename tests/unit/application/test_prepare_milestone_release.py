"""
Unit tests for PrepareMilestoneRelease use case.

Usage:
    pytest tests/unit/application/test_prepare_milestone_release.py
"""

import pytest

from mecene.application.use_cases.prepare_milestone_release import (
    PrepareMilestoneRelease,
)
from mecene.domain.entities.project import ProjectStatus
from mecene.domain.exceptions import (
    ProjectNotFoundError,
    StatePreconditionError,
    ValidationError,
)
from tests.helpers.escrow_fixtures import (
    FUNDER_ADDRESS,
    InMemoryEscrowReader,
    make_project,
)


@pytest.fixture
def make_use_case(call_encoder, contract_address):
    def factory(reader):
        return PrepareMilestoneRelease(reader, call_encoder, contract_address)

    return factory


class TestPrepareMilestoneRelease:
    """Unit tests for PrepareMilestoneRelease use case."""

    async def test_release_for_active_project(self, make_use_case):
        """Test Active project yields a release payload for the next milestone."""
        reader = InMemoryEscrowReader(
            [make_project(project_id=1, current_milestone=1, released_wei=10**16)]
        )

        request = await make_use_case(reader).execute(1)

        assert request.project_id == 1
        assert request.milestone == 2
        assert request.funder.matches(FUNDER_ADDRESS)
        assert request.transaction.data == "0x317debf5" + "0" * 63 + "1"
        assert len(request.transaction.data) == 74
        assert request.transaction.value is None
        assert "milestone 2" in request.instructions
        assert str(request.funder) in request.instructions

    @pytest.mark.parametrize(
        "status", [ProjectStatus.COMPLETED, ProjectStatus.CANCELLED]
    )
    async def test_rejects_non_active(self, make_use_case, status):
        """Test Completed and Cancelled projects get no payload."""
        reader = InMemoryEscrowReader([make_project(project_id=1, status=status)])

        with pytest.raises(StatePreconditionError) as exc_info:
            await make_use_case(reader).execute(1)

        assert exc_info.value.status == status.value
        assert status.value in exc_info.value.message

    async def test_uses_supplied_project_without_rpc(self, make_use_case):
        """Test an already-fetched record skips the read."""
        reader = InMemoryEscrowReader()

        request = await make_use_case(reader).execute(
            3,
            project=make_project(project_id=3),
            work_completed="Completed data collection",
        )

        assert reader.calls == []
        assert reader.count_calls == 0
        assert request.milestone == 1
        assert request.to_dict()["workCompleted"] == "Completed data collection"

    async def test_supplied_project_must_match_id(self, make_use_case):
        with pytest.raises(ValidationError):
            await make_use_case(InMemoryEscrowReader()).execute(
                2, project=make_project(project_id=3)
            )

    async def test_project_beyond_count(self, make_use_case):
        """Test an ID past projectCount() is not found without getProject."""
        reader = InMemoryEscrowReader([make_project(project_id=1)])

        with pytest.raises(ProjectNotFoundError):
            await make_use_case(reader).execute(2)

        assert reader.calls == []

    @pytest.mark.parametrize("project_id", ["0", "abc", -1, True])
    async def test_invalid_project_id(self, make_use_case, project_id):
        with pytest.raises(ValidationError):
            await make_use_case(InMemoryEscrowReader()).execute(project_id)

    async def test_accepts_numeric_string(self, make_use_case):
        """Test CLI-style string IDs are parsed."""
        reader = InMemoryEscrowReader([make_project(project_id=1)])
        request = await make_use_case(reader).execute("1")
        assert request.project_id == 1
