"""
Unit tests for read-only use cases: stats, project details, milestone status.

Usage:
    pytest tests/unit/application/test_project_queries.py
"""

from unittest.mock import AsyncMock

import pytest

from mecene.application.use_cases.check_milestone_status import (
    CheckMilestoneStatus,
)
from mecene.application.use_cases.get_platform_stats import GetPlatformStats
from mecene.application.use_cases.get_project_details import (
    GetProjectDetails,
    parse_project_id,
)
from mecene.domain.entities.project import ProjectStatus
from mecene.domain.exceptions import (
    NotFoundError,
    ProjectNotFoundError,
    ValidationError,
)
from tests.helpers.escrow_fixtures import InMemoryEscrowReader, make_project


class TestParseProjectId:
    """Unit tests for parse_project_id."""

    @pytest.mark.parametrize("value,expected", [(1, 1), ("7", 7), (" 12 ", 12)])
    def test_valid(self, value, expected):
        assert parse_project_id(value) == expected

    @pytest.mark.parametrize("value", [0, "-3", "1.5", "abc", "", False])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            parse_project_id(value)


class TestGetPlatformStats:
    """Unit tests for GetPlatformStats use case."""

    async def test_stats(self, settings):
        reader = InMemoryEscrowReader(project_count=42)

        stats = await GetPlatformStats(reader, settings).execute()
        data = stats.to_dict()

        assert data["totalProjects"] == 42
        assert data["chain"] == "Base Mainnet"
        assert data["chainId"] == 8453
        assert data["platformFee"] == "5%"
        assert data["explorerUrl"].startswith("https://basescan.org/address/0x")
        assert data["contractAddress"].lower() == settings.contract_address.lower()


class TestGetProjectDetails:
    """Unit tests for GetProjectDetails use case."""

    async def test_details(self):
        reader = InMemoryEscrowReader([make_project(project_id=1)])

        project = await GetProjectDetails(reader).execute(1)

        assert project.id == 1
        assert reader.calls == [1]

    async def test_beyond_count_is_not_found(self):
        reader = InMemoryEscrowReader([make_project(project_id=1)])

        with pytest.raises(NotFoundError) as exc_info:
            await GetProjectDetails(reader).execute(5)

        assert "only 1 project(s) exist" in exc_info.value.message

    async def test_read_failure_propagates(self):
        reader = AsyncMock()
        reader.get_project_count.return_value = 10
        reader.get_project.side_effect = ProjectNotFoundError(4, "reverted")

        with pytest.raises(ProjectNotFoundError):
            await GetProjectDetails(reader).execute(4)


class TestCheckMilestoneStatus:
    """Unit tests for CheckMilestoneStatus use case."""

    async def test_status(self):
        reader = InMemoryEscrowReader(
            [
                make_project(
                    project_id=2,
                    total_wei=4 * 10**16,
                    released_wei=4 * 10**16,
                    current_milestone=3,
                    status=ProjectStatus.COMPLETED,
                )
            ],
            project_count=2,
        )

        status = await CheckMilestoneStatus(reader).execute(2)

        assert status.project_id == 2
        assert status.status == ProjectStatus.COMPLETED
        assert status.remaining.wei == 0

    async def test_not_found(self):
        with pytest.raises(NotFoundError):
            await CheckMilestoneStatus(InMemoryEscrowReader()).execute(1)
