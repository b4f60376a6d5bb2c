"""
Unit tests for the MCP toolset.

Usage:
    pytest tests/unit/presentation/test_mcp_server.py
"""

import pytest
from mcp.server.fastmcp import FastMCP

from mecene.di.container import Container
from mecene.domain.entities.project import ProjectStatus
from mecene.domain.exceptions import RPCError
from mecene.presentation.mcp.server import (
    EscrowToolset,
    create_mcp_server,
    error_response,
)
from tests.helpers.escrow_fixtures import (
    AGENT_ADDRESS,
    InMemoryEscrowReader,
    make_project,
)


@pytest.fixture
def toolset(settings) -> EscrowToolset:
    reader = InMemoryEscrowReader(
        [
            make_project(project_id=1),
            make_project(project_id=2, status=ProjectStatus.CANCELLED),
        ]
    )
    return EscrowToolset(Container(settings, escrow_reader=reader))


class TestEscrowToolset:
    """Unit tests for EscrowToolset."""

    async def test_get_stats(self, toolset):
        data = await toolset.get_stats()
        assert data["totalProjects"] == 2

    async def test_get_project(self, toolset):
        data = await toolset.get_project(1)
        assert data["status"] == "Active"
        assert data["totalAmount"] == "0.04 ETH"

    async def test_get_project_not_found(self, toolset):
        """Test domain errors become error payloads."""
        data = await toolset.get_project(3)
        assert data["error"] == "NOT_FOUND"
        assert "Project #3" in data["message"]

    async def test_find_my_projects(self, toolset):
        data = await toolset.find_my_projects(AGENT_ADDRESS)
        assert [p["id"] for p in data["projects"]] == [1, 2]

    async def test_create_fundraise(self, toolset):
        data = await toolset.create_fundraise(
            AGENT_ADDRESS, ["0.01", "0.02", "0.03"], "Build a scraper"
        )
        assert data["proposal"]["totalFunding"] == "0.06 ETH"
        assert data["transaction"]["data"].startswith("0xcd278980")

    async def test_create_fundraise_invalid(self, toolset):
        data = await toolset.create_fundraise(AGENT_ADDRESS, [])
        assert data["error"] == "VALIDATION_ERROR"

    async def test_check_milestone(self, toolset):
        data = await toolset.check_milestone(1)
        assert data["currentMilestone"] == 1
        assert data["remaining"] == "0.04 ETH"

    async def test_request_release(self, toolset):
        data = await toolset.request_release(1, "Completed module")
        assert data["milestone"] == 1
        assert len(data["transaction"]["data"]) == 74
        assert data["workCompleted"] == "Completed module"

    async def test_request_release_cancelled(self, toolset):
        data = await toolset.request_release(2)
        assert data["error"] == "STATE_PRECONDITION_FAILED"

    async def test_request_cancel(self, toolset):
        data = await toolset.request_cancel(1)
        assert data["refund"] == "0.04 ETH"


class TestServer:
    """Unit tests for server construction."""

    def test_error_response(self):
        assert error_response(RPCError("projectCount", "down")) == {
            "error": "RPC_ERROR",
            "message": "RPC call projectCount failed: down",
        }

    async def test_registers_tools(self, settings):
        """Test every escrow operation is exposed as a tool."""
        server = create_mcp_server(settings)

        assert isinstance(server, FastMCP)
        tools = {tool.name for tool in await server.list_tools()}
        assert tools == {
            "get_stats",
            "get_project",
            "find_my_projects",
            "create_fundraise",
            "check_milestone",
            "request_release",
            "request_cancel",
        }
