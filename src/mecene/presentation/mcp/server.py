"""
Mecene MCP server.

Exposes escrow operations as MCP tools for AI agents. Each tool returns
a JSON-serialisable dict; domain failures come back as
{"error": <code>, "message": <text>} instead of raising.

Usage:
    mecene-mcp                       # stdio transport
    mecene-mcp --transport streamable-http
"""

from contextlib import asynccontextmanager
from typing import List, Optional

import click
from mcp.server.fastmcp import FastMCP

from mecene.application.dto.escrow_dto import project_to_display_dict
from mecene.config.settings import Settings, get_settings, load_config
from mecene.di.container import Container
from mecene.domain.exceptions import MeceneException
from mecene.infrastructure.monitoring.logger import get_logger, setup_logging

logger = get_logger(__name__)


def error_response(exc: MeceneException) -> dict:
    """Map a domain exception to a tool error payload."""
    return {"error": exc.code or "MECENE_ERROR", "message": exc.message}


class EscrowToolset:
    """Tool implementations bound to one container."""

    def __init__(self, container: Container):
        self.container = container

    @property
    def symbol(self) -> str:
        return self.container.settings.native_symbol

    async def get_stats(self) -> dict:
        try:
            result = await self.container.get_platform_stats().execute()
        except MeceneException as e:
            return error_response(e)
        return result.to_dict()

    async def get_project(self, project_id: int) -> dict:
        try:
            result = await self.container.get_project_details().execute(
                project_id
            )
        except MeceneException as e:
            return error_response(e)
        return project_to_display_dict(result, self.symbol)

    async def find_my_projects(self, address: str) -> dict:
        try:
            result = await self.container.find_agent_projects().execute(address)
        except MeceneException as e:
            return error_response(e)
        return result.to_dict(self.symbol)

    async def create_fundraise(
        self,
        agent_address: str,
        milestone_amounts: List[str],
        description: Optional[str] = None,
    ) -> dict:
        try:
            result = self.container.prepare_funding_proposal().execute(
                agent_address, milestone_amounts, description=description
            )
        except MeceneException as e:
            return error_response(e)
        return result.to_dict(self.symbol)

    async def check_milestone(self, project_id: int) -> dict:
        try:
            result = await self.container.check_milestone_status().execute(
                project_id
            )
        except MeceneException as e:
            return error_response(e)
        return result.to_dict(self.symbol)

    async def request_release(
        self,
        project_id: int,
        completed_work: Optional[str] = None,
    ) -> dict:
        try:
            result = await self.container.prepare_milestone_release().execute(
                project_id, work_completed=completed_work
            )
        except MeceneException as e:
            return error_response(e)
        return result.to_dict(self.symbol)

    async def request_cancel(self, project_id: int) -> dict:
        try:
            result = await self.container.prepare_project_cancellation().execute(
                project_id
            )
        except MeceneException as e:
            return error_response(e)
        return result.to_dict(self.symbol)


def create_mcp_server(settings: Settings) -> FastMCP:
    """
    Build the FastMCP server and register escrow tools.

    The container is closed when the server shuts down.
    """
    container = Container(settings)
    toolset = EscrowToolset(container)

    @asynccontextmanager
    async def lifespan(server: FastMCP):
        try:
            yield {}
        finally:
            await container.close()

    mcp = FastMCP(name="mecene", lifespan=lifespan)

    @mcp.tool()
    async def get_stats() -> dict:
        """Get platform statistics: project count, contract, chain, fee."""
        return await toolset.get_stats()

    @mcp.tool()
    async def get_project(project_id: int) -> dict:
        """Get details of an escrow project by ID."""
        return await toolset.get_project(project_id)

    @mcp.tool()
    async def find_my_projects(address: str) -> dict:
        """Find projects where the address is the agent (fund recipient)."""
        return await toolset.find_my_projects(address)

    @mcp.tool()
    async def create_fundraise(
        agent_address: str,
        milestone_amounts: List[str],
        description: Optional[str] = None,
    ) -> dict:
        """Build an unsigned createProject transaction for a funder."""
        return await toolset.create_fundraise(
            agent_address, milestone_amounts, description
        )

    @mcp.tool()
    async def check_milestone(project_id: int) -> dict:
        """Check milestone progress and the next action for a project."""
        return await toolset.check_milestone(project_id)

    @mcp.tool()
    async def request_release(
        project_id: int,
        completed_work: Optional[str] = None,
    ) -> dict:
        """Build an unsigned releaseMilestone transaction for the funder."""
        return await toolset.request_release(project_id, completed_work)

    @mcp.tool()
    async def request_cancel(project_id: int) -> dict:
        """Build an unsigned cancelProject transaction for the funder."""
        return await toolset.request_cancel(project_id)

    return mcp


@click.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="MCP transport",
)
@click.option("--config", "-c", default=None, help="YAML config file")
def main(transport: str, config: Optional[str]):
    """Run the Mecene MCP server."""
    settings = load_config(config_file=config) if config else get_settings()
    setup_logging(level=settings.log_level, json_logs=settings.json_logs)

    logger.info(f"Starting Mecene MCP server ({transport})")
    create_mcp_server(settings).run(transport)


if __name__ == "__main__":
    main()
