"""
Mecene CLI.

Usage:
    mecene stats
    mecene project <id>
    mecene my-projects <address>
    mecene create <address> <amount>... [--desc TEXT]
    mecene milestone <id>
    mecene release <id> [--work TEXT]
    mecene cancel <id>

Global options:
    --json           Print JSON instead of text
    --config FILE    YAML config file

Environment:
    BASE_RPC_URL     Custom RPC endpoint (default: https://mainnet.base.org)
"""

import asyncio
import json
import sys
from typing import Awaitable, Callable, Optional

import click
import yaml

from mecene.application.dto.escrow_dto import project_to_display_dict
from mecene.config.settings import Settings, get_settings, load_config
from mecene.di.container import Container
from mecene.domain.exceptions import MeceneException
from mecene.infrastructure.monitoring.logger import get_logger, setup_logging
from mecene.presentation.cli import formatters

logger = get_logger(__name__)


def build_container(settings: Settings) -> Container:
    """Create the container used by one CLI invocation."""
    return Container(settings)


def _emit(ctx: click.Context, payload: dict, lines) -> None:
    if ctx.obj["json"]:
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo("\n".join(lines))


def _run(ctx: click.Context, operation: Callable[[Container], Awaitable]) -> None:
    """Run an async operation against a fresh container and close it."""
    settings = ctx.obj["settings"]

    async def runner():
        async with build_container(settings) as container:
            return await operation(container)

    try:
        asyncio.run(runner())
    except MeceneException as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--json", "as_json", is_flag=True, help="Print JSON output")
@click.option("--config", "-c", default=None, help="YAML config file")
@click.pass_context
def cli(ctx, as_json: bool, config: Optional[str]):
    """Mecene - milestone escrow client."""
    try:
        settings = load_config(config_file=config) if config else get_settings()
    except (ValueError, OSError, yaml.YAMLError) as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)
    setup_logging(level=settings.log_level, json_logs=settings.json_logs)

    ctx.ensure_object(dict)
    ctx.obj["json"] = as_json
    ctx.obj["settings"] = settings


@cli.command()
@click.pass_context
def stats(ctx):
    """Get platform statistics."""

    async def operation(container: Container):
        result = await container.get_platform_stats().execute()
        _emit(ctx, result.to_dict(), formatters.format_stats(result))

    _run(ctx, operation)


@cli.command()
@click.argument("project_id")
@click.pass_context
def project(ctx, project_id: str):
    """Get project details by ID."""
    symbol = ctx.obj["settings"].native_symbol

    async def operation(container: Container):
        result = await container.get_project_details().execute(project_id)
        _emit(
            ctx,
            project_to_display_dict(result, symbol),
            formatters.format_project(result, symbol),
        )

    _run(ctx, operation)


@cli.command("my-projects")
@click.argument("address")
@click.pass_context
def my_projects(ctx, address: str):
    """Find projects paying ADDRESS."""
    symbol = ctx.obj["settings"].native_symbol

    async def operation(container: Container):
        result = await container.find_agent_projects().execute(address)
        _emit(ctx, result.to_dict(symbol), formatters.format_scan(result, symbol))

    _run(ctx, operation)


@cli.command()
@click.argument("address")
@click.argument("amounts", nargs=-1, required=True)
@click.option("--desc", default=None, help="Project description")
@click.pass_context
def create(ctx, address: str, amounts, desc: Optional[str]):
    """Create funding proposal for ADDRESS with milestone AMOUNTS in ETH."""
    symbol = ctx.obj["settings"].native_symbol

    async def operation(container: Container):
        result = container.prepare_funding_proposal().execute(
            address, list(amounts), description=desc
        )
        _emit(
            ctx,
            result.to_dict(symbol),
            formatters.format_proposal(result, symbol),
        )

    _run(ctx, operation)


@cli.command()
@click.argument("project_id")
@click.pass_context
def milestone(ctx, project_id: str):
    """Check milestone status."""
    symbol = ctx.obj["settings"].native_symbol

    async def operation(container: Container):
        result = await container.check_milestone_status().execute(project_id)
        _emit(
            ctx,
            result.to_dict(symbol),
            formatters.format_milestone(result, symbol),
        )

    _run(ctx, operation)


@cli.command()
@click.argument("project_id")
@click.option("--work", default=None, help="Description of completed work")
@click.pass_context
def release(ctx, project_id: str, work: Optional[str]):
    """Generate milestone release request."""
    symbol = ctx.obj["settings"].native_symbol

    async def operation(container: Container):
        result = await container.prepare_milestone_release().execute(
            project_id, work_completed=work
        )
        _emit(ctx, result.to_dict(symbol), formatters.format_release(result))

    _run(ctx, operation)


@cli.command()
@click.argument("project_id")
@click.pass_context
def cancel(ctx, project_id: str):
    """Generate project cancellation request."""
    symbol = ctx.obj["settings"].native_symbol

    async def operation(container: Container):
        result = await container.prepare_project_cancellation().execute(
            project_id
        )
        _emit(
            ctx,
            result.to_dict(symbol),
            formatters.format_cancellation(result, symbol),
        )

    _run(ctx, operation)


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
