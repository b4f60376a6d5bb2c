"""
Live Base mainnet fixtures.

Enabled with MECENE_LIVE_RPC=1. Public endpoints throttle aggressively;
rate-limit and connectivity failures skip the test instead of failing it.
"""

import os

import pytest
import pytest_asyncio

from mecene.config.settings import Settings
from mecene.di.container import Container

LIVE = os.getenv("MECENE_LIVE_RPC") == "1"


def pytest_collection_modifyitems(config, items):
    if LIVE:
        return
    skip_live = pytest.mark.skip(reason="set MECENE_LIVE_RPC=1 to run live tests")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest_asyncio.fixture
async def live_container():
    """Container talking to the configured (default: public) Base RPC."""
    container = Container(Settings(rpc_timeout=20.0))
    yield container
    await container.close()
