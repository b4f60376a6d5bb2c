"""
Helpers for live RPC tests.
"""

import pytest

from mecene.domain.exceptions import RPCError
from tests.helpers.escrow_fixtures import is_rate_limit_error


async def call_or_skip(awaitable):
    """Await a live call, skipping on throttling or unreachable RPC."""
    try:
        return await awaitable
    except RPCError as e:
        if is_rate_limit_error(e):
            pytest.skip(f"RPC rate limited: {e.message}")
        pytest.skip(f"RPC unavailable: {e.message}")
