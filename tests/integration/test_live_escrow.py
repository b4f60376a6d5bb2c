"""
Live integration tests against the Base mainnet escrow contract.

Usage:
    MECENE_LIVE_RPC=1 pytest tests/integration -m live
"""

import pytest

from mecene.domain.exceptions import NotFoundError, RPCError
from mecene.infrastructure.blockchain.escrow_contract_reader import TRANSPORT_ERRORS
from tests.helpers.escrow_fixtures import AGENT_ADDRESS
from tests.helpers.live import call_or_skip

pytestmark = pytest.mark.live


class TestLiveEscrow:
    """Read-only checks against the deployed contract."""

    async def test_chain_id(self, live_container):
        """Test the endpoint is Base mainnet."""
        chain_id = await call_or_skip(_chain_id(live_container))
        assert chain_id == 8453

    async def test_stats(self, live_container):
        stats = await call_or_skip(live_container.get_platform_stats().execute())

        assert stats.total_projects >= 0
        assert stats.platform_fee == "5%"

    async def test_first_project(self, live_container):
        """Test project #1 reads and derives when it exists."""
        count = await call_or_skip(live_container.escrow_reader.get_project_count())
        if count == 0:
            pytest.skip("no projects on chain yet")

        status = await call_or_skip(
            live_container.check_milestone_status().execute(1)
        )

        assert status.current == status.completed + 1
        assert status.remaining.wei >= 0

    async def test_project_beyond_count(self, live_container):
        count = await call_or_skip(live_container.escrow_reader.get_project_count())

        with pytest.raises(NotFoundError):
            await call_or_skip(
                live_container.get_project_details().execute(count + 1)
            )

    async def test_find_projects(self, live_container):
        result = await call_or_skip(
            live_container.find_agent_projects().execute(AGENT_ADDRESS)
        )

        assert result.inspected <= 100
        for project in result.matches:
            assert project.agent.matches(AGENT_ADDRESS)


async def _chain_id(container):
    try:
        return await container.web3.eth.chain_id
    except TRANSPORT_ERRORS as e:
        raise RPCError("eth_chainId", str(e)) from e
