"""
Unit tests for the DI container.

Usage:
    pytest tests/unit/test_container.py
"""

from unittest.mock import AsyncMock

from web3 import AsyncWeb3

from mecene.application.use_cases import (
    CheckMilestoneStatus,
    FindAgentProjects,
    PrepareFundingProposal,
)
from mecene.di.container import Container
from mecene.infrastructure.blockchain.escrow_contract_reader import (
    Web3EscrowReader,
)
from tests.helpers.escrow_fixtures import InMemoryEscrowReader


class TestContainer:
    """Unit tests for Container wiring and lifecycle."""

    def test_builds_web3_reader_lazily(self, settings):
        """Test the default reader is web3-backed and created on demand."""
        container = Container(settings)
        assert container._web3 is None

        reader = container.escrow_reader

        assert isinstance(reader, Web3EscrowReader)
        assert isinstance(container.web3, AsyncWeb3)
        assert container.escrow_reader is reader

    def test_injected_reader(self, settings):
        reader = InMemoryEscrowReader()
        container = Container(settings, escrow_reader=reader)

        assert container.escrow_reader is reader
        assert isinstance(container.check_milestone_status(), CheckMilestoneStatus)
        assert container._web3 is None

    def test_scan_limit_from_settings(self, settings):
        settings.scan_limit = 25
        use_case = Container(settings).find_agent_projects()

        assert isinstance(use_case, FindAgentProjects)
        assert use_case.scan_limit == 25

    def test_proposal_needs_no_rpc(self, settings):
        container = Container(settings)
        assert isinstance(container.prepare_funding_proposal(), PrepareFundingProposal)
        assert container._web3 is None

    async def test_close(self, settings):
        """Test close() disconnects the provider once."""
        async with Container(settings) as container:
            web3 = container.web3
            web3.provider.disconnect = AsyncMock()

        web3.provider.disconnect.assert_awaited_once()
        assert container._web3 is None

    async def test_close_without_connection(self, settings):
        await Container(settings).close()
