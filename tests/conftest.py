"""
Test fixtures and configuration.
"""

import pytest

from mecene.application.use_cases.prepare_funding_proposal import (
    PrepareFundingProposal,
)
from mecene.config.settings import Settings, override_settings, reset_settings
from mecene.domain.value_objects.evm_address import EvmAddress
from mecene.infrastructure.blockchain.call_encoder import EscrowCallEncoder
from tests.helpers.escrow_fixtures import CONTRACT_ADDRESS, InMemoryEscrowReader


@pytest.fixture
def settings() -> Settings:
    """Settings with package defaults, independent of env and YAML."""
    return Settings(
        rpc_url="https://mainnet.base.org",
        contract_address=CONTRACT_ADDRESS,
        log_level="WARNING",
        json_logs=False,
    )


@pytest.fixture
def global_settings(settings: Settings):
    """Install settings as the process default for the duration of a test."""
    override_settings(settings)
    yield settings
    reset_settings()


@pytest.fixture
def contract_address() -> EvmAddress:
    return EvmAddress(CONTRACT_ADDRESS)


@pytest.fixture
def call_encoder() -> EscrowCallEncoder:
    return EscrowCallEncoder()


@pytest.fixture
def empty_reader() -> InMemoryEscrowReader:
    return InMemoryEscrowReader()


@pytest.fixture
def proposal_use_case(call_encoder, contract_address) -> PrepareFundingProposal:
    return PrepareFundingProposal(call_encoder, contract_address)
