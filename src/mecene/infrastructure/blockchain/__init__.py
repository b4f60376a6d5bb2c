"""Blockchain adapters for the AgentFund escrow contract."""

from mecene.infrastructure.blockchain.call_encoder import EscrowCallEncoder
from mecene.infrastructure.blockchain.escrow_abi import ESCROW_ABI
from mecene.infrastructure.blockchain.escrow_contract_reader import (
    Web3EscrowReader,
    build_web3,
)

__all__ = [
    "ESCROW_ABI",
    "EscrowCallEncoder",
    "Web3EscrowReader",
    "build_web3",
]
