"""
Escrow calldata encoder.

Selector (keccak of the canonical signature, first 4 bytes) followed by
the ABI-encoded arguments. Pure and deterministic: no provider needed.
"""

from typing import Sequence

from eth_abi import encode
from eth_utils import encode_hex, function_signature_to_4byte_selector

from mecene.domain.exceptions import ValidationError
from mecene.domain.services.i_escrow_call_encoder import IEscrowCallEncoder
from mecene.domain.value_objects.ether_amount import EtherAmount
from mecene.domain.value_objects.evm_address import EvmAddress
from mecene.infrastructure.blockchain.escrow_abi import (
    CANCEL_PROJECT_SIGNATURE,
    CREATE_PROJECT_SIGNATURE,
    RELEASE_MILESTONE_SIGNATURE,
)


class EscrowCallEncoder(IEscrowCallEncoder):
    """ABI encoder for AgentFund state-changing functions."""

    def encode_create_project(
        self,
        agent: EvmAddress,
        milestone_amounts: Sequence[EtherAmount],
    ) -> str:
        """Encode createProject(address,uint256[])."""
        if not milestone_amounts:
            raise ValidationError(
                field="milestone_amounts",
                reason="At least one milestone amount required",
            )

        return self._encode_call(
            CREATE_PROJECT_SIGNATURE,
            ["address", "uint256[]"],
            [agent.address, [amount.wei for amount in milestone_amounts]],
        )

    def encode_release_milestone(self, project_id: int) -> str:
        """Encode releaseMilestone(uint256)."""
        return self._encode_call(
            RELEASE_MILESTONE_SIGNATURE,
            ["uint256"],
            [self._check_project_id(project_id)],
        )

    def encode_cancel_project(self, project_id: int) -> str:
        """Encode cancelProject(uint256)."""
        return self._encode_call(
            CANCEL_PROJECT_SIGNATURE,
            ["uint256"],
            [self._check_project_id(project_id)],
        )

    @staticmethod
    def selector(signature: str) -> str:
        """
        Function selector for a canonical signature.

        Args:
            signature: e.g. "releaseMilestone(uint256)"

        Returns:
            0x-prefixed 4-byte selector, e.g. "0x317debf5"
        """
        return encode_hex(function_signature_to_4byte_selector(signature))

    def _encode_call(self, signature: str, types: list, args: list) -> str:
        selector = function_signature_to_4byte_selector(signature)
        return encode_hex(selector + encode(types, args))

    @staticmethod
    def _check_project_id(project_id: int) -> int:
        if isinstance(project_id, bool) or not isinstance(project_id, int):
            raise ValidationError(field="project_id", reason="must be an integer")
        if project_id < 1:
            raise ValidationError(
                field="project_id", reason="must be a positive integer"
            )
        return project_id
