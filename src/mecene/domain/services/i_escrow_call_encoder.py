"""
Escrow call encoder service interface.

Builds calldata for state-changing escrow functions. Nothing is signed
or submitted: the hex payload is handed to the funder.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from mecene.domain.value_objects.ether_amount import EtherAmount
from mecene.domain.value_objects.evm_address import EvmAddress


class IEscrowCallEncoder(ABC):
    """Abstract encoder for escrow contract calldata."""

    @abstractmethod
    def encode_create_project(
        self,
        agent: EvmAddress,
        milestone_amounts: Sequence[EtherAmount],
    ) -> str:
        """
        Encode createProject(address,uint256[]).

        Args:
            agent: Recipient of milestone payments
            milestone_amounts: Ordered milestone amounts

        Returns:
            0x-prefixed hex calldata
        """

    @abstractmethod
    def encode_release_milestone(self, project_id: int) -> str:
        """
        Encode releaseMilestone(uint256).

        Args:
            project_id: Project ID

        Returns:
            0x-prefixed hex calldata
        """

    @abstractmethod
    def encode_cancel_project(self, project_id: int) -> str:
        """
        Encode cancelProject(uint256).

        Args:
            project_id: Project ID

        Returns:
            0x-prefixed hex calldata
        """
