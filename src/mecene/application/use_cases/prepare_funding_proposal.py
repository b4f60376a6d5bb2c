"""
Prepare Funding Proposal use case.

Builds an unsigned createProject transaction for a funder.
"""

from typing import Optional, Sequence

from mecene.application.dto.escrow_dto import FundingProposal, UnsignedTransaction
from mecene.domain.exceptions import ValidationError
from mecene.domain.services.i_escrow_call_encoder import IEscrowCallEncoder
from mecene.domain.value_objects.ether_amount import EtherAmount
from mecene.domain.value_objects.evm_address import EvmAddress


class PrepareFundingProposal:
    """
    Prepare createProject proposal.

    Business rules:
    - At least one milestone amount
    - Every amount parses before anything is encoded
    - Total is summed in wei, never in floating point
    - Same agent and amounts always give the same calldata
    """

    def __init__(
        self,
        call_encoder: IEscrowCallEncoder,
        contract_address: EvmAddress,
    ):
        """
        Initialize use case with dependencies.

        Args:
            call_encoder: Escrow calldata encoder
            contract_address: Transaction target
        """
        self.call_encoder = call_encoder
        self.contract_address = contract_address

    def execute(
        self,
        agent_address: str,
        milestone_amounts: Sequence[str],
        description: Optional[str] = None,
    ) -> FundingProposal:
        """
        Build funding proposal.

        Args:
            agent_address: Recipient of milestone payments
            milestone_amounts: Ordered amounts in ETH, e.g. ["0.01", "0.02"]
            description: Optional project description

        Returns:
            FundingProposal with unsigned transaction

        Raises:
            ValidationError: If address or any amount is malformed
        """
        agent = EvmAddress(agent_address)

        if not milestone_amounts:
            raise ValidationError(
                field="milestone_amounts",
                reason="At least one milestone amount required",
            )

        amounts = [
            EtherAmount.from_display(amount, field=f"milestone {index}")
            for index, amount in enumerate(milestone_amounts, start=1)
        ]
        total = EtherAmount.total(amounts)

        data = self.call_encoder.encode_create_project(agent, amounts)

        return FundingProposal(
            agent=agent,
            milestone_amounts=amounts,
            total=total,
            transaction=UnsignedTransaction(
                to=self.contract_address,
                data=data,
                value=total,
            ),
            description=description or None,
        )
