"""
Prepare Project Cancellation use case.

Generates an unsigned cancelProject transaction for the funder.
"""

from typing import Optional

from mecene.application.dto.escrow_dto import (
    CancellationRequest,
    UnsignedTransaction,
)
from mecene.application.use_cases.get_project_details import (
    fetch_project,
    parse_project_id,
)
from mecene.domain.entities.project import Project
from mecene.domain.exceptions import StatePreconditionError, ValidationError
from mecene.domain.services.i_escrow_call_encoder import IEscrowCallEncoder
from mecene.domain.services.i_escrow_reader import IEscrowReader
from mecene.domain.value_objects.evm_address import EvmAddress


class PrepareProjectCancellation:
    """
    Prepare cancellation request.

    Business rules:
    - Project must be Active
    - Remaining escrow is refunded to the funder by the contract
    """

    def __init__(
        self,
        escrow_reader: IEscrowReader,
        call_encoder: IEscrowCallEncoder,
        contract_address: EvmAddress,
    ):
        self.escrow_reader = escrow_reader
        self.call_encoder = call_encoder
        self.contract_address = contract_address

    async def execute(
        self,
        project_id,
        project: Optional[Project] = None,
    ) -> CancellationRequest:
        """
        Build cancellation request.

        Args:
            project_id: Project ID
            project: Already-fetched project record (skips the RPC read)

        Returns:
            CancellationRequest with unsigned transaction

        Raises:
            ValidationError: If project_id is malformed or mismatches project
            ProjectNotFoundError: If the project cannot be read
            StatePreconditionError: If the project is not Active
        """
        project_id = parse_project_id(project_id)

        if project is None:
            project = await fetch_project(self.escrow_reader, project_id)
        elif project.id != project_id:
            raise ValidationError(
                field="project",
                reason=f"record is #{project.id}, expected #{project_id}",
            )

        if not project.is_active:
            raise StatePreconditionError(
                project_id, "cancel project", project.status.value
            )

        data = self.call_encoder.encode_cancel_project(project_id)

        return CancellationRequest(
            project_id=project_id,
            funder=project.funder,
            refund=project.remaining_amount,
            transaction=UnsignedTransaction(to=self.contract_address, data=data),
            instructions=(
                f"Only the funder ({project.funder}) can cancel project "
                f"#{project_id}. Unreleased funds return to the funder."
            ),
        )
