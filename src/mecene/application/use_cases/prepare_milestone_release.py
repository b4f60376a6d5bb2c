"""
Prepare Milestone Release use case.

Generates an unsigned releaseMilestone transaction for the funder.
"""

from typing import Optional

from mecene.application.dto.escrow_dto import ReleaseRequest, UnsignedTransaction
from mecene.application.use_cases.get_project_details import (
    fetch_project,
    parse_project_id,
)
from mecene.domain.entities.project import Project
from mecene.domain.exceptions import StatePreconditionError, ValidationError
from mecene.domain.services.i_escrow_call_encoder import IEscrowCallEncoder
from mecene.domain.services.i_escrow_reader import IEscrowReader
from mecene.domain.value_objects.evm_address import EvmAddress
from mecene.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class PrepareMilestoneRelease:
    """
    Prepare release request.

    Business rules:
    - Project must be Active (advisory check; the contract decides)
    - Only the funder can execute the resulting transaction
    - Payload carries the project ID only
    """

    def __init__(
        self,
        escrow_reader: IEscrowReader,
        call_encoder: IEscrowCallEncoder,
        contract_address: EvmAddress,
    ):
        """
        Initialize use case with dependencies.

        Args:
            escrow_reader: Contract reader (used when no project is given)
            call_encoder: Escrow calldata encoder
            contract_address: Transaction target
        """
        self.escrow_reader = escrow_reader
        self.call_encoder = call_encoder
        self.contract_address = contract_address

    async def execute(
        self,
        project_id,
        project: Optional[Project] = None,
        work_completed: Optional[str] = None,
    ) -> ReleaseRequest:
        """
        Build release request.

        Args:
            project_id: Project ID
            project: Already-fetched project record (skips the RPC read)
            work_completed: Optional description of the completed work

        Returns:
            ReleaseRequest with unsigned transaction

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
                project_id, "release milestone", project.status.value
            )

        data = self.call_encoder.encode_release_milestone(project_id)
        milestone = project.current_milestone + 1

        logger.info(
            f"Prepared release of milestone {milestone} for project #{project_id}",
            extra={"project_id": project_id},
        )

        return ReleaseRequest(
            project_id=project_id,
            milestone=milestone,
            funder=project.funder,
            transaction=UnsignedTransaction(to=self.contract_address, data=data),
            instructions=(
                f"Send this transaction data to your funder ({project.funder}) "
                f"to release payment for milestone {milestone}."
            ),
            work_completed=work_completed or None,
        )
