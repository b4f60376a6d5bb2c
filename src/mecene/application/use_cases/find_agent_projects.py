"""
Find Agent Projects use case.

Bounded linear scan over project IDs for projects paying a given agent.
"""

from mecene.application.dto.escrow_dto import ProjectScanResult
from mecene.domain.exceptions import MeceneException
from mecene.domain.services.i_escrow_reader import IEscrowReader
from mecene.domain.value_objects.evm_address import EvmAddress
from mecene.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SCAN_LIMIT = 100


class FindAgentProjects:
    """
    Find projects whose agent matches an address.

    Business rules:
    - Inspects IDs 1..min(projectCount, scan_limit), oldest first
    - Reads are sequential: each ID resolves before the next is requested
    - Agent comparison is case-insensitive
    - A failed read skips that ID; skipped IDs are reported, not raised
    """

    def __init__(
        self,
        escrow_reader: IEscrowReader,
        scan_limit: int = DEFAULT_SCAN_LIMIT,
    ):
        """
        Initialize use case with dependencies.

        Args:
            escrow_reader: Contract reader
            scan_limit: Maximum number of IDs inspected
        """
        self.escrow_reader = escrow_reader
        self.scan_limit = scan_limit

    async def execute(self, agent_address: str) -> ProjectScanResult:
        """
        Scan for projects paying agent_address.

        Args:
            agent_address: Agent (recipient) address

        Returns:
            ProjectScanResult with matches and skipped IDs

        Raises:
            ValidationError: If agent_address is malformed
            RPCError: If projectCount() fails
        """
        agent = EvmAddress(agent_address)

        project_count = await self.escrow_reader.get_project_count()
        inspected = max(0, min(project_count, self.scan_limit))

        result = ProjectScanResult(
            agent=agent,
            project_count=project_count,
            inspected=inspected,
        )

        for project_id in range(1, inspected + 1):
            try:
                project = await self.escrow_reader.get_project(project_id)
            except MeceneException as e:
                logger.warning(
                    f"Skipping project #{project_id}: {e.message}",
                    extra={"project_id": project_id},
                )
                result.skipped_ids.append(project_id)
                continue

            if project.agent.matches(agent):
                result.matches.append(project)

        if result.truncated:
            logger.info(
                f"Scan stopped at project #{inspected} of {project_count}"
            )

        return result
