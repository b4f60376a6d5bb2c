"""
Check Milestone Status use case.
"""

from mecene.application.use_cases.get_project_details import fetch_project
from mecene.domain.services.i_escrow_reader import IEscrowReader
from mecene.domain.services.milestone_status import (
    MilestoneStatus,
    derive_milestone_status,
)


class CheckMilestoneStatus:
    """
    Fetch a project and derive its milestone status.

    The deriver only runs on a successfully fetched record.
    """

    def __init__(self, escrow_reader: IEscrowReader):
        self.escrow_reader = escrow_reader

    async def execute(self, project_id) -> MilestoneStatus:
        """
        Args:
            project_id: Project ID

        Returns:
            MilestoneStatus

        Raises:
            ValidationError: If project_id is malformed
            ProjectNotFoundError: If the project cannot be read
        """
        project = await fetch_project(self.escrow_reader, project_id)
        return derive_milestone_status(project)
