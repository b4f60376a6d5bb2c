"""
Get Project Details use case.

Fetches a single project record from the escrow contract.
"""

from mecene.domain.entities.project import Project
from mecene.domain.exceptions import ProjectNotFoundError, ValidationError
from mecene.domain.services.i_escrow_reader import IEscrowReader
from mecene.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


def parse_project_id(value) -> int:
    """
    Validate a caller-supplied project ID.

    Args:
        value: int or numeric string

    Returns:
        Positive integer project ID

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool):
        raise ValidationError(field="project_id", reason="must be an integer")
    try:
        project_id = int(str(value).strip())
    except ValueError:
        raise ValidationError(
            field="project_id", reason=f"'{value}' is not an integer"
        )
    if project_id < 1:
        raise ValidationError(
            field="project_id", reason="must be a positive integer (IDs start at 1)"
        )
    return project_id


async def fetch_project(escrow_reader: IEscrowReader, project_id) -> Project:
    """
    Fetch a project, rejecting IDs beyond projectCount().

    Args:
        escrow_reader: Contract reader
        project_id: Requested project ID

    Returns:
        Project entity

    Raises:
        ValidationError: If project_id is malformed
        ProjectNotFoundError: If ID is beyond range or the read fails
        RPCError: If the RPC transport fails
    """
    project_id = parse_project_id(project_id)

    count = await escrow_reader.get_project_count()
    if project_id > count:
        raise ProjectNotFoundError(
            project_id, f"only {count} project(s) exist"
        )

    project = await escrow_reader.get_project(project_id)
    logger.debug(
        f"Fetched project #{project_id}: {project.status.value}",
        extra={"project_id": project_id},
    )
    return project


class GetProjectDetails:
    """Get project details by ID."""

    def __init__(self, escrow_reader: IEscrowReader):
        """
        Initialize use case with dependencies.

        Args:
            escrow_reader: Contract reader
        """
        self.escrow_reader = escrow_reader

    async def execute(self, project_id) -> Project:
        """
        Execute project lookup.

        Args:
            project_id: Project ID

        Returns:
            Project entity

        Raises:
            ValidationError: If project_id is malformed
            ProjectNotFoundError: If the project cannot be read
        """
        return await fetch_project(self.escrow_reader, project_id)
