"""
Escrow reader service interface.

Read-only access to the deployed milestone escrow contract.
"""

from abc import ABC, abstractmethod

from mecene.domain.entities.project import Project


class IEscrowReader(ABC):
    """
    Abstract service interface for escrow contract reads.

    Implementations issue view calls only:
    - projectCount()
    - getProject(uint256)
    """

    @abstractmethod
    async def get_project_count(self) -> int:
        """
        Query number of projects ever created.

        Returns:
            Highest assigned project ID (IDs start at 1)

        Raises:
            RPCError: If the RPC call fails
        """

    @abstractmethod
    async def get_project(self, project_id: int) -> Project:
        """
        Query a single project record.

        Args:
            project_id: Project ID (1-based)

        Returns:
            Project entity

        Raises:
            ProjectNotFoundError: If the call reverts or the record is empty
            RPCError: If the RPC transport fails
        """
