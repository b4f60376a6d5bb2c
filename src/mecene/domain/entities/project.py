"""
Project entity - read-only view of an escrow project record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from mecene.domain.value_objects.ether_amount import EtherAmount
from mecene.domain.value_objects.evm_address import EvmAddress


class ProjectStatus(str, Enum):
    """Project lifecycle states (uint8 ordinal on the wire)."""

    ACTIVE = "Active"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    UNKNOWN = "Unknown"

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "ProjectStatus":
        """
        Map contract enum ordinal to status.

        Args:
            ordinal: 0 = Active, 1 = Completed, 2 = Cancelled

        Returns:
            ProjectStatus (UNKNOWN for any other ordinal)
        """
        ordered = (cls.ACTIVE, cls.COMPLETED, cls.CANCELLED)
        if 0 <= int(ordinal) < len(ordered):
            return ordered[int(ordinal)]
        return cls.UNKNOWN


@dataclass(frozen=True)
class Project:
    """
    Project entity as reported by the escrow contract.

    Business rules (enforced by the contract, not re-validated here):
    - 0 <= current_milestone <= total_milestones
    - released_amount <= total_amount
    - COMPLETED implies everything released
    - CANCELLED implies no further releases
    """

    id: int
    funder: EvmAddress
    agent: EvmAddress
    total_amount: EtherAmount
    released_amount: EtherAmount
    current_milestone: int
    total_milestones: int
    status: ProjectStatus

    @classmethod
    def from_chain_tuple(cls, project_id: int, raw: Sequence) -> "Project":
        """
        Build entity from the getProject() return tuple.

        Args:
            project_id: Requested project ID
            raw: (funder, agent, totalAmount, releasedAmount,
                currentMilestone, totalMilestones, status)

        Returns:
            Project entity
        """
        (
            funder,
            agent,
            total_amount,
            released_amount,
            current_milestone,
            total_milestones,
            status,
        ) = raw

        return cls(
            id=int(project_id),
            funder=EvmAddress(funder),
            agent=EvmAddress(agent),
            total_amount=EtherAmount(wei=int(total_amount)),
            released_amount=EtherAmount(wei=int(released_amount)),
            current_milestone=int(current_milestone),
            total_milestones=int(total_milestones),
            status=ProjectStatus.from_ordinal(status),
        )

    @property
    def remaining_amount(self) -> EtherAmount:
        """Amount still held in escrow (total - released)."""
        return self.total_amount - self.released_amount

    @property
    def is_active(self) -> bool:
        """True when further milestones may be released."""
        return self.status == ProjectStatus.ACTIVE

    @property
    def milestone_progress(self) -> str:
        """Compact 'released/total' milestone counter."""
        return f"{self.current_milestone}/{self.total_milestones}"

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "funder": str(self.funder),
            "agent": str(self.agent),
            "total_amount_wei": str(self.total_amount.wei),
            "released_amount_wei": str(self.released_amount.wei),
            "current_milestone": self.current_milestone,
            "total_milestones": self.total_milestones,
            "status": self.status.value,
        }
