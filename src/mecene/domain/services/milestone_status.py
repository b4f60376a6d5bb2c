"""
Milestone status derivation.

Pure transformation of a Project record into a human-facing summary.
Performs no network calls and never asserts on contract-reported values.
"""

from dataclasses import dataclass

from mecene.domain.entities.project import Project, ProjectStatus
from mecene.domain.value_objects.ether_amount import EtherAmount

COMPLETED_ACTION = "All milestones completed! No further action needed."
CANCELLED_ACTION = "Project was cancelled. Remaining funds refunded to funder."
UNKNOWN_ACTION = "Project status is not recognised. No action can be suggested."


@dataclass(frozen=True)
class MilestoneStatus:
    """
    Derived milestone summary for a single project.

    Attributes:
        project_id: Project ID
        status: Project status
        current: 1-based milestone being worked on
        total: Total milestones in the project
        completed: Milestones already released
        released: Amount paid out so far
        remaining: Amount still in escrow (total - released)
        next_action: Instruction for the agent
    """

    project_id: int
    status: ProjectStatus
    current: int
    total: int
    completed: int
    released: EtherAmount
    remaining: EtherAmount
    next_action: str

    def to_dict(self, symbol: str = "ETH") -> dict:
        """Convert to dictionary with display amounts."""
        return {
            "projectId": self.project_id,
            "status": self.status.value,
            "currentMilestone": self.current,
            "totalMilestones": self.total,
            "completed": self.completed,
            "released": self.released.with_symbol(symbol),
            "remaining": self.remaining.with_symbol(symbol),
            "nextAction": self.next_action,
        }


def derive_milestone_status(project: Project) -> MilestoneStatus:
    """
    Derive milestone status from a project record.

    Args:
        project: Project as read from the contract

    Returns:
        MilestoneStatus summary
    """
    current = project.current_milestone + 1

    if project.status == ProjectStatus.COMPLETED:
        next_action = COMPLETED_ACTION
    elif project.status == ProjectStatus.CANCELLED:
        next_action = CANCELLED_ACTION
    elif project.status == ProjectStatus.ACTIVE:
        next_action = (
            f"Complete milestone {current} work, then generate a release "
            f"request for project #{project.id} to request payment."
        )
    else:
        next_action = UNKNOWN_ACTION

    return MilestoneStatus(
        project_id=project.id,
        status=project.status,
        current=current,
        total=project.total_milestones,
        completed=project.current_milestone,
        released=project.released_amount,
        remaining=project.remaining_amount,
        next_action=next_action,
    )
