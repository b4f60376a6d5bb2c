"""Application use cases."""

from mecene.application.use_cases.check_milestone_status import (
    CheckMilestoneStatus,
)
from mecene.application.use_cases.find_agent_projects import FindAgentProjects
from mecene.application.use_cases.get_platform_stats import GetPlatformStats
from mecene.application.use_cases.get_project_details import GetProjectDetails
from mecene.application.use_cases.prepare_funding_proposal import (
    PrepareFundingProposal,
)
from mecene.application.use_cases.prepare_milestone_release import (
    PrepareMilestoneRelease,
)
from mecene.application.use_cases.prepare_project_cancellation import (
    PrepareProjectCancellation,
)

__all__ = [
    "CheckMilestoneStatus",
    "FindAgentProjects",
    "GetPlatformStats",
    "GetProjectDetails",
    "PrepareFundingProposal",
    "PrepareMilestoneRelease",
    "PrepareProjectCancellation",
]
