"""
Escrow DTOs.

Transient results handed to the presentation layer. Amounts are kept as
EtherAmount and rendered with the configured currency symbol on output.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from mecene.domain.entities.project import Project
from mecene.domain.value_objects.ether_amount import EtherAmount
from mecene.domain.value_objects.evm_address import EvmAddress


@dataclass(frozen=True)
class UnsignedTransaction:
    """
    Transaction descriptor for an external signer.

    Never signed or submitted by Mecene.
    """

    to: EvmAddress
    data: str
    value: Optional[EtherAmount] = None

    def to_dict(self, symbol: str = "ETH") -> dict:
        result = {"to": str(self.to), "data": self.data}
        if self.value is not None:
            result["value"] = self.value.with_symbol(symbol)
            result["valueWei"] = str(self.value.wei)
        return result


@dataclass(frozen=True)
class PlatformStats:
    """Platform-level facts about the escrow deployment."""

    total_projects: int
    contract_address: EvmAddress
    chain: str
    chain_id: int
    platform_fee: str
    explorer_url: str

    def to_dict(self) -> dict:
        return {
            "totalProjects": self.total_projects,
            "contractAddress": str(self.contract_address),
            "chain": self.chain,
            "chainId": self.chain_id,
            "platformFee": self.platform_fee,
            "explorerUrl": self.explorer_url,
        }


def project_to_display_dict(project: Project, symbol: str = "ETH") -> dict:
    """Project details with display amounts."""
    return {
        "projectId": project.id,
        "funder": str(project.funder),
        "agent": str(project.agent),
        "totalAmount": project.total_amount.with_symbol(symbol),
        "releasedAmount": project.released_amount.with_symbol(symbol),
        "remainingAmount": project.remaining_amount.with_symbol(symbol),
        "currentMilestone": (
            f"{project.current_milestone} of {project.total_milestones}"
        ),
        "status": project.status.value,
    }


@dataclass
class ProjectScanResult:
    """
    Result of scanning for projects paid to an agent.

    Attributes:
        agent: Address searched for
        project_count: projectCount() at scan time
        inspected: Number of IDs attempted (1..inspected)
        matches: Projects whose agent matches
        skipped_ids: IDs whose read failed and were skipped
    """

    agent: EvmAddress
    project_count: int
    inspected: int
    matches: List[Project] = field(default_factory=list)
    skipped_ids: List[int] = field(default_factory=list)

    @property
    def truncated(self) -> bool:
        """True when projects beyond the scan limit were not inspected."""
        return self.project_count > self.inspected

    def to_dict(self, symbol: str = "ETH") -> dict:
        return {
            "agent": str(self.agent),
            "projectCount": self.project_count,
            "inspected": self.inspected,
            "skippedIds": list(self.skipped_ids),
            "truncated": self.truncated,
            "projects": [
                {
                    "id": project.id,
                    "status": project.status.value,
                    "total": project.total_amount.display(),
                    "released": project.released_amount.display(),
                    "milestone": project.milestone_progress,
                }
                for project in self.matches
            ],
        }


@dataclass(frozen=True)
class FundingProposal:
    """
    createProject proposal for a funder.

    Attributes:
        agent: Recipient of milestone payments
        milestone_amounts: Ordered milestone amounts
        total: Exact sum of milestone amounts
        transaction: Unsigned createProject transaction (value = total)
        description: Optional free-text project description
    """

    agent: EvmAddress
    milestone_amounts: List[EtherAmount]
    total: EtherAmount
    transaction: UnsignedTransaction
    description: Optional[str] = None

    @property
    def milestone_count(self) -> int:
        return len(self.milestone_amounts)

    def to_dict(self, symbol: str = "ETH") -> dict:
        proposal = {
            "agent": str(self.agent),
            "totalFunding": self.total.with_symbol(symbol),
            "milestoneCount": self.milestone_count,
            "milestones": [
                {"milestone": index, "amount": amount.with_symbol(symbol)}
                for index, amount in enumerate(self.milestone_amounts, start=1)
            ],
        }
        if self.description:
            proposal["description"] = self.description

        return {
            "proposal": proposal,
            "transaction": self.transaction.to_dict(symbol),
        }


@dataclass(frozen=True)
class ReleaseRequest:
    """releaseMilestone request for the funder to sign."""

    project_id: int
    milestone: int
    funder: EvmAddress
    transaction: UnsignedTransaction
    instructions: str
    work_completed: Optional[str] = None

    def to_dict(self, symbol: str = "ETH") -> dict:
        result = {
            "projectId": self.project_id,
            "milestone": self.milestone,
            "funder": str(self.funder),
            "transaction": self.transaction.to_dict(symbol),
            "instructions": self.instructions,
        }
        if self.work_completed:
            result["workCompleted"] = self.work_completed
        return result


@dataclass(frozen=True)
class CancellationRequest:
    """cancelProject request for the funder to sign."""

    project_id: int
    funder: EvmAddress
    refund: EtherAmount
    transaction: UnsignedTransaction
    instructions: str

    def to_dict(self, symbol: str = "ETH") -> dict:
        return {
            "projectId": self.project_id,
            "funder": str(self.funder),
            "refund": self.refund.with_symbol(symbol),
            "transaction": self.transaction.to_dict(symbol),
            "instructions": self.instructions,
        }
