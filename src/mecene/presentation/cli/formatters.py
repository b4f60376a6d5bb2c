"""
Plain-text renderers for CLI output.

Each function takes a use case result and returns the lines to print.
"""

from typing import List

from mecene.application.dto.escrow_dto import (
    CancellationRequest,
    FundingProposal,
    PlatformStats,
    ProjectScanResult,
    ReleaseRequest,
)
from mecene.domain.entities.project import Project, ProjectStatus
from mecene.domain.services.milestone_status import MilestoneStatus


def format_stats(stats: PlatformStats) -> List[str]:
    return [
        "=== Mecene Escrow Statistics ===",
        "",
        f"Total Projects: {stats.total_projects}",
        f"Contract: {stats.contract_address}",
        f"Chain: {stats.chain} ({stats.chain_id})",
        f"Platform Fee: {stats.platform_fee}",
        "",
        f"Explorer: {stats.explorer_url}",
    ]


def format_project(project: Project, symbol: str) -> List[str]:
    return [
        f"=== Project #{project.id} ===",
        "",
        f"Status: {project.status.value}",
        f"Agent (recipient): {project.agent}",
        f"Funder: {project.funder}",
        f"Total: {project.total_amount.with_symbol(symbol)}",
        f"Released: {project.released_amount.with_symbol(symbol)}",
        f"Remaining: {project.remaining_amount.with_symbol(symbol)}",
        f"Milestone: {project.current_milestone} of {project.total_milestones}",
    ]


def format_scan(result: ProjectScanResult, symbol: str) -> List[str]:
    lines = [f"=== Projects for {result.agent} ===", ""]

    if not result.matches:
        lines.append("No projects found for this address.")
        lines.append("")
        lines.append("To start fundraising, use the 'create' command:")
        lines.append(f'  mecene create {result.agent} 0.01 0.02 --desc "Your project"')
    else:
        lines.append(f"Found {len(result.matches)} project(s):")
        lines.append("")
        for project in result.matches:
            lines.append(f"Project #{project.id}")
            lines.append(f"  Status: {project.status.value}")
            lines.append(
                f"  Funding: {project.released_amount.display()}/"
                f"{project.total_amount.with_symbol(symbol)} released"
            )
            lines.append(f"  Milestone: {project.milestone_progress}")
            lines.append("")

    if result.skipped_ids:
        skipped = ", ".join(f"#{project_id}" for project_id in result.skipped_ids)
        lines.append(f"Skipped unreadable projects: {skipped}")
    if result.truncated:
        lines.append(
            f"Searched projects 1-{result.inspected} of {result.project_count}."
        )

    return lines


def format_proposal(proposal: FundingProposal, symbol: str) -> List[str]:
    lines = [
        "=== Funding Proposal ===",
        "",
        f"Agent (you): {proposal.agent}",
        f"Total Funding: {proposal.total.with_symbol(symbol)}",
        f"Milestones: {proposal.milestone_count}",
        "",
        "Milestone Breakdown:",
    ]
    for index, amount in enumerate(proposal.milestone_amounts, start=1):
        lines.append(f"  {index}. {amount.with_symbol(symbol)}")
    lines.append("")

    if proposal.description:
        lines.append(f"Project: {proposal.description}")
        lines.append("")

    transaction = proposal.transaction
    lines.extend(
        [
            "=== For Funder to Execute ===",
            "",
            f"To: {transaction.to}",
            f"Value: {transaction.value.with_symbol(symbol)}",
            f"Data: {transaction.data}",
            "",
            "Share this with potential funders. When they execute this "
            "transaction,",
            "your project will be created and you'll receive funds as you "
            "complete milestones.",
        ]
    )
    return lines


def format_milestone(status: MilestoneStatus, symbol: str) -> List[str]:
    lines = [f"=== Milestone Status - Project #{status.project_id} ===", ""]

    if status.status == ProjectStatus.COMPLETED:
        lines.extend(
            [
                "COMPLETED",
                f"All {status.total} milestones completed!",
                f"Total received: {status.released.with_symbol(symbol)}",
            ]
        )
    elif status.status == ProjectStatus.CANCELLED:
        lines.extend(
            [
                "CANCELLED",
                f"Released before cancel: {status.released.with_symbol(symbol)}",
                f"Refunded to funder: {status.remaining.with_symbol(symbol)}",
            ]
        )
    else:
        lines.extend(
            [
                f"Status: {status.status.value}",
                f"Current: Milestone {status.current} of {status.total}",
                f"Completed: {status.completed}",
                f"Released so far: {status.released.with_symbol(symbol)}",
                f"Remaining: {status.remaining.with_symbol(symbol)}",
            ]
        )

    lines.append("")
    lines.append(f"Next step: {status.next_action}")
    if status.status == ProjectStatus.ACTIVE:
        lines.append(
            f'  mecene release {status.project_id} '
            f'--work "Description of completed work"'
        )
    return lines


def format_release(request: ReleaseRequest) -> List[str]:
    lines = [
        f"=== Release Request - Project #{request.project_id} ===",
        "",
        f"Project: #{request.project_id}",
        f"Milestone: {request.milestone}",
        f"Funder: {request.funder}",
        "",
    ]
    if request.work_completed:
        lines.append(f"Work Completed: {request.work_completed}")
        lines.append("")

    lines.extend(
        [
            "=== For Funder to Sign ===",
            "",
            f"To: {request.transaction.to}",
            f"Data: {request.transaction.data}",
            "",
            request.instructions,
        ]
    )
    return lines


def format_cancellation(request: CancellationRequest, symbol: str) -> List[str]:
    return [
        f"=== Cancellation Request - Project #{request.project_id} ===",
        "",
        f"Project: #{request.project_id}",
        f"Funder: {request.funder}",
        f"Refund: {request.refund.with_symbol(symbol)}",
        "",
        "=== For Funder to Sign ===",
        "",
        f"To: {request.transaction.to}",
        f"Data: {request.transaction.data}",
        "",
        request.instructions,
    ]
