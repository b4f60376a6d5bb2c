"""Application DTOs."""

from mecene.application.dto.escrow_dto import (
    CancellationRequest,
    FundingProposal,
    PlatformStats,
    ProjectScanResult,
    ReleaseRequest,
    UnsignedTransaction,
    project_to_display_dict,
)

__all__ = [
    "CancellationRequest",
    "FundingProposal",
    "PlatformStats",
    "ProjectScanResult",
    "ReleaseRequest",
    "UnsignedTransaction",
    "project_to_display_dict",
]
