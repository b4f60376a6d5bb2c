"""
Domain services.
"""

from mecene.domain.services.i_escrow_call_encoder import IEscrowCallEncoder
from mecene.domain.services.i_escrow_reader import IEscrowReader
from mecene.domain.services.milestone_status import (
    MilestoneStatus,
    derive_milestone_status,
)

__all__ = [
    "IEscrowReader",
    "IEscrowCallEncoder",
    "MilestoneStatus",
    "derive_milestone_status",
]
