"""
Domain exceptions package.
"""

from mecene.domain.exceptions.base import (
    MeceneException,
    NotFoundError,
    ValidationError,
)
from mecene.domain.exceptions.blockchain import (
    BlockchainError,
    ProjectNotFoundError,
    RPCError,
    StatePreconditionError,
)

__all__ = [
    # Base
    "MeceneException",
    "NotFoundError",
    "ValidationError",
    # Blockchain
    "BlockchainError",
    "ProjectNotFoundError",
    "RPCError",
    "StatePreconditionError",
]
