"""
Blockchain-related exceptions.

Defines exceptions for escrow contract reads and call preparation.
"""

from mecene.domain.exceptions.base import MeceneException, NotFoundError


class BlockchainError(MeceneException):
    """Base exception for blockchain operations."""


class RPCError(BlockchainError):
    """
    Raised when the JSON-RPC transport fails.

    The underlying exception is chained as ``__cause__`` and is not
    classified further.
    """

    def __init__(self, method: str, reason: str):
        """
        Initialize RPC error.

        Args:
            method: Contract function or RPC method being called
            reason: Text of the underlying failure
        """
        super().__init__(f"RPC call {method} failed: {reason}", code="RPC_ERROR")
        self.method = method
        self.reason = reason


class ProjectNotFoundError(NotFoundError):
    """Raised when getProject reverts or returns an empty record."""

    def __init__(self, project_id: int, reason: str = ""):
        """
        Initialize project not found error.

        Args:
            project_id: Requested project ID
            reason: Optional detail (revert message, range)
        """
        super().__init__("Project", f"#{project_id}", reason)
        self.project_id = project_id


class StatePreconditionError(BlockchainError):
    """Raised when a state-changing call is prepared for a non-Active project."""

    def __init__(self, project_id: int, action: str, status: str):
        """
        Initialize state precondition error.

        Args:
            project_id: Project the call was prepared for
            action: Human-readable action ("release milestone")
            status: Actual project status
        """
        super().__init__(
            f"Cannot {action} - project #{project_id} is {status}",
            code="STATE_PRECONDITION_FAILED",
        )
        self.project_id = project_id
        self.action = action
        self.status = status
