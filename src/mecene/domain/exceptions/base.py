"""
Base domain exceptions.
"""


class MeceneException(Exception):
    """Base exception for all Mecene domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(MeceneException):
    """Raised when caller input (address, amount, id) is malformed."""

    def __init__(self, field: str, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.reason = reason


class NotFoundError(MeceneException):
    """Raised when an entity cannot be read from the contract."""

    def __init__(self, entity_type: str, entity_id: str, reason: str = ""):
        message = f"{entity_type} {entity_id} not found"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, code="NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id
