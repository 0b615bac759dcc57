"""Custom exceptions for reorderable section list operations."""


class ReorderServiceError(Exception):
    """Base exception for reorderable section list errors."""

    pass


class ValidationError(ReorderServiceError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class ContractViolationError(ValidationError):
    """Raised when a move breaks the caller contract (bad index, offset or header drag)."""

    pass


class NotFoundError(ReorderServiceError):
    """Raised when a list is not found."""

    def __init__(self, resource_type: str, resource_id: str):
        message = f"{resource_type} with ID '{resource_id}' not found"
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateError(ReorderServiceError):
    """Raised when attempting to create a duplicate resource."""

    def __init__(self, resource_type: str, field: str, value: str):
        message = f"{resource_type} with {field} '{value}' already exists"
        super().__init__(message)
        self.resource_type = resource_type
        self.field = field
        self.value = value
