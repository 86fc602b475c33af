"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Person related errors
# ============================================================================


class InvalidPersonError(DomainError):
    """Raised when a person field is missing or violates its invariants."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid person field '{field}': {reason}")
        self.field = field
        self.reason = reason


class MissingIdentifierError(DomainError):
    """Raised when an operation needs a store-assigned id the person lacks."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation} a person that has no identifier.")
        self.operation = operation
