"""Exception raised when an input violates a codec or verifier precondition."""


class DomainError(ValueError):
    """Raised when an input lies outside the domain of an operation."""
