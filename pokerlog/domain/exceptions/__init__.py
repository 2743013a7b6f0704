"""Domain exceptions."""
from pokerlog.domain.exceptions.domain_errors import (
    DomainError,
    ValidationError,
    NotFoundError,
    ConflictError,
    InternalFault,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "InternalFault",
]
