"""Genesis document registry and validator entry builder."""

from .errors import GenesisError, ValidationError, NotFoundError, ConflictError, SerializationError
from .builder import build_validator, require_validator
from .store import GenesisRegistry

__all__ = [
    "GenesisError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "SerializationError",
    "build_validator",
    "require_validator",
    "GenesisRegistry",
]
