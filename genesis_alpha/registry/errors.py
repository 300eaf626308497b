"""Errors raised by the genesis registry.

Every error carries a human-readable reason meant to be shown to the
caller as is. None of them is transient, so none should be retried.
"""


class GenesisError(Exception):
    """Base class for registry errors."""


class ValidationError(GenesisError, ValueError):
    """Caller input is invalid (chain ID, validator fields, pub key)."""


class NotFoundError(GenesisError, LookupError):
    """No genesis document exists for a chain ID."""

    def __init__(self, chain_id: str):
        self.chain_id = chain_id
        super().__init__(f"genesis with such chain ID {chain_id} not found")


class ConflictError(GenesisError):
    """The chain ID (or validator key) is already taken."""


class SerializationError(GenesisError):
    """A stored document cannot be rendered as JSON."""
