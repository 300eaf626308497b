"""In-memory registry of genesis documents."""

import logging
import re
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..models import CHAIN_ID_PATTERN, GenesisDocument, GenesisValidator, default_consensus_params
from .errors import ConflictError, NotFoundError, SerializationError, ValidationError

logger = logging.getLogger(__name__)

_chain_id_re = re.compile(CHAIN_ID_PATTERN)


class GenesisRegistry:
    """
    Registry of genesis documents keyed by chain ID.

    A document is created once and afterwards only gains validators; it is
    never replaced or deleted. One lock guards the whole map, so every
    operation is atomic with respect to the others. Documents handed out
    are copies: changing them does not change the registry.
    """

    def __init__(self, allow_duplicate_pub_keys: bool = True):
        """
        Initialize an empty registry.

        Args:
            allow_duplicate_pub_keys: Accept a validator whose public key is
                already in the chain's validator set (default: True)
        """
        self.allow_duplicate_pub_keys = allow_duplicate_pub_keys

        # chain_id -> document
        self._documents: Dict[str, GenesisDocument] = {}
        self._lock = threading.Lock()

    def create(
        self,
        chain_id: str,
        validator: Optional[GenesisValidator] = None,
        app_hash: bytes = b"",
        app_state: Optional[str] = None
    ) -> GenesisDocument:
        """
        Create a new genesis document.

        Args:
            chain_id: Unique chain identifier
            validator: Optional first validator
            app_hash: Initial application hash, stored as is
            app_state: Raw application state JSON, stored as is

        Returns:
            The created document

        Raises:
            ValidationError: If the chain ID is empty or malformed
            ConflictError: If a document with this chain ID already exists
        """
        self.check_chain_id(chain_id)

        with self._lock:
            if chain_id in self._documents:
                raise ConflictError("chain already exists")

            document = GenesisDocument(
                genesis_time=datetime.now(timezone.utc),
                chain_id=chain_id,
                consensus_params=default_consensus_params(),
                validators=[validator] if validator is not None else [],
                app_hash=app_hash,
                app_state=app_state
            )
            self._documents[chain_id] = document
            snapshot = document.model_copy(deep=True)

        logger.info(
            f"Created genesis for chain {chain_id} "
            f"with {len(snapshot.validators)} validator(s)"
        )
        return snapshot

    @staticmethod
    def check_chain_id(chain_id: str):
        """
        Check that chain_id is usable as a key.

        Raises:
            ValidationError: If the chain ID is empty or malformed
        """
        if not chain_id:
            raise ValidationError("chainID is required")
        if not _chain_id_re.fullmatch(chain_id):
            raise ValidationError("invalid chainID")

    def add_validator(self, chain_id: str, validator: GenesisValidator) -> GenesisDocument:
        """
        Append a validator to an existing document.

        The validator set is re-sorted by descending power afterwards;
        validators with equal power stay in the order they were added.

        Args:
            chain_id: Chain to add the validator to
            validator: Validator built with build_validator()

        Returns:
            The updated document

        Raises:
            NotFoundError: If no document exists for chain_id
            ConflictError: If duplicate keys are disallowed and the key is
                already in the validator set
        """
        with self._lock:
            document = self._documents.get(chain_id)
            if document is None:
                raise NotFoundError(chain_id)

            if not self.allow_duplicate_pub_keys and any(
                v.pub_key == validator.pub_key for v in document.validators
            ):
                raise ConflictError("validator with such pub_key already exists")

            document.validators.append(validator)
            document.sort_validators()
            snapshot = document.model_copy(deep=True)

        logger.info(
            f"Added validator {validator.name} (power={validator.power}) "
            f"to chain {chain_id}, {len(snapshot.validators)} validator(s) total"
        )
        return snapshot

    def get(self, chain_id: str) -> GenesisDocument:
        """
        Look up a document.

        Raises:
            NotFoundError: If no document exists for chain_id
        """
        with self._lock:
            document = self._documents.get(chain_id)
            if document is None:
                logger.debug(f"Genesis for chain {chain_id} not found")
                raise NotFoundError(chain_id)
            return document.model_copy(deep=True)

    def list(self) -> List[str]:
        """Get all known chain IDs."""
        with self._lock:
            return list(self._documents.keys())

    def __contains__(self, chain_id: str) -> bool:
        with self._lock:
            return chain_id in self._documents

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    @staticmethod
    def serialize(document: GenesisDocument) -> bytes:
        """
        Serialize a document to canonical JSON.

        Raises:
            SerializationError: If the document's app state is not valid JSON
        """
        try:
            return document.to_canonical_json()
        except ValueError as e:
            raise SerializationError(f"failed to serialize genesis {document.chain_id}: {e}") from e
