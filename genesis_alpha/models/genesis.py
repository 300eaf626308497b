"""Genesis document data models."""

import json
from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..crypto.keys import PubKey
from .amino import HexBytes, Int64
from .consensus import ConsensusParams, default_consensus_params
from .rawjson import indent_raw_json, split_object

CHAIN_ID_PATTERN = r"^[a-zA-Z0-9_-]+$"


class GenesisValidator(BaseModel):
    """One validator of the initial validator set."""
    model_config = ConfigDict(frozen=True)

    pub_key: PubKey = Field(..., description="Tagged validator public key")
    power: Int64 = Field(..., ge=0, description="Voting power")
    name: str = Field(..., min_length=1, description="Display name")


class GenesisDocument(BaseModel):
    """
    Genesis document - the bootstrap configuration of a chain.

    A node loads it once, at first startup. Field order here is the field
    order of the serialized document.
    """
    genesis_time: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Chain start time"
    )
    chain_id: str = Field(..., min_length=1, pattern=CHAIN_ID_PATTERN, description="Unique chain identifier")
    consensus_params: ConsensusParams = Field(
        default_factory=default_consensus_params,
        description="Consensus parameters"
    )
    validators: List[GenesisValidator] = Field(
        default_factory=list,
        description="Initial validator set, highest power first"
    )
    app_hash: HexBytes = Field(default=b"", description="Expected initial application hash")
    app_state: Optional[str] = Field(
        default=None,
        description="Raw JSON of the initial application state"
    )

    @field_serializer("genesis_time")
    def _serialize_genesis_time(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")

    def sort_validators(self):
        """Order validators by descending power; equal powers keep their order."""
        self.validators.sort(key=lambda v: v.power, reverse=True)

    def to_canonical_json(self) -> bytes:
        """
        Serialize to the canonical, indented JSON a node loads at startup.

        The raw app state is embedded verbatim (only re-indented) and
        omitted when empty.

        Raises:
            ValueError: If the stored app state is not valid JSON
        """
        body = json.dumps(self.model_dump(mode='json', exclude={"app_state"}), indent=2)
        if self.app_state:
            app_state = indent_raw_json(self.app_state, level=1)
            # body ends with "\n}"
            body = f'{body[:-2]},\n  "app_state": {app_state}\n}}'
        return body.encode('utf-8')

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "GenesisDocument":
        """
        Load a document previously produced by to_canonical_json().

        Raises:
            ValueError: If raw is not a valid genesis document
        """
        if isinstance(raw, bytes):
            raw = raw.decode('utf-8')
        members = split_object(raw)
        data = {key: value for key, (value, _) in members.items()}
        if "app_state" in members:
            data["app_state"] = members["app_state"][1]
        return cls.model_validate(data)
