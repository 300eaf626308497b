"""Data models and schemas for Genesis Alpha."""

from .consensus import (
    BlockSizeParams,
    TxSizeParams,
    BlockGossipParams,
    EvidenceParams,
    ConsensusParams,
    default_consensus_params,
)
from .genesis import GenesisDocument, GenesisValidator, CHAIN_ID_PATTERN

__all__ = [
    "BlockSizeParams",
    "TxSizeParams",
    "BlockGossipParams",
    "EvidenceParams",
    "ConsensusParams",
    "default_consensus_params",
    "GenesisDocument",
    "GenesisValidator",
    "CHAIN_ID_PATTERN",
]
