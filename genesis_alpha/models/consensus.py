"""Consensus parameter models."""

from pydantic import BaseModel, Field

from .amino import Int64


class BlockSizeParams(BaseModel):
    """Limits on the size of a block."""
    max_bytes: int = Field(default=22020096, description="Maximum block size in bytes")
    max_txs: int = Field(default=10000, description="Maximum number of transactions per block")
    max_gas: Int64 = Field(default=-1, description="Maximum gas per block (-1 means unlimited)")


class TxSizeParams(BaseModel):
    """Limits on the size of a single transaction."""
    max_bytes: int = Field(default=10240, description="Maximum transaction size in bytes")
    max_gas: Int64 = Field(default=-1, description="Maximum gas per transaction (-1 means unlimited)")


class BlockGossipParams(BaseModel):
    """How blocks are split when gossiped between peers."""
    block_part_size_bytes: int = Field(default=65536, description="Size of a block part in bytes")


class EvidenceParams(BaseModel):
    """Evidence handling."""
    max_age: Int64 = Field(default=100000, description="Maximum age of evidence, in blocks")


class ConsensusParams(BaseModel):
    """
    Consensus parameters of a chain.

    Every genesis document gets the defaults; changing them is not supported.
    """
    block_size_params: BlockSizeParams = Field(default_factory=BlockSizeParams)
    tx_size_params: TxSizeParams = Field(default_factory=TxSizeParams)
    block_gossip_params: BlockGossipParams = Field(default_factory=BlockGossipParams)
    evidence_params: EvidenceParams = Field(default_factory=EvidenceParams)


def default_consensus_params() -> ConsensusParams:
    """Return a fresh copy of the system-wide default consensus parameters."""
    return ConsensusParams()
