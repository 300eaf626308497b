"""Service configuration."""

from pydantic import BaseModel, Field

ENV_PREFIX = "GENESIS_ALPHA_"


class ServiceConfig(BaseModel):
    """Settings of the web service, filled in from CLI options or environment."""
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=8080, ge=1, le=65535, description="Port to bind to")
    debug: bool = Field(default=False, description="Enable Flask debug mode")
    allow_duplicate_pub_keys: bool = Field(
        default=True,
        description="Accept a validator whose key is already in the chain's validator set"
    )
