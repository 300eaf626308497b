"""Web front end for Genesis Alpha."""

from .server import GenesisService, create_app

__all__ = ["GenesisService", "create_app"]
