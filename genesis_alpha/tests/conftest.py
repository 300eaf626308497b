"""Shared fixtures."""

import pytest

from genesis_alpha.crypto import generate_keypair, pub_key_to_json
from genesis_alpha.registry import GenesisRegistry
from genesis_alpha.web import GenesisService


@pytest.fixture
def pub_key_json():
    """Tagged JSON of a fresh Ed25519 validator key."""
    return pub_key_to_json(generate_keypair().pub_key)


@pytest.fixture
def registry():
    """Empty genesis registry."""
    return GenesisRegistry()


@pytest.fixture
def client(registry):
    """Flask test client backed by the registry fixture."""
    service = GenesisService(registry)
    service.app.config['TESTING'] = True
    return service.app.test_client()
