"""Validator keys for Genesis Alpha."""

from .keys import (
    ED25519_TYPE,
    SECP256K1_TYPE,
    Ed25519PubKey,
    Secp256k1PubKey,
    PubKey,
    parse_pub_key,
    pub_key_to_json,
    KeyPair,
    generate_keypair,
    keypair_from_private_key,
    save_keypair,
    load_private_key,
)

__all__ = [
    "ED25519_TYPE",
    "SECP256K1_TYPE",
    "Ed25519PubKey",
    "Secp256k1PubKey",
    "PubKey",
    "parse_pub_key",
    "pub_key_to_json",
    "KeyPair",
    "generate_keypair",
    "keypair_from_private_key",
    "save_keypair",
    "load_private_key",
]
