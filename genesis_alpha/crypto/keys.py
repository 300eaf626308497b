"""Validator public keys and Ed25519 key pair management."""

import base64
import binascii
import hashlib
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Literal, Optional, Union

import nacl.signing
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

ED25519_TYPE = "tendermint/PubKeyEd25519"
SECP256K1_TYPE = "tendermint/PubKeySecp256k1"

SECP256K1_KEY_SIZE = 33


def _decode_b64(value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as e:
        raise ValueError(f"value is not valid base64: {e}") from e


class _BasePubKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    value: str

    @property
    def raw(self) -> bytes:
        """Raw key bytes."""
        return base64.b64decode(self.value)

    @property
    def address(self) -> str:
        """
        Short identifier of the key: the first 20 bytes of its SHA-256,
        upper-case hex. Only used for display.
        """
        return hashlib.sha256(self.raw).digest()[:20].hex().upper()


class Ed25519PubKey(_BasePubKey):
    """Ed25519 validator key."""
    type: Literal["tendermint/PubKeyEd25519"] = ED25519_TYPE
    value: str = Field(..., description="Base64-encoded 32-byte key")

    @field_validator("value")
    @classmethod
    def _check_key(cls, v: str) -> str:
        # VerifyKey rejects anything that is not exactly 32 bytes
        nacl.signing.VerifyKey(_decode_b64(v))
        return v


class Secp256k1PubKey(_BasePubKey):
    """Compressed secp256k1 validator key."""
    type: Literal["tendermint/PubKeySecp256k1"] = SECP256K1_TYPE
    value: str = Field(..., description="Base64-encoded 33-byte compressed key")

    @field_validator("value")
    @classmethod
    def _check_key(cls, v: str) -> str:
        key_bytes = _decode_b64(v)
        if len(key_bytes) != SECP256K1_KEY_SIZE:
            raise ValueError(
                f"secp256k1 key must be {SECP256K1_KEY_SIZE} bytes, got {len(key_bytes)}"
            )
        if key_bytes[0] not in (0x02, 0x03):
            raise ValueError("secp256k1 key must be in compressed form")
        return v


PubKey = Annotated[
    Union[Ed25519PubKey, Secp256k1PubKey],
    Field(discriminator="type"),
]

_pub_key_adapter = TypeAdapter(PubKey)


def parse_pub_key(raw_json: Union[str, bytes]) -> PubKey:
    """
    Parse a tagged public key, e.g. the output of `tendermint show_validator`.

    Args:
        raw_json: JSON of the form {"type": "<tag>", "value": "<base64>"}

    Returns:
        Typed public key

    Raises:
        ValueError: If the JSON is malformed, the tag is unknown or the
            key material is invalid
    """
    try:
        return _pub_key_adapter.validate_json(raw_json)
    except PydanticValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        if location:
            raise ValueError(f"{location}: {error['msg']}") from e
        raise ValueError(error["msg"]) from e


def pub_key_to_json(pub_key: PubKey) -> str:
    """Render a public key in its tagged JSON form."""
    return json.dumps(pub_key.model_dump(mode="json"), indent=2)


@dataclass
class KeyPair:
    """Ed25519 validator key pair."""
    private_key: nacl.signing.SigningKey
    public_key: nacl.signing.VerifyKey

    @property
    def pub_key(self) -> Ed25519PubKey:
        """Tagged public key."""
        return Ed25519PubKey(value=base64.b64encode(bytes(self.public_key)).decode('utf-8'))

    @property
    def private_key_b64(self) -> str:
        """Get base64-encoded private key seed."""
        return base64.b64encode(bytes(self.private_key)).decode('utf-8')


def generate_keypair() -> KeyPair:
    """
    Generate a new Ed25519 key pair.

    Returns:
        KeyPair: New validator key pair
    """
    return keypair_from_private_key(nacl.signing.SigningKey.generate())


def keypair_from_private_key(private_key: nacl.signing.SigningKey) -> KeyPair:
    """Complete a private key to a key pair."""
    return KeyPair(private_key=private_key, public_key=private_key.verify_key)


def save_keypair(keypair: KeyPair, base_path: str, name: Optional[str] = None) -> tuple[Path, Path]:
    """
    Save key pair to files.

    The public half is written as tagged JSON, ready to be pasted into the
    add-validator form.

    Args:
        keypair: Key pair to save
        base_path: Base path for key files (without extension)
        name: Optional validator name recorded in the private key file

    Returns:
        Tuple of (private_key_path, public_key_path)
    """
    base = Path(base_path)
    base.parent.mkdir(parents=True, exist_ok=True)

    private_path = base.with_suffix('.key')
    public_path = base.with_suffix('.pub')

    with open(private_path, 'w') as f:
        f.write("# Ed25519 Validator Private Key\n")
        if name:
            f.write(f"# Validator: {name}\n")
        f.write(f"{keypair.private_key_b64}\n")

    with open(public_path, 'w') as f:
        f.write(pub_key_to_json(keypair.pub_key))
        f.write("\n")

    private_path.chmod(0o600)

    return private_path, public_path


def load_private_key(path: str) -> nacl.signing.SigningKey:
    """
    Load private key from file.

    Args:
        path: Path to private key file

    Returns:
        SigningKey: Ed25519 private key
    """
    with open(path, 'r') as f:
        key_lines = [line.strip() for line in f if not line.startswith('#')]
        key_b64 = ''.join(key_lines)

    return nacl.signing.SigningKey(base64.b64decode(key_b64))
