"""Field types following Tendermint's amino JSON conventions.

Amino encodes 64-bit integers as decimal strings (JavaScript cannot hold
them losslessly) and byte slices that are hashes as upper-case hex.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _hex_to_bytes(value: Any) -> Any:
    if isinstance(value, str):
        return bytes.fromhex(value)
    return value


Int64 = Annotated[
    int,
    Field(ge=INT64_MIN, le=INT64_MAX),
    PlainSerializer(lambda v: str(v), return_type=str, when_used="json"),
]

HexBytes = Annotated[
    bytes,
    BeforeValidator(_hex_to_bytes),
    PlainSerializer(lambda v: v.hex().upper(), return_type=str, when_used="json"),
]
