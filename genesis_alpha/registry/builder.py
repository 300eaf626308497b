"""Build validator entries from raw form fields."""

import re
from typing import Optional

from ..crypto import parse_pub_key
from ..models import GenesisValidator
from ..models.amino import INT64_MAX, INT64_MIN
from .errors import ValidationError

INCORRECT_FIELDS = "incorrect validator fields"

_POWER_RE = re.compile(r"[+-]?[0-9]+")

# digits in INT64_MAX
_MAX_POWER_DIGITS = 19


def _parse_power(raw_power: str) -> int:
    # int() would also accept surrounding whitespace and digit separators
    if not _POWER_RE.fullmatch(raw_power):
        raise ValidationError(f"failed to parse power: invalid syntax {raw_power!r}")
    if len(raw_power.lstrip("+-").lstrip("0")) > _MAX_POWER_DIGITS:
        raise ValidationError(f"failed to parse power: {raw_power[:32]!r}... is out of range")
    power = int(raw_power, 10)

    if not INT64_MIN <= power <= INT64_MAX:
        raise ValidationError(f"failed to parse power: {raw_power!r} is out of range")
    if power < 0:
        raise ValidationError("power can't be negative")
    return power


def build_validator(
    raw_pub_key: str,
    raw_power: str,
    raw_name: str
) -> Optional[GenesisValidator]:
    """
    Build a validator entry from raw field values.

    Args:
        raw_pub_key: Tagged public key JSON
        raw_power: Voting power, base-10
        raw_name: Display name, used verbatim

    Returns:
        The validator, or None if all three fields are empty

    Raises:
        ValidationError: If only some fields are filled in, or a field
            does not parse
    """
    fields = (raw_pub_key, raw_power, raw_name)
    if not any(fields):
        return None
    if not all(fields):
        raise ValidationError(INCORRECT_FIELDS)

    power = _parse_power(raw_power)

    try:
        pub_key = parse_pub_key(raw_pub_key)
    except ValueError as e:
        raise ValidationError(f"failed to parse pub_key: {e}") from e

    return GenesisValidator(pub_key=pub_key, power=power, name=raw_name)


def require_validator(raw_pub_key: str, raw_power: str, raw_name: str) -> GenesisValidator:
    """Like build_validator(), but an omitted validator is an error too."""
    validator = build_validator(raw_pub_key, raw_power, raw_name)
    if validator is None:
        raise ValidationError(INCORRECT_FIELDS)
    return validator
