"""Handling of raw JSON embedded in a genesis document.

The app state is opaque to us. It is re-indented character by character
and never decoded and re-encoded, so number text, key order and duplicate
keys reach the node exactly as they were entered.
"""

import json
from typing import Any, Dict, Tuple

_WHITESPACE = " \t\n\r"


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


_decoder = json.JSONDecoder(parse_constant=_reject_constant)


def loads_strict(raw: str) -> Any:
    """Like json.loads(), but NaN and Infinity are errors."""
    return _decoder.decode(raw)


def _skip_whitespace(raw: str, idx: int) -> int:
    while idx < len(raw) and raw[idx] in _WHITESPACE:
        idx += 1
    return idx


def indent_raw_json(raw: str, level: int = 0, indent: str = "  ") -> str:
    """
    Re-indent raw JSON the way json.dumps(indent=2) lays out its output.

    Args:
        raw: JSON text
        level: Indentation level of the value's first line
        indent: One level of indentation

    Returns:
        The same JSON value, with only whitespace changed

    Raises:
        ValueError: If raw is not valid JSON
    """
    loads_strict(raw)

    out = []
    depth = level
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch == '"':
            j = i + 1
            while raw[j] != '"':
                j += 2 if raw[j] == '\\' else 1
            out.append(raw[i:j + 1])
            i = j + 1
            continue
        if ch in _WHITESPACE:
            pass
        elif ch in "{[":
            j = _skip_whitespace(raw, i + 1)
            if raw[j] in "}]":
                out.append(ch + raw[j])
                i = j + 1
                continue
            depth += 1
            out.append(ch + "\n" + indent * depth)
        elif ch in "}]":
            depth -= 1
            out.append("\n" + indent * depth + ch)
        elif ch == ",":
            out.append(",\n" + indent * depth)
        elif ch == ":":
            out.append(": ")
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def split_object(raw: str) -> Dict[str, Tuple[Any, str]]:
    """
    Split a JSON object into its members, keeping each value's raw text.

    Returns:
        key -> (decoded value, raw value text); a repeated key keeps its
        last value, as json.loads() does

    Raises:
        ValueError: If raw is not a JSON object
    """
    members: Dict[str, Tuple[Any, str]] = {}
    idx = _skip_whitespace(raw, 0)
    if idx >= len(raw) or raw[idx] != "{":
        raise ValueError("expected a JSON object")

    idx = _skip_whitespace(raw, idx + 1)
    if idx < len(raw) and raw[idx] == "}":
        idx += 1
    else:
        while True:
            key, idx = _decoder.raw_decode(raw, idx)
            if not isinstance(key, str):
                raise ValueError(f"expected an object key at char {idx}")
            idx = _skip_whitespace(raw, idx)
            if idx >= len(raw) or raw[idx] != ":":
                raise ValueError(f"expected ':' at char {idx}")
            start = _skip_whitespace(raw, idx + 1)
            value, idx = _decoder.raw_decode(raw, start)
            members[key] = (value, raw[start:idx])

            idx = _skip_whitespace(raw, idx)
            if idx < len(raw) and raw[idx] == ",":
                idx = _skip_whitespace(raw, idx + 1)
                continue
            if idx < len(raw) and raw[idx] == "}":
                idx += 1
                break
            raise ValueError(f"expected ',' or '}}' at char {idx}")

    if _skip_whitespace(raw, idx) != len(raw):
        raise ValueError(f"extra data at char {idx}")
    return members
