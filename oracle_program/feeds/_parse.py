# feeds/_parse.py
"""Shared body-parsing helpers for feed modules."""

import json

from oracle_program.errors import DecodeError


def load_json(body: bytes, source: str):
    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"{source}: response is not valid JSON: {e}") from e


def walk(obj, path, source):
    """Follow a list of keys into nested dicts; any miss is a DecodeError."""
    for key in path:
        if not isinstance(obj, dict) or key not in obj:
            raise DecodeError(f"{source}: missing field {'.'.join(path)}")
        obj = obj[key]
    return obj


def number(obj, key, source):
    if not isinstance(obj, dict) or key not in obj:
        raise DecodeError(f"{source}: missing field {key}")
    v = obj[key]
    # bool is an int subclass
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise DecodeError(f"{source}: field {key} is not a number ({v!r})")
    return float(v)
