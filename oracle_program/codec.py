# oracle_program/codec.py
"""
Fixed-width result codec.

All numeric results cross the host boundary as 8-byte little-endian
unsigned integers.
"""

import math

from oracle_program.errors import DecodeError

RESULT_SIZE = 8
U64_MAX = 2 ** 64 - 1


def encode_u64(value: int) -> bytes:
    if value < 0 or value > U64_MAX:
        raise DecodeError(f"value {value} does not fit in an unsigned 64-bit integer")
    return int(value).to_bytes(RESULT_SIZE, "little")


def decode_u64(data: bytes) -> int:
    if len(data) != RESULT_SIZE:
        raise DecodeError(f"expected {RESULT_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, "little")


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero (not banker's rounding)."""
    if math.isnan(x) or math.isinf(x):
        raise DecodeError(f"cannot round non-finite value {x}")
    return int(math.copysign(math.floor(abs(x) + 0.5), x))
