# oracle_program/models.py
"""
Value types passed between the host and the two stages.
"""

from dataclasses import dataclass, field
from typing import Optional

from oracle_program.codec import RESULT_SIZE, decode_u64


@dataclass(frozen=True)
class MarketQuote:
    price: float
    percent_change_24h: float
    volume_24h: float


@dataclass(frozen=True)
class Reveal:
    """One node's execution output plus consensus metadata."""
    exit_code: int
    gas_used: int
    in_consensus: bool
    result: bytes

    @classmethod
    def from_dict(cls, d):
        """Build a reveal from decoded JSON. Raises ValueError on a malformed entry."""
        if not isinstance(d, dict):
            raise ValueError(f"reveal must be a JSON object, got {type(d).__name__}")

        # Accepts both the host's camelCase keys and snake_case.
        def pick(snake, camel, default=None):
            if snake in d:
                return d[snake]
            return d.get(camel, default)

        in_consensus = pick("in_consensus", "inConsensus", False)
        if not isinstance(in_consensus, bool):
            raise ValueError(f"in_consensus must be a boolean, got {in_consensus!r}")

        result = d.get("result", "")
        # hex string, or a list of byte values
        if isinstance(result, list):
            result = bytes(result)
        elif isinstance(result, str):
            result = bytes.fromhex(result)
        else:
            raise ValueError(f"result must be a hex string or byte list, got {result!r}")

        return cls(
            exit_code=int(pick("exit_code", "exitCode", 0)),
            gas_used=int(pick("gas_used", "gasUsed", 0)),
            in_consensus=in_consensus,
            result=result,
        )


@dataclass(frozen=True)
class VmResult:
    exit_code: int
    result: bytes = b""
    error: Optional[str] = field(default=None, compare=False)

    @classmethod
    def success(cls, result: bytes):
        return cls(exit_code=0, result=result)

    @classmethod
    def failure(cls, err: Exception):
        return cls(exit_code=getattr(err, "exit_code", 1), result=b"", error=str(err))

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    def to_dict(self):
        value = None
        if self.ok and len(self.result) == RESULT_SIZE:
            value = decode_u64(self.result)
        return {
            "exit_code": self.exit_code,
            "result": self.result.hex(),
            "value": value,
            "error": self.error,
        }
