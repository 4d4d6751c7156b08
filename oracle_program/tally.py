# oracle_program/tally.py
"""
Tally stage: reduce a reveal set to one value via median.

  1. Drop reveals that are not in consensus
  2. Empty set -> exit 1
  3. Any result that is not exactly 8 bytes -> exit 1 for the whole batch
  4. Median of the decoded values; even counts take the lower middle

Pure function of its input. Reads no configuration.
"""

import logging
import statistics

from oracle_program.codec import decode_u64, encode_u64
from oracle_program.errors import EmptyInputError, OracleError
from oracle_program.models import VmResult

log = logging.getLogger("oracle-program.tally")


def median_low(values):
    if not values:
        raise EmptyInputError("no values to aggregate")
    return statistics.median_low(values)


def aggregate(reveals) -> int:
    in_consensus = [r for r in reveals if r.in_consensus]
    if not in_consensus:
        raise EmptyInputError(
            f"no reveals in consensus ({len(reveals)} received)"
        )
    values = [decode_u64(r.result) for r in in_consensus]
    return median_low(values)


def tally_phase(inputs=b"", reveals=()) -> VmResult:
    reveals = list(reveals)
    try:
        median = aggregate(reveals)
    except OracleError as e:
        log.error(f"Tally failed: {e}")
        return VmResult.failure(e)
    log.info(f"Tally median: {median} from {sum(r.in_consensus for r in reveals)}/{len(reveals)} reveals")
    return VmResult.success(encode_u64(median))
