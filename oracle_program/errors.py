# oracle_program/errors.py
"""
Error taxonomy shared by the execution and tally stages.

Every error maps to exit code 1 at the stage boundary. Nothing is retried
here; retry and re-quorum policy belongs to the host.
"""


class OracleError(Exception):
    exit_code = 1


class FetchError(OracleError):
    """Non-200 status or transport failure during a price lookup."""


class DecodeError(OracleError):
    """Malformed provider body, or a payload that is not a valid u64."""


class EmptyInputError(OracleError):
    """Tally invoked with zero in-consensus reveals."""
