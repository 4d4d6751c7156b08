"""Tests for host-facing value types."""

import pytest

from oracle_program.codec import encode_u64
from oracle_program.errors import DecodeError, EmptyInputError, FetchError, OracleError
from oracle_program.models import Reveal, VmResult


def test_reveal_from_camel_case():
    r = Reveal.from_dict({"exitCode": 0, "gasUsed": 12, "inConsensus": True, "result": "4800000000000000"})
    assert r == Reveal(exit_code=0, gas_used=12, in_consensus=True, result=encode_u64(72))


def test_reveal_defaults_out_of_consensus():
    assert Reveal.from_dict({"result": ""}).in_consensus is False


def test_vm_result_failure():
    res = VmResult.failure(FetchError("HTTP 500"))
    assert res.exit_code == 1
    assert res.result == b""
    assert res.to_dict() == {"exit_code": 1, "result": "", "value": None, "error": "HTTP 500"}


def test_vm_result_success():
    assert VmResult.success(encode_u64(60)).to_dict()["value"] == 60


def test_error_taxonomy():
    for cls in (FetchError, DecodeError, EmptyInputError):
        assert issubclass(cls, OracleError)
        assert cls.exit_code == 1


@pytest.mark.parametrize("flag", ["false", "true", 0, 1, None])
def test_reveal_consensus_flag_must_be_bool(flag):
    with pytest.raises(ValueError):
        Reveal.from_dict({"inConsensus": flag, "result": encode_u64(90).hex()})


@pytest.mark.parametrize("entry", [[72], 72, "4800000000000000", None])
def test_reveal_entry_must_be_object(entry):
    with pytest.raises(ValueError):
        Reveal.from_dict(entry)


def test_reveal_result_type():
    with pytest.raises(ValueError):
        Reveal.from_dict({"in_consensus": True, "result": 72})


def test_vm_result_value_only_for_full_report():
    assert VmResult.success(b"\x01\x02").to_dict()["value"] is None
