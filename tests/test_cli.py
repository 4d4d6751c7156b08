"""Tests for the command-line runner."""

import json

import pytest

from oracle_program.__main__ import build_parser, load_reveals, main
from oracle_program.codec import encode_u64


def _write_reveals(tmp_path, reveals):
    path = tmp_path / "reveals.json"
    path.write_text(json.dumps(reveals))
    return str(path)


class TestTallyCommand:

    def test_prints_median(self, tmp_path, capsys):
        path = _write_reveals(tmp_path, [
            {"exitCode": 0, "gasUsed": 0, "inConsensus": True, "result": encode_u64(v).hex()}
            for v in (71, 72, 73)
        ])
        assert main(["tally", path]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["value"] == 72

    def test_byte_list_results(self, tmp_path, capsys):
        path = _write_reveals(tmp_path, [
            {"in_consensus": True, "result": list(encode_u64(v))} for v in (72, 90, 73)
        ])
        assert main(["tally", path]) == 0
        assert json.loads(capsys.readouterr().out)["value"] == 73

    def test_failed_tally_exit_code(self, tmp_path, capsys):
        path = _write_reveals(tmp_path, [{"in_consensus": True, "result": "010203"}])
        assert main(["tally", path]) == 1

    def test_unreadable_file(self, tmp_path):
        assert main(["tally", str(tmp_path / "missing.json")]) == 2

    def test_non_object_entry(self, tmp_path, capsys):
        path = _write_reveals(tmp_path, [[72]])
        assert main(["tally", path]) == 2
        assert capsys.readouterr().out == ""

    def test_string_consensus_flag_rejected(self, tmp_path):
        path = _write_reveals(tmp_path, [
            {"inConsensus": True, "result": encode_u64(72).hex()},
            {"inConsensus": "false", "result": encode_u64(90).hex()},
            {"inConsensus": True, "result": encode_u64(73).hex()},
        ])
        assert main(["tally", path]) == 2

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "reveals.json"
        path.write_text("{}")
        with pytest.raises(ValueError):
            load_reveals(str(path))


class TestParser:

    def test_execute_defaults(self):
        args = build_parser().parse_args(["execute"])
        assert args.input == ""
        assert args.variant is None

    def test_rejects_unknown_variant(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["execute", "--variant", "twap"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
