from pathlib import Path
import json

import pytest
from click.testing import CliRunner

from sfecoder import __version__
from sfecoder.cli import cli


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def inputs(tmp_path: Path) -> dict[str, Path]:
    alphabet = tmp_path / "alphabet.txt"
    alphabet.write_text("+ 0.5\n- 0.5\n", encoding="utf-8")
    symbols = tmp_path / "symbols.txt"
    symbols.write_text("+ - +\n", encoding="utf-8")
    codes = tmp_path / "codes.txt"
    codes.write_text("01 11\n11\n", encoding="utf-8")
    return {"alphabet": alphabet, "symbols": symbols, "codes": codes, "base": tmp_path}


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_encode_success(cli_runner: CliRunner, inputs):
    result = cli_runner.invoke(
        cli, ["encode", "--alphabet", str(inputs["alphabet"]), "--sequence", str(inputs["symbols"])]
    )
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "01 11 01"
    assert "+: 01" in lines
    assert "Kraft inequality: 0.5000 PASS" in lines


def test_decode_success(cli_runner: CliRunner, inputs):
    result = cli_runner.invoke(
        cli, ["decode", "--alphabet", str(inputs["alphabet"]), "--sequence", str(inputs["codes"])]
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[0] == "+ - -"


def test_encode_output_file(cli_runner: CliRunner, inputs):
    out = inputs["base"] / "results" / "encoded.txt"
    result = cli_runner.invoke(
        cli,
        [
            "encode",
            "--alphabet",
            str(inputs["alphabet"]),
            "--sequence",
            str(inputs["symbols"]),
            "--output",
            str(out),
        ],
    )
    assert result.exit_code == 0, result.output
    assert "Results saved" in result.output
    content = out.read_text(encoding="utf-8")
    assert content.startswith("01 11 01\n\nCodewords:\n+: 01\n-: 11\n")


def test_encode_json(cli_runner: CliRunner, inputs):
    result = cli_runner.invoke(
        cli,
        [
            "encode",
            "--alphabet",
            str(inputs["alphabet"]),
            "--sequence",
            str(inputs["symbols"]),
            "--format",
            "json",
        ],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["output"] == ["01", "11", "01"]
    assert data["metrics"]["avg_length"] == pytest.approx(2.0)


def test_decode_json_to_file(cli_runner: CliRunner, inputs):
    out = inputs["base"] / "decoded.json"
    result = cli_runner.invoke(
        cli,
        [
            "decode",
            "--alphabet",
            str(inputs["alphabet"]),
            "--sequence",
            str(inputs["codes"]),
            "--format",
            "json",
            "--output",
            str(out),
        ],
    )
    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8"))["output"] == ["+", "-", "-"]


def test_encode_unknown_symbol(cli_runner: CliRunner, inputs):
    seq = inputs["base"] / "bad.txt"
    seq.write_text("+ *\n", encoding="utf-8")
    result = cli_runner.invoke(
        cli, ["encode", "--alphabet", str(inputs["alphabet"]), "--sequence", str(seq)]
    )
    assert result.exit_code == 1
    assert "not found" in result.output


def test_decode_unknown_code(cli_runner: CliRunner, inputs):
    seq = inputs["base"] / "bad.txt"
    seq.write_text("111\n", encoding="utf-8")
    result = cli_runner.invoke(
        cli, ["decode", "--alphabet", str(inputs["alphabet"]), "--sequence", str(seq)]
    )
    assert result.exit_code == 1
    assert "111" in result.output


def test_invalid_alphabet(cli_runner: CliRunner, inputs):
    bad = inputs["base"] / "bad_alphabet.txt"
    bad.write_text("+ 0.5\n+ 0.5\n", encoding="utf-8")
    result = cli_runner.invoke(
        cli, ["encode", "--alphabet", str(bad), "--sequence", str(inputs["symbols"])]
    )
    assert result.exit_code == 1
    assert "more than once" in result.output


def test_empty_sequence(cli_runner: CliRunner, inputs):
    empty = inputs["base"] / "empty.txt"
    empty.write_text("  \n", encoding="utf-8")
    result = cli_runner.invoke(
        cli, ["encode", "--alphabet", str(inputs["alphabet"]), "--sequence", str(empty)]
    )
    assert result.exit_code == 1
    assert "empty" in result.output


def test_missing_file(cli_runner: CliRunner, inputs):
    result = cli_runner.invoke(
        cli,
        ["encode", "--alphabet", str(inputs["base"] / "nope.txt"), "--sequence", str(inputs["symbols"])],
    )
    assert result.exit_code != 0


def test_table_command(cli_runner: CliRunner, inputs):
    result = cli_runner.invoke(cli, ["table", "--alphabet", str(inputs["alphabet"])])
    assert result.exit_code == 0, result.output
    assert "+: 01" in result.output
    assert "Entropy: 1.0000 bits" in result.output


def test_table_command_json(cli_runner: CliRunner, inputs):
    result = cli_runner.invoke(cli, ["table", "--alphabet", str(inputs["alphabet"]), "--format", "json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [row["codeword"] for row in data["codewords"]] == ["01", "11"]
