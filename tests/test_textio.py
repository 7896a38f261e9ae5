from pathlib import Path

import pytest

from sfecoder.errors import (
    DuplicateSymbolError,
    EmptySequenceError,
    FormatError,
    InvalidProbabilityError,
    InvalidSymbolError,
    InvalidTokenError,
    ProbabilityRangeError,
    ProbabilitySumError,
)
from sfecoder.textio import (
    format_tokens,
    parse_alphabet,
    parse_sequence,
    read_alphabet,
    read_sequence,
    write_json,
    write_output,
)


def test_parse_alphabet_basic():
    ab = parse_alphabet("+ 0.5\n- 0.25\n* 0.25\n")
    assert ab.pairs() == [("+", 0.5), ("-", 0.25), ("*", 0.25)]


def test_parse_alphabet_tabs_and_blank_lines():
    ab = parse_alphabet("\n+\t0.5\n\n   \n-   \t 0.5\n")
    assert ab.symbols == ("+", "-")


def test_parse_alphabet_wrong_field_count():
    with pytest.raises(FormatError) as exc:
        parse_alphabet("+ 0.5\n- 0.25 extra\n")
    assert exc.value.lineno == 2


def test_parse_alphabet_single_field():
    with pytest.raises(FormatError):
        parse_alphabet("+\n")


def test_parse_alphabet_invalid_symbol():
    with pytest.raises(InvalidSymbolError):
        parse_alphabet("? 0.5\n- 0.5\n")


@pytest.mark.parametrize("value", ["abc", "0,5", "1/2", "0_5", "０.５", "nan", "inf"])
def test_parse_alphabet_invalid_probability(value):
    with pytest.raises(InvalidProbabilityError) as exc:
        parse_alphabet(f"+ {value}\n- 0.5\n")
    assert exc.value.value == value


@pytest.mark.parametrize("value", ["0.5", ".5", "5e-1", "+0.5", "5.E-1"])
def test_parse_alphabet_decimal_forms(value):
    ab = parse_alphabet(f"+ {value}\n- 0.5\n")
    assert ab.probability_of("+") == pytest.approx(0.5)


def test_parse_alphabet_duplicate():
    with pytest.raises(DuplicateSymbolError):
        parse_alphabet("+ 0.5\n+ 0.5\n")


def test_parse_alphabet_range_checked_before_sum():
    with pytest.raises(ProbabilityRangeError):
        parse_alphabet("+ 1.5\n- -0.5\n")


def test_parse_alphabet_sum():
    with pytest.raises(ProbabilitySumError):
        parse_alphabet("+ 0.5\n- 0.4\n")


def test_parse_alphabet_empty():
    with pytest.raises(ProbabilitySumError):
        parse_alphabet("")


def test_parse_sequence_mixed_tokens():
    tokens = parse_sequence("+ - *\n\t01  11\n\n= 0\n")
    assert tokens == ["+", "-", "*", "01", "11", "=", "0"]


@pytest.mark.parametrize("bad", ["abc", "012", "++", "+-"])
def test_parse_sequence_invalid_token(bad):
    with pytest.raises(InvalidTokenError) as exc:
        parse_sequence(f"+ {bad} -", source="seq.txt")
    assert exc.value.token == bad
    assert "seq.txt" in str(exc.value)


@pytest.mark.parametrize("text", ["", "   ", "\n\t\n  \n"])
def test_parse_sequence_empty(text):
    with pytest.raises(EmptySequenceError):
        parse_sequence(text)


def test_read_files(tmp_path: Path):
    a = tmp_path / "alphabet.txt"
    s = tmp_path / "sequence.txt"
    a.write_text("+ 0.5\n- 0.5\n", encoding="utf-8")
    s.write_text("+ -\n-\n", encoding="utf-8")
    assert read_alphabet(a).symbols == ("+", "-")
    assert read_sequence(s) == ["+", "-", "-"]


def test_read_empty_sequence_file(tmp_path: Path):
    s = tmp_path / "empty.txt"
    s.write_text("", encoding="utf-8")
    with pytest.raises(EmptySequenceError):
        read_sequence(s)


def test_missing_file_propagates(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_alphabet(tmp_path / "missing.txt")


def test_format_tokens():
    assert format_tokens(["01", "11"]) == "01 11"
    assert format_tokens(["+", "-"], separator=",") == "+,-"
    assert format_tokens([]) == ""


def test_write_output_overwrites(tmp_path: Path):
    p = tmp_path / "out" / "result.txt"
    write_output(p, "first", "report")
    write_output(p, "01 11", "Codewords:\n+: 01\n")
    assert p.read_text(encoding="utf-8") == "01 11\n\nCodewords:\n+: 01\n"


def test_write_json(tmp_path: Path):
    p = tmp_path / "out" / "result.json"
    write_json(p, {"output": ["+", "="], "symbol": "÷"})
    content = p.read_text(encoding="utf-8")
    assert content.endswith("\n")
    assert '"symbol": "÷"' in content
