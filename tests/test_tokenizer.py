# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom2dot.core.exceptions import InputFormatError
from gedcom2dot.loader import GedcomSyntaxError, tokenize_file, tokenize_line, tokenize_lines
from gedcom2dot.utils import mock_file_path


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_link_value_keeps_pointer_text() -> None:
    token = tokenize_line("1 FAMC @F2@", lineno=4)
    assert token.pointer is None
    assert token.tag == "FAMC"
    assert token.value == "@F2@"


def test_tokenize_line_name_value_is_verbatim() -> None:
    token = tokenize_line("1 NAME John /Smith/\r\n", lineno=2)
    assert token.value == "John /Smith/"


def test_tokenize_line_splits_tag_from_value_on_tabs() -> None:
    token = tokenize_line("1 NAME\tJohn /Smith/", lineno=2)
    assert token.tag == "NAME"
    assert token.value == "John /Smith/"


def test_tokenize_line_with_bom_on_first_line() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_accepts_indented_lines_and_lowercase_tags() -> None:
    token = tokenize_line("   2 date 1 JAN 1900", lineno=9)
    assert token.level == 2
    assert token.tag == "DATE"
    assert token.value == "1 JAN 1900"


def test_tokenize_line_invalid_level_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("X HEAD", lineno=1)


def test_tokenize_line_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 ", lineno=1)


def test_tokenize_line_pointer_without_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 @I1@", lineno=1)


def test_syntax_error_is_an_input_format_error() -> None:
    with pytest.raises(InputFormatError) as info:
        tokenize_line("nonsense", lineno=3)
    assert info.value.exit_code == 5


def test_tokenize_lines_skips_blank_lines_and_numbers_lines() -> None:
    tokens = list(tokenize_lines(["0 HEAD\n", "\n", "0 TRLR\n"]))
    assert [t.tag for t in tokens] == ["HEAD", "TRLR"]
    assert [t.lineno for t in tokens] == [1, 3]


def test_tokenize_file_reads_mock_file() -> None:
    tokens = list(tokenize_file(mock_file_path("family.ged")))

    assert tokens[0].level == 0
    assert tokens[0].tag == "HEAD"
    assert tokens[-1].tag == "TRLR"


def test_tokenize_file_missing_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list(tokenize_file(tmp_path / "missing.ged"))
