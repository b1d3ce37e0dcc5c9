from __future__ import annotations

import pytest

from gedcom2dot.labels import UNKNOWN_PLACEHOLDER, compact_label


@pytest.mark.parametrize(
    "raw, expected",
    [
        # surname delimiters are dropped and the surname stays inline
        ("John/Robert/Smith", "JohnRobertSmith"),
        ("John /Smith/", "John\nSmith"),
        # bracketed unknown names become the placeholder
        ("(Unknown) /Lee/", "(....)\nLee"),
        ("(Unknown) Smith", "(....)"),
        # middle names become initials
        ("Mary Jane Smith", "Mary\nJ.\nSmith"),
        ("Mary Jane /Doe/", "Mary\nJ.\nDoe"),
        ("john quincy adams", "john\nQ.\nadams"),
        ("Mary   Jane  Smith", "Mary\nJ.\nSmith"),
        # a leading title protects the following name
        ("Ompu Siregar Manalu", "Ompu\nSiregar\nManalu"),
        ("Ompu Siregar Tua Manalu", "Ompu\nSiregar\nT.\nManalu"),
        ("Datu Raja /Batak/", "Datu\nRaja\nBatak"),
        # consecutive initials share a line
        ("John Ronald Reuel Tolkien", "John\nR.R.\nTolkien"),
        ("A. B. Smith", "A.B.\nSmith"),
        # two or fewer names are never abbreviated
        ("Cher", "Cher"),
        ("Ompu Manalu", "Ompu\nManalu"),
        ("", ""),
    ],
)
def test_compact_label(raw, expected):
    assert compact_label(raw) == expected


def test_title_is_only_honoured_in_first_position():
    assert compact_label("Sri Ompu Siregar Manalu") == "Sri\nO.S.\nManalu"


def test_custom_title_list():
    assert compact_label("Sir Walter Scott") == "Sir\nW.\nScott"
    assert compact_label("Sir Walter Scott", titles=("Sir",)) == "Sir\nWalter\nScott"


def test_none_name_gives_empty_label():
    assert compact_label(None) == ""


def test_placeholder_constant():
    assert compact_label("(unknown)").startswith(UNKNOWN_PLACEHOLDER)


def test_compaction_is_deterministic():
    raw = "Anna Maria Louisa /Berg/"
    assert compact_label(raw) == compact_label(raw) == "Anna\nM.L.\nBerg"
