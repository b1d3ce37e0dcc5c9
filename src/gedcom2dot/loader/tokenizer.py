# src/gedcom2dot/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from gedcom2dot.core.exceptions import InputFormatError


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the source file.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier on the record line, e.g. "@I1@".
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NAME", "FAMC".
        value: The line payload (may be empty). Link lines such as
            "1 FAMC @F1@" carry the referenced pointer here.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str


class GedcomSyntaxError(InputFormatError, ValueError):
    """Raised when a GEDCOM line cannot be split into level, pointer, tag and value."""


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    Required order:
        <level> [<pointer>] <tag> [<value>]

    Examples:
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "1 FAMC @F2@"
    """
    raw = _strip_eol(line)

    if lineno == 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    # Some exporters indent nested lines.
    raw = raw.lstrip(" \t")
    if not raw:
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    parts = raw.split(None, 1)
    if len(parts) == 1:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag (only level found) -> {raw!r}"
        )

    level_str, rest = parts
    if not level_str.isdigit():
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )

    pointer: Optional[str] = None
    if rest.startswith("@"):
        ptr_parts = rest.split(None, 1)
        if len(ptr_parts) == 1:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but no tag -> {raw!r}"
            )
        pointer, rest = ptr_parts

    tag_parts = rest.split(None, 1)
    tag = tag_parts[0]
    value = tag_parts[1] if len(tag_parts) == 2 else ""

    return Token(
        lineno=lineno,
        level=int(level_str),
        pointer=pointer,
        tag=tag.upper(),
        value=value,
    )


def tokenize_lines(lines: Iterable[str], start: int = 1) -> Iterator[Token]:
    """Yield a Token for every non-blank line; blank lines are skipped."""
    for lineno, raw_line in enumerate(lines, start=start):
        if not _strip_eol(raw_line).strip():
            continue
        yield tokenize_line(raw_line, lineno=lineno)


def tokenize_file(path: Union[str, Path]) -> Iterator[Token]:
    """
    Yield Token objects for every non-empty GEDCOM line in the given file.

    Raises:
        FileNotFoundError: if `path` does not exist.
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        yield from tokenize_lines(f)
