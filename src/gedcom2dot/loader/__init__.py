# src/gedcom2dot/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    tokens = tokenize_file("family.ged")
    for event in iter_field_events(tokens):
        ...
"""

from __future__ import annotations

from .record_stream import END_KINDS, FieldEvent, FieldKind, iter_field_events
from .tokenizer import GedcomSyntaxError, Token, tokenize_file, tokenize_line, tokenize_lines

__all__ = [
    "END_KINDS",
    "FieldEvent",
    "FieldKind",
    "GedcomSyntaxError",
    "Token",
    "iter_field_events",
    "tokenize_file",
    "tokenize_line",
    "tokenize_lines",
]
