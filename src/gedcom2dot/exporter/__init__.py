"""
Exporter package.

Re-exports the DOT writer used by the pipeline.
"""

from __future__ import annotations

from .dot_exporter import DotExporter, DotStyle, EmitStats, dot_escape, export_dot

__all__ = ["DotExporter", "DotStyle", "EmitStats", "dot_escape", "export_dot"]
