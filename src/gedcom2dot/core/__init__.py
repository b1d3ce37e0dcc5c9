"""
Orchestration layer: error taxonomy, run context and the conversion pipeline.

``Pipeline`` is imported from ``gedcom2dot.core.pipeline`` directly to keep this
package importable from the lower layers.
"""

from gedcom2dot.core.exceptions import (
    ConfigurationError,
    Gedcom2DotError,
    InputFormatError,
    MissingInputError,
    RecordSequenceError,
    UnresolvedRootError,
)

__all__ = [
    "ConfigurationError",
    "Gedcom2DotError",
    "InputFormatError",
    "MissingInputError",
    "RecordSequenceError",
    "UnresolvedRootError",
]
