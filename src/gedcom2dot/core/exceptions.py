class Gedcom2DotError(Exception):
    """Base exception for conversion failures.

    ``exit_code`` is the process status the CLI exits with.
    """

    exit_code = 1


class ConfigurationError(Gedcom2DotError):
    """Raised when options or the config file are malformed or conflicting."""

    exit_code = 2


class MissingInputError(Gedcom2DotError):
    """Raised when no usable GEDCOM input was given."""

    exit_code = 3


class UnresolvedRootError(Gedcom2DotError):
    """Raised when the root id does not match any loaded record."""

    exit_code = 4

    def __init__(self, root_id: str, kind: str):
        super().__init__(f"No {kind} id = {root_id} found")
        self.root_id = root_id
        self.kind = kind


class InputFormatError(Gedcom2DotError):
    """Raised when the GEDCOM input cannot be tokenized."""

    exit_code = 5


class RecordSequenceError(Gedcom2DotError):
    """Raised when field events arrive in an order the store builder cannot accept."""
