from __future__ import annotations

from typing import Optional

# Placeholder some exporters write for a missing spouse or child.
ABSENT_XREF = "I-1"


def normalize_xref(value: Optional[str]) -> Optional[str]:
    """
    Turn a GEDCOM pointer such as ``@I12@`` into a record id (``I12``).

    Every ``@`` is removed. Empty values and the absent-person placeholder
    come back as None.
    """
    if value is None:
        return None

    xref = value.replace("@", "").strip()
    if not xref or xref == ABSENT_XREF:
        return None
    return xref
