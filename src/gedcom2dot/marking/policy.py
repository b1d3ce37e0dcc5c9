from __future__ import annotations

from enum import Enum

from gedcom2dot.core.exceptions import ConfigurationError


class InclusionPolicy(str, Enum):
    """
    What to pull in next to each ancestor's family.

    DEFAULT  – ancestors and descendants only.
    CHILDREN – also every sibling in each ancestral family.
    BLOOD    – also every sibling and the siblings' descendants.
    """

    DEFAULT = "default"
    CHILDREN = "children"
    BLOOD = "blood"

    @classmethod
    def from_flags(cls, children: bool = False, blood: bool = False) -> "InclusionPolicy":
        if children and blood:
            raise ConfigurationError("Only one of --children and --blood can be specified")
        if children:
            return cls.CHILDREN
        if blood:
            return cls.BLOOD
        return cls.DEFAULT
