from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from gedcom2dot.marking.policy import InclusionPolicy
from gedcom2dot.marking.roots import NO_ROOT, Root


@dataclass
class RunContext:
    """
    Shared pipeline context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None

    root: Root = NO_ROOT
    policy: InclusionPolicy = InclusionPolicy.DEFAULT
    use_initials: bool = False

    stats: Dict[str, Any] = field(default_factory=dict)
