"""Registry of analysis checks."""

from __future__ import annotations

from typing import Callable, List

from ..context import AnalysisContext
from ..issues import Violation

from . import lifecycle

Check = Callable[[AnalysisContext], List[Violation]]

CHECKS: list[Check] = [
    lifecycle.run_lifecycle_hooks,
]

RULES = {
    lifecycle.RULE.name: lifecycle.RULE,
}

__all__ = ["CHECKS", "RULES", "Check"]
