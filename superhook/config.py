"""Configuration for the super lifecycle hook check."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import FrozenSet, Tuple

# React-like component lifecycle hooks that must delegate to the base class.
LIFECYCLE_HOOKS: FrozenSet[str] = frozenset({
    "componentWillReceiveProps",
    "componentWillUpdate",
    "componentDidUpdate",
    "componentWillMount",
    "componentDidMount",
    "componentWillUnmount",
})


class HookMatch(Enum):
    """How a method name is compared against the hook names."""
    WORD_BOUNDARY = "word-boundary"  # hook token delimited by non-identifier chars
    EXACT = "exact"


class ArgumentForwarding(Enum):
    """How the inserted super call passes the method's arguments on."""
    ARGUMENTS = "arguments"    # super.hook(...arguments)
    PARAMETERS = "parameters"  # super.hook(a, b), falls back to ...arguments


@dataclass(frozen=True)
class LintConfig:
    hooks: FrozenSet[str] = LIFECYCLE_HOOKS
    match: HookMatch = HookMatch.WORD_BOUNDARY
    forwarding: ArgumentForwarding = ArgumentForwarding.ARGUMENTS
    indent_unit: str = "    "

    @cached_property
    def hook_patterns(self) -> Tuple[re.Pattern, ...]:
        return tuple(
            re.compile(rf"\b{re.escape(hook)}\b", re.ASCII)
            for hook in sorted(self.hooks)
        )


DEFAULT_CONFIG = LintConfig()
