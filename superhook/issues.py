"""Violation data model for lifecycle hook findings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

import tree_sitter


@dataclass(frozen=True)
class Replacement:
    """Insert text at a byte offset of the original source."""

    offset: int
    text: str


@dataclass(frozen=True)
class Violation:
    """
    A lifecycle hook override that never reaches its base implementation.

    line/col are 1-based and point at the anchor token, start/end are the
    anchor's byte span. node refers back to the method in the tree it was
    found in and takes no part in equality.
    """

    rule: str
    hook: str
    line: int
    col: int
    start: int
    end: int
    message: str
    replacements: Tuple[Replacement, ...] = ()
    node: Any = field(default=None, compare=False, repr=False)

    @property
    def fixable(self) -> bool:
        return bool(self.replacements)

    def to_dict(self) -> dict:
        return {
            "rule": self.rule,
            "hook": self.hook,
            "line": self.line,
            "col": self.col,
            "start": self.start,
            "end": self.end,
            "message": self.message,
            "fix": [{"offset": r.offset, "text": r.text} for r in self.replacements],
        }


def make_violation(
    rule: str,
    hook: str,
    method: tree_sitter.Node,
    anchor: tree_sitter.Node,
    message: str,
    replacements: Tuple[Replacement, ...] = (),
) -> Violation:
    """Create a Violation using the anchor's start point (converted to 1-based)."""
    line, col = anchor.start_point
    return Violation(
        rule=rule,
        hook=hook,
        line=line + 1,
        col=col + 1,
        start=anchor.start_byte,
        end=anchor.end_byte,
        message=message,
        replacements=tuple(replacements),
        node=method,
    )
