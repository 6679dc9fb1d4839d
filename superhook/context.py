"""Analysis context shared across checks."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Iterator, List

import tree_sitter

from .config import DEFAULT_CONFIG, LintConfig
from .utils import iter_nodes, node_text


@dataclass
class AnalysisContext:
    tree: tree_sitter.Tree
    source_bytes: bytes
    config: LintConfig = DEFAULT_CONFIG
    line_starts: List[int] = field(init=False, default_factory=list)
    newline: str = field(init=False, default="\n")

    def __post_init__(self):
        self._collect_line_starts()
        self._detect_newline()

    def text(self, node: tree_sitter.Node | None) -> str:
        return node_text(node, self.source_bytes) if node is not None else ""

    def iter_nodes(self) -> Iterator[tree_sitter.Node]:
        return iter_nodes(self.tree.root_node)

    def line_of(self, offset: int) -> int:
        """0-based line index containing a byte offset."""
        return bisect.bisect_right(self.line_starts, offset) - 1

    def line_indent(self, offset: int) -> str:
        """Leading whitespace of the line containing offset."""
        start = self.line_starts[self.line_of(offset)]
        end = start
        while end < len(self.source_bytes) and self.source_bytes[end] in b" \t":
            end += 1
        return self.source_bytes[start:end].decode("utf-8")

    def starts_line(self, offset: int) -> bool:
        """True if only whitespace precedes offset on its line."""
        start = self.line_starts[self.line_of(offset)]
        return not self.source_bytes[start:offset].strip(b" \t")

    def _collect_line_starts(self):
        self.line_starts = [0]
        pos = self.source_bytes.find(b"\n")
        while pos != -1:
            self.line_starts.append(pos + 1)
            pos = self.source_bytes.find(b"\n", pos + 1)

    def _detect_newline(self):
        # The terminator of the first physical line decides for the whole file.
        if len(self.line_starts) > 1:
            end = self.line_starts[1] - 1
            if end > 0 and self.source_bytes[end - 1:end] == b"\r":
                self.newline = "\r\n"
