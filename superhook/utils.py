"""Shared utilities for Tree-sitter parsing and node helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import tree_sitter
import tree_sitter_typescript

DIALECTS = ("typescript", "tsx")

# JavaScript sources go through the TSX grammar, which accepts JSX.
EXTENSION_DIALECTS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "tsx",
    ".jsx": "tsx",
    ".mjs": "tsx",
    ".cjs": "tsx",
}


def get_language(dialect: str) -> tree_sitter.Language:
    if dialect == "typescript":
        return tree_sitter.Language(tree_sitter_typescript.language_typescript())
    if dialect == "tsx":
        return tree_sitter.Language(tree_sitter_typescript.language_tsx())
    raise ValueError(f"Unsupported dialect: {dialect!r} (expected one of {', '.join(DIALECTS)})")


def create_parser(dialect: str = "tsx") -> tree_sitter.Parser:
    """
    Create a Tree-sitter parser configured for the given dialect.

    Supports both the modern bindings (Parser(language)) and older
    releases that expect set_language() after construction.
    """

    language = get_language(dialect)
    try:
        parser = tree_sitter.Parser(language)
    except TypeError:
        parser = tree_sitter.Parser()
        parser.set_language(language)
    return parser


def dialect_for_path(path: str | Path) -> str:
    suffix = Path(path).suffix.lower()
    try:
        return EXTENSION_DIALECTS[suffix]
    except KeyError:
        raise ValueError(f"Cannot infer dialect for {path} (unknown extension {suffix!r})") from None


def node_text(node: tree_sitter.Node, source_bytes: bytes) -> str:
    """Decode the bytes that correspond to a node."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def iter_nodes(root: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Iterative preorder traversal of the syntax tree."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def first_token(node: tree_sitter.Node) -> tree_sitter.Node:
    """Leftmost leaf below (or at) node."""
    while node.child_count:
        node = node.children[0]
    return node
