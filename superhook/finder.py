"""Coordinator that runs all lifecycle checks over one source unit."""

from __future__ import annotations

import logging
from typing import Optional

import tree_sitter

from .checks import CHECKS
from .config import DEFAULT_CONFIG, LintConfig
from .context import AnalysisContext
from .issues import Violation
from .utils import create_parser

log = logging.getLogger(__name__)


class HookFinder:
    """Wraps the analysis context and executes the registered checks."""

    def __init__(self, tree: tree_sitter.Tree, source_bytes: bytes, config: LintConfig = DEFAULT_CONFIG):
        self.context = AnalysisContext(tree, source_bytes, config)
        self.violations: list[Violation] = []
        if tree.root_node.has_error:
            log.warning("source contains syntax errors; results may be incomplete")
        self._run_checks()

    def _run_checks(self):
        for check in CHECKS:
            new_violations = check(self.context)
            for violation in new_violations:
                log.debug("violation: %s", violation)
            self.violations.extend(new_violations)


def check_tree(
    tree: tree_sitter.Tree,
    source_bytes: bytes,
    config: LintConfig = DEFAULT_CONFIG,
) -> list[Violation]:
    return HookFinder(tree, source_bytes, config).violations


def check_source(
    source: str | bytes,
    dialect: str = "tsx",
    config: Optional[LintConfig] = None,
) -> list[Violation]:
    """Parse source with the given dialect and check it."""
    if isinstance(source, str):
        source = source.encode("utf-8")
    tree = create_parser(dialect).parse(source)
    return check_tree(tree, source, config or DEFAULT_CONFIG)
