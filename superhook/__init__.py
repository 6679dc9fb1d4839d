"""
superhook

Lint check for react-like component subclasses that override a lifecycle
hook (componentDidMount, componentWillUnmount, ...) without calling the
inherited implementation through super.

- Source parsing with tree-sitter (TypeScript / TSX / JavaScript)
- Detection of hook overrides missing super.<hook>(...)
- Machine-applicable fixes inserting the missing call

Example:
    violations = check_source(source_text, dialect="tsx")
    for v in violations:
        print(f"{v.line}:{v.col} {v.message}")
    fixed = fix_source(source_text, dialect="tsx")
"""

from superhook.config import (
    DEFAULT_CONFIG,
    LIFECYCLE_HOOKS,
    ArgumentForwarding,
    HookMatch,
    LintConfig,
)

from superhook.issues import (
    Replacement,
    Violation,
)

from superhook.checks.lifecycle import (
    FAILURE_STRING,
    RULE,
    is_lifecycle_hook,
    is_super_called,
    iter_violations,
)

from superhook.finder import (
    HookFinder,
    check_source,
    check_tree,
)

from superhook.rewriter import (
    apply_fixes,
    apply_replacements,
    fix_source,
)

from superhook.utils import (
    create_parser,
    dialect_for_path,
)


__all__ = [
    # Configuration
    "DEFAULT_CONFIG",
    "LIFECYCLE_HOOKS",
    "ArgumentForwarding",
    "HookMatch",
    "LintConfig",

    # Results
    "Replacement",
    "Violation",

    # Check
    "FAILURE_STRING",
    "RULE",
    "is_lifecycle_hook",
    "is_super_called",
    "iter_violations",
    "HookFinder",
    "check_source",
    "check_tree",

    # Fixing
    "apply_fixes",
    "apply_replacements",
    "fix_source",

    # Parsing
    "create_parser",
    "dialect_for_path",
]

__version__ = "1.0.0"
