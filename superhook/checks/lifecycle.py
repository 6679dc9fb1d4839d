"""Lifecycle hook overrides in subclasses that never call their super method."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import tree_sitter

from ..config import DEFAULT_CONFIG, LIFECYCLE_HOOKS, HookMatch, LintConfig
from ..context import AnalysisContext
from ..fixes import synthesize_fix
from ..issues import Violation, make_violation
from ..utils import first_token, iter_nodes

CLASS_TYPES = ("class_declaration", "abstract_class_declaration", "class")


@dataclass(frozen=True)
class RuleMetadata:
    name: str
    description: str
    rationale: str
    type: str
    typescript_only: bool
    has_fix: bool


FAILURE_STRING = "Always call `super` lifecycle method in react-like component subclasses"

RULE = RuleMetadata(
    name="call-component-super-lifecycle-hook",
    description=FAILURE_STRING,
    rationale=(
        "Component lifecycle hooks should call their super method to make sure the side "
        "effects are propagated to the super classes. In a react-like component, the "
        "lifecycle hooks are: " + ", ".join(sorted(LIFECYCLE_HOOKS)) + "."
    ),
    type="functionality",
    typescript_only=False,
    has_fix=True,
)


def is_lifecycle_hook(name: str, config: LintConfig = DEFAULT_CONFIG) -> bool:
    if config.match is HookMatch.EXACT:
        return name in config.hooks
    return any(pattern.search(name) for pattern in config.hook_patterns)


def is_super_called(body: tree_sitter.Node, name: str, ctx: AnalysisContext) -> bool:
    """
    True if body contains a call shaped exactly like super.<name>(...).

    The whole subtree counts, including branches and nested functions;
    reachability is not considered.
    """
    return any(_is_super_call(node, name, ctx) for node in iter_nodes(body))


def _is_super_call(node: tree_sitter.Node, name: str, ctx: AnalysisContext) -> bool:
    if node.type != "call_expression":
        return False
    callee = node.child_by_field_name("function")
    if callee is None or callee.type != "member_expression":
        return False
    target = callee.child_by_field_name("object")
    member = callee.child_by_field_name("property")
    return (
        target is not None
        and target.type == "super"
        and member is not None
        and ctx.text(member) == name
    )


def is_derived_class(node: tree_sitter.Node) -> bool:
    if not node.is_named or node.type not in CLASS_TYPES:
        return False
    return any(child.type == "class_heritage" for child in node.children)


def iter_hook_methods(cls: tree_sitter.Node, ctx: AnalysisContext) -> Iterator[tuple[tree_sitter.Node, str]]:
    """Direct method members of cls that have a body and a lifecycle hook name."""
    body = cls.child_by_field_name("body")
    if body is None:
        return
    for member in body.named_children:
        if member.type != "method_definition":
            continue
        if member.child_by_field_name("body") is None:
            continue
        name = ctx.text(member.child_by_field_name("name"))
        if name and is_lifecycle_hook(name, ctx.config):
            yield member, name


def iter_violations(ctx: AnalysisContext) -> Iterator[Violation]:
    for node in ctx.iter_nodes():
        if not is_derived_class(node):
            continue
        for method, name in iter_hook_methods(node, ctx):
            if is_super_called(method.child_by_field_name("body"), name, ctx):
                continue
            yield make_violation(
                RULE.name,
                name,
                method,
                first_token(method),
                FAILURE_STRING,
                synthesize_fix(method, name, ctx),
            )


def run_lifecycle_hooks(ctx: AnalysisContext) -> list[Violation]:
    return list(iter_violations(ctx))
