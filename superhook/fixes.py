"""Synthesis of the super call that repairs a lifecycle hook override."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import tree_sitter

from .config import ArgumentForwarding
from .context import AnalysisContext
from .issues import Replacement

log = logging.getLogger(__name__)

FORWARD_ARGUMENTS = "...arguments"


def synthesize_fix(method: tree_sitter.Node, hook: str, ctx: AnalysisContext) -> Tuple[Replacement, ...]:
    """
    Build the insertion that makes method call super.<hook>(...) first.

    The statement goes right after the body's opening brace, on its own
    line, using the file's line break and the body's indentation. Methods
    whose name cannot follow "super." (strings, computed or private
    names) get no fix.
    """
    name_node = method.child_by_field_name("name")
    body = method.child_by_field_name("body")
    if name_node is None or name_node.type != "property_identifier" or body is None:
        log.debug("no fix for %s at line %d", hook, method.start_point[0] + 1)
        return ()

    open_brace = body.children[0] if body.child_count else None
    if open_brace is None or open_brace.type != "{":
        return ()

    args = forwarded_arguments(method, ctx)
    indent = body_indent(method, body, ctx)
    text = f"{ctx.newline}{indent}super.{hook}({args});"
    return (Replacement(offset=open_brace.end_byte, text=text),)


def forwarded_arguments(method: tree_sitter.Node, ctx: AnalysisContext) -> str:
    if ctx.config.forwarding is ArgumentForwarding.ARGUMENTS:
        return FORWARD_ARGUMENTS

    params = method.child_by_field_name("parameters")
    if params is None:
        return ""

    names = []
    for param in params.named_children:
        if param.type == "comment":
            continue
        name = _parameter_name(param, ctx)
        if name is None:
            return FORWARD_ARGUMENTS
        if name:
            names.append(name)
    return ", ".join(names)


def _parameter_name(param: tree_sitter.Node, ctx: AnalysisContext) -> Optional[str]:
    """
    Source text that forwards one parameter, "" for parameters that are
    not passed on (TypeScript's this), None when it cannot be forwarded
    by name.
    """
    pattern = param.child_by_field_name("pattern")
    if pattern is None:
        # JavaScript-style parameters without a required/optional wrapper
        pattern = param
        if pattern.type == "assignment_pattern":
            pattern = pattern.child_by_field_name("left")
    if pattern is None:
        return None
    if pattern.type == "this":
        return ""
    if pattern.type == "identifier":
        return ctx.text(pattern)
    if pattern.type == "rest_pattern":
        inner = [c for c in pattern.named_children if c.type != "type_annotation"]
        if len(inner) == 1 and inner[0].type == "identifier":
            return "..." + ctx.text(inner[0])
    return None


def body_indent(method: tree_sitter.Node, body: tree_sitter.Node, ctx: AnalysisContext) -> str:
    """
    Indentation for a statement at the top of body.

    A first statement on its own line sets it directly. Otherwise it is
    one nesting level past the closing brace's line, or past the method's
    line when the brace trails other code.
    """
    open_brace = body.children[0]
    close_brace = body.children[-1]

    statements = body.named_children
    if statements:
        first = statements[0]
        if ctx.line_of(first.start_byte) > ctx.line_of(open_brace.start_byte) and ctx.starts_line(first.start_byte):
            return ctx.line_indent(first.start_byte)

    if ctx.starts_line(close_brace.start_byte):
        base = ctx.line_indent(close_brace.start_byte)
    else:
        base = ctx.line_indent(method.start_byte)
    return base + indent_unit(method, base, ctx)


def indent_unit(method: tree_sitter.Node, base: str, ctx: AnalysisContext) -> str:
    """One nesting level as the file writes it: method indent minus class indent."""
    class_body = method.parent
    if class_body is not None and ctx.starts_line(method.start_byte):
        outer = ctx.line_indent(class_body.start_byte)
        inner = ctx.line_indent(method.start_byte)
        if len(inner) > len(outer) and inner.startswith(outer):
            return inner[len(outer):]
    if base.startswith("\t"):
        return "\t"
    return ctx.config.indent_unit
