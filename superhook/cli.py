#!/usr/bin/env python3
"""Command line entry point for the super lifecycle hook check."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from superhook.config import ArgumentForwarding, HookMatch, LintConfig
from superhook.finder import check_tree
from superhook.issues import Violation
from superhook.rewriter import apply_fixes
from superhook.utils import DIALECTS, EXTENSION_DIALECTS, create_parser, dialect_for_path

log = logging.getLogger(__name__)

SKIP_DIRS = {"node_modules", ".git", "dist", "build"}

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


@dataclass
class FileResult:
    path: Path
    violations: List[Violation] = field(default_factory=list)
    fixed: int = 0

    @property
    def remaining(self) -> List[Violation]:
        if not self.fixed:
            return self.violations
        return [v for v in self.violations if not v.fixable]


def find_source_files(directory: Path) -> List[Path]:
    files = []
    for path in sorted(directory.rglob("*")):
        if any(part in SKIP_DIRS for part in path.relative_to(directory).parts):
            continue
        if path.is_file() and path.suffix.lower() in EXTENSION_DIALECTS:
            files.append(path)
    return files


def collect_paths(targets: List[Path]) -> List[Path]:
    paths = []
    for target in targets:
        if target.is_dir():
            found = find_source_files(target)
            log.debug("found %d source files in %s", len(found), target)
            paths.extend(found)
        elif target.exists():
            paths.append(target)
        else:
            raise FileNotFoundError(f"Path not found: {target}")
    return paths


def lint_file(path: Path, config: LintConfig, dialect: Optional[str] = None, fix: bool = False) -> FileResult:
    source_bytes = path.read_bytes()
    tree = create_parser(dialect or dialect_for_path(path)).parse(source_bytes)
    result = FileResult(path=path, violations=check_tree(tree, source_bytes, config))

    if fix and any(v.fixable for v in result.violations):
        path.write_bytes(apply_fixes(source_bytes, result.violations))
        result.fixed = sum(1 for v in result.violations if v.fixable)
        log.info("%s: fixed %d lifecycle hook(s)", path, result.fixed)
    return result


def format_text(result: FileResult) -> List[str]:
    return [
        f"{result.path}:{v.line}:{v.col}: {v.message} ({v.hook}) [{v.rule}]"
        for v in result.remaining
    ]


def format_json(results: List[FileResult]) -> str:
    payload = {
        "ok": True,
        "results": [
            {
                "file": str(r.path),
                "fixed": r.fixed,
                "violations": [v.to_dict() for v in r.remaining],
            }
            for r in results
        ],
    }
    return json.dumps(payload, indent=2)


def build_config(args: argparse.Namespace) -> LintConfig:
    indent = "\t" if args.indent == "tab" else " " * int(args.indent)
    return LintConfig(
        match=HookMatch.EXACT if args.exact else HookMatch.WORD_BOUNDARY,
        forwarding=ArgumentForwarding(args.forward),
        indent_unit=indent,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="superhook",
        description="Find lifecycle hook overrides that do not call their super method",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file
  superhook src/components/Panel.tsx

  # Whole directory, rewriting files in place
  superhook --fix src/

  # Only flag methods named exactly like a hook
  superhook --exact --format json src/
        """
    )

    parser.add_argument("paths", nargs="+", type=Path, help="Source files or directories")
    parser.add_argument("--fix", action="store_true",
                        help="Insert the missing super calls in place")
    parser.add_argument("--format", choices=("text", "json"), default="text",
                        help="Output format (default: text)")
    parser.add_argument("--dialect", choices=DIALECTS,
                        help="Grammar to parse with (default: inferred from the extension)")
    parser.add_argument("--exact", action="store_true",
                        help="Match hook names exactly instead of as delimited words")
    parser.add_argument("--forward", choices=[f.value for f in ArgumentForwarding],
                        default=ArgumentForwarding.ARGUMENTS.value,
                        help="How inserted calls pass arguments on (default: arguments)")
    parser.add_argument("--indent", default="4", metavar="N|tab",
                        help="Nesting level for inserted code when it cannot be inferred (default: 4)")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only log warnings and errors")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log debug output")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logging.basicConfig(level=log_level, format="%(message)s")

    if args.indent != "tab" and not args.indent.isdigit():
        parser.error(f"--indent expects a number or 'tab', got {args.indent!r}")
    config = build_config(args)

    try:
        paths = collect_paths(args.paths)
    except FileNotFoundError as e:
        log.error(f"Error: {e}")
        return EXIT_ERROR

    results: List[FileResult] = []
    errors = 0
    for path in paths:
        try:
            results.append(lint_file(path, config, args.dialect, args.fix))
        except (OSError, ValueError) as e:
            log.error(f"{path}: {e}")
            errors += 1

    if args.format == "json":
        print(format_json(results))
    else:
        for result in results:
            for line in format_text(result):
                print(line)

    remaining = sum(len(r.remaining) for r in results)
    log.info("%d file(s) checked, %d violation(s)", len(results), remaining)

    if errors:
        return EXIT_ERROR
    if remaining:
        return EXIT_VIOLATIONS
    return EXIT_OK


def main():
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
