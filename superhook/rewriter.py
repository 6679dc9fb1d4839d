"""Application of synthesized fixes to source text."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .config import LintConfig
from .finder import check_source
from .issues import Replacement, Violation

log = logging.getLogger(__name__)


def apply_replacements(source_bytes: bytes, replacements: Iterable[Replacement]) -> bytes:
    """
    Apply insertions to the original bytes.

    Offsets refer to the original source, so edits are spliced in one
    left-to-right pass. Insertions sharing an offset keep their order.
    """
    ordered = sorted(replacements, key=lambda r: r.offset)
    pieces = []
    cursor = 0
    for replacement in ordered:
        if not 0 <= replacement.offset <= len(source_bytes):
            raise ValueError(f"Replacement offset {replacement.offset} outside source of {len(source_bytes)} bytes")
        pieces.append(source_bytes[cursor:replacement.offset])
        pieces.append(replacement.text.encode("utf-8"))
        cursor = replacement.offset
    pieces.append(source_bytes[cursor:])
    return b"".join(pieces)


def apply_fixes(source_bytes: bytes, violations: Iterable[Violation]) -> bytes:
    replacements = [r for v in violations for r in v.replacements]
    log.debug("applying %d replacements", len(replacements))
    return apply_replacements(source_bytes, replacements)


def fix_source(source: str, dialect: str = "tsx", config: Optional[LintConfig] = None) -> str:
    """Check source and return it with every available fix applied."""
    source_bytes = source.encode("utf-8")
    violations = check_source(source_bytes, dialect, config)
    return apply_fixes(source_bytes, violations).decode("utf-8")
