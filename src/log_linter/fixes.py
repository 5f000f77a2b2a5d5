from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from log_linter.models import Finding, SuggestedFix
from log_linter.source import read_source, write_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixResult:
    text: str
    applied: int
    skipped: int


def apply_fixes(text: str, findings: Iterable[Finding]) -> FixResult:
    """Apply suggested fixes to ``text``.

    Fixes are taken in finding order; a fix whose span overlaps one already
    accepted is skipped. Lowercase and punctuation fixes for the same literal
    both replace the whole literal, so only the first of them lands per run.
    """
    accepted: list[SuggestedFix] = []
    skipped = 0
    for finding in findings:
        fix = finding.fix
        if fix is None:
            continue
        if any(_overlaps(fix, other) for other in accepted):
            skipped += 1
            continue
        accepted.append(fix)

    pieces: list[str] = []
    cursor = 0
    for fix in sorted(accepted, key=lambda item: item.span.start):
        pieces.append(text[cursor : fix.span.start])
        pieces.append(fix.new_text)
        cursor = fix.span.end
    pieces.append(text[cursor:])

    return FixResult(text="".join(pieces), applied=len(accepted), skipped=skipped)


def fix_file(path: str | Path, findings: Iterable[Finding]) -> FixResult:
    file_path = Path(path)
    original, has_bom = read_source(file_path)
    result = apply_fixes(original, findings)
    if result.applied:
        write_source(file_path, result.text, bom=has_bom)
        logger.info("Applied %d fixes to %s", result.applied, file_path)
    return result


def _overlaps(left: SuggestedFix, right: SuggestedFix) -> bool:
    return left.span.start < right.span.end and right.span.start < left.span.end
