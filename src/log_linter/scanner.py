from __future__ import annotations

import ast
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from log_linter.checks import FindingSink, process
from log_linter.models import CallSite, Finding, LinterConfig
from log_linter.source import SourceText, read_source

logger = logging.getLogger(__name__)


DEFAULT_EXCLUDE_DIRS = {
    ".git",
    ".venv",
    "node_modules",
    "build",
    "dist",
    "__pycache__",
}

DEFAULT_MAX_FILE_SIZE_BYTES = 2_000_000


@dataclass
class ScanResult:
    files_scanned: int = 0
    findings: list[Finding] = field(default_factory=list)


def scan_source(
    text: str,
    file_path: str,
    config: LinterConfig,
    sink: FindingSink | None = None,
) -> list[Finding]:
    tree = ast.parse(text, filename=file_path)
    return scan_tree(tree, SourceText(text), file_path, config, sink)


def scan_tree(
    tree: ast.AST,
    source: SourceText,
    file_path: str,
    config: LinterConfig,
    sink: FindingSink | None = None,
) -> list[Finding]:
    calls = [node for node in ast.walk(tree) if isinstance(node, ast.Call)]
    calls.sort(key=lambda node: (node.lineno, node.col_offset))

    findings: list[Finding] = []
    for node in calls:
        call_site = CallSite(node=node, source=source, file_path=file_path)
        findings.extend(process(call_site, config, sink))
    return findings


def scan_paths(
    paths: Iterable[str | Path],
    config: LinterConfig,
    *,
    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
    exclude_dirs: set[str] | None = None,
    sink: FindingSink | None = None,
) -> ScanResult:
    exclude = DEFAULT_EXCLUDE_DIRS if exclude_dirs is None else exclude_dirs
    result = ScanResult()

    for file_path in iter_python_files(paths, exclude):
        try:
            if file_path.stat().st_size > max_file_size_bytes:
                logger.debug("Skipping %s: larger than %d bytes", file_path, max_file_size_bytes)
                continue
            text, _ = read_source(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping %s: %s", file_path, exc)
            continue

        try:
            tree = ast.parse(text, filename=str(file_path))
        except (SyntaxError, ValueError, RecursionError) as exc:
            logger.debug("Skipping %s: cannot parse: %s", file_path, exc)
            continue

        result.files_scanned += 1
        result.findings.extend(scan_tree(tree, SourceText(text), str(file_path), config, sink))

    logger.debug("Scanned %d files, %d findings", result.files_scanned, len(result.findings))
    return result


def iter_python_files(paths: Iterable[str | Path], exclude_dirs: set[str]):
    for item in paths:
        root = Path(item)
        if root.is_file():
            yield root
            continue
        if not root.is_dir():
            logger.warning("Path does not exist: %s", root)
            continue

        for path in sorted(root.rglob("*.py")):
            if not path.is_file():
                continue
            if any(part in exclude_dirs for part in path.relative_to(root).parts):
                continue
            yield path
