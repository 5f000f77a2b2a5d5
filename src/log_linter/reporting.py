from __future__ import annotations

import csv
import json
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from log_linter.models import Finding


CSV_FIELDS = ["file_path", "line", "column", "rule", "description", "fix_text"]


def format_finding(finding: Finding) -> str:
    return f"{finding.file_path}:{finding.line}:{finding.column}: {finding.description} [{finding.rule}]"


def build_summary(findings: list[Finding], *, files_scanned: int) -> dict:
    by_rule = Counter(item.rule for item in findings)
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "files_scanned": files_scanned,
        "findings_count": len(findings),
        "fixable_count": sum(1 for item in findings if item.fix is not None),
        "by_rule": dict(sorted(by_rule.items())),
        "findings": [item.to_dict() for item in findings],
    }


def write_reports(output_dir: str | Path, findings: list[Finding], *, files_scanned: int) -> dict:
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    summary = build_summary(findings, files_scanned=files_scanned)
    findings_json = out_dir / "findings.json"
    findings_csv = out_dir / "findings.csv"

    _write_json(findings_json, summary)
    _write_csv(findings_csv, _csv_rows(findings))

    return {
        "findings_count": summary["findings_count"],
        "files": {
            "findings_json": str(findings_json.resolve()),
            "findings_csv": str(findings_csv.resolve()),
        },
    }


def _csv_rows(findings: Iterable[Finding]) -> list[dict]:
    return [
        {
            "file_path": item.file_path,
            "line": item.line,
            "column": item.column,
            "rule": item.rule,
            "description": item.description,
            "fix_text": item.fix.new_text if item.fix else "",
        }
        for item in findings
    ]


def _write_json(path: Path, payload: dict) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)


def _write_csv(path: Path, rows: list[dict]) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
