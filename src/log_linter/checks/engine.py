from __future__ import annotations

from typing import Callable, Iterator

from log_linter.checks.classifier import classify
from log_linter.checks.extractor import extract
from log_linter.checks.rules import RULES, check_sensitive_data
from log_linter.models import (
    CallSite,
    Finding,
    Fragment,
    LinterConfig,
    SuggestedFix,
    Violation,
)
from log_linter.source import quote_char_of, quote_literal


FindingSink = Callable[[Finding], None]


def iter_findings(call_site: CallSite, config: LinterConfig) -> Iterator[Finding]:
    """Yield findings for one call site in rule order, as they are produced."""
    classification = classify(call_site, config)
    if not classification.is_log_call or classification.message_index is None:
        return

    message = extract(call_site.args, classification.message_index)
    if message is None:
        return

    if message.concatenated:
        # The rendered text is unknown here, so only keyword leaks are checked.
        if not config.check_sensitive_data:
            return
        for fragment in message.fragments:
            violation = check_sensitive_data(fragment.text, config)
            if violation is not None:
                yield _to_finding(call_site, fragment, violation)
        return

    fragment = message.primary
    if fragment is None or not fragment.text:
        return

    enabled = config.enabled_rules
    for rule in RULES:
        if rule.code not in enabled:
            continue
        violation = rule.check(fragment.text, config)
        if violation is None:
            continue
        yield _to_finding(call_site, fragment, violation)
        if rule.gate and config.english_only_gate:
            return


def process(
    call_site: CallSite,
    config: LinterConfig,
    sink: FindingSink | None = None,
) -> list[Finding]:
    findings: list[Finding] = []
    for finding in iter_findings(call_site, config):
        if sink is not None:
            sink(finding)
        findings.append(finding)
    return findings


def _to_finding(call_site: CallSite, fragment: Fragment, violation: Violation) -> Finding:
    span = call_site.source.span(fragment.node)
    fix = None
    if violation.replacement is not None:
        quote = quote_char_of(call_site.source.segment(fragment.node))
        fix = SuggestedFix(
            description=violation.fix_description or "Rewrite log message",
            span=span,
            new_text=quote_literal(violation.replacement, quote),
        )

    return Finding(
        file_path=call_site.file_path,
        line=span.line,
        column=span.column + 1,
        rule=violation.rule,
        description=violation.description,
        fix=fix,
    )
