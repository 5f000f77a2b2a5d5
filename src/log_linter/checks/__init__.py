from log_linter.checks.classifier import CONTEXT_METHODS, LOG_METHODS, classify
from log_linter.checks.engine import FindingSink, iter_findings, process
from log_linter.checks.extractor import extract
from log_linter.checks.rules import RULES

__all__ = [
    "CONTEXT_METHODS",
    "FindingSink",
    "LOG_METHODS",
    "RULES",
    "classify",
    "extract",
    "iter_findings",
    "process",
]
