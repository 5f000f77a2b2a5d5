from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from log_linter.models import (
    ENGLISH_ONLY,
    LOWERCASE_START,
    SENSITIVE_DATA,
    SPECIAL_CHARS,
    LinterConfig,
    Violation,
)


# Cyrillic, Han, Hiragana and Katakana script ranges.
NON_ENGLISH_SCRIPT_RE = re.compile(
    "["
    "\u0400-\u052f\u1c80-\u1c8f\u2de0-\u2dff\ua640-\ua69f"  # Cyrillic
    "\u2e80-\u2fdf\u3005\u3007\u3021-\u3029\u3038-\u303b"  # Han radicals and marks
    "\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff"  # Han ideographs
    "\U00020000-\U0002ebef\U00030000-\U000323af"  # Han supplementary planes
    "\u3041-\u3096\u309d-\u309f\U0001b001-\U0001b11f\U0001f200"  # Hiragana
    "\u30a1-\u30fa\u30fd-\u30ff\u31f0-\u31ff\u32d0-\u32fe\u3300-\u3357"  # Katakana
    "\uff66-\uff6f\uff71-\uff9d\U0001b000"  # Katakana half-width and supplement
    "]"
)

EMOJI_RE = re.compile("[\U0001f300-\U0001f9ff]")

EXCESSIVE_PUNCTUATION = ("!!!", "...")

ENGLISH_ONLY_MESSAGE = "log message should be in English only"
LOWERCASE_MESSAGE = "log message should start with lowercase letter"
EMOJI_MESSAGE = "log message should not contain emojis"
PUNCTUATION_MESSAGE = "log message should not contain excessive punctuation or special characters"
SENSITIVE_MESSAGE = "log message may contain sensitive data (keyword: {keyword})"

LOWERCASE_FIX = "Convert first letter to lowercase"
PUNCTUATION_FIX = "Remove excessive punctuation"


def check_english_only(message: str, config: LinterConfig) -> Violation | None:
    if NON_ENGLISH_SCRIPT_RE.search(message):
        return Violation(rule=ENGLISH_ONLY, description=ENGLISH_ONLY_MESSAGE)
    return None


def check_lowercase_start(message: str, config: LinterConfig) -> Violation | None:
    if not message:
        return None

    first = message[0]
    if first.isalpha() and first.isupper():
        return Violation(
            rule=LOWERCASE_START,
            description=LOWERCASE_MESSAGE,
            replacement=first.lower() + message[1:],
            fix_description=LOWERCASE_FIX,
        )
    return None


def check_special_chars(message: str, config: LinterConfig) -> Violation | None:
    if EMOJI_RE.search(message):
        return Violation(rule=SPECIAL_CHARS, description=EMOJI_MESSAGE)

    for pattern in EXCESSIVE_PUNCTUATION:
        if pattern in message:
            return Violation(
                rule=SPECIAL_CHARS,
                description=PUNCTUATION_MESSAGE,
                replacement=_strip_all(message, pattern),
                fix_description=PUNCTUATION_FIX,
            )
    return None


def check_sensitive_data(message: str, config: LinterConfig) -> Violation | None:
    lowered = message.lower()
    for keyword in config.keywords:
        if keyword.lower() in lowered:
            return Violation(
                rule=SENSITIVE_DATA,
                description=SENSITIVE_MESSAGE.format(keyword=keyword),
            )
    return None


def _strip_all(message: str, pattern: str) -> str:
    return message.replace(pattern, "")


@dataclass(frozen=True)
class Rule:
    code: str
    check: Callable[[str, LinterConfig], Violation | None]
    gate: bool = False


# Evaluation order matters: the English-only rule runs first so it can gate.
RULES: tuple[Rule, ...] = (
    Rule(code=ENGLISH_ONLY, check=check_english_only, gate=True),
    Rule(code=LOWERCASE_START, check=check_lowercase_start),
    Rule(code=SPECIAL_CHARS, check=check_special_chars),
    Rule(code=SENSITIVE_DATA, check=check_sensitive_data),
)
