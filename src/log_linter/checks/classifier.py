from __future__ import annotations

from log_linter.models import CallSite, Classification, LinterConfig


LOG_METHODS = frozenset({"Debug", "Info", "Warn", "Error", "Fatal", "Panic"})

CONTEXT_METHODS = frozenset({"DebugContext", "InfoContext", "WarnContext", "ErrorContext"})

NO_LOG_CALL = Classification(is_log_call=False)


def classify(call_site: CallSite, config: LinterConfig | None = None) -> Classification:
    """Decide whether ``call_site`` is a log call and where its message sits.

    Matching is by method name only; the receiver is never resolved.
    """
    name = call_site.callee
    if name is None:
        return NO_LOG_CALL

    arg_count = len(call_site.args)

    if name in CONTEXT_METHODS:
        # First argument is the context value.
        return Classification(is_log_call=True, message_index=1 if arg_count >= 2 else None)

    extra = config.extra_log_methods if config is not None else ()
    if name in LOG_METHODS or name in extra:
        return Classification(is_log_call=True, message_index=0 if arg_count >= 1 else None)

    return NO_LOG_CALL
