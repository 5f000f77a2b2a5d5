from __future__ import annotations

import ast
from typing import Sequence

from log_linter.models import Fragment, Message


MAX_CONCAT_DEPTH = 4096


def extract(args: Sequence[ast.expr], message_index: int) -> Message | None:
    """Reduce the message argument to text.

    Returns ``None`` for anything that is neither a string literal nor a ``+``
    concatenation, and for an index with no argument behind it.
    """
    if message_index < 0 or message_index >= len(args):
        return None

    arg = args[message_index]
    if _is_string_literal(arg):
        return Message(text=arg.value, fragments=(Fragment(text=arg.value, node=arg),))

    if _is_concatenation(arg):
        fragments = tuple(_walk_left_spine(arg))
        return Message(
            text="".join(fragment.text for fragment in reversed(fragments)),
            fragments=fragments,
            concatenated=True,
        )

    return None


def _walk_left_spine(node: ast.BinOp):
    # Outermost "+" first. Right operands are yielded on the way down, the
    # literal at the bottom of the spine last.
    current: ast.expr = node
    depth = 0
    while _is_concatenation(current) and depth < MAX_CONCAT_DEPTH:
        depth += 1
        # Right operands count too, not only the left literal of each node.
        if _is_string_literal(current.right):
            yield Fragment(text=current.right.value, node=current.right)
        current = current.left

    if _is_string_literal(current):
        yield Fragment(text=current.value, node=current)


def _is_string_literal(node: ast.AST) -> bool:
    return isinstance(node, ast.Constant) and isinstance(node.value, str)


def _is_concatenation(node: ast.AST) -> bool:
    return isinstance(node, ast.BinOp) and isinstance(node.op, ast.Add)
