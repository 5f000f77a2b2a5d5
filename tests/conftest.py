import ast

import pytest

from log_linter.models import CallSite
from log_linter.source import SourceText


@pytest.fixture
def make_call_site():
    def _make(code: str, file_path: str = "app.py") -> CallSite:
        tree = ast.parse(code)
        node = next(item for item in ast.walk(tree) if isinstance(item, ast.Call))
        return CallSite(node=node, source=SourceText(code), file_path=file_path)

    return _make
