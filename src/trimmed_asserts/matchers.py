from __future__ import annotations

import difflib
from typing import Any

from trimmed_asserts.errors import AssertionMismatch


def _format_mismatch(actual: Any, expected: Any) -> str:
    message = f"expected:<{expected!r}> but was:<{actual!r}>"
    if not (isinstance(actual, str) and isinstance(expected, str)):
        return message
    if "\n" not in actual and "\n" not in expected:
        return message
    diff = list(
        difflib.unified_diff(
            expected.splitlines(),
            actual.splitlines(),
            fromfile="expected",
            tofile="actual",
            lineterm="",
        )
    )
    if diff:
        message += "\n" + "\n".join(diff)
    return message


def should_be(actual: Any, expected: Any) -> None:
    """Deep equality check raising ``AssertionMismatch`` on a difference."""
    __tracebackhide__ = True
    if actual == expected:
        return
    raise AssertionMismatch(actual, expected, _format_mismatch(actual, expected))
