from __future__ import annotations

from typing import Any


class AssertionMismatch(AssertionError):
    """Raised by the comparator when two values are not equal."""

    def __init__(self, actual: Any, expected: Any, message: str | None = None):
        self.actual = actual
        self.expected = expected
        super().__init__(message or f"expected:<{expected!r}> but was:<{actual!r}>")


class UnqualifiableTypeError(TypeError):
    """A type reference or frame has no usable qualified name."""
