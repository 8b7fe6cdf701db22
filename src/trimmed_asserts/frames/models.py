from __future__ import annotations

from dataclasses import dataclass, field
from types import FrameType, TracebackType

import pytest

from trimmed_asserts.errors import UnqualifiableTypeError


def split_qualname(module: str, qualname: str) -> tuple[str, str]:
    """Split a dotted qualname into its declaring qualifier and its own name.

    ``("pkg.mod", "Outer.method")`` gives ``("pkg.mod.Outer", "method")`` and
    module-level names resolve to the module itself.
    """
    container, _, name = qualname.rpartition(".")
    if container:
        return f"{module}.{container}", name
    return module, name


def _module_name(frame: FrameType) -> str:
    module = frame.f_globals.get("__name__")
    if not isinstance(module, str) or not module:
        raise UnqualifiableTypeError(
            f"Frame {frame.f_code.co_name} in {frame.f_code.co_filename} has no module name"
        )
    return module


def _is_hidden(frame: FrameType, exc: BaseException | None) -> bool:
    """Evaluate ``__tracebackhide__`` the way pytest does.

    A callable marker is called with the ``ExceptionInfo`` of ``exc``; without
    an exception to hand it, the frame is not hidden.
    """
    if "__tracebackhide__" in frame.f_locals:
        hide = frame.f_locals["__tracebackhide__"]
    else:
        hide = frame.f_globals.get("__tracebackhide__", False)
    if callable(hide):
        if exc is None:
            return False
        return bool(hide(pytest.ExceptionInfo.from_exception(exc)))
    return bool(hide)


@dataclass(frozen=True)
class Frame:
    qualifier: str
    method_name: str
    filename: str = "<unknown>"
    lineno: int = 0
    skipped: bool = False
    tb: TracebackType | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_traceback(cls, tb: TracebackType, exc: BaseException | None = None) -> "Frame":
        code = tb.tb_frame.f_code
        qualifier, _ = split_qualname(_module_name(tb.tb_frame), code.co_qualname)
        return cls(
            qualifier=qualifier,
            method_name=code.co_name,
            filename=code.co_filename,
            lineno=tb.tb_lineno,
            skipped=_is_hidden(tb.tb_frame, exc),
            tb=tb,
        )
