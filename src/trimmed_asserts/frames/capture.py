from __future__ import annotations

from types import TracebackType
from typing import Iterable

from .models import Frame


def frames_from_traceback(
    tb: TracebackType | None, exc: BaseException | None = None
) -> list[Frame]:
    """Read a traceback chain innermost-first, the raise point at index 0.

    ``exc`` is the exception being reported; callable ``__tracebackhide__``
    markers are evaluated against it.
    """
    frames: list[Frame] = []
    while tb is not None:
        frames.append(Frame.from_traceback(tb, exc))
        tb = tb.tb_next
    frames.reverse()
    return frames


def build_traceback(frames: Iterable[Frame]) -> TracebackType | None:
    """Chain innermost-first frames into a fresh traceback, outermost entry returned."""
    tb_next: TracebackType | None = None
    for frame in frames:
        if frame.tb is None:
            raise ValueError(f"Frame {frame.qualifier}.{frame.method_name} has no traceback entry")
        tb_next = TracebackType(tb_next, frame.tb.tb_frame, frame.tb.tb_lasti, frame.tb.tb_lineno)
    return tb_next
