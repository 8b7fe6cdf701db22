from __future__ import annotations

from types import TracebackType

import pytest

from trimmed_asserts.frames import Frame, build_traceback, frames_from_traceback, split_qualname


class _Outer:
    def call(self) -> None:
        _raise_hidden()


def _raise_hidden() -> None:
    __tracebackhide__ = True
    raise RuntimeError("boom")


def _capture() -> TracebackType:
    try:
        _Outer().call()
    except RuntimeError as exc:
        assert exc.__traceback__ is not None
        return exc.__traceback__
    raise AssertionError("nothing was raised")


def test_split_qualname() -> None:
    assert split_qualname("pkg.mod", "Outer.method") == ("pkg.mod.Outer", "method")
    assert split_qualname("pkg.mod", "func") == ("pkg.mod", "func")
    assert split_qualname("pkg.mod", "func.<locals>.<lambda>") == (
        "pkg.mod.func.<locals>",
        "<lambda>",
    )


def test_frames_are_read_innermost_first() -> None:
    frames = frames_from_traceback(_capture())

    assert [frame.method_name for frame in frames] == ["_raise_hidden", "call", "_capture"]
    assert frames[0].qualifier == __name__
    assert frames[1].qualifier == f"{__name__}._Outer"
    assert frames[0].skipped is True
    assert frames[1].skipped is False
    assert frames[0].filename.endswith("test_capture.py")
    assert frames[0].lineno > 0


def _raise_conditionally_hidden() -> None:
    __tracebackhide__ = lambda info: True
    raise RuntimeError("boom")


def test_callable_hide_marker_needs_the_exception() -> None:
    try:
        _raise_conditionally_hidden()
    except RuntimeError as exc:
        without = frames_from_traceback(exc.__traceback__)
        with_exc = frames_from_traceback(exc.__traceback__, exc)

    assert [frame.skipped for frame in without] == [False, False]
    assert [frame.skipped for frame in with_exc] == [True, False]


def test_frames_from_empty_traceback() -> None:
    assert frames_from_traceback(None) == []


def test_build_traceback_links_outermost_first() -> None:
    frames = frames_from_traceback(_capture())

    rebuilt = build_traceback(frames[:2])
    assert rebuilt is not None
    assert rebuilt.tb_frame.f_code.co_name == "call"
    assert rebuilt.tb_next is not None
    assert rebuilt.tb_next.tb_frame.f_code.co_name == "_raise_hidden"
    assert rebuilt.tb_next.tb_next is None
    assert frames_from_traceback(rebuilt) == frames[:2]


def test_build_traceback_of_nothing_is_none() -> None:
    assert build_traceback([]) is None


def test_build_traceback_requires_traceback_entries() -> None:
    with pytest.raises(ValueError, match="has no traceback entry"):
        build_traceback([Frame("pkg.mod", "func")])
