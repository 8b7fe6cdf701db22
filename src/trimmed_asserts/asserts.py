from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Awaitable, Callable, Iterable

from trimmed_asserts.config import TrimConfig, default_config
from trimmed_asserts.frames import build_traceback, frames_from_traceback
from trimmed_asserts.matchers import should_be
from trimmed_asserts.trimming import build_exclusions, skip_in_stack_trace, trim_frames

logger = logging.getLogger(__name__)


def run_blocking(awaitable: Awaitable[Any]) -> Any:
    """Drive an awaitable assertion to completion on a fresh event loop.

    Inside a running loop the awaitable is closed and ``RuntimeError`` is
    raised; await ``trimmed_assert_async`` there instead.
    """
    __tracebackhide__ = True
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        if inspect.iscoroutine(awaitable):
            awaitable.close()
        raise RuntimeError(
            "trimmed_assert cannot run an awaitable assertion inside a running event loop; "
            "use `await trimmed_assert_async(...)` instead"
        )

    async def _await() -> Any:
        return await awaitable

    return asyncio.run(_await())


def _trim_failure(
    failure: AssertionError,
    exclude_from_stack: tuple[Any, ...],
    config: TrimConfig | None,
) -> AssertionError:
    settings = config or default_config()
    exclusions = build_exclusions(exclude_from_stack, settings.exclude)
    tb = failure.__traceback__
    # The head entry is the catching frame; unwinding adds it back on re-raise.
    frames = frames_from_traceback(tb.tb_next if tb is not None else None, failure)
    trimmed = trim_frames(frames, exclusions, settings)
    logger.debug(
        "Trimmed %s traceback: kept %d of %d entries",
        type(failure).__name__,
        len(trimmed),
        len(frames),
    )
    return failure.with_traceback(build_traceback(trimmed))


def trimmed_assert(
    assertion: Callable[[], Any],
    *exclude_from_stack: Any,
    config: TrimConfig | None = None,
) -> Any:
    """Run ``assertion``; if it fails, remove the noise at the top of its traceback.

    The caught ``AssertionError`` is re-raised as the same instance, with its
    traceback rebuilt from the frames that survive trimming. Frames declared
    by the support types, asyncio internals, ``should_be`` calls, hidden or
    marked frames and anything in ``exclude_from_stack`` are dropped up to the
    first frame that is none of those. Other exceptions pass through untouched.
    """
    __tracebackhide__ = True
    try:
        result = assertion()
        if inspect.isawaitable(result):
            return run_blocking(result)
        return result
    except AssertionError as failure:
        raise _trim_failure(failure, exclude_from_stack, config)


async def trimmed_assert_async(
    assertion: Callable[[], Any],
    *exclude_from_stack: Any,
    config: TrimConfig | None = None,
) -> Any:
    """Like ``trimmed_assert``, for test bodies already running in an event loop."""
    __tracebackhide__ = True
    try:
        result = assertion()
        if inspect.isawaitable(result):
            result = await result
        return result
    except AssertionError as failure:
        raise _trim_failure(failure, exclude_from_stack, config)


def assert_equal(
    actual: Any,
    expected: Any,
    extra_exclude_types: Iterable[Any] = (),
    *,
    config: TrimConfig | None = None,
) -> None:
    __tracebackhide__ = True
    trimmed_assert(lambda: should_be(actual, expected), *extra_exclude_types, config=config)


def assert_file_text(
    path: str | Path,
    expected: str,
    extra_exclude_types: Iterable[Any] = (),
) -> None:
    """Read ``path`` as UTF-8 and compare its full text to ``expected``."""
    __tracebackhide__ = True
    assert_equal(Path(path).read_text(encoding="utf-8"), expected, extra_exclude_types)


@skip_in_stack_trace
class TrimmedAsserts:
    """Mixin for test classes: equality checks with trimmed failure tracebacks.

    Set ``trim_config`` on a subclass to override the process-wide settings.
    """

    trim_config: TrimConfig | None = None

    def should_have_text(self, path: str | Path, expected: str) -> None:
        """Reads the file's text and asserts."""
        __tracebackhide__ = True
        self.should_be(Path(path).read_text(encoding="utf-8"), expected)

    def should_be(self, actual: Any, expected: Any) -> None:
        """Equality check; iterators compared to a list are materialised first."""
        __tracebackhide__ = True
        if isinstance(actual, Iterator) and isinstance(expected, list):
            actual = list(actual)
        self.trimmed_should_be(actual, expected)

    def trimmed_should_be(self, actual: Any, expected: Any, *exclude_from_stack: Any) -> None:
        __tracebackhide__ = True
        trimmed_assert(
            lambda: should_be(actual, expected),
            *exclude_from_stack,
            config=self.trim_config,
        )
