from __future__ import annotations

MAX_FRAMES = 15

WRAPPER_METHOD = "should_be"

# Frames asyncio puts between a running coroutine and the code that drives it.
RUNTIME_QUALIFIERS: frozenset[str] = frozenset(
    {
        "asyncio.base_events",
        "asyncio.base_events.BaseEventLoop",
        "asyncio.events.Handle",
        "asyncio.futures.Future",
        "asyncio.runners",
        "asyncio.runners.Runner",
        "asyncio.tasks",
        "asyncio.tasks.Task",
        "asyncio.unix_events._UnixSelectorEventLoop",
    }
)

SUPPORT_QUALIFIERS: frozenset[str] = frozenset(
    {
        "trimmed_asserts.asserts",
        "trimmed_asserts.asserts.TrimmedAsserts",
        "trimmed_asserts.working_dir.HasWorkingDir",
    }
)

# Functions whose closures and lambdas show up as `<qualifier>.<name>.<locals>`.
NESTED_WRAPPERS: tuple[str, ...] = (
    "run_blocking",
    "should_be",
    "trimmed_assert",
    "trimmed_should_be",
    "assert_equal",
)
