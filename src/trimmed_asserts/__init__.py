from .asserts import (
    TrimmedAsserts,
    assert_equal,
    assert_file_text,
    run_blocking,
    trimmed_assert,
    trimmed_assert_async,
)
from .config import TrimConfig, default_config, load_config
from .errors import AssertionMismatch, UnqualifiableTypeError
from .frames import Frame
from .matchers import should_be
from .trimming import SKIP_REGISTRY, SkipRegistry, build_exclusions, skip_in_stack_trace, trim_frames
from .working_dir import HasWorkingDir

__all__ = [
    "AssertionMismatch",
    "Frame",
    "HasWorkingDir",
    "SKIP_REGISTRY",
    "SkipRegistry",
    "TrimConfig",
    "TrimmedAsserts",
    "UnqualifiableTypeError",
    "assert_equal",
    "assert_file_text",
    "build_exclusions",
    "default_config",
    "load_config",
    "run_blocking",
    "should_be",
    "skip_in_stack_trace",
    "trim_frames",
    "trimmed_assert",
    "trimmed_assert_async",
]
