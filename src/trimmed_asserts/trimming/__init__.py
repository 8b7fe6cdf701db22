from .exclusions import build_exclusions, qualified_name, synthetic_variants
from .noise import is_noise
from .skip import SKIP_REGISTRY, SkipRegistry, skip_in_stack_trace
from .trim import trim_frames

__all__ = [
    "SKIP_REGISTRY",
    "SkipRegistry",
    "build_exclusions",
    "is_noise",
    "qualified_name",
    "skip_in_stack_trace",
    "synthetic_variants",
    "trim_frames",
]
