from __future__ import annotations

from itertools import dropwhile, islice
from typing import Iterable

from trimmed_asserts.config import TrimConfig, default_config
from trimmed_asserts.frames.models import Frame

from .noise import is_noise
from .skip import SKIP_REGISTRY, SkipRegistry


def trim_frames(
    frames: Iterable[Frame],
    exclusions: frozenset[str] | set[str],
    config: TrimConfig | None = None,
    registry: SkipRegistry = SKIP_REGISTRY,
) -> list[Frame]:
    """Drop the leading noise frames, then cap the length.

    This is a prefix-drop and not a filter: once a frame survives, every frame
    after it is kept, noise or not, so scheduler frames nested under real test
    code stay visible.
    """
    settings = config or default_config()
    kept = dropwhile(lambda frame: is_noise(frame, exclusions, settings, registry), frames)
    return list(islice(kept, settings.max_frames))
