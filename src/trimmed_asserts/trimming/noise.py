from __future__ import annotations

from trimmed_asserts.config import TrimConfig, default_config
from trimmed_asserts.frames.models import Frame

from .skip import SKIP_REGISTRY, SkipRegistry


def is_noise(
    frame: Frame,
    exclusions: frozenset[str] | set[str],
    config: TrimConfig | None = None,
    registry: SkipRegistry = SKIP_REGISTRY,
) -> bool:
    settings = config or default_config()
    if frame.qualifier in exclusions:
        return True
    if frame.qualifier in settings.runtime_qualifiers:
        return True
    if frame.method_name == settings.wrapper_method:
        return True
    if frame.skipped or registry.is_call_site_skipped(frame):
        return True
    return registry.is_type_skipped(frame.qualifier)
