from __future__ import annotations

from types import ModuleType
from typing import TypeVar

from trimmed_asserts.errors import UnqualifiableTypeError
from trimmed_asserts.frames.models import Frame, split_qualname

T = TypeVar("T")


def _require_qualifier(qualifier: str) -> str:
    if not isinstance(qualifier, str) or not qualifier:
        raise UnqualifiableTypeError(f"Invalid qualifier for skip lookup: {qualifier!r}")
    return qualifier


class SkipRegistry:
    """Declaring types and call sites whose frames are always noise."""

    def __init__(self) -> None:
        self._types: set[str] = set()
        self._call_sites: set[tuple[str, str]] = set()

    def mark_type(self, qualifier: str) -> None:
        self._types.add(_require_qualifier(qualifier))

    def mark_call_site(self, qualifier: str, method_name: str) -> None:
        self._call_sites.add((_require_qualifier(qualifier), method_name))

    def is_type_skipped(self, qualifier: str) -> bool:
        return _require_qualifier(qualifier) in self._types

    def is_call_site_skipped(self, frame: Frame) -> bool:
        return (_require_qualifier(frame.qualifier), frame.method_name) in self._call_sites


SKIP_REGISTRY = SkipRegistry()


def skip_in_stack_trace(target: T, registry: SkipRegistry = SKIP_REGISTRY) -> T:
    """Mark a class, module or function so its frames are dropped from trimmed traces.

    Classes and modules are registered as skipped types: every frame they
    declare counts as noise. Functions are registered as single call sites.
    """
    if isinstance(target, ModuleType):
        registry.mark_type(target.__name__)
        return target
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", None)
    if not module or not qualname:
        raise UnqualifiableTypeError(f"Cannot mark {target!r}: missing __module__ or __qualname__")
    if isinstance(target, type):
        registry.mark_type(f"{module}.{qualname}")
    else:
        registry.mark_call_site(*split_qualname(module, qualname))
    return target

