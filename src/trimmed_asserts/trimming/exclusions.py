from __future__ import annotations

from types import ModuleType
from typing import Any, Iterable

from trimmed_asserts.constants import NESTED_WRAPPERS, SUPPORT_QUALIFIERS
from trimmed_asserts.errors import UnqualifiableTypeError


def qualified_name(type_ref: Any) -> str:
    """Fully qualified name of a class or module, as it appears in frame qualifiers."""
    if isinstance(type_ref, ModuleType):
        return type_ref.__name__
    module = getattr(type_ref, "__module__", None)
    qualname = getattr(type_ref, "__qualname__", None)
    if not isinstance(module, str) or not isinstance(qualname, str):
        raise UnqualifiableTypeError(f"Cannot exclude {type_ref!r}: it has no qualified name")
    return f"{module}.{qualname}"


def synthetic_variants(qualifier: str) -> set[str]:
    """The qualifier plus the qualifiers of closures defined inside the wrapper functions.

    A lambda inside ``trimmed_assert`` of module ``pkg.mod`` runs with the
    qualifier ``pkg.mod.trimmed_assert.<locals>``, so one logical wrapper
    shows up under several qualifiers.

    Top-level functions are declared by their module, not by a class. To drop
    those for an extra type, pass the type's module to ``build_exclusions`` too.
    """
    variants = {qualifier}
    variants.update(f"{qualifier}.{name}.<locals>" for name in NESTED_WRAPPERS)
    return variants


def build_exclusions(
    extra_types: Iterable[Any] = (),
    extra_qualifiers: Iterable[str] = (),
) -> frozenset[str]:
    qualifiers = set(SUPPORT_QUALIFIERS)
    qualifiers.update(qualified_name(type_ref) for type_ref in extra_types)
    qualifiers.update(extra_qualifiers)

    exclusions: set[str] = set()
    for qualifier in qualifiers:
        exclusions.update(synthetic_variants(qualifier))
    return frozenset(exclusions)
