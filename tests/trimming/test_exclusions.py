from __future__ import annotations

import json
import sys

import pytest

from trimmed_asserts.asserts import TrimmedAsserts
from trimmed_asserts.constants import NESTED_WRAPPERS, SUPPORT_QUALIFIERS
from trimmed_asserts.errors import UnqualifiableTypeError
from trimmed_asserts.trimming import build_exclusions, qualified_name, synthetic_variants
from trimmed_asserts.working_dir import HasWorkingDir


class _Checks:
    class Nested:
        pass


def test_support_qualifiers_name_the_support_types() -> None:
    import trimmed_asserts.asserts as asserts_module

    assert qualified_name(TrimmedAsserts) in SUPPORT_QUALIFIERS
    assert qualified_name(HasWorkingDir) in SUPPORT_QUALIFIERS
    assert qualified_name(asserts_module) in SUPPORT_QUALIFIERS


def test_qualified_name_of_classes_and_modules() -> None:
    assert qualified_name(_Checks) == f"{__name__}._Checks"
    assert qualified_name(_Checks.Nested) == f"{__name__}._Checks.Nested"
    assert qualified_name(json) == "json"


@pytest.mark.parametrize("type_ref", [None, 42, "tests.Checks"])
def test_qualified_name_fails_fast(type_ref: object) -> None:
    with pytest.raises(UnqualifiableTypeError):
        qualified_name(type_ref)


def test_synthetic_variants() -> None:
    variants = synthetic_variants("pkg.mod.Helper")

    assert "pkg.mod.Helper" in variants
    assert "pkg.mod.Helper.trimmed_assert.<locals>" in variants
    assert "pkg.mod.Helper.trimmed_should_be.<locals>" in variants
    assert "pkg.mod.Helper.should_be.<locals>" in variants
    assert "pkg.mod.Helper.run_blocking.<locals>" in variants
    assert len(variants) == len(NESTED_WRAPPERS) + 1


def test_base_types_always_present() -> None:
    for exclusions in (build_exclusions(), build_exclusions([_Checks]), build_exclusions([json])):
        for qualifier in SUPPORT_QUALIFIERS:
            assert synthetic_variants(qualifier) <= exclusions


def test_extra_types_add_all_their_variants() -> None:
    exclusions = build_exclusions([_Checks], ["tests.helpers"])

    assert synthetic_variants(f"{__name__}._Checks") <= exclusions
    assert synthetic_variants("tests.helpers") <= exclusions
    assert f"{__name__}._Checks" not in build_exclusions()


def test_extra_types_fail_fast_on_unqualifiable_entries() -> None:
    with pytest.raises(UnqualifiableTypeError):
        build_exclusions([_Checks, None])


def test_module_must_be_passed_to_drop_its_top_level_functions() -> None:
    assert __name__ not in build_exclusions([_Checks])
    assert synthetic_variants(__name__) <= build_exclusions([_Checks, sys.modules[__name__]])
