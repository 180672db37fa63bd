"""Tests for the any_of constraint check of resolved groups."""

import pytest

from semconv_resolver.resolved import AttributeGroupKind, AttributeRef, Constraint, Group, Registry
from semconv_resolver.resolver import (
    InternalResolverError,
    ResolverError,
    UnresolvedAttributeError,
    UnresolvedReferencesError,
    UnsatisfiedAnyOfConstraintError,
    check_any_of_constraints,
    check_group_any_of_constraints,
)


def test_no_attribute_and_no_constraint() -> None:
    """A group without constraints always passes."""
    check_group_any_of_constraints("group", set(), [])


def test_attributes_and_no_constraint() -> None:
    check_group_any_of_constraints("group", {"attr1", "attr2"}, [])


def test_all_constraints_satisfiable() -> None:
    """Satisfied constraints pass; empty any_of lists are ignored."""
    check_group_any_of_constraints(
        "group",
        {"attr1", "attr2", "attr3"},
        [
            Constraint(any_of=("attr1", "attr2")),
            Constraint(any_of=("attr3",)),
            Constraint(any_of=()),
        ],
    )


def test_single_unsatisfied_constraint_fails() -> None:
    """The only non-empty any_of constraint is unsatisfied."""
    with pytest.raises(UnsatisfiedAnyOfConstraintError):
        check_group_any_of_constraints(
            "group",
            {"attr1", "attr2", "attr3"},
            [Constraint(any_of=("attr4",)), Constraint(any_of=())],
        )


def test_one_satisfied_constraint_is_enough() -> None:
    """Constraints are alternatives: one satisfied constraint makes the group pass."""
    check_group_any_of_constraints(
        "group",
        {"present"},
        [Constraint(any_of=("missing",)), Constraint(any_of=("present",))],
    )


def test_constraint_requires_every_listed_name() -> None:
    """A constraint listing several names is satisfied only if all are present."""
    with pytest.raises(UnsatisfiedAnyOfConstraintError) as exc_info:
        check_group_any_of_constraints(
            "group", {"a"}, [Constraint(any_of=("a", "b"))]
        )
    assert exc_info.value.any_of_constraints == [["a", "b"]]


def test_error_lists_constraints_and_group_attributes() -> None:
    with pytest.raises(UnsatisfiedAnyOfConstraintError) as exc_info:
        check_group_any_of_constraints(
            "group",
            {"b", "a"},
            [Constraint(any_of=("m1",)), Constraint(any_of=()), Constraint(any_of=("m2",))],
        )

    error = exc_info.value
    assert error.group_id == "group"
    assert error.group_attributes == ["a", "b"]
    assert error.any_of_constraints == [["m1"], ["m2"]]
    assert isinstance(error, ResolverError)


def test_include_is_not_evaluated() -> None:
    """`include` is carried but has no effect on the check."""
    check_group_any_of_constraints(
        "group", {"a"}, [Constraint(any_of=("a",), include="other.group")]
    )


def test_unknown_attribute_ref_is_an_internal_error() -> None:
    """A reference missing from the name index is an internal error, not a registry error."""
    registry = Registry(
        registry_url="test",
        groups=[Group(id="g", typed_group=AttributeGroupKind(), attributes=[AttributeRef(5)])],
    )

    with pytest.raises(UnresolvedAttributeError) as exc_info:
        check_any_of_constraints(registry, ["a"])

    assert exc_info.value.attribute_ref == AttributeRef(5)
    assert isinstance(exc_info.value, InternalResolverError)
    assert not isinstance(exc_info.value, (UnresolvedReferencesError, UnsatisfiedAnyOfConstraintError))


def test_registry_check_uses_name_index() -> None:
    registry = Registry(
        registry_url="test",
        groups=[
            Group(
                id="g",
                typed_group=AttributeGroupKind(),
                constraints=[Constraint(any_of=("b",))],
                attributes=[AttributeRef(0), AttributeRef(1)],
            )
        ],
    )

    check_any_of_constraints(registry, ["a", "b"])
    with pytest.raises(UnsatisfiedAnyOfConstraintError):
        check_any_of_constraints(registry, ["a", "c"])
