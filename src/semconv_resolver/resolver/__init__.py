"""Resolution of attribute references, extends clauses and constraints."""

from .attribute_catalog import AttributeCatalog
from .errors import (
    InternalResolverError,
    ResolverError,
    UnresolvedAttributeError,
    UnresolvedAttributeRef,
    UnresolvedExtendsRef,
    UnresolvedReference,
    UnresolvedReferencesError,
    UnsatisfiedAnyOfConstraintError,
)
from .registry import (
    FixedPointResult,
    UnresolvedGroup,
    UnresolvedRegistry,
    check_any_of_constraints,
    check_group_any_of_constraints,
    resolve_semconv_registry,
)

__all__ = [
    "AttributeCatalog",
    "FixedPointResult",
    "InternalResolverError",
    "ResolverError",
    "UnresolvedAttributeError",
    "UnresolvedAttributeRef",
    "UnresolvedExtendsRef",
    "UnresolvedGroup",
    "UnresolvedReference",
    "UnresolvedReferencesError",
    "UnresolvedRegistry",
    "UnsatisfiedAnyOfConstraintError",
    "check_any_of_constraints",
    "check_group_any_of_constraints",
    "resolve_semconv_registry",
]
