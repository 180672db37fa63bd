"""
Resolve a semantic convention registry.

Resolution steps:
- Resolve all attribute references against the attribute catalog, applying
  overrides (repeated until no pass makes progress)
- Resolve all `extends` clauses (repeated until no pass makes progress)
- Report every reference left unresolved, if any
- Sort each group's attribute references
- Check the `any_of` constraints of every group
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from opentelemetry import trace

from ..resolved.attribute import AttributeRef
from ..resolved.lineage import (
    FieldId,
    FieldLineage,
    GroupLineage,
    ResolutionMode,
    record_field_lineage,
)
from ..resolved.registry import (
    AttributeGroupKind,
    Constraint,
    EventGroupKind,
    Group,
    MetricGroupGroupKind,
    MetricGroupKind,
    Registry,
    ResourceGroupKind,
    ScopeGroupKind,
    SpanGroupKind,
    TypedGroup,
)
from ..schemas.group_spec import (
    AttributeRefSpec,
    AttributeSpec,
    ConvType,
    GroupSpec,
    GroupSpecWithProvenance,
)
from ..schemas.registry_loader import SemConvRegistry
from .attribute_catalog import AttributeCatalog
from .errors import (
    UnresolvedAttributeError,
    UnresolvedAttributeRef,
    UnresolvedExtendsRef,
    UnresolvedReference,
    UnresolvedReferencesError,
    UnsatisfiedAnyOfConstraintError,
)
from .translators import (
    resolve_constraints,
    resolve_instrument,
    resolve_span_kind,
    resolve_stability,
)

logger = logging.getLogger(__name__)
_tracer = trace.get_tracer(__name__)


@dataclass
class UnresolvedGroup:
    """A group whose attribute specs and `extends` clause are being resolved."""

    group: Group
    # Attribute specs not resolved yet; emptied as resolution progresses.
    attributes: list[AttributeSpec] = field(default_factory=list)
    provenance: str = ""


@dataclass
class UnresolvedRegistry:
    """Registry shell plus the groups still being resolved."""

    registry: Registry
    groups: list[UnresolvedGroup] = field(default_factory=list)


@dataclass(frozen=True)
class FixedPointResult:
    """Outcome of an iterative resolution step."""

    converged: bool
    passes: int


def resolve_semconv_registry(
    attr_catalog: AttributeCatalog,
    registry_url: str,
    registry: SemConvRegistry,
    track_lineage: bool = True,
) -> Registry:
    """
    Resolve the registry and return it with every group fully resolved.

    Args:
        attr_catalog: Catalog used to resolve attribute references; it keeps the
            deduplicated attributes once resolution is done
        registry_url: Identifier (URL or path) of the registry
        registry: Group specifications with provenance
        track_lineage: Attach a GroupLineage to every group

    Returns:
        Registry whose groups hold sorted, unique attribute references

    Raises:
        UnresolvedReferencesError: attribute or extends references cannot be resolved
        UnsatisfiedAnyOfConstraintError: a group satisfies none of its any_of constraints
        UnresolvedAttributeError: the catalog cannot name a reference it issued
    """
    with _tracer.start_as_current_span("semconv.registry.resolve") as span:
        span.set_attribute("semconv.registry.url", registry_url)
        ureg = unresolved_registry_from_specs(registry_url, registry, track_lineage)
        span.set_attribute("semconv.registry.group_count", len(ureg.groups))

        attributes_result = resolve_attribute_references(ureg, attr_catalog)
        extends_result = resolve_extends_references(ureg)

        if not (attributes_result.converged and extends_result.converged):
            unresolved_refs = collect_unresolved_references(ureg)
            if unresolved_refs:
                for ref in unresolved_refs:
                    logger.warning("Unresolved reference: %s", ref)
                raise UnresolvedReferencesError(unresolved_refs)

        # Sorted (and unique) references make resolved registries comparable.
        for unresolved_group in ureg.groups:
            group = unresolved_group.group
            group.attributes = sorted(set(group.attributes))
            ureg.registry.groups.append(group)

        check_any_of_constraints(ureg.registry, attr_catalog.attribute_name_index())

        span.set_attribute("semconv.registry.attribute_count", len(attr_catalog))
        logger.info(
            "Resolved registry %s: %d groups, %d attributes",
            registry_url,
            len(ureg.registry.groups),
            len(attr_catalog),
        )
        return ureg.registry


def collect_unresolved_references(ureg: UnresolvedRegistry) -> list[UnresolvedReference]:
    """List every pending `extends` target and attribute reference of every group."""
    unresolved_refs: list[UnresolvedReference] = []
    for unresolved_group in ureg.groups:
        group = unresolved_group.group
        if group.extends is not None:
            unresolved_refs.append(
                UnresolvedExtendsRef(
                    group_id=group.id,
                    extends_ref=group.extends,
                    provenance=unresolved_group.provenance,
                )
            )
        for attr_spec in unresolved_group.attributes:
            if isinstance(attr_spec, AttributeRefSpec):
                unresolved_refs.append(
                    UnresolvedAttributeRef(
                        group_id=group.id,
                        attribute_ref=attr_spec.ref,
                        provenance=unresolved_group.provenance,
                    )
                )
    return unresolved_refs


def check_any_of_constraints(registry: Registry, attr_name_index: Sequence[str]) -> None:
    """Check the any_of constraints of every group of a resolved registry."""
    with _tracer.start_as_current_span("semconv.registry.check_any_of_constraints"):
        for group in registry.groups:
            group_attr_names = set()
            for attr_ref in group.attributes:
                if not 0 <= attr_ref.index < len(attr_name_index):
                    raise UnresolvedAttributeError(attr_ref)
                group_attr_names.add(attr_name_index[attr_ref.index])
            check_group_any_of_constraints(group.id, group_attr_names, group.constraints)


def check_group_any_of_constraints(
    group_id: str,
    group_attr_names: set[str],
    constraints: Sequence[Constraint],
) -> None:
    """
    Check the any_of constraints of one group.

    A constraint is satisfied when all its names are group attributes. The group
    fails only when it has any_of constraints and none of them is satisfied.
    Constraints with an empty any_of list are ignored.
    """
    any_of_total = 0
    any_of_unsatisfied = 0
    any_of_constraints: list[list[str]] = []
    for constraint in constraints:
        if not constraint.any_of:
            continue
        any_of_total += 1
        any_of_constraints.append(list(constraint.any_of))
        if not all(name in group_attr_names for name in constraint.any_of):
            any_of_unsatisfied += 1

    if any_of_total > 0 and any_of_unsatisfied == any_of_total:
        raise UnsatisfiedAnyOfConstraintError(
            group_id=group_id,
            group_attributes=sorted(group_attr_names),
            any_of_constraints=any_of_constraints,
        )


def unresolved_registry_from_specs(
    registry_url: str,
    registry: SemConvRegistry,
    track_lineage: bool = True,
) -> UnresolvedRegistry:
    """
    Build the unresolved registry from group specifications. No reference is resolved here.

    Groups are ordered by id so catalog references do not depend on the order
    in which files or groups were enumerated.
    """
    specs = sorted(registry.groups_with_provenance(), key=lambda s: s.spec.id)
    return UnresolvedRegistry(
        registry=Registry(registry_url=registry_url, groups=[]),
        groups=[group_from_spec(s, track_lineage) for s in specs],
    )


def _typed_group_from_spec(spec: GroupSpec) -> TypedGroup:
    match spec.type:
        case ConvType.ATTRIBUTE_GROUP:
            return AttributeGroupKind()
        case ConvType.SPAN:
            return SpanGroupKind(
                span_kind=resolve_span_kind(spec.span_kind) if spec.span_kind else None,
                events=tuple(spec.events),
            )
        case ConvType.EVENT:
            return EventGroupKind(name=spec.name)
        case ConvType.METRIC:
            return MetricGroupKind(
                metric_name=spec.metric_name,
                instrument=resolve_instrument(spec.instrument) if spec.instrument else None,
                unit=spec.unit,
            )
        case ConvType.METRIC_GROUP:
            return MetricGroupGroupKind()
        case ConvType.RESOURCE:
            return ResourceGroupKind()
        case ConvType.SCOPE:
            return ScopeGroupKind()


def group_from_spec(spec_with_provenance: GroupSpecWithProvenance, track_lineage: bool = True) -> UnresolvedGroup:
    """Create an unresolved group from its specification. References are not resolved."""
    spec = spec_with_provenance.spec
    provenance = spec_with_provenance.provenance
    return UnresolvedGroup(
        group=Group(
            id=spec.id,
            typed_group=_typed_group_from_spec(spec),
            brief=spec.brief,
            note=spec.note,
            prefix=spec.prefix,
            extends=spec.extends,
            stability=resolve_stability(spec.stability),
            deprecated=spec.deprecated,
            constraints=resolve_constraints(spec.constraints),
            attributes=[],
            lineage=GroupLineage(provenance=provenance) if track_lineage else None,
        ),
        attributes=list(spec.attributes),
        provenance=provenance,
    )


def resolve_attribute_references(
    ureg: UnresolvedRegistry,
    attr_catalog: AttributeCatalog,
) -> FixedPointResult:
    """
    Resolve the attribute specs of every group against the catalog.

    Each pass retries every pending spec. A reference can only resolve once its
    target was defined, possibly by another group during the same loop, so the
    loop stops when nothing is pending or when a pass resolves nothing.
    """
    with _tracer.start_as_current_span("semconv.registry.resolve_attribute_references") as span:
        passes = 0
        while True:
            passes += 1
            unresolved_attr_count = 0
            resolved_attr_count = 0

            for unresolved_group in ureg.groups:
                group = unresolved_group.group
                pending, unresolved_group.attributes = unresolved_group.attributes, []
                for attr_spec in pending:
                    attr_ref = attr_catalog.resolve(group.id, group.prefix, attr_spec, group.lineage)
                    if attr_ref is None:
                        unresolved_group.attributes.append(attr_spec)
                        unresolved_attr_count += 1
                    else:
                        group.attributes.append(attr_ref)
                        resolved_attr_count += 1

            logger.debug(
                "Attribute pass %d: %d resolved, %d unresolved",
                passes,
                resolved_attr_count,
                unresolved_attr_count,
            )
            if unresolved_attr_count == 0:
                converged = True
                break
            # No progress: the remaining references are dangling or circular.
            if resolved_attr_count == 0:
                converged = False
                break

        span.set_attribute("semconv.resolution.passes", passes)
        span.set_attribute("semconv.resolution.converged", converged)
        return FixedPointResult(converged=converged, passes=passes)


def resolve_extends_references(ureg: UnresolvedRegistry) -> FixedPointResult:
    """
    Resolve the `extends` clause of every group.

    Each pass only inherits from groups whose own `extends` was already resolved
    when the pass started, so a chain A -> B -> C takes one pass per level.
    Inherited references are appended as is (no deduplication here).
    """
    with _tracer.start_as_current_span("semconv.registry.resolve_extends_references") as span:
        passes = 0
        while True:
            passes += 1
            unresolved_extends_count = 0
            resolved_extends_count = 0

            group_index: dict[str, list[AttributeRef]] = {
                g.group.id: list(g.group.attributes) for g in ureg.groups if g.group.extends is None
            }

            for unresolved_group in ureg.groups:
                group = unresolved_group.group
                if group.extends is None:
                    continue
                attr_refs = group_index.get(group.extends)
                if attr_refs is None:
                    unresolved_extends_count += 1
                    continue
                for attr_ref in attr_refs:
                    group.attributes.append(attr_ref)
                    record_field_lineage(
                        group.lineage,
                        attr_ref,
                        FieldId.GROUP_ATTRIBUTES,
                        FieldLineage(resolution_mode=ResolutionMode.EXTENDS, group_id=group.extends),
                    )
                group.extends = None
                resolved_extends_count += 1

            logger.debug(
                "Extends pass %d: %d resolved, %d unresolved",
                passes,
                resolved_extends_count,
                unresolved_extends_count,
            )
            if unresolved_extends_count == 0:
                converged = True
                break
            if resolved_extends_count == 0:
                converged = False
                break

        span.set_attribute("semconv.resolution.passes", passes)
        span.set_attribute("semconv.resolution.converged", converged)
        return FixedPointResult(converged=converged, passes=passes)
