"""Translate registry vocabularies (span kind, instrument, stability, constraints) to resolved values."""

from opentelemetry.trace import SpanKind

from ..resolved.attribute import Stability
from ..resolved.registry import Constraint, Instrument
from ..schemas.group_spec import ConstraintSpec, SemConvSpecError

_SPAN_KINDS = {
    "client": SpanKind.CLIENT,
    "server": SpanKind.SERVER,
    "internal": SpanKind.INTERNAL,
    "producer": SpanKind.PRODUCER,
    "consumer": SpanKind.CONSUMER,
}


def resolve_span_kind(span_kind: str) -> SpanKind:
    try:
        return _SPAN_KINDS[span_kind]
    except KeyError:
        raise SemConvSpecError(f"unknown span_kind '{span_kind}'") from None


def resolve_instrument(instrument: str) -> Instrument:
    try:
        return Instrument(instrument)
    except ValueError:
        raise SemConvSpecError(f"unknown instrument '{instrument}'") from None


def resolve_stability(stability: str | None) -> Stability | None:
    if stability is None:
        return None
    try:
        return Stability(stability)
    except ValueError:
        raise SemConvSpecError(f"unknown stability '{stability}'") from None


def resolve_constraints(constraints: list[ConstraintSpec]) -> list[Constraint]:
    return [Constraint(any_of=tuple(c.any_of), include=c.include) for c in constraints]
