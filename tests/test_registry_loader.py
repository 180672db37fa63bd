"""Tests for loading registry files into group specifications."""

from pathlib import Path

import pytest

from semconv_resolver.schemas import (
    AttributeIdSpec,
    AttributeRefSpec,
    ConvType,
    EnumAttributeType,
    RequirementLevel,
    RequirementLevelKind,
    SemConvRegistry,
    SemConvSpecError,
)


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_load_sample_registry_directory(registry_dir: Path) -> None:
    """Directory loading reads every file in sorted order and keeps provenance."""
    registry = SemConvRegistry.from_paths([registry_dir])

    specs = list(registry.groups_with_provenance())
    assert len(registry) == 5
    assert [s.spec.id for s in specs[:2]] == ["registry.http", "attributes.http.common"]
    assert specs[0].provenance == str(registry_dir / "http.yaml")
    assert specs[-1].provenance == str(registry_dir / "server.yaml")
    assert registry.registry_id == str(registry_dir)


def test_group_fields_are_parsed(registry_dir: Path) -> None:
    registry = SemConvRegistry.from_paths([registry_dir / "server.yaml"])
    specs = {s.spec.id: s.spec for s in registry.groups_with_provenance()}

    span = specs["span.http.server"]
    assert span.type is ConvType.SPAN
    assert span.span_kind == "server"
    assert span.extends == "attributes.http.common"
    assert span.stability == "experimental"
    assert [c.any_of for c in span.constraints] == [("server.address",), ("server.port",)]
    assert span.attributes[1] == AttributeRefSpec(
        ref="server.port", brief="Port of the local HTTP server that received the request."
    )

    metric = specs["metric.http.server.request.duration"]
    assert (metric.metric_name, metric.instrument, metric.unit) == (
        "http.server.request.duration",
        "histogram",
        "s",
    )


def test_attribute_types_and_requirement_levels(registry_dir: Path) -> None:
    registry = SemConvRegistry.from_paths([registry_dir / "http.yaml"])
    specs = {s.spec.id: s.spec for s in registry.groups_with_provenance()}

    method = specs["registry.http"].attributes[0]
    assert isinstance(method, AttributeIdSpec)
    assert isinstance(method.type, EnumAttributeType)
    assert method.type.allow_custom_values is True
    assert [m.value for m in method.type.members] == ["GET", "POST"]
    assert method.requirement_level == RequirementLevel(kind=RequirementLevelKind.REQUIRED)
    assert method.examples == ("GET", "POST")

    status_ref = specs["attributes.http.common"].attributes[1]
    assert status_ref.requirement_level == RequirementLevel(
        kind=RequirementLevelKind.CONDITIONALLY_REQUIRED,
        text="If and only if one was received/sent.",
    )


def test_registry_paths_from_environment(monkeypatch: pytest.MonkeyPatch, registry_dir: Path) -> None:
    monkeypatch.setenv("SEMCONV_REGISTRY", str(registry_dir))

    registry = SemConvRegistry.from_paths()

    assert len(registry) == 5


def test_missing_registry_path_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        SemConvRegistry.from_paths([tmp_path / "nope"])


def test_no_registry_path_raises() -> None:
    with pytest.raises(FileNotFoundError):
        SemConvRegistry.from_paths()


def test_empty_file_has_no_groups(tmp_path: Path) -> None:
    registry = SemConvRegistry()
    registry.load_from_file(_write(tmp_path / "empty.yaml", ""))

    assert len(registry) == 0


@pytest.mark.parametrize(
    "content, message",
    [
        ("groups:\n  - type: span\n", "group has no id"),
        ("groups:\n  - id: g\n    type: widget\n", "unknown type"),
        (
            "groups:\n  - id: g\n    type: span\n    attributes:\n      - id: a\n        ref: b\n",
            "exactly one of 'id' or 'ref'",
        ),
        ("groups:\n  - id: g\n    type: span\n    attributes:\n      - id: a\n", "has no type"),
        (
            "groups:\n  - id: g\n    type: span\n    attributes:\n      - id: a\n        type: float\n",
            "unknown attribute type",
        ),
        ("groups:\n  - id: g\n    type: span\n    span_kind: sideways\n", "unknown span_kind"),
        ("groups:\n  - id: g\n    type: metric\n    instrument: meter\n", "unknown instrument"),
        ("groups:\n  - id: g\n    type: span\n    stability: beta\n", "unknown stability"),
        ("groups: {}\n", "'groups' must be a list"),
        ("groups: \"\"\n", "'groups' must be a list"),
        ("groups:\n  - id: g\n    type: span\n    attributes: {}\n", "attributes must be a list"),
        ("groups:\n  - id: g\n    type: span\n    constraints: x\n", "constraints must be a list"),
        ("groups:\n  - id: g\n    type: span\n    events: {}\n", "events must be a list"),
        (
            "groups:\n  - id: g\n    type: span\n    constraints:\n      - any_of: a\n",
            "any_of must be a list",
        ),
        (
            "groups:\n  - id: g\n    type: span\n    attributes:\n      - id: a\n        type: string\n        examples: [{k: v}]\n",
            "examples must be scalars",
        ),
        (
            "groups:\n  - id: g\n    type: span\n    attributes:\n      - ref: a\n        examples: {k: v}\n",
            "examples must be a scalar or a list",
        ),
        ("groups: [\n", "invalid YAML"),
    ],
)
def test_invalid_specs_raise(tmp_path: Path, content: str, message: str) -> None:
    """Parse errors name the offending file."""
    path = _write(tmp_path / "bad.yaml", content)
    registry = SemConvRegistry()

    with pytest.raises(SemConvSpecError) as exc_info:
        registry.load_from_file(path)

    assert message in str(exc_info.value)
    assert exc_info.value.source == str(path)


def test_null_lists_are_empty(tmp_path: Path) -> None:
    """Keys present without a value count as empty lists."""
    path = _write(tmp_path / "nulls.yaml", "groups:\n  - id: g\n    type: span\n    attributes:\n    events:\n")
    registry = SemConvRegistry()
    registry.load_from_file(path)

    (spec,) = [s.spec for s in registry.groups_with_provenance()]
    assert spec.attributes == []
    assert spec.events == []


def test_array_examples_are_frozen(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "arrays.yaml",
        "groups:\n  - id: g\n    type: span\n    attributes:\n"
        "      - id: a\n        type: string[]\n        examples: [[a, b], [c]]\n",
    )
    registry = SemConvRegistry()
    registry.load_from_file(path)

    (spec,) = [s.spec for s in registry.groups_with_provenance()]
    assert spec.attributes[0].examples == (("a", "b"), ("c",))


def test_examples_given_as_lists_are_frozen() -> None:
    assert AttributeIdSpec(id="a", type="string", examples=["x", "y"]).examples == ("x", "y")
    assert AttributeRefSpec(ref="a", examples=[80, [1, 2]]).examples == (80, (1, 2))
    assert AttributeIdSpec(id="a", type="int", examples=3).examples == 3


def test_mapping_examples_are_rejected() -> None:
    with pytest.raises(SemConvSpecError, match="examples must be scalars"):
        AttributeIdSpec(id="a", type="string", examples=[{"k": "v"}])
