"""
Load semantic convention registry files.

Reads one or more registry YAML files (paths from the argument, `SEMCONV_REGISTRY`,
or `--registry`) and keeps every group together with its provenance:
- A file path loads that file
- A directory loads every *.yaml / *.yml file below it, in sorted order
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import yaml

from ..config import SEMCONV_FILE_SUFFIXES, get_registry_paths, load_yaml
from .group_spec import GroupSpec, GroupSpecWithProvenance, SemConvSpecError

logger = logging.getLogger(__name__)


class SemConvRegistry:
    """Collection of semantic convention group specifications with provenance."""

    def __init__(self, registry_id: str = ""):
        self.registry_id = registry_id
        self._specs: list[GroupSpecWithProvenance] = []

    @classmethod
    def from_paths(cls, paths: Iterable[Path | str] | None = None, registry_id: str = "") -> "SemConvRegistry":
        """Build a registry from paths (argument, else SEMCONV_REGISTRY)."""
        resolved_paths = [Path(p) for p in paths] if paths is not None else get_registry_paths()
        if not resolved_paths:
            raise FileNotFoundError(
                "Registry path is required. Set SEMCONV_REGISTRY or pass --registry with the path "
                "to your semantic convention registry."
            )
        registry = cls(registry_id or str(resolved_paths[0]))
        registry.load_from_paths(resolved_paths)
        return registry

    def load_from_paths(self, paths: Iterable[Path | str]) -> None:
        """Load files and directories of registry files."""
        for path in paths:
            path = Path(path)
            if path.is_dir():
                files = sorted(
                    p for p in path.rglob("*") if p.is_file() and p.suffix in SEMCONV_FILE_SUFFIXES
                )
                for file in files:
                    self.load_from_file(file)
            elif path.is_file():
                self.load_from_file(path)
            else:
                raise FileNotFoundError(f"Registry path not found: {path}")

    def load_from_file(self, path: Path | str) -> None:
        """Load all groups declared in one registry file."""
        path = Path(path)
        provenance = str(path)
        try:
            data = load_yaml(path)
        except yaml.YAMLError as e:
            raise SemConvSpecError(f"invalid YAML: {e}", provenance) from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SemConvSpecError("registry file must be a mapping with a 'groups' list", provenance)
        groups = data.get("groups")
        if groups is None:
            groups = []
        elif not isinstance(groups, list):
            raise SemConvSpecError("'groups' must be a list", provenance)
        for group_data in groups:
            self.add_group_spec(GroupSpec.from_yaml(group_data, provenance), provenance)
        logger.debug("Loaded %d groups from %s", len(groups), provenance)

    def add_group_spec(self, spec: GroupSpec, provenance: str) -> None:
        """Add a group specification loaded by other means (tests, remote registries)."""
        self._specs.append(GroupSpecWithProvenance(spec=spec, provenance=provenance))

    def groups_with_provenance(self) -> Iterator[GroupSpecWithProvenance]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)
