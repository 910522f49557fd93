"""Data models for the component dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from component_layers.models import SourceFile

Loader = Callable[[Path], SourceFile]


@dataclass
class ComponentNode:
    path: Path
    children: list[Path] = field(default_factory=list)  # ordered, no duplicates
    parents: set[Path] = field(default_factory=set)
    depth_levels: set[int] = field(default_factory=set)
    min_depth: int | None = None
    is_entry_point: bool = False

    def add_child(self, child: Path) -> None:
        if child not in self.children:
            self.children.append(child)

    def record_depth(self, depth: int) -> None:
        self.depth_levels.add(depth)
        if self.min_depth is None or depth < self.min_depth:
            self.min_depth = depth


@dataclass(frozen=True)
class CycleReport:
    """Ancestor sub-chain from the first occurrence through the repeat."""
    chain: tuple[Path, ...]

    @property
    def key(self) -> tuple[Path, ...]:
        """Same loop entered from a different node yields the same key."""
        body = self.chain[:-1]
        if not body:
            return self.chain
        start = body.index(min(body))
        return body[start:] + body[:start]


@dataclass
class ComponentGraph:
    """Path-keyed arena of component nodes.

    Nodes reference each other by path only. Targets that were not part of
    the initial node set are materialized on first lookup through
    ``loader`` after re-checking that the file still exists.
    """
    project_root: Path
    pages_root: Path
    components_root: Path
    nodes: dict[Path, ComponentNode] = field(default_factory=dict)
    loader: Loader | None = None

    def node(self, path: Path) -> ComponentNode | None:
        existing = self.nodes.get(path)
        if existing is not None:
            return existing
        if self.loader is None or not path.is_file():
            return None
        return self.add_source(self.loader(path))

    def add_source(self, source: SourceFile) -> ComponentNode:
        node = self.nodes.get(source.path)
        if node is None:
            node = ComponentNode(
                path=source.path,
                is_entry_point=self.is_page(source.path),
            )
            self.nodes[source.path] = node
        for target in source.targets:
            node.add_child(target)
        return node

    def is_page(self, path: Path) -> bool:
        return path.is_relative_to(self.pages_root)

    def is_component(self, path: Path) -> bool:
        return path.is_relative_to(self.components_root)

    @property
    def entry_points(self) -> list[Path]:
        return sorted(p for p, n in self.nodes.items() if n.is_entry_point)

    def importers(self) -> dict[Path, set[Path]]:
        """Reverse of the children relation over every node in the arena."""
        reverse: dict[Path, set[Path]] = {}
        for path, node in self.nodes.items():
            for child in node.children:
                reverse.setdefault(child, set()).add(path)
        return reverse

    def display_path(self, path: Path, base: Path | None = None) -> str:
        base = base or self.project_root
        try:
            return path.relative_to(base).as_posix()
        except ValueError:
            return path.as_posix()

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, path: Path) -> bool:
        return path in self.nodes
