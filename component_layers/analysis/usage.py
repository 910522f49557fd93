"""Usage analysis: reachability from entry points and unused component detection."""

from __future__ import annotations

from pathlib import Path

from component_layers.analysis.graph_models import ComponentGraph
from component_layers.analysis.traversal import DEFAULT_MAX_DEPTH, walk


def collect_used(
    graph: ComponentGraph,
    entry_points: list[Path],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> set[Path]:
    """Paths reachable from at least one entry point, entry points included."""
    used: set[Path] = set()
    for entry in entry_points:
        for step in walk(graph, entry, max_depth):
            if step.node is not None:
                used.add(step.path)
    return used


def find_unused(
    graph: ComponentGraph,
    components: list[Path],
    used: set[Path],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Path]:
    """Return the outermost unused components.

    A dead subtree is reported once, through its unimported root. Dead
    islands where every member is imported by another member (pure cycles)
    report their first member in path order.
    """
    unused = sorted(p for p in set(components) if p not in used)
    if not unused:
        return []

    importers = graph.importers()
    reported: list[Path] = []
    covered: set[Path] = set()

    def cover(root: Path) -> None:
        reported.append(root)
        covered.add(root)
        for step in walk(graph, root, max_depth):
            if step.node is not None:
                covered.add(step.path)

    for path in unused:
        if not importers.get(path, set()) - {path}:
            cover(path)

    for path in unused:
        if path not in covered:
            cover(path)

    return sorted(reported)
