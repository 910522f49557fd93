"""Placement rules: check each component's directory against the components that use it.

Depth is the number of path segments below the components root, with a
trailing index file dropped, so ``forms/button/index.tsx`` has depth 2.

Rule A (depth <= 2): a component used only by components that all live in
the same directory should live under that directory.
Rule B (depth > 2): a parent may not be nested deeper than its dependency
and must sit on the dependency's own branch of the tree.
Rule C: pages may import only components of depth <= 2.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from component_layers.analysis.findings import Finding, FindingKind
from component_layers.analysis.graph_models import ComponentGraph, ComponentNode
from component_layers.models import CheckConfig

TOP_LEVEL_DEPTH = 2


def component_segments(path: Path, components_root: Path, index_name: str = "index") -> tuple[str, ...]:
    parts = path.relative_to(components_root).parts
    if parts and PurePosixPath(parts[-1]).stem == index_name:
        parts = parts[:-1]
    return tuple(parts)


def directory_segments(path: Path, components_root: Path) -> tuple[str, ...]:
    return path.parent.relative_to(components_root).parts


def validate_placement(graph: ComponentGraph, config: CheckConfig) -> list[Finding]:
    findings: list[Finding] = []
    for path in sorted(graph.nodes):
        if not graph.is_component(path):
            continue
        node = graph.nodes[path]
        depth = len(component_segments(path, graph.components_root, config.index_name))
        if depth <= TOP_LEVEL_DEPTH:
            findings.extend(_check_shallow(graph, node, config))
        else:
            findings.extend(_check_nested(graph, node, config))
    findings.extend(_check_pages(graph, config))
    return findings


def _check_shallow(graph: ComponentGraph, node: ComponentNode, config: CheckConfig) -> list[Finding]:
    if not node.parents:
        return []
    if any(not graph.is_component(parent) for parent in node.parents):
        return []

    segments = component_segments(node.path, graph.components_root, config.index_name)
    if segments and (
        segments[0] in config.shared_dirs
        or PurePosixPath(segments[0]).stem in config.shared_dirs
    ):
        return []

    parent_dirs = {directory_segments(p, graph.components_root) for p in node.parents}
    if len(parent_dirs) != 1:
        return []
    prefix = parent_dirs.pop()

    node_dir = directory_segments(node.path, graph.components_root)
    if node_dir[:len(prefix)] == prefix:
        return []

    return [Finding(
        kind=FindingKind.SHOULD_MOVE_DEEPER,
        paths=(_component_display(graph, node.path), "/".join(prefix)),
    )]


def _check_nested(graph: ComponentGraph, node: ComponentNode, config: CheckConfig) -> list[Finding]:
    findings: list[Finding] = []
    dependency = component_segments(node.path, graph.components_root, config.index_name)

    for parent in sorted(node.parents):
        if not graph.is_component(parent):
            continue
        owner = component_segments(parent, graph.components_root, config.index_name)
        if not owner:
            continue  # the components root index owns everything

        pair = (_component_display(graph, parent), _component_display(graph, node.path))
        if len(owner) > len(dependency):
            findings.append(Finding(FindingKind.PARENT_DEEPER_THAN_DEPENDENCY, pair))
        elif owner[:-1] != dependency[:len(owner) - 1]:
            findings.append(Finding(FindingKind.PARENT_IN_DIFFERENT_SUBDIRECTORY, pair))

    return findings


def _check_pages(graph: ComponentGraph, config: CheckConfig) -> list[Finding]:
    findings: list[Finding] = []
    for entry in graph.entry_points:
        node = graph.node(entry)
        if node is None:
            continue
        for child in node.children:
            if not graph.is_component(child):
                continue
            depth = len(component_segments(child, graph.components_root, config.index_name))
            if depth > TOP_LEVEL_DEPTH:
                findings.append(Finding(
                    kind=FindingKind.PAGE_USES_NON_TOP_LEVEL_COMPONENT,
                    paths=(
                        graph.display_path(entry, graph.pages_root),
                        _component_display(graph, child),
                    ),
                ))
    return findings


def _component_display(graph: ComponentGraph, path: Path) -> str:
    return graph.display_path(path, graph.components_root)
