"""Shared fixtures: on-disk sample projects and in-memory graphs."""

from pathlib import Path

import pytest

from component_layers.analysis.graph_models import ComponentGraph, ComponentNode

FIXTURES = Path(__file__).parent / "fixtures"
REPO = Path("/repo")


@pytest.fixture
def make_project(tmp_path):
    """Write ``{relative_path: source}`` under tmp_path and return the root."""
    def _make(files: dict[str, str]) -> Path:
        root = tmp_path.resolve()
        (root / "pages").mkdir(exist_ok=True)
        (root / "components").mkdir(exist_ok=True)
        for rel, source in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        return root
    return _make


def make_graph(edges: dict[str, list[str]]) -> ComponentGraph:
    """In-memory graph rooted at /repo. Keys and targets are repo-relative."""
    graph = ComponentGraph(
        project_root=REPO,
        pages_root=REPO / "pages",
        components_root=REPO / "components",
    )
    for rel in edges:
        path = REPO / rel
        graph.nodes[path] = ComponentNode(path=path, is_entry_point=graph.is_page(path))
    for rel, targets in edges.items():
        for target in targets:
            graph.nodes[REPO / rel].add_child(REPO / target)
            if REPO / target not in graph.nodes:
                graph.nodes[REPO / target] = ComponentNode(
                    path=REPO / target, is_entry_point=graph.is_page(REPO / target),
                )
    return graph
