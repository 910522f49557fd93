"""ASCII tree rendering of a page's component dependencies."""

from __future__ import annotations

from pathlib import Path

from component_layers.analysis.graph_models import ComponentGraph

# Unicode tree characters
UNICODE_CHARS = ("├── ", "└── ", "│   ", "    ")
# ASCII fallback characters
ASCII_CHARS = ("|-- ", "\\-- ", "|   ", "    ")

CYCLE_MARKER = " [cycle]"
TRUNCATED_MARKER = " [...]"


def render_tree(
    graph: ComponentGraph,
    entry_point: Path,
    style: str = "tree",
    max_depth: int = 50,
) -> str:
    """Render the children of ``entry_point`` as an indented tree.

    A node that already appears on its own ancestor path is marked and not
    expanded again. Shared nodes in separate branches are printed in full.
    """
    branch, last, vertical, space = ASCII_CHARS if style == "ascii" else UNICODE_CHARS
    lines = [graph.display_path(entry_point)]

    # (path, prefix, is_last, ancestors, depth), popped depth-first
    stack: list[tuple[Path, str, bool, tuple[Path, ...], int]] = []

    def push_children(path: Path, prefix: str, ancestors: tuple[Path, ...], depth: int) -> None:
        node = graph.node(path)
        if node is None:
            return
        children = node.children
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], prefix, i == len(children) - 1, ancestors, depth))

    push_children(entry_point, "", (entry_point,), 1)

    while stack:
        path, prefix, is_last, ancestors, depth = stack.pop()
        connector = last if is_last else branch
        label = graph.display_path(path)

        if path in ancestors:
            lines.append(f"{prefix}{connector}{label}{CYCLE_MARKER}")
            continue
        if depth > max_depth:
            lines.append(f"{prefix}{connector}{label}{TRUNCATED_MARKER}")
            continue

        lines.append(f"{prefix}{connector}{label}")
        child_prefix = prefix + (space if is_last else vertical)
        push_children(path, child_prefix, ancestors + (path,), depth + 1)

    return "\n".join(lines)


def render_forest(graph: ComponentGraph, style: str = "tree", max_depth: int = 50) -> str:
    """Render one tree per entry point, separated by blank lines."""
    return "\n\n".join(
        render_tree(graph, entry, style=style, max_depth=max_depth)
        for entry in graph.entry_points
    )
