"""Cycle-safe depth-first traversal of the component graph.

Every walk carries the chain of ancestors on the current path. A child that
is already on that chain closes a cycle: it is reported and not descended.
Independent branches each get their own chain, so a node shared by two
siblings is visited once per path, not once per walk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from component_layers.analysis.graph_models import ComponentGraph, ComponentNode, CycleReport

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 50


@dataclass(frozen=True)
class Step:
    path: Path
    ancestors: tuple[Path, ...]
    depth: int
    node: ComponentNode | None = None
    cycle: CycleReport | None = None


def walk(graph: ComponentGraph, start: Path, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[Step]:
    """Yield a Step per visited node and per back-edge, in depth-first order.

    Frames deeper than ``max_depth`` are dropped without a step.
    """
    stack: list[tuple[Path, tuple[Path, ...], int]] = [(start, (), 0)]
    while stack:
        path, ancestors, depth = stack.pop()

        if path in ancestors:
            first = ancestors.index(path)
            yield Step(
                path=path,
                ancestors=ancestors,
                depth=depth,
                cycle=CycleReport(chain=ancestors[first:] + (path,)),
            )
            continue

        if depth > max_depth:
            logger.debug("depth ceiling %d reached at %s", max_depth, path)
            continue

        node = graph.node(path)
        if node is None:
            continue

        yield Step(path=path, ancestors=ancestors, depth=depth, node=node)

        chain = ancestors + (path,)
        for child in reversed(node.children):
            stack.append((child, chain, depth + 1))


def assign_children(
    graph: ComponentGraph,
    entry_points: list[Path],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[CycleReport]:
    """Record depth levels for every node reachable from an entry point.

    Returns one report per distinct cycle, in discovery order.
    """
    cycles: dict[tuple[Path, ...], CycleReport] = {}
    for entry in entry_points:
        for step in walk(graph, entry, max_depth):
            if step.cycle is not None:
                cycles.setdefault(step.cycle.key, step.cycle)
                continue
            step.node.record_depth(step.depth)
    if cycles:
        logger.info("found %d import cycle(s)", len(cycles))
    return list(cycles.values())


def assign_parents(
    graph: ComponentGraph,
    entry_points: list[Path],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> None:
    """Add each visited node to the parent set of every one of its children.

    A self-import does not make a node its own parent.
    """
    for entry in entry_points:
        for step in walk(graph, entry, max_depth):
            if step.node is None:
                continue
            for child in step.node.children:
                if child == step.path:
                    continue
                child_node = graph.node(child)
                if child_node is not None:
                    child_node.parents.add(step.path)
