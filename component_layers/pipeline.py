"""Check pipeline: discover -> build -> traverse -> usage -> placement."""

from __future__ import annotations

import fnmatch
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from component_layers.analysis.findings import Finding, FindingKind, changes_needed
from component_layers.analysis.graph_builder import ComponentGraphBuilder
from component_layers.analysis.graph_models import ComponentGraph, CycleReport
from component_layers.analysis.placement import validate_placement
from component_layers.analysis.traversal import assign_children, assign_parents
from component_layers.analysis.usage import collect_used, find_unused
from component_layers.models import CheckConfig
from component_layers.scanner import iter_candidate_files

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


class LayoutError(ValueError):
    """The project root is missing its pages or components directory."""


@dataclass
class CheckResult:
    graph: ComponentGraph
    findings: list[Finding] = field(default_factory=list)
    used: set[Path] = field(default_factory=set)
    cycles: list[CycleReport] = field(default_factory=list)
    components: list[Path] = field(default_factory=list)

    @property
    def changes_needed(self) -> bool:
        return changes_needed(self.findings)


def check_layout(config: CheckConfig) -> None:
    for root in (config.pages_root, config.components_root):
        if not root.is_dir():
            raise LayoutError(f"Expected directory not found: {root}")


def run_scan(config: CheckConfig) -> tuple[list[Path], list[Path]]:
    """Discover candidate files. Returns (pages, components)."""
    check_layout(config)
    pages = iter_candidate_files(config.pages_root, config)
    components = iter_candidate_files(config.components_root, config)
    logger.info("discovered %d page(s) and %d component(s)", len(pages), len(components))
    return pages, components


def run_check(config: CheckConfig, progress: ProgressCallback | None = None) -> CheckResult:
    """Run every analysis phase and collect the findings."""
    stages = 5

    # Stage 1: Discover
    if progress:
        progress("Scanning", 0, stages)
    pages, components = run_scan(config)

    # Stage 2: Build
    if progress:
        progress("Building graph", 1, stages)
    builder = ComponentGraphBuilder(config)
    graph = builder.build(pages + components)
    builder.materialize_targets(graph)
    entry_points = graph.entry_points

    # Stage 3: Traverse
    if progress:
        progress("Traversing", 2, stages)
    cycles = assign_children(graph, entry_points, config.max_depth)
    assign_parents(graph, entry_points, config.max_depth)

    # Stage 4: Usage
    if progress:
        progress("Checking usage", 3, stages)
    used = collect_used(graph, entry_points, config.max_depth)
    unused = find_unused(graph, components, used, config.max_depth)

    # Stage 5: Placement
    if progress:
        progress("Checking placement", 4, stages)
    findings: list[Finding] = [
        Finding(
            kind=FindingKind.CYCLE,
            paths=tuple(graph.display_path(p) for p in cycle.chain),
        )
        for cycle in cycles
    ]
    for path in unused:
        rel = graph.display_path(path, graph.components_root)
        findings.append(Finding(
            kind=FindingKind.UNUSED,
            paths=(rel,),
            exempt=_is_exempt(rel, config.allow_unused),
        ))
    findings.extend(validate_placement(graph, config))

    if progress:
        progress("Checking placement", stages, stages)

    result = CheckResult(
        graph=graph,
        findings=findings,
        used=used,
        cycles=cycles,
        components=components,
    )
    logger.info(
        "%d finding(s), changes needed: %s",
        len(findings), result.changes_needed,
    )
    return result


def _is_exempt(rel_path: str, patterns: list[str]) -> bool:
    return any(fnmatch.fnmatch(rel_path, pattern) for pattern in patterns)
