"""Text and JSON reports for check results."""

from __future__ import annotations

import json
from pathlib import Path

import click

from component_layers.analysis.findings import Finding, FindingKind

_KIND_COLORS = {
    FindingKind.CYCLE: "magenta",
    FindingKind.UNUSED: "yellow",
    FindingKind.SHOULD_MOVE_DEEPER: "cyan",
    FindingKind.PARENT_DEEPER_THAN_DEPENDENCY: "red",
    FindingKind.PARENT_IN_DIFFERENT_SUBDIRECTORY: "red",
    FindingKind.PAGE_USES_NON_TOP_LEVEL_COMPONENT: "red",
}

_KIND_TITLES = {
    FindingKind.CYCLE: "Import cycles",
    FindingKind.UNUSED: "Unused components",
    FindingKind.SHOULD_MOVE_DEEPER: "Components to move deeper",
    FindingKind.PARENT_DEEPER_THAN_DEPENDENCY: "Parents nested deeper than their dependency",
    FindingKind.PARENT_IN_DIFFERENT_SUBDIRECTORY: "Imports across subdirectories",
    FindingKind.PAGE_USES_NON_TOP_LEVEL_COMPONENT: "Pages importing nested components",
}


def format_findings(findings: list[Finding], color: bool = True) -> str:
    """Group findings by kind, in FindingKind order."""
    lines: list[str] = []
    for kind in FindingKind:
        group = [f for f in findings if f.kind is kind]
        if not group:
            continue
        title = f"{_KIND_TITLES[kind]} ({len(group)})"
        lines.append(click.style(title, fg=_KIND_COLORS[kind], bold=True) if color else title)
        for finding in group:
            text = finding.message
            if finding.exempt:
                text += " (allowed)"
                text = click.style(text, dim=True) if color else text
            lines.append(f"  {text}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def format_summary(result, color: bool = True) -> str:
    graph = result.graph
    total = len(result.findings)
    actionable = sum(1 for f in result.findings if f.actionable)
    summary = (
        f"{len(graph.entry_points)} page(s), {len(result.components)} component(s), "
        f"{len(result.used)} used, {total} finding(s), {actionable} actionable"
    )
    if not color:
        return summary
    fg = "red" if result.changes_needed else "green"
    return click.style(summary, fg=fg)


def to_json(result, indent: int = 2) -> str:
    """Machine-readable report: findings, used set and the graph arena."""
    graph = result.graph

    def rel(path: Path) -> str:
        return graph.display_path(path)

    nodes = []
    for path in sorted(graph.nodes):
        node = graph.nodes[path]
        nodes.append({
            "path": rel(path),
            "entry_point": node.is_entry_point,
            "children": [rel(c) for c in node.children],
            "parents": sorted(rel(p) for p in node.parents),
            "depth_levels": sorted(node.depth_levels),
            "min_depth": node.min_depth,
        })

    data = {
        "changes_needed": result.changes_needed,
        "findings": [f.to_dict() for f in result.findings],
        "used": sorted(rel(p) for p in result.used),
        "nodes": nodes,
    }
    return json.dumps(data, indent=indent)
