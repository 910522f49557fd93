"""Rendering of graphs and check results."""

from __future__ import annotations

from component_layers.formatter.report import format_findings, format_summary, to_json
from component_layers.formatter.tree import render_forest, render_tree

__all__ = [
    "format_findings",
    "format_summary",
    "render_forest",
    "render_tree",
    "to_json",
]
