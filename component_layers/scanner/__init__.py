"""File discovery, import extraction and import resolution."""

from __future__ import annotations

from pathlib import Path

from component_layers.models import CheckConfig, ImportEdge, SourceFile
from component_layers.scanner.discovery import is_test_file, iter_candidate_files
from component_layers.scanner.import_scanner import extract_specifiers, find_imports
from component_layers.scanner.resolver import probe, resolve


def read_source(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def scan_source(path: Path, source: str, config: CheckConfig) -> SourceFile:
    """Extract and resolve the imports of one file. ``source`` is not kept."""
    edges = [
        ImportEdge(specifier=spec, resolved=resolve(path, spec, config))
        for spec in extract_specifiers(source)
    ]
    return SourceFile(path=path, imports=edges)


__all__ = [
    "extract_specifiers",
    "find_imports",
    "is_test_file",
    "iter_candidate_files",
    "probe",
    "read_source",
    "resolve",
    "scan_source",
]
