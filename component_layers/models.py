"""Data models for the component-layers pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ImportEdge:
    """A single import declaration found in a source file."""
    specifier: str
    resolved: Path | None = None  # key into the graph arena


@dataclass
class SourceFile:
    """Result from the scanner stage. Raw text is never kept."""
    path: Path
    imports: list[ImportEdge] = field(default_factory=list)

    @property
    def targets(self) -> list[Path]:
        """Distinct resolved targets in first-seen order, self-imports included."""
        seen: list[Path] = []
        for edge in self.imports:
            if edge.resolved is None:
                continue
            if edge.resolved not in seen:
                seen.append(edge.resolved)
        return seen


@dataclass
class CheckConfig:
    """Configuration for the layering check."""
    project_root: Path = field(default_factory=lambda: Path("."))
    pages_dir: str = "pages"
    components_dir: str = "components"
    # Probe order matters: the first extension that exists wins
    extensions: tuple[str, ...] = (".tsx", ".ts", ".jsx", ".js")
    index_name: str = "index"
    alias_prefix: str = "@/"
    alias_namespaces: tuple[str, ...] = ("components", "shared")
    style_extensions: tuple[str, ...] = (".css", ".scss", ".sass", ".less", ".styl")
    ignore_patterns: list[str] = field(default_factory=lambda: [
        "node_modules", ".next", "dist", "build", ".git", "__snapshots__",
    ])
    test_patterns: list[str] = field(default_factory=lambda: [
        "*.test.*", "*.spec.*", "__tests__",
    ])
    shared_dirs: tuple[str, ...] = ("shared",)
    allow_unused: list[str] = field(default_factory=list)
    max_depth: int = 50
    max_workers: int = 8

    def __post_init__(self) -> None:
        self.project_root = Path(self.project_root).resolve()

    @property
    def pages_root(self) -> Path:
        return self.project_root / self.pages_dir

    @property
    def components_root(self) -> Path:
        return self.project_root / self.components_dir
