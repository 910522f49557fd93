"""Component graph builder: reads sources and builds the node arena from resolved imports."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from component_layers.analysis.graph_models import ComponentGraph
from component_layers.models import CheckConfig, SourceFile
from component_layers.scanner import is_test_file, read_source, scan_source

logger = logging.getLogger(__name__)


class ComponentGraphBuilder:
    """Build a component graph from candidate source files."""

    def __init__(self, config: CheckConfig):
        self.config = config

    def build(self, candidate_files: list[Path]) -> ComponentGraph:
        graph = ComponentGraph(
            project_root=self.config.project_root,
            pages_root=self.config.pages_root,
            components_root=self.config.components_root,
            loader=self.load,
        )

        root = self.config.project_root
        files = [
            p for p in candidate_files
            if not is_test_file(
                p.relative_to(root) if p.is_relative_to(root) else p,
                self.config.test_patterns,
            )
        ]

        # Files with no resolved internal import stay out of the initial set;
        # they remain reachable by path through graph.node().
        dropped = 0
        for source in self.read_all(files):
            if source.targets:
                graph.add_source(source)
            else:
                dropped += 1

        logger.info(
            "built graph: %d node(s) from %d file(s), %d without internal imports",
            len(graph), len(files), dropped,
        )
        return graph

    def materialize_targets(self, graph: ComponentGraph) -> int:
        """Read every resolved target not yet in the arena, batch by batch.

        Returns the number of nodes added.
        """
        added = 0
        while True:
            missing = sorted({
                child
                for node in list(graph.nodes.values())
                for child in node.children
                if child not in graph.nodes and child.is_file()
            })
            if not missing:
                return added
            for source in self.read_all(missing):
                graph.add_source(source)
                added += 1

    def read_all(self, paths: list[Path]) -> list[SourceFile]:
        """Read and scan ``paths`` with a bounded thread pool.

        The whole batch is awaited; an OSError from any read propagates.
        """
        if not paths:
            return []
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            contents = list(pool.map(read_source, paths))
        return [
            scan_source(path, text, self.config)
            for path, text in zip(paths, contents)
        ]

    def load(self, path: Path) -> SourceFile:
        return scan_source(path, read_source(path), self.config)
