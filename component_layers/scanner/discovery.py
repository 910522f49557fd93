"""Candidate file discovery for the pages and components roots."""

from __future__ import annotations

import fnmatch
from pathlib import Path

from component_layers.models import CheckConfig


def is_test_file(path: Path, test_patterns: list[str]) -> bool:
    for part in path.parts:
        for pattern in test_patterns:
            if fnmatch.fnmatch(part, pattern):
                return True
    return False


def is_ignored(path: Path, ignore_patterns: list[str]) -> bool:
    text = path.as_posix()
    return any(pattern in text for pattern in ignore_patterns)


def iter_candidate_files(directory: Path, config: CheckConfig) -> list[Path]:
    """Recursively list source files under ``directory``.

    Ignore patterns are plain substrings of the posix path; test patterns
    are fnmatch patterns applied to each path part. Errors while walking
    the tree propagate to the caller.
    """
    directory = directory.resolve()
    files: list[Path] = []
    for path in sorted(directory.rglob("*")):
        if not path.is_file():
            continue
        if path.suffix not in config.extensions:
            continue
        rel = path.relative_to(directory)
        if is_ignored(rel, config.ignore_patterns):
            continue
        if is_test_file(rel, config.test_patterns):
            continue
        files.append(path)
    return files
