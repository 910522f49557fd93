"""Import specifier resolution: maps a raw specifier to a project file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from component_layers.models import CheckConfig

logger = logging.getLogger(__name__)


def is_stylesheet(specifier: str, style_extensions: tuple[str, ...]) -> bool:
    bare = specifier.split("?", 1)[0]
    return bare.lower().endswith(tuple(ext.lower() for ext in style_extensions))


def resolve(source_path: Path, specifier: str, config: CheckConfig) -> Path | None:
    """Resolve ``specifier`` imported from ``source_path``.

    Returns None for stylesheets, external packages, alias imports outside
    the recognized namespaces and targets that do not exist.
    """
    if not specifier or is_stylesheet(specifier, config.style_extensions):
        return None

    if specifier.startswith("."):
        base = source_path.parent / specifier
    elif specifier.startswith(config.alias_prefix):
        tail = specifier[len(config.alias_prefix):]
        namespace = tail.split("/", 1)[0]
        if namespace not in config.alias_namespaces:
            return None
        base = config.project_root / tail
    else:
        return None

    base = Path(os.path.normpath(base))
    resolved = probe(base, config.extensions, config.index_name)
    if resolved is None:
        logger.debug("unresolved import %r in %s", specifier, source_path)
    return resolved


def probe(base: Path, extensions: tuple[str, ...], index_name: str) -> Path | None:
    """Probe exact path, then ``base + ext``, then ``base/index + ext``."""
    if base.is_file():
        return base

    for ext in extensions:
        candidate = base.with_name(base.name + ext)
        if candidate.is_file():
            return candidate

    if base.is_dir():
        for ext in extensions:
            candidate = base / f"{index_name}{ext}"
            if candidate.is_file():
                return candidate

    return None
