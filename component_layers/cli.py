"""Click CLI with check and tree subcommands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from component_layers.config import ConfigError, load_config
from component_layers.formatter import format_findings, format_summary, render_forest, render_tree, to_json
from component_layers.models import CheckConfig
from component_layers.pipeline import LayoutError, run_check

_ROOT_ARG = click.argument(
    "project_root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
)


def _config_options(func):
    options = [
        click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
                     help="Config file (default: component-layers.json in the project root)"),
        click.option("--pages-dir", help="Pages directory name"),
        click.option("--components-dir", help="Components directory name"),
        click.option("--alias-prefix", help="Import alias resolved from the project root"),
        click.option("--namespace", "alias_namespaces", multiple=True,
                     help="Alias namespace allowed after the prefix (repeatable)"),
        click.option("--ignore", "ignore_patterns", multiple=True,
                     help="Skip paths containing this substring (repeatable)"),
        click.option("--max-depth", type=click.IntRange(min=1), help="Traversal depth ceiling"),
        click.option("--workers", "max_workers", type=click.IntRange(min=1),
                     help="Parallel file reads"),
        click.option("-v", "--verbose", is_flag=True, help="Debug logging"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(project_root: Path, config_path: Path | None, verbose: bool, **overrides) -> CheckConfig:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    for key, value in list(overrides.items()):
        if isinstance(value, tuple) and not value:
            overrides[key] = None
    try:
        return load_config(project_root, config_path, **overrides)
    except ConfigError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """component-layers: enforce directory layering rules for pages and components."""


@cli.command()
@_ROOT_ARG
@_config_options
@click.option("--allow-unused", multiple=True, help="Glob of components allowed to be unused (repeatable)")
@click.option("--tree/--no-tree", "show_tree", default=False, help="Print each page's dependency tree")
@click.option("--style", type=click.Choice(["tree", "ascii"]), default="tree", help="Tree characters")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text")
@click.option("--color/--no-color", default=True, help="Colored output")
def check(
    project_root: Path,
    config_path: Path | None,
    verbose: bool,
    allow_unused: tuple[str, ...],
    show_tree: bool,
    style: str,
    output_format: str,
    color: bool,
    **overrides,
):
    """Check a project's pages and components against the layering rules."""
    config = _build_config(project_root, config_path, verbose, allow_unused=allow_unused, **overrides)

    try:
        result = run_check(config)
    except (LayoutError, OSError) as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(to_json(result))
        sys.exit(1 if result.changes_needed else 0)

    if show_tree:
        forest = render_forest(result.graph, style=style, max_depth=config.max_depth)
        if forest:
            click.echo(forest)
            click.echo()

    if result.findings:
        click.echo(format_findings(result.findings, color=color))
        click.echo()
    click.echo(format_summary(result, color=color))

    if result.changes_needed:
        click.echo(click.style("Changes needed.", fg="red") if color else "Changes needed.")
        sys.exit(1)
    click.echo(click.style("No changes needed.", fg="green") if color else "No changes needed.")


@cli.command()
@_ROOT_ARG
@_config_options
@click.option("--page", "pages", multiple=True, help="Page path relative to the pages directory (repeatable)")
@click.option("--style", type=click.Choice(["tree", "ascii"]), default="tree", help="Tree characters")
def tree(
    project_root: Path,
    config_path: Path | None,
    verbose: bool,
    pages: tuple[str, ...],
    style: str,
    **overrides,
):
    """Print the component dependency tree of each page."""
    config = _build_config(project_root, config_path, verbose, **overrides)

    try:
        result = run_check(config)
    except (LayoutError, OSError) as e:
        raise click.ClickException(str(e))

    graph = result.graph
    if not pages:
        click.echo(render_forest(graph, style=style, max_depth=config.max_depth))
        return

    for i, page in enumerate(pages):
        entry = (config.pages_root / page).resolve()
        if graph.node(entry) is None:
            raise click.ClickException(f"Page not found: {page}")
        if i:
            click.echo()
        click.echo(render_tree(graph, entry, style=style, max_depth=config.max_depth))


if __name__ == "__main__":
    cli()
