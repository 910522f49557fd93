"""Tests for the click CLI."""

import json
from pathlib import Path

from click.testing import CliRunner

from component_layers.cli import cli

FIXTURES = Path(__file__).parent / "fixtures"
APP = str(FIXTURES / "app")


def test_check_reports_changes_needed():
    result = CliRunner().invoke(cli, ["check", APP, "--no-color"])

    assert result.exit_code == 1
    assert "Unused components (1)" in result.output
    assert "old/banner.tsx is not used by any page" in result.output
    assert result.output.rstrip().endswith("Changes needed.")


def test_check_allow_unused_is_clean():
    result = CliRunner().invoke(cli, ["check", APP, "--no-color", "--allow-unused", "old/*"])

    assert result.exit_code == 0
    assert "(allowed)" in result.output
    assert "No changes needed." in result.output


def test_check_json_output():
    result = CliRunner().invoke(cli, ["check", APP, "--format", "json"])

    assert result.exit_code == 1
    data = json.loads(result.output)
    assert data["changes_needed"] is True
    assert [f["paths"] for f in data["findings"]] == [["old/banner.tsx"]]


def test_check_with_tree():
    result = CliRunner().invoke(cli, ["check", APP, "--no-color", "--tree", "--style", "ascii"])

    assert "pages/home.tsx" in result.output
    assert "|-- components/header.tsx" in result.output


def test_check_missing_layout(tmp_path):
    (tmp_path / "pages").mkdir()
    result = CliRunner().invoke(cli, ["check", str(tmp_path)])

    assert result.exit_code == 1
    assert "Expected directory not found" in result.output


def test_check_bad_config(tmp_path):
    (tmp_path / "component-layers.json").write_text('{"unknown": 1}')
    result = CliRunner().invoke(cli, ["check", str(tmp_path)])

    assert result.exit_code == 1
    assert "Invalid config" in result.output


def test_tree_all_pages():
    result = CliRunner().invoke(cli, ["tree", APP])

    assert result.exit_code == 0
    assert "pages/about.tsx" in result.output
    assert "│   └── components/header/logo.tsx" in result.output


def test_tree_single_page():
    result = CliRunner().invoke(cli, ["tree", APP, "--page", "about.tsx"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "pages/about.tsx",
        "└── components/layout/index.tsx",
        "    └── components/layout/footer.tsx",
        "        └── shared/link.ts",
    ]


def test_tree_unknown_page():
    result = CliRunner().invoke(cli, ["tree", APP, "--page", "missing.tsx"])

    assert result.exit_code == 1
    assert "Page not found: missing.tsx" in result.output


def test_check_read_failure_exits_nonzero(monkeypatch):
    def deny(path):
        raise PermissionError(f"Permission denied: {path.name}")

    monkeypatch.setattr("component_layers.analysis.graph_builder.read_source", deny)
    result = CliRunner().invoke(cli, ["check", APP, "--no-color"])

    assert result.exit_code == 1
    assert "Permission denied: " in result.output
    assert "Changes needed." not in result.output
