"""Tests for the scanner layer: discovery, import extraction, resolution."""

from pathlib import Path

from component_layers.models import CheckConfig
from component_layers.scanner import (
    extract_specifiers,
    find_imports,
    is_test_file,
    iter_candidate_files,
    resolve,
    scan_source,
)

FIXTURES = Path(__file__).parent / "fixtures"


# ── Import extraction ─────────────────────────────────────────

def test_extract_default_and_named_imports():
    source = (
        "import React from 'react';\n"
        "import { Button, Icon } from \"./button\";\n"
        "import type { Props } from '@/components/types';\n"
    )
    assert extract_specifiers(source) == ["react", "./button", "@/components/types"]


def test_extract_side_effect_reexport_and_require():
    source = (
        "import './polyfills';\n"
        "export { default as Card } from './card';\n"
        "export * from '../shared/utils';\n"
        "const lodash = require('lodash');\n"
    )
    assert extract_specifiers(source) == [
        "./polyfills", "./card", "../shared/utils", "lodash",
    ]


def test_extract_keeps_duplicates_in_order():
    source = "import a from './a';\nimport b from './b';\nimport { c } from './a';\n"
    assert extract_specifiers(source) == ["./a", "./b", "./a"]


def test_extract_skips_commented_and_plain_code():
    source = (
        "// import Old from './old';\n"
        "export default function Page() {\n"
        "  return <div className=\"page\" />;\n"
        "}\n"
    )
    assert extract_specifiers(source) == []


def test_extract_multiline_named_imports():
    source = (
        "import {\n"
        "  Button,\n"
        "  Icon,\n"
        "} from './controls'\n"
    )
    assert find_imports(source) == [(1, "./controls")]


def test_semicolon_free_statements_stay_on_their_own_line():
    source = (
        "export default Header\n"
        "import Logo from './logo'\n"
        "import './theme'\n"
        "const x = require('./x')\n"
    )
    assert find_imports(source) == [
        (2, "./logo"), (3, "./theme"), (4, "./x"),
    ]


# ── Discovery ─────────────────────────────────────────────────

def test_is_test_file():
    patterns = CheckConfig().test_patterns
    assert is_test_file(Path("header/logo.test.tsx"), patterns)
    assert is_test_file(Path("forms/input.spec.ts"), patterns)
    assert is_test_file(Path("__tests__/input.tsx"), patterns)
    assert not is_test_file(Path("forms/input.tsx"), patterns)


def test_discovery_skips_tests_and_other_extensions():
    config = CheckConfig(project_root=FIXTURES / "app")
    files = iter_candidate_files(config.components_root, config)
    names = [p.relative_to(config.components_root).as_posix() for p in files]

    assert "header/logo.tsx" in names
    assert "header/logo.test.tsx" not in names
    assert all(p.is_absolute() for p in files)


def test_discovery_ignore_substrings(make_project):
    root = make_project({
        "components/button.tsx": "",
        "components/node_modules/pkg/index.js": "",
        "components/generated/.next/chunk.js": "",
    })
    config = CheckConfig(project_root=root)
    files = iter_candidate_files(config.components_root, config)

    assert [p.name for p in files] == ["button.tsx"]


# ── Resolution ────────────────────────────────────────────────

def test_resolve_relative_prefers_file_over_index(make_project):
    root = make_project({
        "components/forms/input.tsx": "",
        "components/forms/button.tsx": "",
        "components/forms/button/index.tsx": "",
    })
    config = CheckConfig(project_root=root)
    source = root / "components/forms/input.tsx"

    assert resolve(source, "./button", config) == root / "components/forms/button.tsx"


def test_resolve_relative_index_fallback(make_project):
    root = make_project({
        "components/forms/input.tsx": "",
        "components/forms/button/index.tsx": "",
    })
    config = CheckConfig(project_root=root)
    source = root / "components/forms/input.tsx"

    assert resolve(source, "./button", config) == root / "components/forms/button/index.tsx"


def test_resolve_extension_priority(make_project):
    root = make_project({
        "components/a.tsx": "",
        "components/b.ts": "",
        "components/b.tsx": "",
    })
    config = CheckConfig(project_root=root)

    assert resolve(root / "components/a.tsx", "./b", config) == root / "components/b.tsx"


def test_resolve_exact_path_and_parent_segments(make_project):
    root = make_project({
        "components/forms/input.tsx": "",
        "components/icons.js": "",
    })
    config = CheckConfig(project_root=root)
    source = root / "components/forms/input.tsx"

    assert resolve(source, "../icons.js", config) == root / "components/icons.js"
    assert resolve(source, "../icons", config) == root / "components/icons.js"


def test_resolve_alias_namespaces(make_project):
    root = make_project({
        "pages/home.tsx": "",
        "components/header.tsx": "",
        "shared/format.ts": "",
        "utils/date.ts": "",
    })
    config = CheckConfig(project_root=root)
    page = root / "pages/home.tsx"

    assert resolve(page, "@/components/header", config) == root / "components/header.tsx"
    assert resolve(page, "@/shared/format", config) == root / "shared/format.ts"
    # exists, but outside the recognized namespaces
    assert resolve(page, "@/utils/date", config) is None


def test_resolve_ignores_external_and_stylesheets(make_project):
    root = make_project({
        "components/forms/input.tsx": "",
        "components/forms/input.module.css": "",
    })
    config = CheckConfig(project_root=root)
    source = root / "components/forms/input.tsx"

    assert resolve(source, "lodash", config) is None
    assert resolve(source, "@mui/material", config) is None
    assert resolve(source, "./input.module.css", config) is None
    assert resolve(source, "./theme.scss?inline", config) is None


def test_resolve_missing_target_is_none(make_project):
    root = make_project({"components/forms/input.tsx": ""})
    config = CheckConfig(project_root=root)

    assert resolve(root / "components/forms/input.tsx", "./missing", config) is None


def test_scan_source_targets_are_deduplicated_and_keep_self_import(make_project):
    root = make_project({
        "components/card.tsx": "",
        "components/icon.tsx": "",
    })
    config = CheckConfig(project_root=root)
    path = root / "components/card.tsx"
    source = (
        "import Icon from './icon';\n"
        "import { Small } from './icon';\n"
        "import Card from './card';\n"
        "import x from 'react';\n"
    )

    scanned = scan_source(path, source, config)

    assert len(scanned.imports) == 4
    assert scanned.targets == [root / "components/icon.tsx", root / "components/card.tsx"]
