"""JavaScript/TypeScript import declaration scanner using regex patterns."""

from __future__ import annotations

import re

# Anchored at line start, so `// import ...` is skipped. Dynamic import()
# calls are not matched. Only a `{ ... }` clause may span lines; anywhere
# else the clause stops at the end of the line, so semicolon-free code
# cannot glue two statements into one match.
_IMPORT_FROM_RE = re.compile(
    r"""^[ \t]*(?:import|export)\s(?:\{[^{}]*\}|[^'";{}\n])*?\bfrom\s*['"](?P<spec>[^'"]+)['"]""",
    re.MULTILINE,
)
_SIDE_EFFECT_RE = re.compile(
    r"""^[ \t]*import\s*['"](?P<spec>[^'"]+)['"]""",
    re.MULTILINE,
)
_REQUIRE_RE = re.compile(
    r"""^[ \t]*(?:const|let|var)\s+[^=\n]+=\s*require\s*\(\s*['"](?P<spec>[^'"]+)['"]\s*\)""",
    re.MULTILINE,
)


def find_imports(source: str) -> list[tuple[int, str]]:
    """Return ``(line, specifier)`` pairs in source order, duplicates included.

    ``line`` is 1-based and points at the line the declaration starts on.
    """
    found: list[tuple[int, str]] = []
    for pattern in (_IMPORT_FROM_RE, _SIDE_EFFECT_RE, _REQUIRE_RE):
        for m in pattern.finditer(source):
            found.append((m.start(), m.group("spec")))
    found.sort(key=lambda item: item[0])
    return [(source.count("\n", 0, pos) + 1, spec) for pos, spec in found]


def extract_specifiers(source: str) -> list[str]:
    """Return raw import specifiers in source order, duplicates included."""
    return [spec for _, spec in find_imports(source)]
