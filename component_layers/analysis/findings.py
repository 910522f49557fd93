"""Validation findings produced by the analysis phases."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class FindingKind(enum.Enum):
    CYCLE = "cycle"
    UNUSED = "unused"
    SHOULD_MOVE_DEEPER = "should_move_deeper"
    PARENT_DEEPER_THAN_DEPENDENCY = "parent_deeper_than_dependency"
    PARENT_IN_DIFFERENT_SUBDIRECTORY = "parent_in_different_subdirectory"
    PAGE_USES_NON_TOP_LEVEL_COMPONENT = "page_uses_non_top_level_component"


_ACTIONABLE = {
    FindingKind.UNUSED,
    FindingKind.SHOULD_MOVE_DEEPER,
    FindingKind.PARENT_DEEPER_THAN_DEPENDENCY,
    FindingKind.PARENT_IN_DIFFERENT_SUBDIRECTORY,
    FindingKind.PAGE_USES_NON_TOP_LEVEL_COMPONENT,
}

_TEMPLATES = {
    FindingKind.UNUSED: "{0} is not used by any page",
    FindingKind.SHOULD_MOVE_DEEPER: "{0} is only used inside {1}/ and should move there",
    FindingKind.PARENT_DEEPER_THAN_DEPENDENCY: "{0} is nested deeper than its dependency {1}",
    FindingKind.PARENT_IN_DIFFERENT_SUBDIRECTORY: "{0} imports {1} from a different subdirectory",
    FindingKind.PAGE_USES_NON_TOP_LEVEL_COMPONENT: "page {0} imports nested component {1}",
}


@dataclass(frozen=True)
class Finding:
    kind: FindingKind
    paths: tuple[str, ...]
    exempt: bool = False

    @property
    def actionable(self) -> bool:
        return self.kind in _ACTIONABLE and not self.exempt

    @property
    def message(self) -> str:
        if self.kind is FindingKind.CYCLE:
            return "import cycle: " + " -> ".join(self.paths)
        return _TEMPLATES[self.kind].format(*self.paths)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "paths": list(self.paths),
            "exempt": self.exempt,
            "actionable": self.actionable,
            "message": self.message,
        }


def changes_needed(findings: list[Finding]) -> bool:
    return any(f.actionable for f in findings)
