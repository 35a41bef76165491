# src/validation.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Tuple

from formstate import FormTree, Status


class ViolationKind(Enum):
    MISSING_STATUS = "missing status"
    MISSING_DESCRIPTION = "missing description"


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    section: int
    item: int
    instance: int
    item_id: str
    instance_id: str

    @property
    def path(self) -> Tuple[int, int, int]:
        return self.section, self.item, self.instance

    @property
    def message(self) -> str:
        row = f"Item {self.item_id} #{self.instance + 1}"
        if self.kind is ViolationKind.MISSING_STATUS:
            return f"{row}: choose OK, Not OK or N/A"
        return f"{row}: a description is required when the status is Not OK"


@dataclass(frozen=True)
class ValidationResult:
    violations: Tuple[Violation, ...] = ()

    @property
    def ready(self) -> bool:
        return not self.violations

    @property
    def invalid_paths(self) -> FrozenSet[Tuple[int, int, int]]:
        return frozenset(v.path for v in self.violations)

    def is_invalid(self, section: int, item: int, instance: int) -> bool:
        return (section, item, instance) in self.invalid_paths

    def messages(self) -> List[str]:
        return [v.message for v in self.violations]


def validate(tree: FormTree) -> ValidationResult:
    """
    Whole-tree pass; every instance of every item is in scope.
    - status unset                       -> MISSING_STATUS
    - status Not OK and blank description -> MISSING_DESCRIPTION
    Photos are always optional. Items with no instances have nothing to check.
    """
    out: List[Violation] = []
    for si, ii, ni, item, inst in tree.iter_instances():
        kind = None
        if inst.status is None:
            kind = ViolationKind.MISSING_STATUS
        elif inst.status is Status.NOT_OK and not inst.description.strip():
            kind = ViolationKind.MISSING_DESCRIPTION
        if kind is not None:
            out.append(Violation(kind, si, ii, ni, item.id, inst.id))
    return ValidationResult(tuple(out))
