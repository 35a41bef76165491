from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .model import FormTree
from .commands import Command
from .reducer import reduce


@dataclass
class Store:
    """
    Small wrapper around the pure reducer with undo/redo snapshots.

    Trees are immutable, so snapshots are kept by reference.

    Usage:
        store = Store(state=build_form(catalog))
        store.apply(SetStatus(InstancePath(0, 0, 0), Status.OK))
        store.undo(); store.redo()
    """
    state: FormTree = field(default_factory=FormTree)
    _undo: List[FormTree] = field(default_factory=list)
    _redo: List[FormTree] = field(default_factory=list)
    _dropped_redo: List[FormTree] = field(default_factory=list)  # redo stack cleared by the last apply

    def apply(self, cmd: Command) -> FormTree:
        new_state = reduce(self.state, cmd)  # raises before history is touched
        self._undo.append(self.state)
        self._dropped_redo = self._redo
        self._redo = []
        self.state = new_state
        return self.state

    def undo(self) -> FormTree:
        if not self._undo:
            return self.state
        self._dropped_redo = []
        self._redo.append(self.state)
        self.state = self._undo.pop()
        return self.state

    def redo(self) -> FormTree:
        if not self._redo:
            return self.state
        self._dropped_redo = []
        self._undo.append(self.state)
        self.state = self._redo.pop()
        return self.state

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def clear_history(self) -> None:
        self._undo.clear()
        self._redo.clear()
        self._dropped_redo = []

    def rollback(self) -> FormTree:
        """Drop the last applied change without making it redoable; the redo stack it cleared comes back."""
        if self._undo:
            self.state = self._undo.pop()
            self._redo, self._dropped_redo = self._dropped_redo, []
        return self.state
