# src/session.py
from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from catalog import Catalog, build_form
from formstate import Command, FormTree, InstancePath, PhotoFile, SetPhoto, Store
from preview import PreviewAllocator, PreviewBinding, PreviewHandle, ThumbnailAllocator, is_image
from validation import ValidationResult, validate

log = logging.getLogger(__name__)


class ChecklistSession:
    """
    One editing session: the single update channel for a form tree.

    Every mutation goes through apply() under one lock; afterwards preview
    slots are reconciled with the new tree and validation is recomputed.

    Typical usage:
        with ChecklistSession.from_catalog(Catalog()) as session:
            session.apply(SetStatus(InstancePath(0, 0, 0), Status.OK))
            session.select_photo(InstancePath(0, 0, 0), PhotoFile.from_path("door.jpg"))
            if session.ready:
                Exporter().write(session.tree, "report.json")
    """

    def __init__(self, tree: FormTree, allocator: Optional[PreviewAllocator] = None):
        self._lock = threading.RLock()
        self._store = Store(state=tree)
        self.previews = PreviewBinding(allocator or ThumbnailAllocator())
        self._validation = validate(tree)
        self.previews.sync(tree)

    @classmethod
    def from_catalog(cls, catalog: Catalog, allocator: Optional[PreviewAllocator] = None) -> "ChecklistSession":
        return cls(build_form(catalog), allocator=allocator)

    def __enter__(self) -> "ChecklistSession":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- snapshots ----
    @property
    def tree(self) -> FormTree:
        return self._store.state

    @property
    def validation(self) -> ValidationResult:
        return self._validation

    @property
    def ready(self) -> bool:
        return self._validation.ready

    def preview(self, instance_id: str) -> Optional[PreviewHandle]:
        return self.previews.get(instance_id)

    # ---- mutations ----
    def apply(self, cmd: Command) -> FormTree:
        with self._lock:
            self._store.apply(cmd)
            self._resync_or_revert(self._store.rollback)
            return self._store.state

    def select_photo(self, path: InstancePath, photo: Optional[PhotoFile]) -> FormTree:
        """Browse input. None clears the slot; non-image files are ignored."""
        if photo is not None and not is_image(photo):
            log.debug("ignoring non-image file %s (%s)", photo.name, photo.content_type)
            return self.tree
        return self.apply(SetPhoto(path, photo))

    def drop_photo(self, path: InstancePath, files: Sequence[PhotoFile]) -> FormTree:
        """Drag-and-drop input: only the first file counts, and only if it is an image."""
        if not files or not is_image(files[0]):
            log.debug("ignoring drop on %s", path)
            return self.tree
        return self.apply(SetPhoto(path, files[0]))

    def undo(self) -> FormTree:
        with self._lock:
            if not self._store.can_undo:
                return self._store.state
            self._store.undo()
            self._resync_or_revert(self._store.redo)
            return self._store.state

    def redo(self) -> FormTree:
        with self._lock:
            if not self._store.can_redo:
                return self._store.state
            self._store.redo()
            self._resync_or_revert(self._store.undo)
            return self._store.state

    def detach_preview(self, instance_id: str) -> None:
        """The view stopped observing this slot; it stays released until its photo changes."""
        with self._lock:
            self.previews.detach(instance_id)

    def observe_preview(self, instance_id: str) -> Optional[PreviewHandle]:
        """The view shows this slot again; re-allocate its preview if it has a photo."""
        with self._lock:
            self.previews.observe(instance_id)
            self.previews.sync(self._store.state)
            return self.previews.get(instance_id)

    def close(self) -> None:
        with self._lock:
            self.previews.close()

    def _refresh(self) -> None:
        self.previews.sync(self._store.state)
        self._validation = validate(self._store.state)

    def _resync_or_revert(self, revert) -> None:
        try:
            self.previews.sync(self._store.state)
        except Exception:
            # restored photo could not be previewed; step back to where we were
            revert()
            self._refresh()
            raise
        self._validation = validate(self._store.state)
