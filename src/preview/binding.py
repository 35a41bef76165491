from __future__ import annotations
from typing import Dict, Optional
import logging

from formstate import FormTree, PhotoFile
from .protocol import PreviewAllocator, PreviewHandle

log = logging.getLogger(__name__)


class PhotoSlot:
    """
    Owns at most one live preview handle for a single instance photo.

    bind(photo) releases the previous handle before allocating a new one;
    binding the very same file object again keeps the current handle.
    """

    def __init__(self, allocator: PreviewAllocator):
        self._allocator = allocator
        self._handle: Optional[PreviewHandle] = None

    @property
    def handle(self) -> Optional[PreviewHandle]:
        return self._handle

    def bind(self, photo: Optional[PhotoFile]) -> Optional[PreviewHandle]:
        if photo is None:
            self.release()
            return None
        if self._handle is not None and self._handle.photo is photo:
            return self._handle
        self.release()
        self._handle = self._allocator.allocate(photo)
        return self._handle

    def release(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            self._allocator.release(handle)


class PreviewBinding:
    """
    Preview slots keyed by instance id, kept in lockstep with the form tree.

    A detached slot stays released across syncs until its instance gets a
    different photo (or the view calls observe() again).

    Usage:
        previews = PreviewBinding(ThumbnailAllocator())
        previews.sync(tree)            # after every tree change
        previews.get(instance_id)      # handle for an <img>-like view
        previews.detach(instance_id)   # view stopped observing that slot
        previews.observe(instance_id)  # view shows it again; next sync re-allocates
        previews.close()               # session end
    """

    def __init__(self, allocator: PreviewAllocator):
        self._allocator = allocator
        self._slots: Dict[str, PhotoSlot] = {}
        self._detached: Dict[str, Optional[PhotoFile]] = {}  # instance id -> photo at detach time

    def __enter__(self) -> "PreviewBinding":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def get(self, instance_id: str) -> Optional[PreviewHandle]:
        slot = self._slots.get(instance_id)
        return slot.handle if slot else None

    def live_handles(self) -> Dict[str, PreviewHandle]:
        return {iid: s.handle for iid, s in self._slots.items() if s.handle is not None}

    def sync(self, tree: FormTree) -> None:
        """Reconcile slots with the tree: drop vanished instances, then (re)bind photos."""
        photos: Dict[str, Optional[PhotoFile]] = {
            inst.id: inst.photo for _si, _ii, _ni, _item, inst in tree.iter_instances()
        }
        for iid in [k for k in self._detached if k not in photos]:
            del self._detached[iid]
        for iid in [k for k in self._slots if k not in photos]:
            self._drop(iid)
        for iid, photo in photos.items():
            if iid in self._detached:
                if self._detached[iid] is photo:
                    continue
                del self._detached[iid]
            slot = self._slots.get(iid)
            if photo is None:
                if slot is not None:
                    self._drop(iid)
                continue
            if slot is None:
                slot = self._slots[iid] = PhotoSlot(self._allocator)
            slot.bind(photo)

    def detach(self, instance_id: str) -> None:
        slot = self._slots.get(instance_id)
        self._detached[instance_id] = slot.handle.photo if slot and slot.handle else None
        self._drop(instance_id)

    def observe(self, instance_id: str) -> None:
        self._detached.pop(instance_id, None)

    def close(self) -> None:
        for iid in list(self._slots):
            self._drop(iid)
        self._detached.clear()

    def _drop(self, instance_id: str) -> None:
        slot = self._slots.pop(instance_id, None)
        if slot is not None:
            slot.release()
            log.debug("released preview slot %s", instance_id)
