from __future__ import annotations
from typing import Tuple
import logging
import threading
import uuid

from PIL import Image

from formstate import PhotoFile
from .protocol import PreviewHandle

log = logging.getLogger(__name__)


class ThumbnailAllocator:
    """
    Pillow-backed preview allocator.
    - allocate(photo): decode the file, keep a bounded thumbnail in memory
    - release(handle): close the thumbnail; a second release is an error
    - live: number of handles allocated and not yet released
    """
    def __init__(self, max_size: Tuple[int, int] = (512, 512)):
        self.max_size = (int(max_size[0]), int(max_size[1]))
        self._lock = threading.Lock()
        self._live: dict[str, PreviewHandle] = {}

    @property
    def live(self) -> int:
        return len(self._live)

    def allocate(self, photo: PhotoFile) -> PreviewHandle:
        with Image.open(photo.path) as im:
            im.load()
            thumb = im.copy()
        thumb.thumbnail(self.max_size)
        handle = PreviewHandle(key=f"preview://{uuid.uuid4().hex}", photo=photo, image=thumb)
        with self._lock:
            self._live[handle.key] = handle
        log.debug("allocated %s for %s (%dx%d)", handle.key, photo.name, *thumb.size)
        return handle

    def release(self, handle: PreviewHandle) -> None:
        with self._lock:
            if handle.released or self._live.pop(handle.key, None) is None:
                raise RuntimeError(f"Preview handle released twice: {handle.key}")
            handle.released = True
        if handle.image is not None:
            handle.image.close()
            handle.image = None
        log.debug("released %s", handle.key)
