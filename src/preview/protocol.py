from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from formstate import PhotoFile


@dataclass(eq=False)
class PreviewHandle:
    """Display-only reference derived from a PhotoFile (compared by identity)."""
    key: str
    photo: PhotoFile
    image: Optional[Any] = field(default=None, repr=False)
    released: bool = False


class PreviewAllocator(Protocol):
    """
    Minimal contract used by PhotoSlot to stay decoupled from the image backend.

    Implementations must provide:
      - allocate(photo) -> PreviewHandle   (one new live handle per call)
      - release(handle) -> None            (called exactly once per handle)
    """
    def allocate(self, photo: PhotoFile) -> PreviewHandle: ...
    def release(self, handle: PreviewHandle) -> None: ...


def is_image(photo: Optional[PhotoFile]) -> bool:
    return photo is not None and (photo.content_type or "").lower().startswith("image/")
