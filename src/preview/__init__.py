"""
Public API for the preview package.
Usage:
    from preview import PreviewBinding, ThumbnailAllocator, is_image
"""
from .protocol import PreviewAllocator, PreviewHandle, is_image
from .allocator import ThumbnailAllocator
from .binding import PhotoSlot, PreviewBinding

__all__ = [
    "PreviewAllocator", "PreviewHandle", "is_image",
    "ThumbnailAllocator", "PhotoSlot", "PreviewBinding",
]
