"""
Public API for the catalog package.
Usage:
    from catalog import Catalog, build_form
"""
from .catalog import Catalog, SectionDef, ItemDef, build_form
from .normalize import normalize_status

__all__ = ["Catalog", "SectionDef", "ItemDef", "build_form", "normalize_status"]
