from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple
from pathlib import Path

from formstate import FormTree, SectionState, ItemState, new_instance
from .normalize import normalize_bool
from .specs import BUILTIN_CATALOG
from .loader import load_catalog_file


@dataclass(frozen=True)
class ItemDef:
    id: str
    text: str
    is_repeatable: bool = False


@dataclass(frozen=True)
class SectionDef:
    title: str
    items: Tuple[ItemDef, ...] = ()


class Catalog:
    """
    Immutable section/item definitions for one checklist.

    Sources:
      - Built-in site inspection catalog (default)
      - A YAML catalog file (replaces the built-ins)
      - Explicit section dicts (for tests)
    """

    def __init__(self, sections: Optional[Iterable[Dict[str, Any]]] = None):
        raw = BUILTIN_CATALOG if sections is None else sections
        self._sections: Tuple[SectionDef, ...] = tuple(_section_def(s) for s in raw)
        self._index: Dict[str, Tuple[int, int]] = {}
        for si, sec in enumerate(self._sections):
            for ii, item in enumerate(sec.items):
                if item.id in self._index:
                    raise ValueError(f"Duplicate item id in catalog: {item.id}")
                self._index[item.id] = (si, ii)

    @classmethod
    def from_file(cls, path: str | Path) -> "Catalog":
        return cls(load_catalog_file(path))

    @property
    def sections(self) -> Tuple[SectionDef, ...]:
        return self._sections

    def item_ids(self) -> Tuple[str, ...]:
        return tuple(self._index)

    def find_item(self, item_id: str) -> Optional[Tuple[int, int]]:
        return self._index.get(str(item_id))

    def get_item(self, item_id: str) -> Optional[ItemDef]:
        pos = self.find_item(item_id)
        if pos is None:
            return None
        return self._sections[pos[0]].items[pos[1]]


def build_form(catalog: Catalog) -> FormTree:
    """Seed a fresh form: one blank instance per item, empty header/follow-up."""
    return FormTree(
        sections=tuple(
            SectionState(
                title=sec.title,
                items=tuple(
                    ItemState(
                        id=item.id,
                        text=item.text,
                        is_repeatable=item.is_repeatable,
                        instances=(new_instance(item.id),),
                    )
                    for item in sec.items
                ),
            )
            for sec in catalog.sections
        ),
    )


# ----- internal plumbing -----

def _section_def(raw: Dict[str, Any]) -> SectionDef:
    title = str(raw.get("title") or "").strip()
    if not title:
        raise ValueError("Catalog section missing 'title'")
    return SectionDef(title=title, items=tuple(_item_def(i, title) for i in raw.get("items") or ()))

def _item_def(raw: Dict[str, Any], section_title: str) -> ItemDef:
    item_id = str(raw.get("id") or "").strip()
    if not item_id:
        raise ValueError(f"Catalog item in '{section_title}' missing 'id'")
    text = raw.get("text") or raw.get("label") or item_id
    repeatable = raw.get("repeatable", raw.get("isRepeatable"))
    return ItemDef(id=item_id, text=str(text), is_repeatable=normalize_bool(repeatable, default=False))
