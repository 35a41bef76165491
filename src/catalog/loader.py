from __future__ import annotations
from typing import Any, Dict, List
from pathlib import Path
import logging

import yaml

log = logging.getLogger(__name__)


def load_catalog_file(path: str | Path) -> List[Dict[str, Any]]:
    """
    Load section definitions from a YAML catalog file.

    Accepts either a top-level list of sections or a mapping with a
    'sections' key. Returns the raw section dicts; Catalog normalizes them.
    """
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if isinstance(data, dict):
        data = data.get("sections", [])
    if not isinstance(data, list):
        raise ValueError(f"{p}: expected a list of sections")
    for n, sec in enumerate(data, start=1):
        if not isinstance(sec, dict) or not sec.get("title"):
            raise ValueError(f"{p}: section {n} missing 'title'")
        for item in sec.get("items") or []:
            if not isinstance(item, dict) or not item.get("id"):
                raise ValueError(f"{p}: item in '{sec['title']}' missing 'id'")
    log.info("Loaded %d catalog sections from %s", len(data), p)
    return data
