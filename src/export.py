# src/export.py
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from formstate import FormTree
from validation import validate

log = logging.getLogger(__name__)


class NotReadyError(ValueError):
    """Raised when a hand-off is attempted while the form still has violations."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("\n".join(errors[:5]) or "Form is not ready")


# ---------------------------
# Public Facade
# ---------------------------

class Exporter:
    """
    Build a clean report dict from a FormTree, gate it on readiness,
    and produce a filename from a template.

    Typical usage:
        xp = Exporter()
        ok, errors = xp.validate(tree)
        if ok:
            out_path = xp.filename(tree, "{area}_{date}.json", directory="reports")
            xp.write(tree, out_path)
    """

    def __init__(self, pretty: bool = True):
        self.pretty = pretty

    # ---- Build JSON (dict) ----
    def build(self, tree: FormTree) -> Dict[str, Any]:
        return _build_report_dict(tree)

    # ---- Readiness ----
    def validate(self, tree: FormTree) -> Tuple[bool, List[str]]:
        result = validate(tree)
        return result.ready, result.messages()

    # ---- JSON text ----
    def dumps(self, data: Dict[str, Any], pretty: Optional[bool] = None) -> str:
        pretty = self.pretty if pretty is None else pretty
        return json.dumps(data, indent=2, ensure_ascii=False) if pretty else json.dumps(data, separators=(",", ":"))

    # ---- Hand-off ----
    def write(self, tree: FormTree, path: str | Path) -> Path:
        ok, errors = self.validate(tree)
        if not ok:
            raise NotReadyError(errors)
        out = Path(path)
        out.write_text(self.dumps(self.build(tree)), encoding="utf-8")
        log.info("Wrote inspection report to %s", out)
        return out

    # ---- Filename from template ----
    def filename(self, tree: FormTree, template: str = "{area}_{date}.json", directory: Optional[str | Path] = None) -> str:
        tokens = {
            "area": _sanitize_filename(tree.header.area_location, "Area"),
            "date": _sanitize_filename(tree.header.assessment_date, "undated"),
        }
        try:
            name = template.format(**tokens)
        except (KeyError, IndexError) as e:
            raise ValueError(f"Bad filename template {template!r}: unknown token {e}; use {{area}} or {{date}}") from None
        if os.path.dirname(name) or directory is None:
            return name
        return str(Path(directory) / name)


# ---------------------------
# Report construction
# ---------------------------

def _build_report_dict(tree: FormTree) -> Dict[str, Any]:
    """
    Projects FormTree -> plain JSON-ready dict:
        {
          "header": {...},
          "sections": [{"title", "items": [{"id", "text", "instances": [...]}]}],
          "follow_up": {...}
        }
    Photos are exported by file name only.
    """
    sections_out: List[Dict[str, Any]] = []
    for sec in tree.sections:
        items_out: List[Dict[str, Any]] = []
        for item in sec.items:
            items_out.append({
                "id": item.id,
                "text": item.text,
                "repeatable": item.is_repeatable,
                "instances": [
                    {
                        "status": inst.status.value if inst.status else None,
                        "description": inst.description,
                        "photo": inst.photo.name if inst.photo else None,
                    }
                    for inst in item.instances
                ],
            })
        sections_out.append({"title": sec.title, "items": items_out})

    return {
        "header": {
            "assessment_date": tree.header.assessment_date,
            "area_location": tree.header.area_location,
            "assessor_name": tree.header.assessor_name,
        },
        "sections": sections_out,
        "follow_up": {
            "summary": tree.follow_up.summary,
            "recommendations": tree.follow_up.recommendations,
            "person_in_charge": tree.follow_up.person_in_charge,
            "target_date": tree.follow_up.target_date,
        },
    }


def _sanitize_filename(s: str, fallback: str) -> str:
    return "".join(c for c in (s or "") if c not in r'\/:*?"<>|').strip() or fallback
