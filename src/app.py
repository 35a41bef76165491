# src/app.py
from __future__ import annotations


import argparse
import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# local imports
from catalog import Catalog, normalize_status
from formstate import (
    AddInstance, InstancePath, ItemPath, PhotoFile,
    SetDescription, SetFollowUpField, SetHeaderField, SetStatus,
)
from preview import ThumbnailAllocator
from session import ChecklistSession
from export import Exporter
from logging_config import setup_logging

log = logging.getLogger(__name__)


# ---------------------------
# Config loading
# ---------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "catalog": {
        "path": None,  # None -> built-in site inspection catalog
    },
    "preview": {
        "max_size": [512, 512],
    },
    "export": {
        "filename_template": "{area}_{date}.json",
        "pretty": True,
    },
}

def load_config(path: Optional[str]) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if path:
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{p}: expected a mapping at top level")

    for key, cmd_type in (("header", SetHeaderField), ("follow_up", SetFollowUpField)):
        for field_name, value in _mapping(data.get(key), p, f"'{key}'").items():
            session.apply(cmd_type(str(field_name), "" if value is None else str(value)))

    for item_id, entries in _mapping(data.get("items"), p, "'items'").items():
        if not isinstance(item_id, str):
            raise ValueError(f"{p}: item id {item_id!r} must be quoted")
        pos = catalog.find_item(item_id)
        if pos is None:
            raise ValueError(f"{p}: unknown item id {item_id}")
        if entries is not None and not isinstance(entries, list):
            raise ValueError(f"{p}: item {item_id} expects a list of instances")
        si, ii = pos
        for n, entry in enumerate(entries or []):
            entry = _mapping(entry, p, f"item {item_id} #{n + 1}")
            if n >= len(session.tree.sections[si].items[ii].instances):
                session.apply(AddInstance(ItemPath(si, ii)))
            target = InstancePath(si, ii, n)
            ok, status, err = normalize_status(entry.get("status"))
            if not ok:
                raise ValueError(f"{p}: item {item_id} #{n + 1}: {err}")
            session.apply(SetStatus(target, status))
            if entry.get("description") is not None:
                session.apply(SetDescription(target, str(entry["description"])))
            if entry.get("photo"):
                session.select_photo(target, PhotoFile.from_path(p.parent / str(entry["photo"])))


def _mapping(value: Any, p: Path, what: str) -> Dict[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{p}: {what} must be a mapping, got {type(value).__name__}")
    return value


# ---------------------------
# App bootstrap
# ---------------------------

def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Site inspection checklist")
    parser.add_argument("--config", "-c", help="Path to config.yaml", default=None)
    parser.add_argument("--catalog", help="Path to a YAML catalog (overrides config)", default=None)
    parser.add_argument("--answers", "-a", help="YAML answers to replay into the form", default=None)
    parser.add_argument("--out", "-o", help="Report path or directory (written only when ready)", default=None)
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    config = load_config(args.config)

    try:
        catalog_path = args.catalog or config["catalog"].get("path")
        catalog = Catalog.from_file(catalog_path) if catalog_path else Catalog()
        log.info("Catalog: %d sections, %d items", len(catalog.sections), len(catalog.item_ids()))
        allocator = ThumbnailAllocator(max_size=tuple(config["preview"].get("max_size", (512, 512))))

        with ChecklistSession.from_catalog(catalog, allocator=allocator) as session:
            if args.answers:
                apply_answers(session, catalog, args.answers)

            result = session.validation
            for msg in result.messages():
                print(f"[app] {msg}")
            print(f"[app] ready: {'yes' if result.ready else 'no'} ({len(result.violations)} open)")

            if args.out and result.ready:
                exporter = Exporter(pretty=bool(config["export"].get("pretty", True)))
                out = Path(args.out)
                if out.is_dir():
                    out = Path(exporter.filename(session.tree, config["export"]["filename_template"], directory=out))
                exporter.write(session.tree, out)
                print(f"[app] wrote {out}")
            return 0 if result.ready else 1
    except (ValueError, OSError) as e:
        print(f"[app] error: {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
