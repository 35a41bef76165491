from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

from formstate import Status

STATUS_ALIASES: Dict[str, Status] = {
    "ok": Status.OK, "pass": Status.OK, "good": Status.OK,
    "not ok": Status.NOT_OK, "not_ok": Status.NOT_OK, "notok": Status.NOT_OK,
    "nok": Status.NOT_OK, "fail": Status.NOT_OK,
    "n/a": Status.NA, "na": Status.NA, "n.a.": Status.NA, "not applicable": Status.NA,
}

def _lc(x: Any) -> str:
    return str(x).strip().lower()

def normalize_status(value: Any) -> Tuple[bool, Optional[Status], Optional[str]]:
    """None/blank means unset; canonical labels and aliases are case-insensitive."""
    if value is None or isinstance(value, Status):
        return True, value, None
    key = _lc(value)
    if key == "":
        return True, None, None
    if key in STATUS_ALIASES:
        return True, STATUS_ALIASES[key], None
    lower_to_canon = {_lc(s.value): s for s in Status}
    if key in lower_to_canon:
        return True, lower_to_canon[key], None
    return False, None, f"Invalid status: {value}"

def normalize_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    s = _lc(value)
    if s in {"y", "yes", "true", "1"}:
        return True
    if s in {"n", "no", "false", "0"}:
        return False
    raise ValueError(f"Invalid boolean: {value}")
