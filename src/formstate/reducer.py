from __future__ import annotations
from dataclasses import fields, replace
from typing import Tuple, TypeVar

from .model import (
    FormTree, SectionState, ItemState, InstanceState, Status,
    new_instance,
)
from .commands import (
    Command, ItemPath, InstancePath,
    SetStatus, SetDescription, SetPhoto, AddInstance, RemoveInstance,
    SetHeaderField, SetFollowUpField,
)
from .errors import FormStateError, InvalidPathError, OperationNotPermitted, UnknownFieldError

T = TypeVar("T")


def reduce(tree: FormTree, cmd: Command) -> FormTree:
    """
    Pure state transformer. Never mutates the input tree.

    Only the branch along the addressed path is rebuilt; untouched sections,
    items and instances are shared with the input by reference.
    Raises FormStateError subclasses on bad paths or forbidden mutations.
    """
    # --- Instance leaf edits ---
    if isinstance(cmd, SetStatus):
        if cmd.status is not None and not isinstance(cmd.status, Status):
            raise FormStateError(f"Invalid status: {cmd.status!r}")
        return _update_instance(tree, cmd.path, lambda inst: replace(inst, status=cmd.status))

    if isinstance(cmd, SetDescription):
        if not isinstance(cmd.text, str):
            raise FormStateError(f"Description must be text, got {type(cmd.text).__name__}")
        return _update_instance(tree, cmd.path, lambda inst: replace(inst, description=cmd.text))

    if isinstance(cmd, SetPhoto):
        return _update_instance(tree, cmd.path, lambda inst: replace(inst, photo=cmd.photo))

    # --- Repeatable instances ---
    if isinstance(cmd, AddInstance):
        def _append(item: ItemState) -> ItemState:
            if not item.is_repeatable:
                raise OperationNotPermitted(f"Item {item.id} is not repeatable; cannot add an instance.")
            return replace(item, instances=item.instances + (new_instance(item.id),))
        return _update_item(tree, cmd.path, _append)

    if isinstance(cmd, RemoveInstance):
        def _remove(item: ItemState) -> ItemState:
            if not item.is_repeatable:
                raise OperationNotPermitted(f"Item {item.id} is not repeatable; cannot remove its instance.")
            idx = _resolve_instance(item, cmd.path.instance)
            if len(item.instances) == 1:
                raise OperationNotPermitted(f"Item {item.id} must keep at least one instance.")
            return replace(item, instances=item.instances[:idx] + item.instances[idx + 1:])
        return _update_item(tree, cmd.path.item_path, _remove)

    # --- Flat records ---
    if isinstance(cmd, SetHeaderField):
        return replace(tree, header=_set_record_field(tree.header, cmd.field, cmd.value))

    if isinstance(cmd, SetFollowUpField):
        return replace(tree, follow_up=_set_record_field(tree.follow_up, cmd.field, cmd.value))

    raise TypeError(f"Unsupported command: {type(cmd).__name__}")


# ----- helpers -----

def _index(seq: Tuple[T, ...], idx, what: str) -> int:
    if isinstance(idx, bool) or not isinstance(idx, int) or idx < 0 or idx >= len(seq):
        raise InvalidPathError(f"{what} index out of range: {idx!r} (have {len(seq)})")
    return idx

def _resolve_instance(item: ItemState, ref) -> int:
    if isinstance(ref, str):
        for i, inst in enumerate(item.instances):
            if inst.id == ref:
                return i
        raise InvalidPathError(f"Item {item.id} has no instance with id {ref!r}")
    return _index(item.instances, ref, f"Instance of item {item.id}")

def _update_item(tree: FormTree, path: ItemPath, fn) -> FormTree:
    si = _index(tree.sections, path.section, "Section")
    sec = tree.sections[si]
    ii = _index(sec.items, path.item, f"Item in section '{sec.title}'")
    new_item = fn(sec.items[ii])
    new_sec = replace(sec, items=sec.items[:ii] + (new_item,) + sec.items[ii + 1:])
    return replace(tree, sections=tree.sections[:si] + (new_sec,) + tree.sections[si + 1:])

def _update_instance(tree: FormTree, path: InstancePath, fn) -> FormTree:
    def _on_item(item: ItemState) -> ItemState:
        ni = _resolve_instance(item, path.instance)
        new_inst: InstanceState = fn(item.instances[ni])
        return replace(item, instances=item.instances[:ni] + (new_inst,) + item.instances[ni + 1:])
    return _update_item(tree, path.item_path, _on_item)

def _set_record_field(record, name: str, value: str):
    names = {f.name for f in fields(record)}
    if name not in names:
        raise UnknownFieldError(f"Unknown field for {type(record).__name__}: {name}")
    return replace(record, **{name: value})
