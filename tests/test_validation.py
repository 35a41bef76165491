from catalog import Catalog, build_form
from formstate import (
    FormTree, SectionState, ItemState, Status, InstancePath, ItemPath,
    SetStatus, SetDescription, AddInstance, reduce,
)
from validation import ViolationKind, validate


def _all_ok(tree):
    for si, ii, ni, _item, _inst in list(tree.iter_instances()):
        tree = reduce(tree, SetStatus(InstancePath(si, ii, ni), Status.OK))
    return tree


def test_fresh_form_is_not_ready(tree):
    result = validate(tree)
    assert not result.ready
    assert len(result.violations) == 3
    assert {v.kind for v in result.violations} == {ViolationKind.MISSING_STATUS}


def test_not_ok_requires_description():
    tree = build_form(Catalog([{"title": "S", "items": [{"id": "1.1", "text": "Lantai"}]}]))
    p = InstancePath(0, 0, 0)
    tree = reduce(tree, SetStatus(p, Status.NOT_OK))

    result = validate(tree)
    assert not result.ready
    assert len(result.violations) == 1
    v = result.violations[0]
    assert v.kind is ViolationKind.MISSING_DESCRIPTION
    assert v.path == (0, 0, 0) and v.item_id == "1.1"
    assert result.is_invalid(0, 0, 0)

    tree = reduce(tree, SetDescription(p, "   "))
    assert not validate(tree).ready

    tree = reduce(tree, SetDescription(p, "cracked tile"))
    result = validate(tree)
    assert result.ready and result.violations == ()


def test_any_unset_instance_blocks_readiness(tree):
    tree = _all_ok(tree)
    assert validate(tree).ready
    tree = reduce(tree, AddInstance(ItemPath(1, 0)))
    result = validate(tree)
    assert not result.ready
    assert result.invalid_paths == {(1, 0, 1)}
    assert "2.1 #2" in result.messages()[0]


def test_ok_and_na_need_no_description(tree):
    tree = _all_ok(tree)
    tree = reduce(tree, SetStatus(InstancePath(0, 1, 0), Status.NA))
    assert validate(tree).ready


def test_item_without_instances_is_skipped():
    tree = FormTree(sections=(SectionState("S", (ItemState("x", "empty", True, ()),)),))
    assert validate(tree).ready
