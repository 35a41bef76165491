import json

import pytest

from formstate import Status, InstancePath, ItemPath, PhotoFile, SetStatus, SetDescription, SetHeaderField, AddInstance, SetPhoto, reduce
from export import Exporter, NotReadyError


def _completed(tree):
    tree = reduce(tree, SetHeaderField("area_location", "Gudang RDF"))
    tree = reduce(tree, SetHeaderField("assessment_date", "2026-10-17"))
    tree = reduce(tree, AddInstance(ItemPath(0, 0)))
    for si, ii, ni, _item, _inst in list(tree.iter_instances()):
        tree = reduce(tree, SetStatus(InstancePath(si, ii, ni), Status.OK))
    tree = reduce(tree, SetStatus(InstancePath(0, 0, 1), Status.NOT_OK))
    tree = reduce(tree, SetDescription(InstancePath(0, 0, 1), "cracked wall"))
    tree = reduce(tree, SetPhoto(InstancePath(0, 0, 1), PhotoFile.from_path("wall.jpg")))
    return tree


def test_export_success(tree, tmp_path):
    tree = _completed(tree)
    xp = Exporter()
    ok, errs = xp.validate(tree)
    assert ok, f"Expected valid export, got errors: {errs}"

    data = xp.build(tree)
    assert data["header"]["area_location"] == "Gudang RDF"
    item = data["sections"][0]["items"][0]
    assert item["id"] == "1.1" and item["repeatable"] is True
    assert item["instances"][1] == {"status": "Not OK", "description": "cracked wall", "photo": "wall.jpg"}

    name = xp.filename(tree, directory=tmp_path)
    assert name.endswith("Gudang RDF_2026-10-17.json")
    out = xp.write(tree, name)
    loaded = json.loads(out.read_text(encoding="utf-8"))
    assert loaded["sections"][1]["items"][0]["instances"][0]["status"] == "OK"


def test_export_blocked_while_not_ready(tree, tmp_path):
    xp = Exporter()
    tree = reduce(tree, SetStatus(InstancePath(0, 0, 0), Status.NOT_OK))
    ok, errs = xp.validate(tree)
    assert not ok
    assert any("description is required" in e for e in errs)
    with pytest.raises(NotReadyError):
        xp.write(tree, tmp_path / "report.json")
    assert not (tmp_path / "report.json").exists()


def test_filename_fallbacks(tree):
    assert Exporter().filename(tree) == "Area_undated.json"


def test_filename_unknown_token_is_value_error(tree):
    with pytest.raises(ValueError, match="unit"):
        Exporter().filename(tree, "{unit}_{date}.json")
