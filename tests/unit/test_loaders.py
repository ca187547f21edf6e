from __future__ import annotations

import json
from pathlib import Path

import pytest

from tableview.errors import RecordLoadError
from tableview.infrastructure.loaders import load_csv, load_json, load_records
from tableview.infrastructure.sample_data import SAMPLE_USERS


def test_load_json_array(tmp_path: Path):
    path = tmp_path / "users.json"
    path.write_text(json.dumps(SAMPLE_USERS), encoding="utf-8")

    store = load_json(path, filterable_fields=["role"])

    assert len(store) == 7
    assert store.schema == ("id", "name", "email", "role", "status")
    assert store.filterable_fields == ("role",)


def test_load_csv_coerces_numeric_cells(tmp_path: Path):
    path = tmp_path / "items.csv"
    path.write_text(
        "code,name,qty,price,note\n"
        "007,Widget,3,2.50,\n"
        "12,Gadget,-1,1e3,fragile\n",
        encoding="utf-8",
    )

    store = load_csv(path)
    first, second = store.records

    assert first["code"] == "007"
    assert first["qty"] == 3
    assert first["price"] == 2.5
    assert first["note"] is None
    assert second["code"] == 12
    assert second["qty"] == -1
    assert second["price"] == 1000.0
    assert second["note"] == "fragile"


def test_load_records_dispatches_on_suffix(tmp_path: Path):
    json_path = tmp_path / "a.JSON"
    json_path.write_text(json.dumps([{"x": 1}]), encoding="utf-8")
    csv_path = tmp_path / "b.csv"
    csv_path.write_text("x\n1\n", encoding="utf-8")

    assert load_records(json_path).records[0]["x"] == 1
    assert load_records(csv_path).records[0]["x"] == 1


def test_unsupported_suffix(tmp_path: Path):
    with pytest.raises(RecordLoadError):
        load_records(tmp_path / "data.xml")


def test_missing_file(tmp_path: Path):
    with pytest.raises(RecordLoadError):
        load_records(tmp_path / "missing.json")


@pytest.mark.parametrize("content", ["{not json", '{"id": 1}', "[1, 2]"])
def test_malformed_json(tmp_path: Path, content: str):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(RecordLoadError):
        load_json(path)


def test_empty_csv_gives_empty_store(tmp_path: Path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert len(load_csv(path)) == 0


@pytest.mark.parametrize("name", ["bad.csv", "bad.json"])
def test_undecodable_file(tmp_path: Path, name: str):
    path = tmp_path / name
    path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(RecordLoadError) as info:
        load_records(path)
    assert name in str(info.value)


def test_csv_text_cells_are_trimmed(tmp_path: Path):
    path = tmp_path / "users.csv"
    path.write_text("id,role,code\n1, Admin , 007\n", encoding="utf-8")

    record = load_csv(path).records[0]

    assert record["role"] == "Admin"
    assert record["code"] == "007"
