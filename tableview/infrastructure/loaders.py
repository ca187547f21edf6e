"""
Loaders that fill a RecordStore from files.

JSON files must hold an array of objects. CSV files need a header row; cells
that look like integers or decimals are converted to numbers so the sort stage
compares them numerically, and empty cells become None.
"""

from __future__ import annotations

import csv
import json
import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from tableview.domain.values import Scalar
from tableview.errors import RecordLoadError
from tableview.infrastructure.record_store import RecordStore
from tableview.utils.logging import get_logger

log = get_logger(__name__)

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")


def _coerce_cell(cell: str) -> Scalar:
    text = cell.strip()
    if text == "":
        return None
    if _INT_RE.match(text):
        # Leading zeros mark identifiers such as "007", keep them as text
        if len(text.lstrip("+-")) > 1 and text.lstrip("+-").startswith("0"):
            return text
        return int(text)
    if _FLOAT_RE.match(text):
        return float(text)
    return text


def _read_json(path: Path) -> List[Dict[str, Scalar]]:
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as exc:
        raise RecordLoadError(f"{path}: invalid JSON ({exc})") from exc

    if not isinstance(payload, list) or not all(isinstance(row, dict) for row in payload):
        raise RecordLoadError(f"{path}: expected a JSON array of objects")
    return payload


def _read_csv(path: Path) -> List[Dict[str, Scalar]]:
    with path.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            return []
        return [
            {name: _coerce_cell(row.get(name) or "") for name in reader.fieldnames}
            for row in reader
        ]


def load_json(path: Path | str, filterable_fields: Optional[Sequence[str]] = None) -> RecordStore:
    path = Path(path)
    return _build_store(path, _read_json, filterable_fields)


def load_csv(path: Path | str, filterable_fields: Optional[Sequence[str]] = None) -> RecordStore:
    path = Path(path)
    return _build_store(path, _read_csv, filterable_fields)


def load_records(path: Path | str, filterable_fields: Optional[Sequence[str]] = None) -> RecordStore:
    """
    Load a record store from a `.json` or `.csv` file, chosen by suffix.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_json(path, filterable_fields)
    if suffix == ".csv":
        return load_csv(path, filterable_fields)
    raise RecordLoadError(f"Unsupported data file '{path}'. Expected .json or .csv")


def _build_store(path: Path, reader, filterable_fields: Optional[Sequence[str]]) -> RecordStore:
    try:
        rows = reader(path)
    except OSError as exc:
        raise RecordLoadError(f"{path}: {exc.strerror or exc}") from exc
    except (UnicodeDecodeError, csv.Error) as exc:
        raise RecordLoadError(f"{path}: {exc}") from exc

    log.info("Loaded records", extra={"path": str(path), "records": len(rows)})
    return RecordStore.from_records(rows, filterable_fields=filterable_fields)


__all__ = ["load_csv", "load_json", "load_records"]
