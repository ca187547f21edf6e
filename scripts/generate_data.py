"""
Synthetic user data generator for the table view engine.

Writes deterministic pseudo-random user records as JSON or CSV, in the same
shape as the bundled sample (id, name, email, role, status, plus an age column
for numeric sorting), so larger views can be tried from the CLI:

    python -m scripts.generate_data --rows 500 --output data/users.json
    tableview show --data data/users.json --filter role=Admin --sort age
"""

from __future__ import annotations

import csv
import json
import random
import sys
import time
from pathlib import Path
from typing import Dict, List

import typer

from tableview.domain.values import Scalar

app = typer.Typer(help="Generate synthetic user records as JSON or CSV.")

FIELDS = ["id", "name", "email", "role", "status", "age"]
FIRST_NAMES = ["John", "Jane", "Alice", "Charlie", "David", "Eve", "Frank", "Grace", "Heidi", "Ivan"]
LAST_NAMES = ["Doe", "Smith", "Johnson", "Brown", "Wilson", "Davis", "Miller", "Moore", "Taylor"]
ROLES = ["Admin", "User", "Editor", "Viewer"]
STATUSES = ["Active", "Inactive"]


def _generate_rows(rows: int, seed: int) -> List[Dict[str, Scalar]]:
    rng = random.Random(seed)
    records: List[Dict[str, Scalar]] = []
    for i in range(1, rows + 1):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        records.append(
            {
                "id": i,
                "name": f"{first} {last}",
                "email": f"{first.lower()}.{last.lower()}{i}@example.com",
                "role": rng.choice(ROLES),
                "status": rng.choice(STATUSES),
                "age": rng.randint(18, 80),
            }
        )
    return records


def _write_json(path: Path, records: List[Dict[str, Scalar]]) -> None:
    with path.open("w", encoding="utf-8") as f:
        json.dump(records, f, indent=2)


def _write_csv(path: Path, records: List[Dict[str, Scalar]]) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        writer.writerows(records)


def write_records(path: Path, rows: int, seed: int, fmt: str | None = None) -> Path:
    """
    Generate `rows` records and write them to `path`. The format defaults to
    the file suffix.
    """
    fmt = (fmt or path.suffix.lstrip(".") or "json").lower()
    if fmt not in ("json", "csv"):
        raise ValueError(f"Unsupported format '{fmt}'. Expected json or csv")

    path.parent.mkdir(parents=True, exist_ok=True)
    records = _generate_rows(rows, seed)
    if fmt == "json":
        _write_json(path, records)
    else:
        _write_csv(path, records)
    return path


@app.command()
def main(
    rows: int = typer.Option(
        100,
        "--rows",
        "-r",
        help="Number of records to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data/users.json"),
        "--output",
        "-o",
        help="Output path (.json or .csv).",
    ),
    fmt: str | None = typer.Option(
        None,
        "--format",
        help="Force json or csv regardless of the output suffix.",
    ),
) -> None:
    """
    Generate synthetic user records.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {rows:,} records -> {output} (seed={seed})")
    try:
        write_records(output, rows=rows, seed=seed, fmt=fmt)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    duration = time.perf_counter() - start
    typer.echo(f"Done in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
