from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import typer

from tableview.config import Settings, get_settings
from tableview.errors import TableViewError
from tableview.infrastructure.loaders import load_records
from tableview.infrastructure.record_store import RecordStore
from tableview.infrastructure.sample_data import sample_store
from tableview.reporter import print_filter_options, print_page, print_profile
from tableview.utils.logging import configure_logging
from tableview.utils.profiler import profile_block
from tableview.view import TableView

app = typer.Typer(help="Search, filter, sort and page through tabular records.")


def _load_store(data: Optional[Path], settings: Settings) -> RecordStore:
    path = data or (Path(settings.data_path) if settings.data_path else None)
    if path is None:
        return sample_store()
    return load_records(path)


def _parse_filter(raw: str) -> Tuple[str, str]:
    field, sep, value = raw.partition("=")
    if not sep or not field:
        raise typer.BadParameter(f"expected FIELD=VALUE, got '{raw}'", param_hint="--filter")
    return field.strip(), value.strip()


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} | "
        f"page_sizes={settings.page_size_options} default={settings.default_page_size} | "
        f"reset_page_on_query_change={settings.reset_page_on_query_change} | "
        f"data={settings.data_path or '<sample users>'}"
    )


@app.command()
def show(
    data: Optional[Path] = typer.Option(
        None,
        "--data",
        "-d",
        help="JSON or CSV file to load (default: DATA_PATH, else the bundled sample users).",
    ),
    search: str = typer.Option("", "--search", "-q", help="Free-text search across all fields."),
    filters: Optional[List[str]] = typer.Option(
        None,
        "--filter",
        "-f",
        help="Equality filter FIELD=VALUE. Repeat for several fields.",
    ),
    sort: Optional[List[str]] = typer.Option(
        None,
        "--sort",
        "-s",
        help="Sort field. Repeating the same field toggles to descending.",
    ),
    page: int = typer.Option(1, "--page", "-p", help="1-based page number."),
    page_size: Optional[int] = typer.Option(
        None,
        "--page-size",
        "-n",
        help="Records per page (must be one of PAGE_SIZE_OPTIONS).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the page as JSON."),
    profile: bool = typer.Option(False, "--profile", help="Print load/derive timings."),
) -> None:
    """
    Render one page of records for the given query.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    parsed_filters = [_parse_filter(raw) for raw in filters or []]

    try:
        with profile_block("load") as load_stats:
            store = _load_store(data, settings)
            view = TableView(store, settings)

        if page_size is not None:
            view.set_page_size(page_size)
        view.set_search_text(search)
        for field, value in parsed_filters:
            view.set_filter(field, value)
        for field in sort or []:
            view.set_sort_field(field)
        view.go_to_page(page - 1)
    except TableViewError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    if view.current_page_index != page - 1:
        typer.echo(
            f"Page {page} is out of range; showing page {view.current_page_index + 1}.",
            err=True,
        )

    with profile_block("derive") as derive_stats:
        result = view.pipeline.render(view.state)

    if as_json:
        payload = result.to_dict()
        payload["query"] = view.state.model_dump(mode="json")
        if profile:
            payload["profile"] = [load_stats.as_dict(), derive_stats.as_dict()]
        typer.echo(json.dumps(payload, indent=2))
        return

    print_page(result)
    if profile:
        print_profile([load_stats, derive_stats])


@app.command()
def fields(
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="JSON or CSV file to load."),
) -> None:
    """
    List the distinct values offered for each filterable field.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        store = _load_store(data, settings)
    except TableViewError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)
    print_filter_options(store.filter_options())


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
