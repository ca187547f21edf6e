from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from tableview.domain.models import ResultView
from tableview.domain.values import is_numeric, to_text
from tableview.utils.profiler import ProfileStats


def column_header(field: str, view: ResultView) -> str:
    """Field name, with an arrow when it is the active sort field."""
    if view.sort_field == field:
        return f"{field} {view.sort_direction.arrow}"
    return field


def page_caption(view: ResultView) -> str:
    caption = view.summary()
    if view.total_pages:
        caption += f" │ Page {view.page_index + 1} of {view.total_pages}"
    return caption


def build_table(view: ResultView, title: Optional[str] = None) -> Table:
    """
    Build a rich table for the rendered page.

    Numeric columns are right-aligned. The caption carries the "Showing X to Y
    of Z entries" line so the counts always match the rows in the table.
    """
    table = Table(title=title, box=box.ROUNDED, caption=page_caption(view))

    for field in view.schema:
        numeric = bool(view.page_records) and all(
            is_numeric(r.get(field)) for r in view.page_records if r.get(field) is not None
        )
        table.add_column(
            column_header(field, view),
            justify="right" if numeric else "left",
            style="magenta" if field == view.sort_field else None,
            no_wrap=True,
        )

    for record in view.page_records:
        table.add_row(*(to_text(record.get(field)) for field in view.schema))

    return table


def print_page(view: ResultView, console: Optional[Console] = None, title: Optional[str] = None) -> None:
    console = console or Console()

    if view.error:
        console.print(f"[yellow]Degraded view:[/yellow] {view.error}")
    if not view.page_records:
        console.print("[yellow]No matching records.[/yellow]")

    console.print(build_table(view, title=title))


def print_filter_options(options: Dict[str, List[str]], console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Filter values", box=box.ROUNDED)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Values")
    for field, values in options.items():
        table.add_row(field, ", ".join(values) if values else "[dim](none)[/dim]")
    console.print(table)


def print_profile(stats: Sequence[ProfileStats], console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Pipeline timing", box=box.ROUNDED)
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Duration (ms)", justify="right", style="green")
    table.add_column("Peak traced (KB)", justify="right", style="yellow")
    table.add_column("CPU %", justify="right", style="red")
    for s in stats:
        traced = f"{s.peak_traced_bytes / 1024:.1f}" if s.peak_traced_bytes is not None else "N/A"
        cpu = f"{s.cpu_percent:.1f}" if s.cpu_percent is not None else "N/A"
        table.add_row(s.label, f"{s.duration_seconds * 1000:.3f}", traced, cpu)
    console.print(table)


__all__ = ["build_table", "column_header", "page_caption", "print_filter_options", "print_page", "print_profile"]
