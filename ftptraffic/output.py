"""FTP Traffic Analyzer - Report output"""

import json

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import AnalysisResult
from .patterns import NOT_FOUND_NOTE


def report_to_json(result: AnalysisResult) -> str:
    return json.dumps(result.to_dict(), indent=2)


def _stamp(result: AnalysisResult, value) -> str:
    return escape(result.format_timestamp(value))


def _time_lines(result: AnalysisResult):
    times = result.timestamps
    if times.global_min is None:
        return []

    lines = [f"Date formatter with index [cyan]{result.format_index}[/] "
             f"({result.timestamp_format.name}) used."]

    line = f"From: [cyan]{_stamp(result, times.global_min)}[/]"
    if times.first_match is not None:
        line += f". First download: [green]{_stamp(result, times.first_match)}[/]"
    lines.append(line)

    if times.global_min != times.global_max:
        line = f"To: [cyan]{_stamp(result, times.global_max)}[/]"
        if times.last_match is not None:
            line += f". Last download: [green]{_stamp(result, times.last_match)}[/]"
        lines.append(line)

    return lines


def print_report(result: AnalysisResult, console: Console):
    console.print("\n" + "═" * 70, style="cyan")
    console.print("              FTP TRAFFIC REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    total = result.total_downloads
    summary = [
        f"Total Downloads: [{'green' if total > 0 else 'yellow'}]{total:,}[/]",
        f"Unique Files: [cyan]{len(result.download_table):,}[/]",
        f"Extensions: [cyan]{'|'.join(result.extensions)}[/]",
    ]
    console.print(Panel.fit("\n".join(summary), title="Summary", border_style="cyan"))

    # Time range
    lines = _time_lines(result)
    if lines:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("TIME RANGE", style="bold")
        for line in lines:
            console.print(f"  {line}")

    # Downloads
    if result.download_table:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("DOWNLOADS", style="bold")
        table = Table(box=box.ROUNDED)
        table.add_column("Request", style="cyan", overflow="fold")
        table.add_column("Count", style="white", justify="right")
        for key, count in result.download_table:
            color = 'red' if key.endswith(NOT_FOUND_NOTE) else 'cyan'
            table.add_row(f"[{color}]{escape(key)}[/]", str(count))
        console.print(table)

    console.print("\n" + "═" * 70, style="cyan")
