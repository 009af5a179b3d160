"""Display and formatting utilities for CLI output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from adzuna.lib.models.models import (
        Categories,
        HistoricalSalary,
        Job,
        JobGeoData,
        JobSearchResults,
        SalaryHistogram,
        TopCompanies,
    )


console = Console()
err_console = Console(stderr=True)

BAR_WIDTH = 40


def format_salary(job: Job) -> str:
    """Format salary, dimmed when unknown or predicted."""
    if job.salary_min is None and job.salary_max is None:
        return "[dim]Not disclosed[/dim]"
    if job.salary_is_predicted:
        return f"[dim green]{job.salary_display}[/dim green]"
    return f"[green]{job.salary_display}[/green]"


def format_contract(job: Job) -> str:
    parts = [
        value.value.replace("_", " ")
        for value in (job.contract_time, job.contract_type)
        if value is not None
    ]
    if not parts:
        return "[dim]-[/dim]"
    return ", ".join(parts)


def truncate(text: str, max_len: int = 40) -> str:
    """Truncate text with ellipsis."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"


def _panel(renderable: Table, title: str, subtitle: str | None = None) -> None:
    console.print()
    console.print(
        Panel(
            renderable,
            title=f"[bold]{title}[/bold]",
            subtitle=subtitle,
            border_style="blue",
        )
    )
    console.print()


def _bar(value: float, peak: float) -> str:
    width = int(BAR_WIDTH * value / peak) if peak > 0 else 0
    return "█" * width


def display_job_table(response: JobSearchResults, *, show_url: bool = False) -> None:
    """Display jobs in a rich table."""
    table = Table(
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
        row_styles=["", "dim"],
        expand=True,
    )

    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Title", style="bold white", min_width=25, max_width=45)
    table.add_column("Company", min_width=15, max_width=30)
    table.add_column("Salary", justify="right", min_width=12)
    table.add_column("Type", min_width=10)
    table.add_column("Location", min_width=15)
    if show_url:
        table.add_column("URL", overflow="fold")

    for i, job in enumerate(response.results, 1):
        row = [
            str(i),
            truncate(job.title, 45),
            truncate(job.company.display_name or "-", 30),
            format_salary(job),
            truncate(format_contract(job), 20),
            truncate(job.location.display_name or "-", 20),
        ]
        if show_url:
            row.append(job.redirect_url)
        table.add_row(*row)

    # Header with search stats
    header = Text()
    header.append("Found ", style="dim")
    header.append(f"{response.count:,}", style="bold green")
    header.append(" jobs", style="dim")
    if response.mean is not None:
        header.append(f" • mean salary {response.mean:,.0f}", style="dim")

    _panel(table, "🔍 Job Search Results", str(header))


def display_top_companies(response: TopCompanies) -> None:
    """Display the company leaderboard."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan", expand=True)
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Company", style="bold white")
    table.add_column("Canonical Name", style="dim")
    table.add_column("Jobs", justify="right", style="green")
    table.add_column("Avg Salary", justify="right")

    for i, company in enumerate(response.leaderboard or [], 1):
        table.add_row(
            str(i),
            company.display_name or "-",
            company.canonical_name or "-",
            f"{company.count:,}" if company.count is not None else "-",
            f"{company.average_salary:,.0f}" if company.average_salary is not None else "-",
        )

    _panel(table, "🏢 Top Companies")


def display_categories(response: Categories) -> None:
    """Display categories with the tag used for filtering."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Tag", style="green", min_width=25)
    table.add_column("Category", style="white")

    for category in response.results:
        table.add_row(category.tag, category.label)

    _panel(
        table,
        "📂 Job Categories",
        f"[dim]{len(response.results)} categories • use tag with --category[/dim]",
    )


def display_histogram(response: SalaryHistogram) -> None:
    """Display salary buckets as horizontal bars."""
    buckets = sorted((response.histogram or {}).items(), key=lambda kv: float(kv[0]))
    peak = max((count for _, count in buckets), default=0)

    table = Table(box=None, show_header=True, header_style="bold cyan", padding=(0, 2))
    table.add_column("Salary From", justify="right")
    table.add_column("Jobs", justify="right", style="green")
    table.add_column("")

    for salary, count in buckets:
        table.add_row(f"{float(salary):,.0f}", f"{count:,}", f"[blue]{_bar(count, peak)}[/blue]")

    _panel(table, "📊 Salary Histogram")


def display_history(response: HistoricalSalary) -> None:
    """Display average salary per month."""
    months = sorted((response.month or {}).items())
    peak = max((salary for _, salary in months), default=0)

    table = Table(box=None, show_header=True, header_style="bold cyan", padding=(0, 2))
    table.add_column("Month")
    table.add_column("Avg Salary", justify="right", style="green")
    table.add_column("")

    for month, salary in months:
        table.add_row(month, f"{salary:,.2f}", f"[blue]{_bar(salary, peak)}[/blue]")

    _panel(table, "📈 Salary History")


def display_geodata(response: JobGeoData) -> None:
    """Display job counts per location."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan", expand=True)
    table.add_column("Location", style="bold white")
    table.add_column("Area", style="dim")
    table.add_column("Jobs", justify="right", style="green")

    for entry in response.locations or []:
        location = entry.location
        table.add_row(
            (location.display_name if location else None) or "-",
            " › ".join(location.area or []) if location else "-",
            f"{entry.count:,}" if entry.count is not None else "-",
        )

    _panel(table, "🗺️  Jobs by Location")
