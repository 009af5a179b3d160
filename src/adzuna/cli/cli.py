"""Adzuna CLI - Query the Adzuna job search API from your terminal."""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated, Optional, TypeVar

import typer
from pydantic import BaseModel
from rich.logging import RichHandler
from rich.panel import Panel

from adzuna.config import AdzunaSettings
from adzuna.lib import (
    Client,
    RequestBuilder,
    console,
    display_categories,
    display_geodata,
    display_histogram,
    display_history,
    display_job_table,
    display_top_companies,
    err_console,
)
from adzuna.lib.api.errors import AdzunaError
from adzuna.lib.models.models import Country, SortBy, SortDirection

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# Initialize Typer app
app = typer.Typer(
    name="adzuna",
    help="🔎 Adzuna CLI - Search job listings and salary statistics",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

CountryOption = Annotated[
    Optional[Country],
    typer.Option("--country", help="Country code (default: ADZUNA_DEFAULT_COUNTRY or us)"),
]
LocationOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--location",
        "-l",
        help="Location level, repeat to refine (e.g. -l UK -l London)",
    ),
]
CategoryOption = Annotated[
    Optional[str],
    typer.Option("--category", "-c", help="Category tag (see 'adzuna categories')"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output raw JSON"),
]


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log HTTP requests to stderr"),
    ] = False,
) -> None:
    if verbose:
        setup_logging()


def setup_logging() -> None:
    """Send the package's DEBUG logs to stderr.

    Only the ``adzuna`` logger is raised to DEBUG. httpx logs full request
    URLs, which carry ``app_key``, so its loggers stay at WARNING.
    """
    logger = logging.getLogger("adzuna")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_client() -> Client:
    """Build a client from the environment, exiting if credentials are missing."""
    settings = AdzunaSettings()
    if not settings.has_credentials:
        err_console.print("[red]Error:[/red] Missing Adzuna credentials")
        err_console.print("[dim]Set ADZUNA_APP_ID and ADZUNA_APP_KEY (or API_ID and API_KEY)[/dim]")
        raise typer.Exit(1)
    return Client.from_settings(settings)


def _fetch(request: RequestBuilder[ResponseT], status: str) -> ResponseT:
    try:
        with console.status(f"[cyan]{status}[/cyan]", spinner="dots"):
            return asyncio.run(request.fetch())
    except AdzunaError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def _with_location(request, location: list[str] | None, category: str | None):
    for loc in location or []:
        request = request.location(loc)
    if category:
        request = request.category(category)
    return request


@app.command()
def search(
    keywords: Annotated[
        Optional[str],
        typer.Argument(help="Search keywords (job title, skills, company)"),
    ] = None,
    country: CountryOption = None,
    location: LocationOption = None,
    category: CategoryOption = None,
    where: Annotated[
        Optional[str],
        typer.Option("--where", "-w", help="Place name or postal code to search around"),
    ] = None,
    distance: Annotated[
        Optional[int],
        typer.Option("--distance", "-d", help="Radius in km around --where"),
    ] = None,
    company: Annotated[
        Optional[str],
        typer.Option("--company", help="Canonical company name"),
    ] = None,
    page: Annotated[
        int,
        typer.Option("--page", "-p", min=1, help="Page number (starts at 1)"),
    ] = 1,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", help="Results per page"),
    ] = None,
    salary_min: Annotated[Optional[int], typer.Option("--salary-min")] = None,
    salary_max: Annotated[Optional[int], typer.Option("--salary-max")] = None,
    max_days_old: Annotated[
        Optional[int],
        typer.Option("--max-days-old", help="Only ads at most this many days old"),
    ] = None,
    sort_by: Annotated[Optional[SortBy], typer.Option("--sort-by")] = None,
    sort_dir: Annotated[Optional[SortDirection], typer.Option("--sort-dir")] = None,
    full_time: Annotated[bool, typer.Option("--full-time")] = False,
    part_time: Annotated[bool, typer.Option("--part-time")] = False,
    contract: Annotated[bool, typer.Option("--contract")] = False,
    permanent: Annotated[bool, typer.Option("--permanent")] = False,
    show_urls: Annotated[
        bool,
        typer.Option("--urls", "-u", help="Show job URLs in table"),
    ] = False,
    json_output: JsonOption = False,
) -> None:
    """🔍 Search for jobs.

    Examples:

        adzuna search "python developer"

        adzuna search "data engineer" --country gb -l UK -l London

        adzuna search nurse --where austin --distance 20 --sort-by date
    """
    client = get_client()
    request = client.search().page(page)
    if country:
        request = request.country(country)
    if keywords:
        request = request.what(keywords)
    request = _with_location(request, location, category)
    if where:
        request = request.where(where)
    if distance is not None:
        request = request.distance(distance)
    if company:
        request = request.company(company)
    if limit is not None:
        request = request.results_per_page(limit)
    if salary_min is not None:
        request = request.salary_min(salary_min)
    if salary_max is not None:
        request = request.salary_max(salary_max)
    if max_days_old is not None:
        request = request.max_days_old(max_days_old)
    if sort_by:
        request = request.sort_by(sort_by)
    if sort_dir:
        request = request.sort_dir(sort_dir)
    if full_time:
        request = request.full_time()
    if part_time:
        request = request.part_time()
    if contract:
        request = request.contract()
    if permanent:
        request = request.permanent()

    response = _fetch(request, "Searching jobs...")

    if json_output:
        console.print_json(response.model_dump_json())
        return

    if not response.results:
        console.print("[yellow]No jobs found matching your criteria.[/yellow]")
        raise typer.Exit(0)

    display_job_table(response, show_url=show_urls)
    console.print(
        f"  [dim]Page {page} • Showing {len(response.results)} of {response.count:,} jobs[/dim]"
    )
    console.print()


@app.command("top-companies")
def top_companies(
    keywords: Annotated[
        Optional[str],
        typer.Argument(help="Keywords to rank companies by"),
    ] = None,
    country: CountryOption = None,
    location: LocationOption = None,
    category: CategoryOption = None,
    json_output: JsonOption = False,
) -> None:
    """🏢 Show the companies with the most advertised jobs.

    Example:

        adzuna top-companies "software engineering" -l US -l Texas
    """
    request = get_client().top_companies()
    if country:
        request = request.country(country)
    if keywords:
        request = request.what(keywords)
    request = _with_location(request, location, category)

    response = _fetch(request, "Fetching top companies...")

    if json_output:
        console.print_json(response.model_dump_json())
        return

    if not response.leaderboard:
        console.print("[yellow]No companies found.[/yellow]")
        raise typer.Exit(0)

    display_top_companies(response)


@app.command()
def histogram(
    keywords: Annotated[
        Optional[str],
        typer.Argument(help="Keywords to build the histogram for"),
    ] = None,
    country: CountryOption = None,
    location: LocationOption = None,
    category: CategoryOption = None,
    json_output: JsonOption = False,
) -> None:
    """📊 Show the current distribution of jobs by salary."""
    request = get_client().histogram()
    if country:
        request = request.country(country)
    if keywords:
        request = request.what(keywords)
    request = _with_location(request, location, category)

    response = _fetch(request, "Fetching salary histogram...")

    if json_output:
        console.print_json(response.model_dump_json())
        return

    if not response.histogram:
        console.print("[yellow]No salary data found.[/yellow]")
        raise typer.Exit(0)

    display_histogram(response)


@app.command()
def history(
    months: Annotated[
        Optional[int],
        typer.Option("--months", "-m", help="Number of months back"),
    ] = None,
    country: CountryOption = None,
    location: LocationOption = None,
    category: CategoryOption = None,
    json_output: JsonOption = False,
) -> None:
    """📈 Show the average advertised salary per month."""
    request = get_client().history()
    if country:
        request = request.country(country)
    if months is not None:
        request = request.months(months)
    request = _with_location(request, location, category)

    response = _fetch(request, "Fetching salary history...")

    if json_output:
        console.print_json(response.model_dump_json())
        return

    if not response.month:
        console.print("[yellow]No salary history found.[/yellow]")
        raise typer.Exit(0)

    display_history(response)


@app.command()
def categories(
    country: CountryOption = None,
    json_output: JsonOption = False,
) -> None:
    """📂 List job categories and their tags.

    Use the tag (left column) with the --category/-c options.
    """
    request = get_client().categories()
    if country:
        request = request.country(country)

    response = _fetch(request, "Fetching categories...")

    if json_output:
        console.print_json(response.model_dump_json())
        return

    display_categories(response)


@app.command()
def geodata(
    country: CountryOption = None,
    location: LocationOption = None,
    category: CategoryOption = None,
    json_output: JsonOption = False,
) -> None:
    """🗺️ Show the number of jobs per location."""
    request = get_client().geodata()
    if country:
        request = request.country(country)
    request = _with_location(request, location, category)

    response = _fetch(request, "Fetching geodata...")

    if json_output:
        console.print_json(response.model_dump_json())
        return

    display_geodata(response)


@app.command()
def version(json_output: JsonOption = False) -> None:
    """ℹ️ Show the API version."""
    response = _fetch(get_client().api_version(), "Fetching API version...")

    if json_output:
        console.print_json(response.model_dump_json())
        return

    console.print()
    console.print(
        Panel(
            f"API version [bold green]{response.api_version}[/bold green]\n"
            f"Software version [dim]{response.software_version}[/dim]",
            title="[bold]ℹ️ Adzuna API[/bold]",
            border_style="blue",
        )
    )
    console.print()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
