"""Adzuna library module."""

from adzuna.lib.api.client import Client
from adzuna.lib.api.request import (
    CategoriesRequest,
    FetchResult,
    GeodataRequest,
    HistogramRequest,
    HistoryRequest,
    RequestBuilder,
    SearchRequest,
    TopCompaniesRequest,
    VersionRequest,
)
from adzuna.lib.display import (
    console,
    display_categories,
    display_geodata,
    display_histogram,
    display_history,
    display_job_table,
    display_top_companies,
    err_console,
)

__all__ = [
    # Client
    "Client",
    # Builders
    "RequestBuilder",
    "FetchResult",
    "CategoriesRequest",
    "GeodataRequest",
    "HistogramRequest",
    "HistoryRequest",
    "SearchRequest",
    "TopCompaniesRequest",
    "VersionRequest",
    # Display
    "console",
    "err_console",
    "display_categories",
    "display_geodata",
    "display_histogram",
    "display_history",
    "display_job_table",
    "display_top_companies",
]
