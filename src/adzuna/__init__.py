"""Adzuna API client and CLI.

A Python library and CLI for the Adzuna job search API: job search, top
companies, salary histograms and history, categories and geodata.

Example:
    >>> from adzuna import Client
    >>> client = Client("my-app-id", "my-app-key")
    >>> results = await client.search().what("python developer").fetch()
    >>> for job in results.results:
    ...     print(f"{job.title}")
"""

from adzuna.lib.api.client import Client
from adzuna.lib.api.errors import (
    AdzunaError,
    ApiError,
    DeserializationError,
    TransportError,
    UnexpectedResponseError,
)
from adzuna.lib.api.request import FetchResult, RequestBuilder
from adzuna.lib.models.models import (
    ApiException,
    Country,
    Job,
    JobSearchResults,
    SortBy,
    SortDirection,
)

__version__ = "0.1.0"
__all__ = [
    "Client",
    "RequestBuilder",
    "FetchResult",
    "AdzunaError",
    "ApiError",
    "DeserializationError",
    "TransportError",
    "UnexpectedResponseError",
    "ApiException",
    "Country",
    "Job",
    "JobSearchResults",
    "SortBy",
    "SortDirection",
]
