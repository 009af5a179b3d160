"""Adzuna API client."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import httpx

from adzuna.lib.api.request import (
    CategoriesRequest,
    GeodataRequest,
    HistogramRequest,
    HistoryRequest,
    RequestBuilder,
    SearchRequest,
    TopCompaniesRequest,
    VersionRequest,
)
from adzuna.lib.models.models import Country

if TYPE_CHECKING:
    from adzuna.config import AdzunaSettings

ROOT_URL = "https://api.adzuna.com/v1/api"

DEFAULT_HEADERS = {
    "accept": "application/json",
    "user-agent": "adzuna-python/0.1.0",
}

BuilderT = TypeVar("BuilderT", bound=RequestBuilder)


class Client:
    """Client for the Adzuna jobs API.

    Holds the credentials and hands out one request builder per endpoint.
    The client keeps no connection open; every ``fetch()`` uses its own
    short-lived HTTP client, so builders from one client may be fetched
    concurrently.

    Example:
        >>> client = Client("my-app-id", "my-app-key")
        >>> results = await client.search().what("data engineer").fetch()
    """

    def __init__(
        self,
        app_id: str,
        app_key: str,
        *,
        base_url: str = ROOT_URL,
        timeout: float | None = None,
        default_country: Country | str = Country.UNITED_STATES,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._app_id = app_id
        self._app_key = app_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._default_country = Country(default_country)
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: AdzunaSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Client:
        """Create a client from settings, loading them from the environment if omitted."""
        if settings is None:
            from adzuna.config import AdzunaSettings

            settings = AdzunaSettings()
        return cls(
            settings.app_id,
            settings.app_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            default_country=settings.default_country,
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"Client(app_id={self._app_id!r}, base_url={self._base_url!r})"

    @property
    def app_id(self) -> str:
        return self._app_id

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def default_country(self) -> Country:
        return self._default_country

    def auth_params(self) -> list[tuple[str, str]]:
        """Credentials sent as query parameters on every request."""
        return [("app_id", self._app_id), ("app_key", self._app_key)]

    def http_client(self) -> httpx.AsyncClient:
        """Create the HTTP client for a single request."""
        kwargs: dict[str, object] = {"headers": DEFAULT_HEADERS}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    def query(self, builder: type[BuilderT]) -> BuilderT:
        """Create a builder of the given type bound to this client."""
        return builder(self)

    def api_version(self) -> VersionRequest:
        return self.query(VersionRequest)

    def categories(self) -> CategoriesRequest:
        return self.query(CategoriesRequest)

    def history(self) -> HistoryRequest:
        return self.query(HistoryRequest)

    def geodata(self) -> GeodataRequest:
        return self.query(GeodataRequest)

    def top_companies(self) -> TopCompaniesRequest:
        return self.query(TopCompaniesRequest)

    def histogram(self) -> HistogramRequest:
        return self.query(HistogramRequest)

    def search(self) -> SearchRequest:
        return self.query(SearchRequest)
