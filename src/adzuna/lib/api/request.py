"""Request builders for the Adzuna API endpoints.

Every builder is an immutable value: each configuration method returns a new
builder with an updated copy of the query parameters, so a partially
configured builder can be reused without the copies interfering.

Example:
    >>> jobs = await (
    ...     client.search()
    ...     .what("python developer")
    ...     .location("UK")
    ...     .location("London")
    ...     .sort_by(SortBy.DATE)
    ...     .fetch()
    ... )
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from adzuna.lib.api.errors import (
    AdzunaError,
    ApiError,
    DeserializationError,
    TransportError,
    UnexpectedResponseError,
)
from adzuna.lib.models.models import (
    ApiException,
    Categories,
    Country,
    HistoricalSalary,
    JobGeoData,
    JobSearchResults,
    SalaryHistogram,
    SortBy,
    SortDirection,
    TopCompanies,
    Version,
)

if TYPE_CHECKING:
    from adzuna.lib.api.client import Client

logger = logging.getLogger(__name__)

# The API accepts location0 .. location7
MAX_LOCATIONS = 8

ResponseT = TypeVar("ResponseT", bound=BaseModel)
BuilderT = TypeVar("BuilderT", bound="RequestBuilder")


@dataclass(frozen=True)
class FetchResult(Generic[ResponseT]):
    """Outcome of a fetch, with the failure carried as a value."""

    value: ResponseT | None = None
    error: AdzunaError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ResponseT:
        """Return the value, raising the captured error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value


class RequestBuilder(ABC, Generic[ResponseT]):
    """Base class for all endpoint builders.

    Subclasses set ``response_model`` and implement ``path()``.
    """

    response_model: ClassVar[type[BaseModel]]

    def __init__(self, client: Client, *, country: Country | str | None = None) -> None:
        self._client = client
        self._country = Country(country) if country is not None else client.default_country
        self._params: dict[str, str] = {}
        self._locations: tuple[str, ...] = ()

    def _replace(self: BuilderT, **params: object) -> BuilderT:
        clone = copy.copy(self)
        clone._params = {**self._params, **{k: str(v) for k, v in params.items()}}
        return clone

    @abstractmethod
    def path(self) -> str:
        """Endpoint path relative to the API root."""

    def url(self) -> str:
        """Full request URL."""
        return f"{self._client.base_url}{self.path()}"

    def params(self) -> list[tuple[str, str]]:
        """Query parameters set on this builder, without credentials."""
        items = [(f"location{i}", loc) for i, loc in enumerate(self._locations)]
        items.extend(self._params.items())
        return items

    async def fetch(self) -> ResponseT:
        """Execute the request and parse the response.

        Failures are raised rather than returned as a value. Use
        ``fetch_result()`` to get them back as a ``FetchResult`` instead.

        Raises:
            TransportError: No response was received.
            ApiError: Non-2xx response with a structured error body.
            UnexpectedResponseError: Non-2xx response with any other body.
            DeserializationError: 2xx response that does not match the model.
        """
        url = self.url()
        params = self.params()
        logger.debug(f"GET {url} params={params}")

        try:
            async with self._client.http_client() as http:
                response = await http.get(url, params=self._client.auth_params() + params)
        except httpx.RequestError as e:
            logger.warning(f"Request to {self.path()} failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            error = _error_from_response(response)
            logger.warning(f"Request to {self.path()} failed: {error}")
            raise error

        try:
            return self.response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Unexpected {self.response_model.__name__} payload from {self.path()}")
            raise DeserializationError(
                response.status_code, self.response_model.__name__, str(e)
            ) from e

    async def fetch_result(self) -> FetchResult[ResponseT]:
        """Like ``fetch()``, but return failures instead of raising them."""
        try:
            return FetchResult(value=await self.fetch())
        except AdzunaError as e:
            return FetchResult(error=e)


def _error_from_response(response: httpx.Response) -> AdzunaError:
    try:
        api_error = ApiException.model_validate_json(response.content)
    except ValidationError:
        return UnexpectedResponseError(response.status_code, response.text)
    return ApiError(response.status_code, api_error)


# ============================================================================
# Shared filters
# ============================================================================


class CountryFilter:
    def country(self: BuilderT, country: Country | str) -> BuilderT:
        """Filter with a country of interest."""
        clone = copy.copy(self)
        clone._country = Country(country)
        return clone


class KeywordFilter:
    def what(self: BuilderT, what: str) -> BuilderT:
        """Filter by keywords. Multiple terms may be space separated."""
        return self._replace(what=what)


class LocationFilter:
    def location(self: BuilderT, location: str) -> BuilderT:
        """Add a location level, in the form returned in a LocationDetail area.

        Each call refines the previous one, e.g. ``location("UK")`` then
        ``location("London")``.
        """
        if len(self._locations) >= MAX_LOCATIONS:
            logger.warning(f"Ignoring location {location!r}: at most {MAX_LOCATIONS} levels")
            return self
        clone = copy.copy(self)
        clone._locations = (*self._locations, location)
        return clone

    def category(self: BuilderT, category: str) -> BuilderT:
        """Filter with a category tag, as returned by the categories endpoint."""
        return self._replace(category=category)


# ============================================================================
# Endpoints
# ============================================================================


class VersionRequest(RequestBuilder[Version]):
    response_model = Version

    def path(self) -> str:
        return "/version"


class CategoriesRequest(CountryFilter, RequestBuilder[Categories]):
    response_model = Categories

    def path(self) -> str:
        return f"/jobs/{self._country.value}/categories"


class HistogramRequest(CountryFilter, KeywordFilter, LocationFilter, RequestBuilder[SalaryHistogram]):
    response_model = SalaryHistogram

    def path(self) -> str:
        return f"/jobs/{self._country.value}/histogram"


class HistoryRequest(CountryFilter, LocationFilter, RequestBuilder[HistoricalSalary]):
    response_model = HistoricalSalary

    def path(self) -> str:
        return f"/jobs/{self._country.value}/history"

    def months(self, months: int) -> HistoryRequest:
        """Set the number of months back for which to retrieve data."""
        return self._replace(months=months)


class TopCompaniesRequest(CountryFilter, KeywordFilter, LocationFilter, RequestBuilder[TopCompanies]):
    response_model = TopCompanies

    def path(self) -> str:
        return f"/jobs/{self._country.value}/top_companies"


class GeodataRequest(CountryFilter, LocationFilter, RequestBuilder[JobGeoData]):
    response_model = JobGeoData

    def path(self) -> str:
        return f"/jobs/{self._country.value}/geodata"


class SearchRequest(CountryFilter, KeywordFilter, LocationFilter, RequestBuilder[JobSearchResults]):
    """Builder for the job search endpoint."""

    response_model = JobSearchResults

    def __init__(self, client: Client, *, country: Country | str | None = None) -> None:
        super().__init__(client, country=country)
        self._page = 1

    def path(self) -> str:
        return f"/jobs/{self._country.value}/search/{self._page}"

    def page(self, page: int) -> SearchRequest:
        """Set the page of search results. Pages start at 1."""
        if page < 1:
            return self
        clone = copy.copy(self)
        clone._page = page
        return clone

    def what_and(self, what_and: str) -> SearchRequest:
        """Filter by keywords. All keywords must be found."""
        return self._replace(what_and=what_and)

    def what_phrase(self, what_phrase: str) -> SearchRequest:
        """Filter by an entire phrase which must be found in the description or title."""
        return self._replace(what_phrase=what_phrase)

    def what_or(self, what_or: str) -> SearchRequest:
        """Filter by keywords. Any keywords may be found."""
        return self._replace(what_or=what_or)

    def what_exclude(self, what_exclude: str) -> SearchRequest:
        """Filter out jobs with certain keywords."""
        return self._replace(what_exclude=what_exclude)

    def where(self, where: str) -> SearchRequest:
        """Filter by geographic centre. Place names, postal codes, etc. may be used."""
        return self._replace(where=where)

    def title_only(self, title_only: str) -> SearchRequest:
        """Filter by keywords found in the title only."""
        return self._replace(title_only=title_only)

    def company(self, company: str) -> SearchRequest:
        """Filter by canonical company name, as found in a Company object."""
        return self._replace(company=company)

    def distance(self, distance: int) -> SearchRequest:
        """Distance in kilometres from the centre given by ``where()``. The API defaults to 5km."""
        return self._replace(distance=distance)

    def results_per_page(self, results_per_page: int) -> SearchRequest:
        if results_per_page < 1:
            return self
        return self._replace(results_per_page=results_per_page)

    def max_days_old(self, max_days_old: int) -> SearchRequest:
        """Upper bound on the age of the oldest advertisement, in days."""
        return self._replace(max_days_old=max_days_old)

    def salary_min(self, salary_min: int) -> SearchRequest:
        return self._replace(salary_min=salary_min)

    def salary_max(self, salary_max: int) -> SearchRequest:
        return self._replace(salary_max=salary_max)

    def salary_include_unknown(self) -> SearchRequest:
        """Include jobs with unknown salaries when filtering by salary."""
        return self._replace(salary_include_unknown=1)

    def full_time(self) -> SearchRequest:
        return self._replace(full_time=1)

    def part_time(self) -> SearchRequest:
        return self._replace(part_time=1)

    def contract(self) -> SearchRequest:
        return self._replace(contract=1)

    def permanent(self) -> SearchRequest:
        return self._replace(permanent=1)

    def sort_by(self, sort_by: SortBy | str) -> SearchRequest:
        """Specify the ordering of search results."""
        return self._replace(sort_by=SortBy(sort_by).value)

    def sort_dir(self, sort_dir: SortDirection | str) -> SearchRequest:
        """Specify the direction of ordering."""
        return self._replace(sort_dir=SortDirection(sort_dir).value)
