"""Pydantic models for Adzuna API responses."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ValidationInfo, field_validator


# ============================================================================
# Enums
# ============================================================================


class Country(str, Enum):
    """Countries served by the Adzuna jobs API, by URL code."""

    UNITED_KINGDOM = "gb"
    UNITED_STATES = "us"
    AUSTRIA = "at"
    AUSTRALIA = "au"
    BELGIUM = "be"
    BRAZIL = "br"
    CANADA = "ca"
    SWITZERLAND = "ch"
    GERMANY = "de"
    SPAIN = "es"
    FRANCE = "fr"
    INDIA = "in"
    ITALY = "it"
    MEXICO = "mx"
    NETHERLANDS = "nl"
    NEW_ZEALAND = "nz"
    POLAND = "pl"
    RUSSIA = "ru"
    SINGAPORE = "sg"
    SOUTH_AFRICA = "za"


class SortBy(str, Enum):
    """Ordering of search results."""

    DEFAULT = "default"
    HYBRID = "hybrid"
    DATE = "date"
    SALARY = "salary"
    RELEVANCE = "relevance"


class SortDirection(str, Enum):
    """Direction of search result ordering."""

    UP = "up"
    DOWN = "down"


class ContractType(str, Enum):
    """Whether a job is permanent or a short-term contract."""

    PERMANENT = "permanent"
    CONTRACT = "contract"


class ContractTime(str, Enum):
    """Hours of a job."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"


# ============================================================================
# Error payload
# ============================================================================


class ApiException(BaseModel):
    """Structured error body returned by the API on failure."""

    exception: str
    """Class of exception, e.g. ``AUTH_FAIL``."""

    doc: str | None = None
    """URL linking to the relevant documentation."""

    display: str | None = None
    """Human readable error message in English."""


# ============================================================================
# Endpoint models
# ============================================================================


class Version(BaseModel):
    """Returned by the version endpoint."""

    api_version: int
    software_version: str


class Company(BaseModel):
    """A company, as embedded in a job or listed in a leaderboard.

    ``count`` and ``average_salary`` are normally only provided by statistics
    queries, not search queries.
    """

    display_name: str | None = None
    canonical_name: str | None = None
    count: int | None = None
    average_salary: float | None = None


class TopCompanies(BaseModel):
    """Returned by the top_companies endpoint."""

    leaderboard: list[Company] | None = None


class Category(BaseModel):
    """A job category.

    ``tag`` is the value to pass to the ``category`` query parameter.
    """

    tag: str
    label: str


class Categories(BaseModel):
    """Returned by the categories endpoint."""

    results: list[Category]


class HistoricalSalary(BaseModel):
    """Returned by the history endpoint.

    Keys of ``month`` are ISO 8601 dates omitting the day, e.g. ``2013-09``.
    """

    month: dict[str, float] | None = None


class SalaryHistogram(BaseModel):
    """Returned by the histogram endpoint.

    Each key is the lower end of a salary bucket; each value is the number of
    live job ads with a salary in that bucket.
    """

    histogram: dict[str, int] | None = None


class LocationDetail(BaseModel):
    """A location, as an array of increasingly specific area names."""

    area: list[str] | None = None
    display_name: str | None = None


class LocationJobs(BaseModel):
    """Number of jobs available at a location."""

    count: int | None = None
    location: LocationDetail | None = None


class JobGeoData(BaseModel):
    """Returned by the geodata endpoint."""

    locations: list[LocationJobs] | None = None


class Job(BaseModel):
    """A single job advertisement from search results."""

    id: str
    created: datetime
    title: str
    description: str
    redirect_url: str
    category: Category
    location: LocationDetail
    company: Company
    latitude: float | None = None
    longitude: float | None = None
    salary_min: float | None = None
    salary_max: float | None = None
    salary_is_predicted: bool = False
    contract_type: ContractType | None = None
    contract_time: ContractTime | None = None
    adref: str | None = None

    @field_validator("salary_is_predicted", mode="before")
    @classmethod
    def _parse_flag(cls, value: object) -> object:
        # API sends "0" / "1"
        if isinstance(value, str):
            return value == "1"
        return value

    @field_validator("contract_type", "contract_time", mode="before")
    @classmethod
    def _drop_unknown(cls, value: object, info: ValidationInfo) -> object:
        enum_cls = ContractType if info.field_name == "contract_type" else ContractTime
        if isinstance(value, str) and value not in {e.value for e in enum_cls}:
            return None
        return value

    @property
    def salary_display(self) -> str:
        """Format salary range for display."""
        if self.salary_min is None and self.salary_max is None:
            return "Not specified"
        if self.salary_min == self.salary_max:
            text = f"{self.salary_min:,.0f}"
        else:
            min_str = f"{self.salary_min:,.0f}" if self.salary_min is not None else "?"
            max_str = f"{self.salary_max:,.0f}" if self.salary_max is not None else "?"
            text = f"{min_str} - {max_str}"
        return f"{text} (predicted)" if self.salary_is_predicted else text


class JobSearchResults(BaseModel):
    """Returned by the search endpoint."""

    results: list[Job]
    count: int
    mean: float | None = None
