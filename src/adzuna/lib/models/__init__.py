"""Adzuna API models."""

from adzuna.lib.models.models import (
    ApiException,
    Categories,
    Category,
    Company,
    ContractTime,
    ContractType,
    Country,
    HistoricalSalary,
    Job,
    JobGeoData,
    JobSearchResults,
    LocationDetail,
    LocationJobs,
    SalaryHistogram,
    SortBy,
    SortDirection,
    TopCompanies,
    Version,
)

__all__ = [
    "ApiException",
    "Categories",
    "Category",
    "Company",
    "ContractTime",
    "ContractType",
    "Country",
    "HistoricalSalary",
    "Job",
    "JobGeoData",
    "JobSearchResults",
    "LocationDetail",
    "LocationJobs",
    "SalaryHistogram",
    "SortBy",
    "SortDirection",
    "TopCompanies",
    "Version",
]
