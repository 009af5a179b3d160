"""Shared fixtures: canned API payloads and clients backed by httpx.MockTransport."""

from __future__ import annotations

import copy
from typing import Callable

import httpx
import pytest

from adzuna import Client

JOB = {
    "__CLASS__": "Adzuna::API::Response::Job",
    "id": "4071963447",
    "created": "2024-05-10T12:34:56Z",
    "title": "Senior Software Engineer",
    "description": "Build and run our Python services...",
    "redirect_url": "https://www.adzuna.com/land/ad/4071963447",
    "latitude": 30.2672,
    "longitude": -97.7431,
    "category": {
        "__CLASS__": "Adzuna::API::Response::Category",
        "tag": "it-jobs",
        "label": "IT Jobs",
    },
    "location": {
        "__CLASS__": "Adzuna::API::Response::Location",
        "area": ["US", "Texas", "Travis County", "Austin"],
        "display_name": "Austin, Travis County",
    },
    "salary_min": 120000,
    "salary_max": 150000,
    "salary_is_predicted": "0",
    "company": {
        "__CLASS__": "Adzuna::API::Response::Company",
        "display_name": "Acme Corp",
    },
    "contract_type": "permanent",
    "contract_time": "full_time",
    "adref": "eyJhbGciOiJIUzI1NiJ9",
}

SEARCH = {
    "__CLASS__": "Adzuna::API::Response::JobSearchResults",
    "results": [JOB],
    "count": 2318,
    "mean": 131250.75,
}

AUTH_FAIL = {
    "exception": "AUTH_FAIL",
    "doc": "https://api.adzuna.com/v1/doc",
    "display": "Authorisation failed",
}


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def job_payload() -> dict:
    return copy.deepcopy(JOB)


@pytest.fixture
def search_payload() -> dict:
    return copy.deepcopy(SEARCH)


@pytest.fixture
def auth_fail_payload() -> dict:
    return dict(AUTH_FAIL)


@pytest.fixture
def client() -> Client:
    """Client that must never touch the network."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request to {request.url}")

    return Client("test-id", "test-key", transport=httpx.MockTransport(handler))


@pytest.fixture
def client_for() -> Callable[..., Client]:
    """Build a client whose requests are answered by ``handler``."""

    def factory(handler: Callable, **kwargs: object) -> Client:
        return Client("test-id", "test-key", transport=httpx.MockTransport(handler), **kwargs)

    return factory
