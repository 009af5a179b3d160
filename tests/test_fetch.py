import asyncio
import logging

import httpx
import pytest

from adzuna import (
    AdzunaError,
    ApiError,
    DeserializationError,
    TransportError,
    UnexpectedResponseError,
)

pytestmark = pytest.mark.anyio


async def test_search_success(client_for, search_payload):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=search_payload)

    client = client_for(handler)
    results = await client.search().what("software engineer").results_per_page(1).fetch()

    assert results.count == 2318
    assert results.mean == pytest.approx(131250.75)
    assert [job.id for job in results.results] == ["4071963447"]
    assert results.results[0].company.display_name == "Acme Corp"

    (request,) = requests
    assert request.method == "GET"
    assert request.url.path == "/v1/api/jobs/us/search/1"
    assert request.url.params.multi_items() == [
        ("app_id", "test-id"),
        ("app_key", "test-key"),
        ("what", "software engineer"),
        ("results_per_page", "1"),
    ]


async def test_top_companies_sends_both_locations(client_for):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params)
        return httpx.Response(200, json={"leaderboard": [{"display_name": "Dell", "count": 812}]})

    client = client_for(handler)
    companies = await (
        client.top_companies()
        .what("software engineering")
        .location("US")
        .location("Texas")
        .fetch()
    )

    assert companies.leaderboard[0].display_name == "Dell"
    params = seen[0]
    assert params["what"] == "software engineering"
    assert params["location0"] == "US"
    assert params["location1"] == "Texas"


async def test_structured_error_body(client_for, auth_fail_payload):
    client = client_for(lambda request: httpx.Response(401, json=auth_fail_payload))

    with pytest.raises(ApiError) as excinfo:
        await client.search().what("engineer").fetch()

    error = excinfo.value
    assert error.http_status == 401
    assert error.api_error is not None
    assert error.api_error.exception == "AUTH_FAIL"
    assert error.api_error.display == "Authorisation failed"
    assert error.api_error.doc == "https://api.adzuna.com/v1/doc"
    assert error.exception == "AUTH_FAIL"
    assert "AUTH_FAIL" in str(error)


async def test_unstructured_error_body(client_for):
    client = client_for(lambda request: httpx.Response(502, text="<html>Bad Gateway</html>"))

    with pytest.raises(UnexpectedResponseError) as excinfo:
        await client.categories().fetch()

    assert excinfo.value.http_status == 502
    assert excinfo.value.api_error is None
    assert "Bad Gateway" in excinfo.value.body


async def test_empty_error_body(client_for):
    client = client_for(lambda request: httpx.Response(400))

    with pytest.raises(UnexpectedResponseError) as excinfo:
        await client.top_companies().category("invalid").fetch()

    assert excinfo.value.http_status == 400
    assert excinfo.value.api_error is None


async def test_transport_failure(client_for):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    client = client_for(handler)

    with pytest.raises(TransportError) as excinfo:
        await client.geodata().fetch()

    assert excinfo.value.http_status is None
    assert excinfo.value.api_error is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


async def test_schema_mismatch_is_not_an_api_error(client_for, search_payload):
    del search_payload["results"][0]["redirect_url"]
    client = client_for(lambda request: httpx.Response(200, json=search_payload))

    with pytest.raises(DeserializationError) as excinfo:
        await client.search().fetch()

    error = excinfo.value
    assert not isinstance(error, ApiError)
    assert error.http_status == 200
    assert error.api_error is None
    assert error.model == "JobSearchResults"


async def test_non_json_success_body(client_for):
    client = client_for(lambda request: httpx.Response(200, text="not json"))

    with pytest.raises(DeserializationError):
        await client.api_version().fetch()


async def test_any_2xx_is_success(client_for):
    client = client_for(
        lambda request: httpx.Response(203, json={"api_version": 1, "software_version": "1.0.7"})
    )

    version = await client.api_version().fetch()

    assert version.api_version == 1


async def test_fetch_result_carries_value(client_for):
    client = client_for(lambda request: httpx.Response(200, json={"histogram": {"20000": 12}}))

    result = await client.histogram().what("photoshop").fetch_result()

    assert result.ok
    assert result.error is None
    assert result.unwrap().histogram == {"20000": 12}


async def test_fetch_result_carries_error(client_for, auth_fail_payload):
    client = client_for(lambda request: httpx.Response(401, json=auth_fail_payload))

    result = await client.search().fetch_result()

    assert not result.ok
    assert result.value is None
    assert isinstance(result.error, AdzunaError)
    assert result.error.http_status == 401
    with pytest.raises(ApiError):
        result.unwrap()


async def test_concurrent_fetches_do_not_share_parameters(client_for):
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(0)
        params = request.url.params
        leader = {"display_name": params["what"], "canonical_name": params["location1"]}
        return httpx.Response(200, json={"leaderboard": [leader]})

    client = client_for(handler)
    base = client.top_companies().location("US")

    nurses, welders = await asyncio.gather(
        base.what("nurse").location("Texas").fetch(),
        base.what("welder").location("Ohio").fetch(),
    )

    assert nurses.leaderboard[0].display_name == "nurse"
    assert nurses.leaderboard[0].canonical_name == "Texas"
    assert welders.leaderboard[0].display_name == "welder"
    assert welders.leaderboard[0].canonical_name == "Ohio"
    assert base.params() == [("location0", "US")]


async def test_fetch_can_be_repeated(client_for):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(200, json={"results": [{"tag": "it-jobs", "label": "IT Jobs"}]})

    request = client_for(handler).categories().country("gb")

    first = await request.fetch()
    second = await request.fetch()

    assert first == second
    assert calls == ["/v1/api/jobs/gb/categories"] * 2


async def test_custom_base_url(client_for):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(f"{request.url.scheme}://{request.url.host}:{request.url.port}{request.url.path}")
        return httpx.Response(200, json={"locations": []})

    client = client_for(handler, base_url="http://localhost:8080/api/")

    geodata = await client.geodata().fetch()

    assert geodata.locations == []
    assert seen == ["http://localhost:8080/api/jobs/us/geodata"]


async def test_request_is_logged_without_credentials(client_for, search_payload, caplog):
    caplog.set_level(logging.DEBUG, logger="adzuna")
    client = client_for(lambda request: httpx.Response(200, json=search_payload))

    await client.search().what("nurse").location("UK").fetch()

    (record,) = [r for r in caplog.records if r.name == "adzuna.lib.api.request"]
    assert record.levelno == logging.DEBUG
    assert "GET https://api.adzuna.com/v1/api/jobs/us/search/1" in record.getMessage()
    assert "('what', 'nurse')" in record.getMessage()
    assert "test-key" not in caplog.text
    assert "test-id" not in caplog.text


async def test_api_error_is_logged_as_warning(client_for, auth_fail_payload, caplog):
    caplog.set_level(logging.DEBUG, logger="adzuna")
    client = client_for(lambda request: httpx.Response(401, json=auth_fail_payload))

    with pytest.raises(ApiError):
        await client.categories().fetch()

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "/jobs/us/categories" in warnings[0].getMessage()
    assert "AUTH_FAIL" in warnings[0].getMessage()
    assert "test-key" not in caplog.text


async def test_transport_failure_is_logged_as_warning(client_for, caplog):
    caplog.set_level(logging.DEBUG, logger="adzuna")

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError):
        await client_for(handler).geodata().fetch()

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "connection refused" in warnings[0].getMessage()


async def test_schema_mismatch_is_logged_as_warning(client_for, caplog):
    caplog.set_level(logging.DEBUG, logger="adzuna")
    client = client_for(lambda request: httpx.Response(200, json={"unexpected": True}))

    with pytest.raises(DeserializationError):
        await client.api_version().fetch()

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Version" in warnings[0].getMessage()
