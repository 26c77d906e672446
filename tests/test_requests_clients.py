import json

import httpx
import pytest

from src.integrations.clients.mocks.necessitous_requests import MockRequestsClient
from src.integrations.clients.real_http.necessitous_requests import RealRequestsClient
from src.integrations.contracts.requests import TransportError
from src.necessitous.request import build_request


@pytest.fixture
def request_obj(make_steps):
    return build_request(
        make_steps(
            supplies={"Glove": {"positions": [{"quantity": 2, "material": "latex", "size": "M"}]}},
            comment="thanks",
        )
    )


def _client(handler, base_url="https://api.example.org/v1/"):
    return RealRequestsClient(base_url=base_url, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_send_posts_compacted_json_to_requests_endpoint(request_obj):
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["url"] = str(request.url)
        captured["content_type"] = request.headers["content-type"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json="req-42")

    result = await _client(handler).send(request_obj)

    assert result == "req-42"
    assert captured["method"] == "POST"
    assert captured["url"] == "https://api.example.org/v1/requests"
    assert captured["content_type"] == "application/json"
    assert captured["body"] == request_obj.to_payload()
    assert set(captured["body"]) == {"medicalCentre", "gloves", "additionalComment"}


@pytest.mark.asyncio
async def test_base_url_without_trailing_slash(request_obj):
    urls = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(200, json="req-1")

    await _client(handler, base_url="https://api.example.org/v1").send(request_obj)

    assert urls == ["https://api.example.org/v1/requests"]


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 404, 500, 503])
async def test_non_2xx_is_a_transport_error(request_obj, status_code):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"error": "nope"})

    with pytest.raises(TransportError) as exc:
        await _client(handler).send(request_obj)
    assert str(exc.value) == "Failed to send the request"
    assert isinstance(exc.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_network_failure_is_a_transport_error(request_obj):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError):
        await _client(handler).send(request_obj)


@pytest.mark.asyncio
async def test_unparseable_body_is_a_transport_error(request_obj):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>ok</html>")

    with pytest.raises(TransportError):
        await _client(handler).send(request_obj)


@pytest.mark.asyncio
async def test_non_string_identifier_is_a_transport_error(request_obj):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": 1})

    with pytest.raises(TransportError):
        await _client(handler).send(request_obj)


@pytest.mark.asyncio
async def test_post_json_without_parsing_returns_response():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    response = await _client(handler).post_json({"ping": True}, "health", parse=False)

    assert response.status_code == 204


def test_real_client_requires_base_url():
    with pytest.raises(ValueError):
        RealRequestsClient(base_url="")


@pytest.mark.asyncio
async def test_mock_client_records_payloads_and_numbers_ids(request_obj):
    client = MockRequestsClient()

    first = await client.send(request_obj)
    second = await client.send(request_obj)

    assert (first, second) == ("mock-request-1", "mock-request-2")
    assert client.sent == [request_obj.to_payload(), request_obj.to_payload()]


@pytest.mark.asyncio
async def test_malformed_base_url_is_a_transport_error(request_obj):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json="req-1")

    with pytest.raises(TransportError) as exc:
        await _client(handler, base_url="https://api.example.org:99999/v1").send(request_obj)
    assert isinstance(exc.value.__cause__, httpx.InvalidURL)
