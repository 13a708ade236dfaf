# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from easyhttp.config import HttpSettings
from easyhttp.errors import InvalidResourceError
from easyhttp.http.adapters import StubTransport
from easyhttp.http.headers import normalize_headers
from easyhttp.http.httpx_transport import HttpxTransport
from easyhttp.http.models import HttpRequest, HttpResponse
from easyhttp.http.transport import create_default_transport
from easyhttp.http.url import build_request_url, resource_from_url
from easyhttp.resource import HttpResource


def test_build_request_url_concatenates_parts_verbatim():
    resource = HttpResource(scheme="http", host="example.com:8080", path="/users/1?expand=true")
    assert build_request_url(resource) == "http://example.com:8080/users/1?expand=true"


def test_build_request_url_allows_empty_path():
    assert build_request_url(HttpResource("https", "api.test", "")) == "https://api.test"


@pytest.mark.parametrize(
    "resource",
    [
        HttpResource(scheme="", host="example.com", path="/x"),
        HttpResource(scheme="http", host="", path="/x"),
        HttpResource(scheme="http", host="exa\x00mple.com", path="/x"),
    ],
)
def test_build_request_url_rejects_malformed_resources(resource):
    with pytest.raises(InvalidResourceError):
        build_request_url(resource)


def test_resource_from_url_keeps_query_on_path():
    resource = resource_from_url("https://api.test:8443/items?page=2")
    assert resource == HttpResource("https", "api.test:8443", "/items?page=2")

    with pytest.raises(InvalidResourceError):
        resource_from_url("/relative/only")


def test_resource_is_immutable():
    resource = HttpResource("http", "example.com", "/")
    with pytest.raises(AttributeError):
        resource.path = "/other"  # type: ignore[misc]


def test_normalize_headers_plain_mapping_is_kept_exactly():
    headers = {"Content-Type": "text/plain", "X-Custom": "42"}
    assert normalize_headers(headers) == {"Content-Type": "text/plain", "X-Custom": "42"}


def test_normalize_headers_httpx_headers_preserve_casing_and_join_duplicates():
    headers = httpx.Headers([("Content-Type", "text/plain"), ("Set-Cookie", "a=1"), ("set-cookie", "b=2")])
    assert normalize_headers(headers) == {"Content-Type": "text/plain", "Set-Cookie": "a=1, b=2"}


def test_normalize_headers_coerces_pairs_and_non_string_values():
    pairs = [(b"X-Bytes", b"yes"), ("X-Number", 42), (None, "skipped"), ("X-Empty", None)]
    assert normalize_headers(pairs) == {"X-Bytes": "yes", "X-Number": "42", "X-Empty": ""}
    assert normalize_headers(None) == {}


def _mock_transport(handler, **settings):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpxTransport(HttpSettings(**settings), client=client)


def test_httpx_transport_success_passes_method_headers_and_body():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, headers={"Location": "/items/7"})

    transport = _mock_transport(handler, user_agent="UA/1.0")
    resp = transport.send(HttpRequest(url="https://api.test/items", method="POST", headers={"X": "1"}, body=b'{"a":1}'))

    assert resp.ok is True
    assert resp.status_code == 201
    assert normalize_headers(resp.headers) == {"Location": "/items/7"}
    assert resp.content == b""
    assert resp.meta["upload"] is True
    assert seen[0].method == "POST"
    assert seen[0].content == b'{"a":1}'
    assert seen[0].headers["X"] == "1"
    assert seen[0].headers["User-Agent"] == "UA/1.0"


def test_httpx_transport_leaves_user_agent_alone_when_unset():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200)

    transport = _mock_transport(handler)
    transport.send(HttpRequest(url="http://example.com/", headers={"User-Agent": "mine"}))
    assert seen[0].headers["User-Agent"] == "mine"


def test_httpx_transport_converts_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = _mock_transport(handler)
    resp = transport.send(HttpRequest(url="http://unreachable.invalid/"))
    assert resp.ok is False
    assert resp.status_code is None
    assert resp.error_type == "ConnectError"
    assert "connection refused" in resp.error_message


def test_httpx_transport_builds_client_from_settings(monkeypatch):
    created = {}

    class FakeHttpxClient:
        def __init__(self, follow_redirects, timeout):
            created["follow_redirects"] = follow_redirects
            created["timeout"] = timeout
            self.closed = False

        def close(self):
            self.closed = True

    monkeypatch.setattr(httpx, "Client", FakeHttpxClient)
    transport = create_default_transport(HttpSettings(timeout=3.5, allow_redirects=False))
    assert isinstance(transport, HttpxTransport)
    assert created == {"follow_redirects": False, "timeout": 3.5}
    transport.close()
    assert transport._client.closed is True


def test_stub_transport_matches_method_then_url():
    transport = StubTransport()
    transport.add("http://x/a", HttpResponse(ok=True, status_code=200))
    transport.add("http://x/a", HttpResponse(ok=True, status_code=204), method="delete")

    assert transport.send(HttpRequest(url="http://x/a")).status_code == 200
    assert transport.send(HttpRequest(url="http://x/a", method="DELETE")).status_code == 204
    missing = transport.send(HttpRequest(url="http://x/b"))
    assert missing.ok is False
    assert missing.status_code is None
    assert [r.url for r in transport.requests] == ["http://x/a", "http://x/a", "http://x/b"]


def test_http_response_carries_only_transport_outcome():
    resp = HttpResponse(ok=True, status_code=200)
    assert resp.headers == {}
    assert resp.content == b""
    assert not hasattr(resp, "url")
