# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Process-wide shared client and module-level verb helpers.

The shared HttpClient (and with it one transport session) is built on first use
and reused by every module-level call until `close_shared_client()`.
"""

from __future__ import annotations

from concurrent.futures import Future
from threading import Lock

from .http.dispatcher import HttpClient
from .http.models import NOOP_COMPLETION_HANDLER, CompletionHandler, CompletionResult, Headers
from .resource import HttpResource

_shared_client: HttpClient | None = None
_shared_lock = Lock()


def get_shared_client() -> HttpClient:
    global _shared_client
    with _shared_lock:
        if _shared_client is None:
            _shared_client = HttpClient()
        return _shared_client


def set_shared_client(client: HttpClient | None) -> HttpClient | None:
    """Install `client` as the shared client and return the previous one (not closed)."""
    global _shared_client
    with _shared_lock:
        previous, _shared_client = _shared_client, client
        return previous


def close_shared_client() -> None:
    client = set_shared_client(None)
    if client is not None:
        client.close()


def get(
    resource: HttpResource,
    headers: Headers | None = None,
    completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
) -> Future[CompletionResult]:
    return get_shared_client().get(resource, headers, completion_handler)


def put(
    resource: HttpResource,
    headers: Headers | None = None,
    data: bytes | str | None = None,
    completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
) -> Future[CompletionResult]:
    return get_shared_client().put(resource, headers, data, completion_handler)


def post(
    resource: HttpResource,
    headers: Headers | None = None,
    data: bytes | str | None = None,
    completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
) -> Future[CompletionResult]:
    return get_shared_client().post(resource, headers, data, completion_handler)


def delete(
    resource: HttpResource,
    headers: Headers | None = None,
    completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
) -> Future[CompletionResult]:
    return get_shared_client().delete(resource, headers, completion_handler)


def head(
    resource: HttpResource,
    headers: Headers | None = None,
    completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
) -> Future[CompletionResult]:
    return get_shared_client().head(resource, headers, completion_handler)


__all__ = [
    "close_shared_client",
    "delete",
    "get",
    "get_shared_client",
    "head",
    "post",
    "put",
    "set_shared_client",
]
