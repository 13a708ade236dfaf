# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Verb helpers that dispatch requests to a Transport.

Every verb funnels into `HttpClient.send_request`, which runs the exchange on a
worker pool and calls the completion handler exactly once with
(error, status, headers, data). Handlers run on a worker thread, and handlers of
independently issued requests may complete in any order. Requests cannot be
cancelled and are never retried.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from contextlib import suppress

from ..config import HttpSettings, load_http_settings
from ..errors import HttpError, classify_status
from ..resource import HttpResource
from .headers import normalize_headers
from .models import (
    NOOP_COMPLETION_HANDLER,
    CompletionHandler,
    CompletionResult,
    Headers,
    HttpRequest,
    HttpResponse,
)
from .transport import Transport, create_default_transport
from .url import build_request_url

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Stateless request dispatcher bound to one transport session.

    The transport (and its connection pool) is created once and reused for every
    request; pass one in to share it or to substitute a stub in tests.

    Completion handlers run on this client's worker pool and must not block on
    futures returned by the same client.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        settings: HttpSettings | None = None,
        executor: Executor | None = None,
    ):
        self.settings = settings or load_http_settings()
        self.transport = transport or create_default_transport(self.settings)
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self.settings.max_workers,
            thread_name_prefix="easyhttp",
        )

    def get(
        self,
        resource: HttpResource,
        headers: Headers | None = None,
        completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
    ) -> Future[CompletionResult]:
        """Send a GET request."""
        return self.send_request(resource, "GET", headers=headers, completion_handler=completion_handler)

    def put(
        self,
        resource: HttpResource,
        headers: Headers | None = None,
        data: bytes | str | None = None,
        completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
    ) -> Future[CompletionResult]:
        """Send a PUT request, uploading `data` as the body when given."""
        return self.send_request(resource, "PUT", headers=headers, data=data, completion_handler=completion_handler)

    def post(
        self,
        resource: HttpResource,
        headers: Headers | None = None,
        data: bytes | str | None = None,
        completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
    ) -> Future[CompletionResult]:
        """Send a POST request, uploading `data` as the body when given."""
        return self.send_request(resource, "POST", headers=headers, data=data, completion_handler=completion_handler)

    def delete(
        self,
        resource: HttpResource,
        headers: Headers | None = None,
        completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
    ) -> Future[CompletionResult]:
        """Send a DELETE request."""
        return self.send_request(resource, "DELETE", headers=headers, completion_handler=completion_handler)

    def head(
        self,
        resource: HttpResource,
        headers: Headers | None = None,
        completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
    ) -> Future[CompletionResult]:
        """Send a HEAD request."""
        return self.send_request(resource, "HEAD", headers=headers, completion_handler=completion_handler)

    def send_request(
        self,
        resource: HttpResource,
        method: str,
        headers: Headers | None = None,
        data: bytes | str | None = None,
        completion_handler: CompletionHandler = NOOP_COMPLETION_HANDLER,
    ) -> Future[CompletionResult]:
        """
        Submit one request and return a future for its CompletionResult.

        Raises InvalidResourceError (before anything is sent, without calling the
        handler) when the resource does not form a valid URL.
        """
        url = build_request_url(resource)
        request = HttpRequest(url=url, method=method, headers=dict(headers) if headers else None, body=data)

        logger.debug("Sending %s request to %s", method, url)
        return self._executor.submit(self._exchange, request, completion_handler)

    def _exchange(self, request: HttpRequest, completion_handler: CompletionHandler) -> CompletionResult:
        try:
            response = self.transport.send(request)
        except Exception as exc:  # noqa: BLE001
            response = HttpResponse(ok=False, error_message=str(exc), error_type=type(exc).__name__)

        result = self._complete(request, response)
        completion_handler(*result)
        return result

    @staticmethod
    def _complete(request: HttpRequest, response: HttpResponse) -> CompletionResult:
        if response.status_code is None:
            logger.error(
                "%s: %s %s (%s: %s)",
                HttpError.CONNECTION_FAILURE,
                request.method,
                request.url,
                response.error_type,
                response.error_message,
            )
            return CompletionResult.connection_failure()

        status = response.status_code
        headers = normalize_headers(response.headers)
        error = classify_status(status)
        if error is not None:
            logger.error("%s: %s %s returned %d", error, request.method, request.url, status)
        return CompletionResult(error, status, headers, response.content)

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        with suppress(Exception):
            if hasattr(self.transport, "close"):
                self.transport.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["HttpClient"]
