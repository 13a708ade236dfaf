# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory Transport implementations."""

from __future__ import annotations

from threading import Lock

from .models import HttpRequest, HttpResponse
from .transport import Transport


class StubTransport(Transport):
    """Deterministic, programmable Transport for tests and offline use."""

    def __init__(self, responses: dict[tuple[str, str] | str, HttpResponse] | None = None):
        self._responses = responses or {}
        self._lock = Lock()
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse, *, method: str | None = None) -> None:
        key = (method.upper(), url) if method else url
        self._responses[key] = response

    def send(self, request: HttpRequest) -> HttpResponse:
        with self._lock:
            self.requests.append(request)
        for key in ((request.method.upper(), request.url), request.url):
            if key in self._responses:
                return self._responses[key]
        return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured", error_type="ConnectError")

    def close(self) -> None:
        self.closed = True
