# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementation."""

from __future__ import annotations

import httpx

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse
from .transport import Transport


class HttpxTransport(Transport):
    """Synchronous httpx session; one instance owns one connection pool."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
        )

    def send(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        if self.settings.user_agent:
            headers.setdefault("User-Agent", self.settings.user_agent)

        try:
            resp = self._client.request(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
            )
            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=resp.headers,
                content=resp.content,
                meta={"http_version": resp.http_version, "upload": request.is_upload},
            )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(
                ok=False,
                error_message=str(exc),
                error_type=type(exc).__name__,
            )

    def close(self) -> None:
        self._client.close()
