# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubTransport
from .dispatcher import HttpClient
from .headers import normalize_headers
from .httpx_transport import HttpxTransport
from .models import (
    NOOP_COMPLETION_HANDLER,
    CompletionHandler,
    CompletionResult,
    Headers,
    HttpRequest,
    HttpResponse,
)
from .transport import Transport, create_default_transport
from .url import build_request_url, resource_from_url

__all__ = [
    "NOOP_COMPLETION_HANDLER",
    "CompletionHandler",
    "CompletionResult",
    "Headers",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "StubTransport",
    "Transport",
    "build_request_url",
    "create_default_transport",
    "normalize_headers",
    "resource_from_url",
]
