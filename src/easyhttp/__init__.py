# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
easyhttp package entrypoint.

Convenience GET/PUT/POST/DELETE/HEAD helpers that address a target with an
HttpResource and report the outcome to a completion handler as
(error, status, headers, data). Network I/O sits behind an injectable
Transport, and a process-wide shared client backs the module-level verbs.
"""

from .config import HttpSettings, load_http_settings
from .errors import HttpError, InvalidResourceError, classify_status
from .http import (
    NOOP_COMPLETION_HANDLER,
    CompletionHandler,
    CompletionResult,
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxTransport,
    StubTransport,
    Transport,
    create_default_transport,
)
from .log import setup_logging
from .resource import HttpResource
from .runtime import (
    close_shared_client,
    delete,
    get,
    get_shared_client,
    head,
    post,
    put,
    set_shared_client,
)
from .version import __version__

__all__ = [
    "NOOP_COMPLETION_HANDLER",
    "CompletionHandler",
    "CompletionResult",
    "HttpClient",
    "HttpError",
    "HttpRequest",
    "HttpResource",
    "HttpResponse",
    "HttpSettings",
    "HttpxTransport",
    "InvalidResourceError",
    "StubTransport",
    "Transport",
    "classify_status",
    "close_shared_client",
    "create_default_transport",
    "delete",
    "get",
    "get_shared_client",
    "head",
    "load_http_settings",
    "post",
    "put",
    "set_shared_client",
    "setup_logging",
    "__version__",
]
