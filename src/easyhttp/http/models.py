# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models shared by the dispatcher and transports."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from ..errors import HttpError

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by Transport implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None

    @property
    def is_upload(self) -> bool:
        return self.body is not None


@dataclass
class HttpResponse:
    """
    Transport outcome.

    `status_code` is None when no response was received at all; `error_message`
    and `error_type` then describe the transport failure.
    """

    ok: bool
    status_code: int | None = None
    headers: Any = field(default_factory=dict)
    content: bytes = b""
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)


class CompletionResult(NamedTuple):
    """The (error, status, headers, data) tuple delivered to a completion handler."""

    error: HttpError | None
    status: int | None
    headers: Headers | None
    data: bytes | None

    @classmethod
    def connection_failure(cls) -> CompletionResult:
        return cls(HttpError.CONNECTION_FAILURE, None, None, None)


CompletionHandler = Callable[[HttpError | None, int | None, Headers | None, bytes | None], None]


NOOP_COMPLETION_HANDLER: CompletionHandler = lambda error, status, headers, data: None  # noqa: E731
