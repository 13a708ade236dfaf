# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy reported through completion handlers."""

from __future__ import annotations

from enum import Enum


class HttpError(str, Enum):
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "NotFound"
    SERVER_ERROR = "ServerError"
    CONNECTION_FAILURE = "ConnectionFailure"

    @property
    def description(self) -> str:
        """User-facing reason string."""
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    HttpError.UNAUTHORIZED: "Request was not authorized (HTTP 401)",
    HttpError.NOT_FOUND: "Resource not found (HTTP 404)",
    HttpError.SERVER_ERROR: "Request failed with an HTTP error status",
    HttpError.CONNECTION_FAILURE: "No response received from the server",
}


class InvalidResourceError(ValueError):
    """Raised when a resource descriptor cannot be turned into a request URL."""


def classify_status(status: int) -> HttpError | None:
    """
    Map an HTTP status code to an HttpError.

    401 and 404 get their own kinds; every other code in 400-599 is a server
    error. Anything outside that range (including 3xx) is a success.
    """
    if status == 401:
        return HttpError.UNAUTHORIZED
    if status == 404:
        return HttpError.NOT_FOUND
    if 400 <= status <= 599:
        return HttpError.SERVER_ERROR
    return None


__all__ = ["HttpError", "InvalidResourceError", "classify_status"]
