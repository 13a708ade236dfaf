# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for resource descriptors."""

from __future__ import annotations

from urllib.parse import urlsplit

import httpx

from ..errors import InvalidResourceError
from ..resource import HttpResource


def build_request_url(resource: HttpResource) -> str:
    """
    Concatenate `scheme://host` and the path exactly as given.

    The path is not percent-encoded and no query string is added; callers pass a
    pre-encoded path. Raises InvalidResourceError when the result is not a usable
    absolute URL.
    """
    url = f"{resource.scheme}://{resource.host}{resource.path}"
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise InvalidResourceError(f"Cannot build a request URL from {resource!r}: {exc}") from exc
    if not parsed.scheme or not parsed.host:
        raise InvalidResourceError(f"Cannot build a request URL from {resource!r}: missing scheme or host")
    return url


def resource_from_url(url: str) -> HttpResource:
    """
    Split an absolute URL into a resource descriptor.

    The query string stays attached to the path, e.g.
      https://api.test:8443/items?page=2 -> HttpResource("https", "api.test:8443", "/items?page=2")
    """
    parts = urlsplit(str(url or "").strip())
    if not parts.scheme or not parts.netloc:
        raise InvalidResourceError(f"Not an absolute URL: {url!r}")
    path = parts.path
    if parts.query:
        path = f"{path}?{parts.query}"
    return HttpResource(scheme=parts.scheme, host=parts.netloc, path=path)


__all__ = ["build_request_url", "resource_from_url"]
