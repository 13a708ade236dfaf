# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

Response headers reach the dispatcher in whatever container the transport uses
(httpx.Headers, plain dicts, lists of pairs). Completion handlers always receive
a plain ``dict[str, str]`` that keeps the server's field-name casing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def _header_pairs(headers: Any) -> tuple[Iterable[tuple[object, object]], str]:
    """
    Return (pairs, encoding) for any supported header container.

    httpx.Headers lowercases names in `.items()`; its `.raw` list keeps the wire casing.
    """
    if not headers:
        return (), "latin-1"

    raw = getattr(headers, "raw", None)
    if isinstance(raw, list):
        return raw, getattr(headers, "encoding", None) or "latin-1"

    if isinstance(headers, Mapping):
        return headers.items(), "latin-1"

    items = getattr(headers, "items", None)
    if callable(items):
        return items(), "latin-1"

    return headers, "latin-1"


def _as_str(value: object, encoding: str) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode(encoding)
    return str(value)


def normalize_headers(headers: Any) -> dict[str, str]:
    """
    Flatten a header container into a plain string-to-string dict.

    The first spelling of a field name wins; repeated fields are joined with ", ".
    """
    pairs, encoding = _header_pairs(headers)
    out: dict[str, str] = {}
    names: dict[str, str] = {}
    for key, value in pairs:
        if key is None:
            continue
        name = _as_str(key, encoding).strip()
        if not name:
            continue
        text = "" if value is None else _as_str(value, encoding)
        existing = names.get(name.lower())
        if existing is None:
            names[name.lower()] = name
            out[name] = text
        else:
            out[existing] = f"{out[existing]}, {text}"
    return out


__all__ = ["normalize_headers"]
