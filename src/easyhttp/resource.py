# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Resource descriptor used to address requests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpResource:
    """URI scheme, host (optionally with port) and pre-encoded path of a request target."""

    scheme: str
    host: str
    path: str = ""
