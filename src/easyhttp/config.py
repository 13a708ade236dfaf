# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for easyhttp."""

import os
from dataclasses import dataclass


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """Transport session and worker pool defaults."""

    timeout: float = 60.0
    allow_redirects: bool = True
    max_workers: int = 8
    user_agent: str | None = None

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_workers = _int_env("EASYHTTP_MAX_WORKERS", cls.max_workers)
        if max_workers <= 0:
            max_workers = cls.max_workers
        return cls(
            timeout=_float_env("EASYHTTP_TIMEOUT", cls.timeout),
            allow_redirects=_bool_env("EASYHTTP_REDIRECTS", cls.allow_redirects),
            max_workers=max_workers,
            user_agent=os.getenv("EASYHTTP_USER_AGENT") or cls.user_agent,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
