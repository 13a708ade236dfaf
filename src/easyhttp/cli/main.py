# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""easyhttp CLI."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..http import HttpClient, create_default_transport, resource_from_url
from ..http.models import CompletionResult
from ..log import setup_logging

CLI_TEXT_TRUNCATION_BYTES = 4096
METHODS = ("GET", "PUT", "POST", "DELETE", "HEAD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a single HTTP request and print the outcome")
    parser.add_argument("url", help="Absolute target URL (path must already be percent-encoded)")
    parser.add_argument(
        "-X",
        "--method",
        type=str.upper,
        choices=METHODS,
        default=None,
        help="HTTP method (default: GET, or POST when a body is given)",
    )
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        metavar="NAME: VALUE",
        help="Request header; may be repeated",
    )
    body = parser.add_mutually_exclusive_group()
    body.add_argument("-d", "--data", help="Request body for PUT/POST")
    body.add_argument("--data-file", type=Path, help="Read the request body from a file")
    parser.add_argument(
        "-i",
        "--include",
        action="store_true",
        help="Print response status and headers before the body",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of the raw body",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Override the session timeout (seconds)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: EASYHTTP_LOG_LEVEL or WARNING)")
    return parser


def parse_header_args(values: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Invalid header {raw!r}; expected 'Name: value'")
        headers[name.strip()] = value.strip()
    return headers


def _truncate_text_bytes(text: str, max_bytes: int) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    suffix = "...[truncated]"
    suffix_bytes = suffix.encode("utf-8")
    keep = max_bytes - len(suffix_bytes)
    if keep <= 0:
        return suffix_bytes[:max_bytes].decode("utf-8", errors="ignore")
    prefix = raw[:keep].decode("utf-8", errors="ignore")
    return prefix + suffix


def result_to_dict(result: CompletionResult) -> dict[str, Any]:
    body = None
    if result.data is not None:
        body = _truncate_text_bytes(result.data.decode("utf-8", errors="replace"), CLI_TEXT_TRUNCATION_BYTES)
    return {
        "error": result.error.value if result.error else None,
        "status": result.status,
        "headers": result.headers,
        "body": body,
    }


def _print_json(result: CompletionResult) -> None:
    json.dump(result_to_dict(result), sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _print_result(result: CompletionResult, *, include: bool) -> None:
    if result.status is None:
        print(f"[easyhttp] {result.error}: {result.error.description if result.error else ''}", file=sys.stderr)
        return
    if include:
        print(f"Status: {result.status}")
        for name, value in (result.headers or {}).items():
            print(f"{name}: {value}")
        print()
    if result.data:
        sys.stdout.flush()
        sys.stdout.buffer.write(result.data)
        sys.stdout.flush()
    if result.error:
        print(f"[easyhttp] {result.error}: {result.error.description}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        resource = resource_from_url(args.url)
        headers = parse_header_args(args.header)
    except ValueError as exc:
        parser.error(str(exc))

    data: bytes | None = None
    if args.data is not None:
        data = args.data.encode("utf-8")
    elif args.data_file is not None:
        try:
            data = args.data_file.read_bytes()
        except OSError as exc:
            parser.error(f"Cannot read {args.data_file}: {exc}")

    method = args.method or ("POST" if data is not None else "GET")
    if data is not None and method not in {"PUT", "POST"}:
        parser.error(f"{method} requests do not take a body")

    settings: HttpSettings = load_http_settings()
    if args.timeout is not None:
        settings.timeout = args.timeout

    with HttpClient(create_default_transport(settings), settings=settings) as client:
        future = client.send_request(resource, method, headers=headers or None, data=data)
        result = future.result()

    if args.json:
        _print_json(result)
    else:
        _print_result(result, include=args.include)

    return 0 if result.error is None else 1


if __name__ == "__main__":
    raise SystemExit(main())
