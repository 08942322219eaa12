"""Fetch pages concurrently and print a short summary of them."""

from __future__ import annotations

import argparse
import asyncio
import sys
import urllib.error
import urllib.request
from typing import Sequence

from hiveflow.flow import flow
from hiveflow.task import Task

__all__ = ["HttpError", "HttpGet", "Summarize", "SummarizeMany", "main"]

SUMMARY_LENGTH = 100
DEFAULT_URLS = ("https://example.com", "https://example.org")


class HttpError(Exception):
    """An HTTP request did not succeed."""


def _fetch(url: str) -> str:
    try:
        with urllib.request.urlopen(url) as response:
            status = response.status
            reason = response.reason
            body = response.read()
            charset = response.headers.get_content_charset() or "utf-8"
    except urllib.error.HTTPError as exc:
        raise HttpError(
            f"HTTP GET failed with status: {exc.code} {exc.reason}"
        ) from exc
    if not 200 <= status < 300:
        raise HttpError(f"HTTP GET failed with status: {status} {reason}")
    return body.decode(charset, errors="replace")


class HttpGet(Task):
    """Fetch a URL and return the response body as text."""

    def __init__(self, url: str) -> None:
        self.url = url

    async def run(self, input: None) -> str:
        return await asyncio.to_thread(_fetch, self.url)


class Summarize(Task):
    """Shorten text to its first hundred characters."""

    async def run(self, input: str) -> str:
        if len(input) > SUMMARY_LENGTH:
            return f"{input[:SUMMARY_LENGTH]}..."
        return input


class SummarizeMany(Task):
    """Join several texts, one per line."""

    async def run(self, input: list[str]) -> str:
        return "\n".join(input)


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch the given URLs in parallel and print a summary of their bodies."""
    parser = argparse.ArgumentParser(
        description="Fetch pages concurrently and summarise them."
    )
    parser.add_argument("urls", nargs="*", default=list(DEFAULT_URLS))
    args = parser.parse_args(argv)

    pipeline = flow(
        type(None),
        [HttpGet(url) for url in args.urls],
        SummarizeMany(),
        Summarize(),
    )
    try:
        result = asyncio.run(pipeline.run(None))
    except (HttpError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Final Summary: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())