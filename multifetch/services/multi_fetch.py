import asyncio
import logging
import time
from contextlib import AsyncExitStack
from typing import List, Optional

import httpx

from multifetch.core.config import settings
from multifetch.fetch import fetcher
from multifetch.fetch.base import FetchError
from multifetch.schemas import FetchOutcome

logger = logging.getLogger(__name__)

async def fetch_all(
    urls: List[str],
    max_concurrency: Optional[int] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> List[FetchOutcome]:
    """
    Fetch every URL concurrently and return one outcome per URL, in input order.

    1. Allocate one result slot per URL
    2. Start one task per (index, url); each task writes only its own slot
    3. Wait for every task to finish (success or failure)
    4. Return the slots

    A FetchError on one URL becomes a failure outcome at that position and
    never cancels the other fetches. Any other exception is re-raised once
    all fetches have finished. max_concurrency caps in-flight fetches;
    None falls back to settings.MAX_CONCURRENCY and 0 means no cap.
    """
    if max_concurrency is None:
        max_concurrency = settings.MAX_CONCURRENCY
    if max_concurrency < 0:
        raise ValueError("max_concurrency must be >= 0")

    if not urls:
        return []

    results: List[Optional[FetchOutcome]] = [None] * len(urls)
    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None
    started = time.monotonic()
    logger.info(
        "Fetching batch of %d URL(s), concurrency=%s",
        len(urls), max_concurrency or "unbounded",
    )

    async with AsyncExitStack() as stack:
        if client is None:
            client = await stack.enter_async_context(fetcher.build_client())

        async def worker(index: int, url: str) -> None:
            if semaphore is None:
                results[index] = await _fetch_one(client, url)
                return
            async with semaphore:
                results[index] = await _fetch_one(client, url)

        # every worker finishes before an unexpected error surfaces or the client closes
        errors = await asyncio.gather(
            *(worker(i, url) for i, url in enumerate(urls)),
            return_exceptions=True,
        )
        for error in errors:
            if isinstance(error, BaseException):
                raise error

    failures = sum(1 for r in results if not r.ok)
    logger.info(
        "Batch done: %d URL(s), %d failure(s) in %.2fs",
        len(results), failures, time.monotonic() - started,
    )
    return results

async def _fetch_one(client: httpx.AsyncClient, url: str) -> FetchOutcome:
    try:
        body = await fetcher.fetch(url, client=client)
    except FetchError as e:
        logger.warning("Fetch failed for %s: %s", url, e)
        return FetchOutcome.failure(str(e))
    return FetchOutcome.success(body)

def to_legacy(outcomes: List[FetchOutcome]) -> List[str]:
    """Render a result batch as plain strings, failures carrying the error prefix."""
    return [outcome.to_legacy() for outcome in outcomes]
