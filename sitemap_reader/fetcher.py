# sitemap_reader/fetcher.py
"""
Fetcher module: downloads sitemap documents over HTTP with retry/backoff and timeout.

The parser itself never does I/O; this module only produces the raw bytes.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional, Union

from aiohttp import ClientError, ClientSession, ClientTimeout

from sitemap_reader.config import ReaderConfig
from sitemap_reader.errors import FetchError
from sitemap_reader.logger import logger

__all__ = ["fetch_sitemap", "read_source", "is_url"]


def is_url(source: str) -> bool:
    """True for ``http://`` / ``https://`` sources."""
    return source.lower().startswith(("http://", "https://"))


def _backoff_delay(attempt: int) -> float:
    """Exponential backoff, cap at 60s."""
    return min(2**attempt, 60)


async def _fetch(session: ClientSession, url: str, config: ReaderConfig) -> bytes:
    attempts = 0
    while True:
        try:
            async with session.get(url, raise_for_status=False) as resp:
                if resp.status in config.retry_status:
                    raise ClientError(f"Retryable status {resp.status}")
                if resp.status >= 400:
                    raise FetchError(f"Sitemap not available: {url} (status {resp.status})", resp.status)
                return await resp.read()
        except asyncio.TimeoutError as exc:
            # no retry on timeout
            raise FetchError(f"Timed out after {config.timeout}s: {url}") from exc
        except ClientError as exc:
            attempts += 1
            if attempts > config.retry_times:
                raise FetchError(f"Failed to fetch {url}: {exc}") from exc
            delay = _backoff_delay(attempts)
            logger.warning("Fetching %s failed (%s), retry %d in %ss", url, exc, attempts, delay)
            await asyncio.sleep(delay)


async def fetch_sitemap(
    url: str,
    config: ReaderConfig,
    session: Optional[ClientSession] = None,
) -> bytes:
    """
    Download the sitemap at *url* and return its raw body.

    Statuses listed in ``config.retry_status`` and connection errors are retried
    up to ``config.retry_times`` with exponential backoff (capped at 60s).
    Any other 4xx/5xx status or a timeout raises FetchError.
    """
    logger.info("Fetching sitemap %s", url)
    if session is not None:
        return await _fetch(session, url, config)

    async with ClientSession(
        headers={"User-Agent": config.user_agent},
        timeout=ClientTimeout(total=config.timeout),
    ) as own_session:
        return await _fetch(own_session, url, config)


def read_source(source: Union[str, Path], config: ReaderConfig) -> bytes:
    """Return raw sitemap bytes from a URL or a local file."""
    if isinstance(source, str) and is_url(source):
        return asyncio.run(fetch_sitemap(source, config))

    path = Path(source).expanduser()
    if not path.is_file():
        logger.error("Sitemap file not found: %s", path)
        raise FileNotFoundError(f"Sitemap file not found: {path}")
    return path.read_bytes()
