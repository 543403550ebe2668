"""Retrieval of raw document bytes from a URL or a local path."""

import asyncio
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import httpx

from ..exceptions import UnreachableSource

logger = logging.getLogger(__name__)


class DocumentFetcher:
    """Fetches a whole document into memory. No retries, nothing written to disk."""

    def __init__(self, timeout: float = 60.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self._transport = transport

    async def fetch(self, location: str) -> bytes:
        """
        Retrieve the document at ``location``.

        Args:
            location: http(s) URL, file:// URI or filesystem path

        Returns:
            The document content as bytes

        Raises:
            UnreachableSource: If the document cannot be retrieved
        """
        if not location:
            raise UnreachableSource(location, "Empty document location")

        scheme = urlparse(location).scheme.lower()
        if scheme in ("http", "https"):
            return await self._fetch_url(location)
        if scheme == "file":
            return await self._read_file(location, Path(unquote(urlparse(location).path)))
        return await self._read_file(location, Path(location))

    async def _fetch_url(self, location: str) -> bytes:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(location)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise UnreachableSource(location, f"Error fetching document: {e}") from e

        logger.info("Fetched %d bytes from %s", len(response.content), location)
        return response.content

    async def _read_file(self, location: str, path: Path) -> bytes:
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise UnreachableSource(location, f"Error reading document: {e}") from e

        logger.info("Read %d bytes from %s", len(content), path)
        return content
