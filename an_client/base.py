"""Base archive client - download open-data ZIPs and parse their JSON members."""

import io
import json
import zipfile
import zlib
from collections.abc import Callable

import httpx
from loguru import logger

from app.models.common import TtlCache
from settings import API_TIMEOUT, ARCHIVE_CACHE_TTL

EntryPredicate = Callable[[str], bool]

# Shared by every client in the process; keyed by logical dataset, not URL.
archive_cache = TtlCache(ttl_seconds=ARCHIVE_CACHE_TTL)


class ArchiveFetchError(Exception):
    """The archive could not be downloaded or opened; nothing from it is usable."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(f"{message} ({url})")


def json_entries(name: str) -> bool:
    """Default predicate: JSON members, skipping macOS resource forks."""
    return name.endswith(".json") and "__" not in name


def parse_archive(content: bytes, predicate: EntryPredicate, url: str = "") -> list:
    """JSON-parse every member of a ZIP whose path matches `predicate`.

    Malformed members are logged and skipped.
    """
    try:
        archive = zipfile.ZipFile(io.BytesIO(content))
    except zipfile.BadZipFile as e:
        raise ArchiveFetchError(url, f"Not a ZIP archive: {e}") from e

    documents = []
    skipped = 0
    with archive:
        for info in archive.infolist():
            if info.is_dir() or not predicate(info.filename):
                continue
            try:
                documents.append(json.loads(archive.read(info).decode("utf-8")))
            except (ValueError, UnicodeDecodeError, zipfile.BadZipFile, zlib.error) as e:
                skipped += 1
                logger.warning("Skipping malformed entry {}: {}", info.filename, e)
    if skipped:
        logger.warning("{}: {} entries skipped", url or "archive", skipped)
    return documents


class BaseClient:
    """Base async client for the Assemblée nationale open-data repository."""

    def __init__(
        self,
        cache: TtlCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = API_TIMEOUT,
    ):
        self._client: httpx.AsyncClient | None = None
        self._cache = cache if cache is not None else archive_cache
        self._transport = transport
        self._timeout = timeout
        self._request_count = 0

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *_):
        logger.debug("{}: {} archive downloads", self.__class__.__name__, self._request_count)
        if self._client:
            await self._client.aclose()

    async def _download(self, url: str) -> bytes:
        """GET the whole resource; any non-2xx status fails the fetch."""
        self._request_count += 1
        logger.info("Downloading {}", url)
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as e:
            raise ArchiveFetchError(url, f"Transport error: {e}") from e
        if not resp.is_success:
            raise ArchiveFetchError(url, f"HTTP {resp.status_code} {resp.reason_phrase}")
        return resp.content

    async def _cached(self, dataset: str, load: Callable) -> list | dict:
        """Return the cached value of `dataset`, loading it once under the cache's per-dataset lock."""
        cached = self._cache.get(dataset)
        if cached is not None:
            logger.debug("Cache hit: {}", dataset)
            return cached
        async with self._cache.lock(dataset):
            cached = self._cache.get(dataset)
            if cached is not None:
                return cached
            value = await load()
            self._cache.set(dataset, value)
            return value

    async def fetch_archive(self, dataset: str, url: str, predicate: EntryPredicate = json_entries) -> list:
        """Parsed JSON members of the ZIP at `url`, cached under `dataset`."""

        async def load():
            content = await self._download(url)
            documents = parse_archive(content, predicate, url)
            logger.info("{}: {} documents", dataset, len(documents))
            return documents

        return await self._cached(dataset, load)

    async def fetch_json(self, dataset: str, url: str) -> dict:
        """A plain JSON resource, cached under `dataset`."""

        async def load():
            content = await self._download(url)
            try:
                return json.loads(content)
            except ValueError as e:
                raise ArchiveFetchError(url, f"Invalid JSON: {e}") from e

        return await self._cached(dataset, load)
