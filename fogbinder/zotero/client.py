"""Zotero Web API client.

Implements the DocumentLibrary port over the Zotero Web API v3.
Transport and HTTP failures surface as LibraryError.
"""

from typing import Any, Optional

import httpx

from ..config.settings import get_settings
from ..exceptions import LibraryError, LibraryNotConfiguredError
from ..utils.logging import get_logger
from .models import ZoteroCollection, ZoteroItem


logger = get_logger(__name__)

API_VERSION = "3"
PAGE_LIMIT = 100

# Child items that carry no citation text of their own
SKIPPED_ITEM_TYPES = {"note", "attachment", "annotation"}


class ZoteroClient:
    """Client for a Zotero user or group library."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        library_type: Optional[str] = None,
        library_id: Optional[str] = None,
        timeout: Optional[int] = None,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Zotero API URL (default from settings)
            api_key: Zotero API key (default from settings)
            library_type: "users" or "groups" (default from settings)
            library_id: Numeric user or group id (default from settings)
            timeout: Request timeout in seconds
            client: Optional preconfigured httpx client
        """
        config = get_settings().zotero

        self.base_url = (base_url or config.base_url).rstrip("/")
        self.api_key = api_key or config.api_key
        self.library_type = library_type or config.library_type
        self.library_id = library_id or config.library_id
        self.timeout = timeout or config.timeout

        if not self.library_id:
            raise LibraryNotConfiguredError()

        headers = {"Zotero-API-Version": API_VERSION}
        if self.api_key:
            headers["Zotero-API-Key"] = self.api_key

        self._client = client or httpx.Client(timeout=self.timeout)
        self._client.headers.update(headers)

    @property
    def library_url(self) -> str:
        return f"{self.base_url}/{self.library_type}/{self.library_id}"

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self.library_url}{path}"
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Zotero %s %s failed: HTTP %s", method, path, e.response.status_code)
            raise LibraryError(
                f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Zotero %s %s failed: %s", method, path, e)
            raise LibraryError(str(e)) from e
        return response

    def is_available(self) -> bool:
        """Check if the library answers."""
        try:
            self._request("GET", "/collections", params={"limit": 1})
            return True
        except LibraryError:
            return False

    def _parse_items(self, payload: list[dict[str, Any]]) -> list[ZoteroItem]:
        items = []
        for entry in payload:
            item_type = entry.get("data", {}).get("itemType")
            if item_type in SKIPPED_ITEM_TYPES:
                continue
            items.append(ZoteroItem.from_api(entry))
        return items

    def _get_all(self, path: str) -> list[dict[str, Any]]:
        """Every entry of a multi-page listing.

        Advances ``start`` one page at a time until ``Total-Results`` is
        reached, or until a short page when the header is absent.
        """
        entries: list[dict[str, Any]] = []
        start = 0
        while True:
            response = self._request("GET", path, params={"limit": PAGE_LIMIT, "start": start})
            page = response.json()
            entries.extend(page)
            start += len(page)

            total = response.headers.get("Total-Results")
            if not page:
                break
            if total is not None:
                if start >= int(total):
                    break
            elif len(page) < PAGE_LIMIT:
                break

        logger.debug("Fetched %d entries from %s", len(entries), path)
        return entries

    def get_items(self) -> list[ZoteroItem]:
        """Top-level items of the library."""
        return self._parse_items(self._get_all("/items/top"))

    def get_collection_items(self, collection_id: str) -> list[ZoteroItem]:
        """Top-level items of one collection."""
        return self._parse_items(self._get_all(f"/collections/{collection_id}/items/top"))

    def get_collections(self) -> list[ZoteroCollection]:
        """All collections with their items."""
        collections = []
        for entry in self._get_all("/collections"):
            data = entry.get("data", entry)
            key = data.get("key") or entry.get("key", "")
            collections.append(
                ZoteroCollection(
                    id=key,
                    name=data.get("name", ""),
                    items=self.get_collection_items(key),
                )
            )
        return collections

    def add_tag(self, item_id: str, tag: str) -> None:
        """Add a tag to an item, keeping its existing tags."""
        response = self._request("GET", f"/items/{item_id}")
        payload = response.json()
        data = payload.get("data", {})

        tags = data.get("tags", [])
        if any(t.get("tag") == tag for t in tags):
            return

        version = data.get("version", payload.get("version"))
        headers = {"If-Unmodified-Since-Version": str(version)} if version is not None else {}

        self._request(
            "PATCH",
            f"/items/{item_id}",
            json={"tags": tags + [{"tag": tag}]},
            headers=headers,
        )

    def create_note(self, item_id: str, html: str) -> None:
        """Attach a child note to an item."""
        response = self._request(
            "POST",
            "/items",
            json=[{
                "itemType": "note",
                "parentItem": item_id,
                "note": html,
                "tags": [],
            }],
        )

        failed = response.json().get("failed") or {}
        if failed:
            first = next(iter(failed.values()))
            raise LibraryError(f"Note creation failed: {first.get('message', 'unknown error')}")
