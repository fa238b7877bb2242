"""Base class for news source adapters."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from ..errors import SourceUnavailable
from .models import FetchResult, NormalizedItem, RawSourceItem, parse_raw_item
from .url import canonicalize_url


DEFAULT_TIMEOUT = 15.0
DEFAULT_PAGE_SIZE = 10
DEFAULT_USER_AGENT = "DevPulse-News-Aggregator"


class SourceAdapter(ABC):
    """Fetch one external feed and map it into ``NormalizedItem`` objects.

    Subclasses describe the endpoint, the raw item shape and the quality
    threshold; this class owns the request, payload validation and error
    absorption. ``fetch`` never raises: every failure becomes a failed
    ``FetchResult``.
    """

    name: str = ""
    # Discriminator of this feed's variant in ``RawSourceItem``.
    kind: str = ""
    icon: Optional[str] = None
    min_score: int = 0
    # Key holding the item array, or None when the body itself is the array.
    array_field: Optional[str] = None

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        page_size: int = DEFAULT_PAGE_SIZE,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize source adapter.

        Args:
            timeout: Upper bound in seconds for the whole request
            page_size: Items requested from the source
            user_agent: User-Agent header value
            transport: Custom httpx transport (for testing)
        """
        self.timeout = timeout
        self.page_size = page_size
        self.user_agent = user_agent
        self.transport = transport

    @property
    @abstractmethod
    def endpoint(self) -> str:
        """URL requested on every fetch."""

    def parse_item(self, entry: Dict[str, Any]) -> RawSourceItem:
        """Validate one payload entry into the source's raw item model."""
        return parse_raw_item(self.kind, entry)

    @abstractmethod
    def popularity(self, raw: Any) -> int:
        """Popularity signal compared against ``min_score``."""

    @abstractmethod
    def normalize(self, raw: Any) -> Optional[NormalizedItem]:
        """Map a raw item to a ``NormalizedItem``, or None if incomplete."""

    def headers(self) -> Dict[str, str]:
        """Request headers."""
        return {"User-Agent": self.user_agent, "Accept": "application/json"}

    def build_item(
        self,
        title: Optional[str],
        url: Optional[str],
        **fields: Any,
    ) -> Optional[NormalizedItem]:
        """Create a ``NormalizedItem`` with this adapter's name and icon.

        Returns None when title or URL is missing after cleanup.
        """
        title = (title or "").strip()
        url = canonicalize_url(url or "")
        if not title or not url:
            return None
        return NormalizedItem(
            title=title,
            url=url,
            source=self.name,
            source_icon=self.icon,
            **fields,
        )

    async def _request(self) -> Any:
        """Perform the GET request and decode the JSON body."""
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers(),
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            response = await client.get(self.endpoint)

        if not response.is_success:
            raise SourceUnavailable(self.name, f"HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise SourceUnavailable(self.name, f"Invalid JSON: {e}")

    def _extract_entries(self, payload: Any) -> List[Any]:
        """Locate the item array in the decoded payload."""
        if self.array_field is None:
            entries = payload
        elif isinstance(payload, dict):
            entries = payload.get(self.array_field)
        else:
            entries = None

        if not isinstance(entries, list):
            expected = f"'{self.array_field}' array" if self.array_field else "top-level array"
            raise SourceUnavailable(self.name, f"Malformed response: missing {expected}")
        return entries

    def _normalize_entries(self, entries: List[Any]) -> Tuple[List[NormalizedItem], int]:
        """Parse, filter and normalize payload entries."""
        items: List[NormalizedItem] = []
        dropped = 0

        for entry in entries:
            if not isinstance(entry, dict):
                dropped += 1
                continue
            try:
                raw = self.parse_item(entry)
            except ValidationError:
                dropped += 1
                continue

            if self.popularity(raw) <= self.min_score:
                dropped += 1
                continue

            item = self.normalize(raw)
            if item is None:
                dropped += 1
                continue
            items.append(item)

        return items, dropped

    def _failed(self, error: str) -> FetchResult:
        return FetchResult(
            source_name=self.name,
            source_url=self.endpoint,
            success=False,
            error=error,
        )

    async def fetch(self) -> FetchResult:
        """Fetch the feed and return normalized items.

        Returns:
            FetchResult; on any failure ``success`` is False and ``items``
            is empty
        """
        try:
            payload = await asyncio.wait_for(self._request(), timeout=self.timeout)
            entries = self._extract_entries(payload)
        except SourceUnavailable as e:
            return self._failed(e.message)
        except asyncio.TimeoutError:
            return self._failed(f"Timed out after {self.timeout:.0f}s")
        except httpx.HTTPError as e:
            return self._failed(f"HTTP error: {e}")
        except Exception as e:
            return self._failed(f"Unexpected error: {e}")

        items, dropped = self._normalize_entries(entries)
        return FetchResult(
            source_name=self.name,
            source_url=self.endpoint,
            success=True,
            items=items,
            raw_count=len(entries),
            dropped_count=dropped,
        )
