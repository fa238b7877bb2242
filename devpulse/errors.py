"""Error types for DevPulse."""

from typing import Dict, Optional


class DevPulseError(Exception):
    """Base class for all DevPulse errors."""


class SourceUnavailable(DevPulseError):
    """An external feed could not be fetched or parsed.

    Raised inside a source adapter and converted into a failed
    ``FetchResult``; it never leaves the adapter.
    """

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


class GenerationUnavailable(DevPulseError):
    """The optional text-generation capability is missing or failed."""


class StoreError(DevPulseError):
    """The article store is unreachable or rejected an operation."""


class IngestionFailed(DevPulseError):
    """An ingestion run was aborted by a storage failure.

    Upserts committed before the failure stay committed; the counts
    describe that partial progress.
    """

    def __init__(
        self,
        message: str,
        processed: int = 0,
        inserted: int = 0,
        updated: int = 0,
        per_source: Optional[Dict[str, int]] = None,
    ) -> None:
        super().__init__(message)
        self.processed = processed
        self.inserted = inserted
        self.updated = updated
        self.per_source = per_source or {}


class RateLimitExceeded(DevPulseError):
    """The caller exceeded its request budget for the current window."""

    def __init__(self, identifier: str, remaining: int, reset_after_ms: int) -> None:
        seconds = -(-reset_after_ms // 1000)
        super().__init__(
            f"Rate limit exceeded for {identifier}. Try again in {seconds} seconds."
        )
        self.identifier = identifier
        self.remaining = remaining
        self.reset_after_ms = reset_after_ms

    @property
    def retry_after_seconds(self) -> int:
        """Whole seconds until the window resets."""
        return -(-self.reset_after_ms // 1000)
