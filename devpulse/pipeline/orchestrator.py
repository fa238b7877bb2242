"""Ingestion coordinator: fetch all sources, enrich, and upsert."""

import asyncio
from datetime import datetime
from typing import Callable, List, Optional, Sequence

import pendulum
from rich.console import Console
from rich.table import Table

from ..db.base import ArticleStore
from ..errors import IngestionFailed, StoreError
from ..generation import SummaryGenerator
from ..ingestion import FetchResult, NormalizedItem, SourceAdapter, categorize
from .models import IngestionResult

console = Console()


def utc_now() -> datetime:
    """Current time in UTC."""
    return pendulum.now("UTC")


class IngestionCoordinator:
    """Run every source adapter concurrently and upsert the merged items."""

    def __init__(
        self,
        adapters: Sequence[SourceAdapter],
        store: ArticleStore,
        summarizer: Optional[SummaryGenerator] = None,
        categorizer: Callable[[str], List[str]] = categorize,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize ingestion coordinator.

        Args:
            adapters: Source adapters to run
            store: Article store receiving upserts
            summarizer: Summary generator, template-only when omitted
            categorizer: Title to tags function
            clock: Source of timestamps
        """
        self.adapters = list(adapters)
        self.store = store
        self.summarizer = summarizer or SummaryGenerator()
        self.categorizer = categorizer
        self.clock = clock

    async def _fetch_all(self) -> List[FetchResult]:
        """Fan out to all adapters and wait for every one of them."""
        outcomes = await asyncio.gather(
            *(adapter.fetch() for adapter in self.adapters),
            return_exceptions=True,
        )

        results = []
        for adapter, outcome in zip(self.adapters, outcomes):
            if isinstance(outcome, BaseException):
                outcome = FetchResult(
                    source_name=adapter.name,
                    source_url="",
                    success=False,
                    error=f"Unexpected error: {outcome}",
                )
            if not outcome.success:
                console.print(f"[yellow]Warning: {outcome.source_name} unavailable: {outcome.error}[/yellow]")
            results.append(outcome)
        return results

    def _merge(self, results: List[FetchResult]) -> List[NormalizedItem]:
        """Concatenate results, keeping the first item seen for each URL."""
        seen = set()
        merged = []
        for result in results:
            for item in result.items:
                if item.url in seen:
                    continue
                seen.add(item.url)
                merged.append(item)
        return merged

    def enrich(self, item: NormalizedItem) -> NormalizedItem:
        """Fill in summary and tags where the source left them empty."""
        updates = {}
        if not item.tags:
            updates["tags"] = self.categorizer(item.title)
        if not (item.summary or "").strip():
            updates["summary"] = self.summarizer.summarize(item)
        return item.model_copy(update=updates) if updates else item

    def _upsert(self, item: NormalizedItem) -> bool:
        now = self.clock()
        set_fields = {
            "title": item.title,
            "source": item.source,
            "author": item.author,
            "score": item.score or 0,
            "tags": list(item.tags),
            "summary": item.summary,
            "source_icon": item.source_icon,
            "updated_at": now,
        }
        return self.store.upsert_by_url(item.url, set_fields, {"created_at": now})

    def _store_item(self, item: NormalizedItem) -> bool:
        return self._upsert(self.enrich(item))

    async def ingest(self) -> IngestionResult:
        """
        Run one ingestion pass.

        Returns:
            Counts of processed, inserted and updated articles

        Raises:
            IngestionFailed: If the store fails; earlier upserts stay committed
        """
        started_at = self.clock()
        results = await self._fetch_all()

        per_source = {r.source_name: r.item_count for r in results}
        failed = [r.source_name for r in results if not r.success]
        errors = {r.source_name: r.error or "" for r in results if not r.success}

        items = self._merge(results)
        inserted, updated = 0, 0

        for item in items:
            try:
                # Summary calls and store writes block, keep them off the event loop
                if await asyncio.to_thread(self._store_item, item):
                    inserted += 1
                else:
                    updated += 1
            except StoreError as e:
                raise IngestionFailed(
                    f"Ingestion aborted after {inserted + updated} of {len(items)} items: {e}",
                    processed=inserted + updated,
                    inserted=inserted,
                    updated=updated,
                    per_source=per_source,
                ) from e

        return IngestionResult(
            total=inserted + updated,
            inserted=inserted,
            updated=updated,
            per_source=per_source,
            failed_sources=failed,
            errors=errors,
            started_at=started_at,
            finished_at=self.clock(),
        )

    def ingest_sync(self) -> IngestionResult:
        """Synchronous wrapper for ingest."""
        return asyncio.run(self.ingest())


def print_ingestion_summary(result: IngestionResult) -> None:
    """Print summary of an ingestion run."""
    table = Table(title="Ingestion Summary")
    table.add_column("Source", style="cyan")
    table.add_column("Items", style="green", justify="right")
    table.add_column("Status", style="bold")

    for source, count in result.per_source.items():
        if source in result.failed_sources:
            status = f"[red]failed: {result.errors.get(source, '')}[/red]"
        else:
            status = "[green]ok[/green]"
        table.add_row(source, str(count), status)

    console.print(table)
    console.print(
        f"  Processed: {result.total}  "
        f"Inserted: [green]{result.inserted}[/green]  "
        f"Updated: [yellow]{result.updated}[/yellow]  "
        f"Duration: {result.duration:.1f}s"
    )
