"""Ingestion run models."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class IngestionResult(BaseModel):
    """Operator-facing report of one ingestion run. Not persisted."""

    total: int = Field(0, description="Items upserted")
    inserted: int = Field(0, description="New articles")
    updated: int = Field(0, description="Existing articles refreshed")
    per_source: Dict[str, int] = Field(default_factory=dict, description="Items returned per source")
    failed_sources: List[str] = Field(default_factory=list, description="Sources whose fetch failed")
    errors: Dict[str, str] = Field(default_factory=dict, description="Fetch error per failed source")
    started_at: Optional[datetime] = Field(None, description="When the run started")
    finished_at: Optional[datetime] = Field(None, description="When the run finished")

    @property
    def duration(self) -> float:
        """Run duration in seconds."""
        if self.started_at and self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0
