"""Ingestion pipeline."""

from .models import IngestionResult
from .orchestrator import IngestionCoordinator, print_ingestion_summary

__all__ = ["IngestionCoordinator", "IngestionResult", "print_ingestion_summary"]
