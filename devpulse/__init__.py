"""DevPulse - developer news ingestion and ranking."""

__version__ = "0.1.0"
