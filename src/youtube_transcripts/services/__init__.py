"""Service layer for transcript retrieval."""

from .transcript_service import TranscriptService

__all__ = [
    "TranscriptService",
]
