"""Data models for transcript retrieval."""

from .transcript import (
    CaptionTrack,
    TranslationLanguage,
    TranscriptLine,
    Transcript,
    VideoTranscriptData,
)

__all__ = [
    "CaptionTrack",
    "TranslationLanguage",
    "TranscriptLine",
    "Transcript",
    "VideoTranscriptData",
]
