"""
Retrieve YouTube transcripts, including auto-generated captions, through the
internal player API.
"""

__version__ = "0.1.0"

from .core import (
    TranscriptClient,
    get_transcripts,
    get_formatted_transcripts,
    TranscriptError,
    InvalidVideoIdError,
    FetchExhaustedError,
    ConsentRequiredError,
    CatalogExtractionError,
    CaptionsNotFoundError,
    TranscriptsDisabledError,
    VideoUnplayableError,
    NoMatchingLanguageError,
    TranscriptParseError,
    RetrievalTimeoutError
)
from .models import CaptionTrack, TranscriptLine, Transcript, VideoTranscriptData
from .formatters import BaseFormatter, JSONFormatter, TextFormatter
from .utils import sanitize_video_id

__all__ = [
    "TranscriptClient",
    "get_transcripts",
    "get_formatted_transcripts",
    "TranscriptError",
    "InvalidVideoIdError",
    "FetchExhaustedError",
    "ConsentRequiredError",
    "CatalogExtractionError",
    "CaptionsNotFoundError",
    "TranscriptsDisabledError",
    "VideoUnplayableError",
    "NoMatchingLanguageError",
    "TranscriptParseError",
    "RetrievalTimeoutError",
    "CaptionTrack",
    "TranscriptLine",
    "Transcript",
    "VideoTranscriptData",
    "BaseFormatter",
    "JSONFormatter",
    "TextFormatter",
    "sanitize_video_id",
]
