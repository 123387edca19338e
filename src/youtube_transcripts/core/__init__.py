"""Core modules for transcript retrieval."""

from .config import config
from .exceptions import (
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
from .page_fetcher import PageFetcher, ConsentCookie, ConsentState
from .innertube_client import InnertubeClient
from .parser import TranscriptParser, TagPatternCache
from .track_processor import ConcurrentTrackProcessor
from .transcript_client import TranscriptClient, get_transcripts, get_formatted_transcripts

__all__ = [
    'config',
    'TranscriptError',
    'InvalidVideoIdError',
    'FetchExhaustedError',
    'ConsentRequiredError',
    'CatalogExtractionError',
    'CaptionsNotFoundError',
    'TranscriptsDisabledError',
    'VideoUnplayableError',
    'NoMatchingLanguageError',
    'TranscriptParseError',
    'RetrievalTimeoutError',
    'PageFetcher',
    'ConsentCookie',
    'ConsentState',
    'InnertubeClient',
    'TranscriptParser',
    'TagPatternCache',
    'ConcurrentTrackProcessor',
    'TranscriptClient',
    'get_transcripts',
    'get_formatted_transcripts'
]
