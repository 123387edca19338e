"""Error hierarchy for transcript retrieval.

Every failure a caller can see derives from ``TranscriptError`` so a single
``except TranscriptError`` covers the whole retrieval call, while the subclasses
keep "no captions", "wrong language" and "network gave up" apart.
"""

from typing import Iterable, List, Optional


class TranscriptError(Exception):
    """Base class for transcript-related errors."""
    pass


class InvalidVideoIdError(TranscriptError):
    """The identifier could not be turned into a video ID."""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(f"Could not extract a video ID from {video_id!r}")


class FetchExhaustedError(TranscriptError):
    """A request kept failing until the retry budget ran out."""

    def __init__(self, url: str, attempts: int, last_error: Optional[str] = None):
        self.url = url
        self.attempts = attempts
        self.last_error = last_error
        message = f"Failed to fetch {url} after {attempts} attempts"
        if last_error:
            message += f": {last_error}"
        super().__init__(message)


class ConsentRequiredError(TranscriptError):
    """The consent page did not contain a token to build the cookie from."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Consent required for {url} but no consent token was found")


class CatalogExtractionError(TranscriptError):
    """The player response could not be turned into a caption catalog."""

    def __init__(self, video_id: str, message: str):
        self.video_id = video_id
        super().__init__(message)


class CaptionsNotFoundError(CatalogExtractionError):
    """The video has no caption tracks at all."""

    def __init__(self, video_id: str, missing: str = "captions"):
        self.missing = missing
        super().__init__(video_id, f"No captions available for video {video_id} ({missing} not found)")


class TranscriptsDisabledError(CaptionsNotFoundError):
    """Captions exist on the response but the track list renderer is absent."""

    def __init__(self, video_id: str):
        super().__init__(video_id, missing="playerCaptionsTracklistRenderer")


class VideoUnplayableError(CatalogExtractionError):
    """The player refused the video, so there is no caption catalog to read."""

    def __init__(self, video_id: str, status: str, reason: Optional[str] = None):
        self.status = status
        self.reason = reason
        message = f"Video {video_id} is not playable: {status}"
        if reason:
            message += f" ({reason})"
        super().__init__(video_id, message)


class NoMatchingLanguageError(TranscriptError):
    """Captions exist but none match the requested language codes."""

    def __init__(self, requested: Iterable[str], available: Iterable[str]):
        self.requested: List[str] = list(requested)
        self.available: List[str] = list(available)
        super().__init__(
            f"No transcript found for languages {self.requested} "
            f"(available: {', '.join(self.available) or 'none'})"
        )


class TranscriptParseError(TranscriptError):
    """A caption track body was not valid timed-text XML."""

    def __init__(self, detail: str, language_code: Optional[str] = None):
        self.detail = detail
        self.language_code = language_code
        prefix = f"Failed to parse transcript for '{language_code}'" if language_code else "Failed to parse transcript"
        super().__init__(f"{prefix}: {detail}")


class RetrievalTimeoutError(TranscriptError):
    """The retrieval call did not finish within its deadline."""

    def __init__(self, video_id: str, timeout: float):
        self.video_id = video_id
        self.timeout = timeout
        super().__init__(f"Retrieving transcripts for {video_id} timed out after {timeout:g}s")
