"""Public client for retrieving YouTube transcripts."""

import asyncio
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from .config import config
from .exceptions import CaptionsNotFoundError, RetrievalTimeoutError
from .innertube_client import InnertubeClient
from .page_fetcher import PageFetcher
from ..formatters import BaseFormatter, FormatterFactory
from ..models import Transcript, VideoTranscriptData
from ..services.transcript_service import TranscriptService
from ..utils.logging import get_logger

logger = get_logger("transcript_client")

T = TypeVar("T")


class TranscriptClient:
    """
    Retrieves transcripts for caption tracks, including auto-generated ones.

    The ``*_async`` methods reuse one pooled session until ``close()`` (or the end
    of an ``async with`` block). The blocking methods run their own event loop per
    call and must not be called from inside a running loop.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        formatter: Optional[BaseFormatter] = None,
        fetcher: Optional[PageFetcher] = None,
        innertube_client: Optional[InnertubeClient] = None
    ):
        self.timeout = config.transcript.timeout if timeout is None else timeout
        self.formatter = formatter or FormatterFactory.create_formatter(
            config.transcript.default_formatter,
            pretty_print=config.transcript.pretty_print
        )
        self.fetcher = fetcher or PageFetcher()
        self.service = TranscriptService(self.fetcher, innertube_client)

    async def __aenter__(self) -> "TranscriptClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Stop leftover track tasks, then release the pooled session."""
        await self.service.processor.shutdown()
        await self.fetcher.close()

    async def _with_deadline(self, video_id: str, work: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(work, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Transcript retrieval for {video_id} exceeded {self.timeout}s")
            raise RetrievalTimeoutError(video_id, self.timeout) from e

    def _run(self, factory: Callable[[], Awaitable[T]]) -> T:
        async def runner() -> T:
            try:
                return await factory()
            finally:
                await self.close()

        return asyncio.run(runner())

    async def get_transcripts_async(
        self,
        video_id: str,
        languages: Optional[Sequence[str]] = None,
        preserve_formatting: bool = False
    ) -> List[Transcript]:
        """
        Retrieve one transcript per caption track matching ``languages``.

        Args:
            video_id: Bare video ID or YouTube URL
            languages: Exact language codes; every track when empty
            preserve_formatting: Keep inline formatting tags in line text

        Returns:
            Transcripts in completion order, not track order

        Raises:
            TranscriptError: If any step or any single track fails
        """
        return await self._with_deadline(
            video_id,
            self.service.get_transcripts(video_id, languages, preserve_formatting)
        )

    async def list_transcripts_async(self, video_id: str) -> VideoTranscriptData:
        """Fetch the caption catalog and title without downloading any track."""
        return await self._with_deadline(video_id, self.service.list_transcripts(video_id))

    async def get_formatted_transcripts_async(
        self,
        video_id: str,
        languages: Optional[Sequence[str]] = None,
        preserve_formatting: bool = False
    ) -> str:
        """Retrieve transcripts and render them with the configured formatter."""
        transcripts = await self.get_transcripts_async(video_id, languages, preserve_formatting)
        if not transcripts:
            raise CaptionsNotFoundError(video_id)
        return self.formatter.format(transcripts)

    def get_transcripts(
        self,
        video_id: str,
        languages: Optional[Sequence[str]] = None,
        preserve_formatting: bool = False
    ) -> List[Transcript]:
        """Blocking form of :meth:`get_transcripts_async`."""
        return self._run(lambda: self.get_transcripts_async(video_id, languages, preserve_formatting))

    def list_transcripts(self, video_id: str) -> VideoTranscriptData:
        """Blocking form of :meth:`list_transcripts_async`."""
        return self._run(lambda: self.list_transcripts_async(video_id))

    def get_formatted_transcripts(
        self,
        video_id: str,
        languages: Optional[Sequence[str]] = None,
        preserve_formatting: bool = False
    ) -> str:
        """Blocking form of :meth:`get_formatted_transcripts_async`."""
        return self._run(lambda: self.get_formatted_transcripts_async(video_id, languages, preserve_formatting))


def get_transcripts(
    video_id: str,
    languages: Optional[Sequence[str]] = None,
    preserve_formatting: bool = False,
    timeout: Optional[float] = None
) -> List[Transcript]:
    """Retrieve transcripts with a default client."""
    return TranscriptClient(timeout=timeout).get_transcripts(video_id, languages, preserve_formatting)


def get_formatted_transcripts(
    video_id: str,
    languages: Optional[Sequence[str]] = None,
    preserve_formatting: bool = False,
    formatter: Optional[BaseFormatter] = None,
    timeout: Optional[float] = None
) -> str:
    """Retrieve transcripts with a default client and render them (pretty JSON unless told otherwise)."""
    client = TranscriptClient(timeout=timeout, formatter=formatter)
    return client.get_formatted_transcripts(video_id, languages, preserve_formatting)
