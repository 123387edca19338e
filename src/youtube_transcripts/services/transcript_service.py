"""Service that runs a full transcript retrieval for one video."""

from typing import List, Optional, Sequence

from ..core.catalog import (
    extract_api_key,
    extract_caption_tracks,
    extract_title,
    extract_translation_languages,
    select_tracks,
)
from ..core.innertube_client import InnertubeClient
from ..core.page_fetcher import PageFetcher
from ..core.parser import TagPatternCache, TranscriptParser
from ..core.track_processor import ConcurrentTrackProcessor
from ..models import Transcript, VideoTranscriptData
from ..utils.logging import get_logger
from ..utils.youtube_utils import sanitize_video_id

logger = get_logger("transcript_service")


class TranscriptService:
    """
    Retrieves transcripts through the internal player API.

    Pipeline: sanitize ID → watch page → API key and title → player response →
    caption catalog → language selection → concurrent fetch and parse.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        innertube_client: Optional[InnertubeClient] = None,
        pattern_cache: Optional[TagPatternCache] = None
    ):
        self.fetcher = fetcher
        self.innertube = innertube_client or InnertubeClient(fetcher)
        self.parser = TranscriptParser(pattern_cache or TagPatternCache())
        self.processor = ConcurrentTrackProcessor(fetcher, self.parser)

    async def list_transcripts(self, video_id: str) -> VideoTranscriptData:
        """
        Fetch the caption catalog for a video without downloading any track.

        Raises:
            FetchExhaustedError: If the watch page or player endpoint cannot be fetched
            CaptionsNotFoundError: If the video has no captions
        """
        video_id = sanitize_video_id(video_id)

        page = await self.fetcher.fetch_video(video_id)
        html = page.decode("utf-8", errors="replace")

        title = extract_title(html)
        api_key = extract_api_key(html)
        if not api_key:
            logger.warning(f"No INNERTUBE_API_KEY found on the watch page for {video_id}")

        data = await self.innertube.fetch_catalog(video_id, api_key)
        tracks = extract_caption_tracks(video_id, data)

        return VideoTranscriptData(
            video_id=video_id,
            title=title,
            tracks=tracks,
            translation_languages=extract_translation_languages(data),
        )

    async def get_transcripts(
        self,
        video_id: str,
        languages: Optional[Sequence[str]] = None,
        preserve_formatting: bool = False
    ) -> List[Transcript]:
        """
        Retrieve one transcript per caption track matching ``languages``.

        Args:
            video_id: Bare video ID or YouTube URL
            languages: Exact language codes to select; all tracks when empty
            preserve_formatting: Keep inline formatting tags in line text

        Returns:
            Transcripts in completion order

        Raises:
            TranscriptError: On any failure; partial results are never returned
        """
        catalog = await self.list_transcripts(video_id)
        tracks = select_tracks(catalog.tracks, languages)

        logger.info(f"Fetching {len(tracks)} transcripts for {catalog.video_id}")
        return await self.processor.process(catalog.video_id, tracks, catalog.title, preserve_formatting)
