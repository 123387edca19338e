"""Client for the internal player endpoint that lists a video's caption tracks."""

import json
from typing import Any, Dict, Optional

from .config import config, YouTubeConfig
from .exceptions import CatalogExtractionError
from .page_fetcher import PageFetcher, ConsentCookie
from ..utils.logging import get_logger

logger = get_logger("innertube_client")


class InnertubeClient:
    """Posts player requests using the API key scraped from the watch page."""

    def __init__(self, fetcher: PageFetcher, youtube_config: Optional[YouTubeConfig] = None):
        self.fetcher = fetcher
        self.youtube = youtube_config or config.youtube

    def build_payload(self, video_id: str) -> Dict[str, Any]:
        return {"context": self.youtube.innertube_context, "videoId": video_id}

    async def fetch_catalog(
        self,
        video_id: str,
        api_key: str,
        cookie: Optional[ConsentCookie] = None
    ) -> Dict[str, Any]:
        """
        Fetch the raw player response for a video.

        Args:
            video_id: YouTube video ID
            api_key: Key scraped from the watch page
            cookie: Consent cookie to send, if one was already negotiated

        Returns:
            The decoded player response

        Raises:
            FetchExhaustedError: If the endpoint never answers with a usable body
            CatalogExtractionError: If the body is not a JSON object
        """
        url = self.youtube.innertube_url.format(api_key=api_key)
        watch_url = self.youtube.watch_url.format(video_id=video_id)
        payload = self.build_payload(video_id)

        body = await self.fetcher.negotiate_consent(
            lambda c: self.fetcher.post(url, payload, c),
            watch_url,
            cookie
        )

        try:
            data = json.loads(body)
        except ValueError as e:
            raise CatalogExtractionError(video_id, f"Failed to decode player response for {video_id}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogExtractionError(video_id, f"Unexpected player response for {video_id}: {type(data).__name__}")

        logger.debug(f"Fetched player response for {video_id} ({len(body)} bytes)")
        return data
