"""Utility functions for working with YouTube video identifiers."""

from urllib.parse import urlparse, parse_qs

from .logging import get_logger
from ..core.exceptions import InvalidVideoIdError

logger = get_logger("youtube_utils")

URL_PREFIXES = ("http://", "https://", "www.")


def sanitize_video_id(video_id: str) -> str:
    """
    Reduce a video identifier to the bare video ID.

    Accepts a bare ID, a ``youtube.com/watch?v=<id>`` URL or a ``youtu.be/<id>``
    short link. Any other URL is passed through unchanged.

    Args:
        video_id: Bare ID or URL

    Returns:
        The video ID

    Raises:
        InvalidVideoIdError: If the identifier is empty or a YouTube URL carries no ID
    """
    value = (video_id or "").strip()
    if not value:
        raise InvalidVideoIdError(video_id)

    if not value.startswith(URL_PREFIXES):
        return value

    # urlparse only finds the host when a scheme is present
    parsed = urlparse(value if "://" in value else f"https://{value}")
    host = (parsed.netloc or "").lower()

    if "youtube.com" in host:
        ids = parse_qs(parsed.query).get("v")
        if not ids or not ids[0]:
            raise InvalidVideoIdError(video_id)
        return ids[0]

    if "youtu.be" in host:
        vid = parsed.path.strip("/").split("/")[0]
        if not vid:
            raise InvalidVideoIdError(video_id)
        return vid

    logger.warning(f"{value} doesn't look like a YouTube video, trying it as-is")
    return value
