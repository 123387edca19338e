"""Extraction of the caption catalog from the watch page and player response."""

import re
from typing import Any, Dict, List, Optional, Sequence

from bs4 import BeautifulSoup

from .exceptions import (
    CaptionsNotFoundError,
    NoMatchingLanguageError,
    TranscriptsDisabledError,
    VideoUnplayableError,
)
from ..models import CaptionTrack, TranslationLanguage
from ..utils.logging import get_logger

logger = get_logger("catalog")

INNERTUBE_API_KEY = re.compile(r'"INNERTUBE_API_KEY":\s*"([a-zA-Z0-9_-]+)"')


def extract_api_key(html: str) -> str:
    """Return the embedded INNERTUBE_API_KEY, or an empty string if the page has none."""
    match = INNERTUBE_API_KEY.search(html)
    return match.group(1) if match else ""


def extract_title(html: str) -> str:
    """Return the text of the first <title> element, or an empty string."""
    try:
        soup = BeautifulSoup(html or "", "html.parser")
        tag = soup.find("title")
    except Exception as e:
        logger.warning(f"Error extracting the page title: {e}")
        return ""

    if tag is None:
        return ""
    return tag.get_text()


def _simple_text(value: Any) -> str:
    if isinstance(value, dict):
        text = value.get("simpleText")
        if isinstance(text, str):
            return text
        runs = value.get("runs")
        if isinstance(runs, list):
            return "".join(run.get("text", "") for run in runs if isinstance(run, dict))
    return ""


def _parse_track(entry: Dict[str, Any]) -> CaptionTrack:
    kind = entry.get("kind")
    return CaptionTrack(
        base_url=entry.get("baseUrl") or "",
        language_code=entry.get("languageCode") or "",
        display_name=_simple_text(entry.get("name")),
        kind=kind if isinstance(kind, str) else None,
        is_translatable=entry.get("isTranslatable") is True,
    )


def _unplayable(video_id: str, data: Dict[str, Any]) -> Optional[VideoUnplayableError]:
    status_data = data.get("playabilityStatus")
    if not isinstance(status_data, dict):
        return None
    status = status_data.get("status", "OK")
    if status == "OK":
        return None
    return VideoUnplayableError(video_id, status, status_data.get("reason"))


def extract_caption_tracks(video_id: str, data: Dict[str, Any]) -> List[CaptionTrack]:
    """
    Walk captions → playerCaptionsTracklistRenderer → captionTracks.

    Args:
        video_id: Video the response belongs to
        data: Decoded player response

    Returns:
        Caption tracks in the order the provider lists them

    Raises:
        VideoUnplayableError: If there are no captions because the video cannot be played
        CaptionsNotFoundError: If the video has no caption tracks
    """
    captions = data.get("captions")
    if not isinstance(captions, dict):
        unplayable = _unplayable(video_id, data)
        if unplayable is not None:
            raise unplayable
        raise CaptionsNotFoundError(video_id)

    renderer = captions.get("playerCaptionsTracklistRenderer")
    if not isinstance(renderer, dict):
        raise TranscriptsDisabledError(video_id)

    entries = renderer.get("captionTracks")
    if not isinstance(entries, list):
        raise CaptionsNotFoundError(video_id, missing="captionTracks")

    tracks = [_parse_track(entry) for entry in entries if isinstance(entry, dict)]
    if not tracks:
        raise CaptionsNotFoundError(video_id, missing="captionTracks")

    summary = ", ".join(f"{t.language_code}{'-asr' if t.is_generated else ''}" for t in tracks)
    logger.info(f"Tracks for {video_id}: [{summary}]")
    return tracks


def extract_translation_languages(data: Dict[str, Any]) -> List[TranslationLanguage]:
    """List the translation targets advertised next to the caption tracks."""
    renderer = (data.get("captions") or {}).get("playerCaptionsTracklistRenderer") or {}
    languages = []
    for entry in renderer.get("translationLanguages") or []:
        if not isinstance(entry, dict):
            continue
        languages.append(TranslationLanguage(
            language_code=entry.get("languageCode") or "",
            language=_simple_text(entry.get("languageName")),
        ))
    return languages


def select_tracks(tracks: Sequence[CaptionTrack], language_codes: Optional[Sequence[str]] = None) -> List[CaptionTrack]:
    """
    Narrow a catalog to the requested languages.

    Matching is exact and case-sensitive: ``en`` does not select ``en-US``.
    Tracks are grouped by requested code, in request order.

    Raises:
        NoMatchingLanguageError: If none of the codes matched
    """
    if not language_codes:
        return list(tracks)

    requested = list(dict.fromkeys(language_codes))
    selected = [track for code in requested for track in tracks if track.language_code == code]

    if not selected:
        raise NoMatchingLanguageError(requested, [track.language_code for track in tracks])

    logger.debug(f"Selected {len(selected)} of {len(tracks)} tracks for {requested}")
    return selected
