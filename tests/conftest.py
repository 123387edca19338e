"""Pytest configuration and fixtures for transcript retrieval tests."""

import os
import sys
import pytest

# Make the src layout importable without an installed package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

os.environ.setdefault("LOG_LEVEL", "DEBUG")

from youtube_transcripts.core.config import NetworkConfig, YouTubeConfig
from youtube_transcripts.models import CaptionTrack


def pytest_configure(config):
    """Register the suite markers used by run_tests.py."""
    config.addinivalue_line("markers", "unit: fast tests without network access")
    config.addinivalue_line("markers", "integration: tests against a local HTTP server")


def pytest_collection_modifyitems(config, items):
    """Mark tests by the suite directory they live in."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}integration{os.sep}" in path:
            item.add_marker(pytest.mark.integration)
        elif f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)


def make_transcript_xml(*texts, start=0.0, step=1.5):
    """Build a timed-text document with one <text> element per argument."""
    body = "".join(
        f'<text start="{start + i * step}" dur="{step}">{text}</text>'
        for i, text in enumerate(texts)
    )
    return f'<?xml version="1.0" encoding="utf-8" ?><transcript>{body}</transcript>'


@pytest.fixture
def fast_network_config():
    """Network settings with the production retry count but no backoff delay."""
    return NetworkConfig(
        max_attempts=3,
        retry_delay=0,
        request_timeout=5,
        max_connections=10,
        max_connections_per_host=5,
        keepalive_timeout=5,
        accept_language="en-US"
    )


@pytest.fixture
def youtube_config():
    """Production endpoint templates."""
    return YouTubeConfig(
        watch_url="https://www.youtube.com/watch?v={video_id}",
        innertube_url="https://www.youtube.com/youtubei/v1/player?key={api_key}",
        consent_cookie_domain=".youtube.com",
        client_name="ANDROID",
        client_version="20.10.38"
    )


@pytest.fixture
def test_video_id():
    return "dQw4w9WgXcQ"


@pytest.fixture
def watch_page_html():
    """A trimmed watch page with a title and an embedded API key."""
    return (
        "<html><head><title>Never Gonna Give You Up - YouTube</title></head>"
        '<body><script>ytcfg.set({"INNERTUBE_API_KEY": "AIzaTestKey_123-abc", '
        '"INNERTUBE_CONTEXT_CLIENT_VERSION": "2.20240101"});</script></body></html>'
    )


@pytest.fixture
def consent_page_html():
    """The regional consent interstitial."""
    return (
        '<html><body><form action="https://consent.youtube.com/s" method="POST">'
        '<input type="hidden" name="v" value="cb.20210328-17-p0.en+FX+123">'
        "</form></body></html>"
    )


@pytest.fixture
def player_response():
    """A player response listing four caption tracks."""
    return {
        "playabilityStatus": {"status": "OK"},
        "captions": {
            "playerCaptionsTracklistRenderer": {
                "captionTracks": [
                    {
                        "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en&fmt=srv3",
                        "name": {"simpleText": "English"},
                        "languageCode": "en",
                        "isTranslatable": True
                    },
                    {
                        "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en-US",
                        "name": {"simpleText": "English (United States)"},
                        "languageCode": "en-US",
                        "isTranslatable": True
                    },
                    {
                        "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en&kind=asr",
                        "name": {"runs": [{"text": "English (auto-generated)"}]},
                        "languageCode": "en",
                        "kind": "asr",
                        "isTranslatable": True
                    },
                    {
                        "baseUrl": "https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=es",
                        "name": {"simpleText": "Spanish"},
                        "languageCode": "es",
                        "isTranslatable": False
                    }
                ],
                "translationLanguages": [
                    {"languageCode": "de", "languageName": {"simpleText": "German"}},
                    {"languageCode": "fr", "languageName": {"simpleText": "French"}}
                ]
            }
        }
    }


@pytest.fixture
def caption_tracks():
    """Tracks for en, en-US and es."""
    return [
        CaptionTrack(base_url="https://example.test/tt?lang=en&fmt=srv3", language_code="en", display_name="English", is_translatable=True),
        CaptionTrack(base_url="https://example.test/tt?lang=en-US", language_code="en-US", display_name="English (United States)"),
        CaptionTrack(base_url="https://example.test/tt?lang=es", language_code="es", display_name="Spanish", kind="asr"),
    ]


@pytest.fixture
def transcript_xml():
    return make_transcript_xml("Hello &amp;amp; welcome", "&lt;b&gt;bold&lt;/b&gt; move", "the end")


@pytest.fixture
def make_xml():
    """Factory fixture for timed-text documents."""
    return make_transcript_xml
