"""Unit tests for the public TranscriptClient entry points."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from youtube_transcripts.core.exceptions import CaptionsNotFoundError, RetrievalTimeoutError
from youtube_transcripts.core.transcript_client import (
    TranscriptClient,
    get_formatted_transcripts,
    get_transcripts,
)
from youtube_transcripts.formatters import JSONFormatter, TextFormatter
from youtube_transcripts.models import Transcript, TranscriptLine


@pytest.fixture
def transcript():
    return Transcript("vid", "Title", "English", "en", lines=[TranscriptLine("hi", 0.0, 1.0)])


@pytest.fixture
def mock_fetcher():
    fetcher = MagicMock()
    fetcher.close = AsyncMock()
    return fetcher


@pytest.fixture
def client(mock_fetcher):
    return TranscriptClient(timeout=1, fetcher=mock_fetcher, innertube_client=MagicMock())


class TestTranscriptClient:
    """Tests for TranscriptClient."""

    def test_defaults_from_config(self, mock_fetcher):
        client = TranscriptClient(fetcher=mock_fetcher)

        assert client.timeout == 30.0
        assert isinstance(client.formatter, JSONFormatter)
        assert client.formatter.pretty_print is True

    @pytest.mark.asyncio
    async def test_get_transcripts_async(self, client, transcript):
        client.service.get_transcripts = AsyncMock(return_value=[transcript])

        result = await client.get_transcripts_async("vid", ["en"], True)

        assert result == [transcript]
        client.service.get_transcripts.assert_awaited_once_with("vid", ["en"], True)

    @pytest.mark.asyncio
    async def test_deadline_exceeded(self, client):
        # Arrange
        async def slow(*args):
            await asyncio.sleep(10)

        client.timeout = 0.05
        client.service.get_transcripts = slow

        # Act
        with pytest.raises(RetrievalTimeoutError) as exc_info:
            await client.get_transcripts_async("vid")

        # Assert
        assert exc_info.value.video_id == "vid"
        assert exc_info.value.timeout == 0.05

    @pytest.mark.asyncio
    async def test_formatted_empty_result(self, client):
        client.service.get_transcripts = AsyncMock(return_value=[])

        with pytest.raises(CaptionsNotFoundError):
            await client.get_formatted_transcripts_async("vid")

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_fetcher(self, client, mock_fetcher):
        async with client:
            pass

        mock_fetcher.close.assert_awaited_once()

    def test_sync_get_transcripts_closes_fetcher(self, client, mock_fetcher, transcript):
        client.service.get_transcripts = AsyncMock(return_value=[transcript])

        assert client.get_transcripts("vid") == [transcript]
        mock_fetcher.close.assert_awaited_once()

    def test_sync_closes_fetcher_on_error(self, client, mock_fetcher):
        client.service.list_transcripts = AsyncMock(side_effect=CaptionsNotFoundError("vid"))

        with pytest.raises(CaptionsNotFoundError):
            client.list_transcripts("vid")

        mock_fetcher.close.assert_awaited_once()

    def test_sync_formatted(self, mock_fetcher, transcript):
        client = TranscriptClient(formatter=TextFormatter(), fetcher=mock_fetcher, innertube_client=MagicMock())
        client.service.get_transcripts = AsyncMock(return_value=[transcript])

        assert client.get_formatted_transcripts("vid") == "Language: English\n0.000000: hi\n"


class TestModuleFunctions:
    """Tests for the module-level helpers."""

    def test_get_transcripts(self, transcript):
        with patch.object(TranscriptClient, "get_transcripts", return_value=[transcript]) as method:
            result = get_transcripts("vid", ["en"], preserve_formatting=True, timeout=5)

        assert result == [transcript]
        method.assert_called_once_with("vid", ["en"], True)

    def test_get_formatted_transcripts_pretty_json_by_default(self, transcript):
        with patch.object(TranscriptClient, "get_transcripts_async", AsyncMock(return_value=[transcript])):
            output = get_formatted_transcripts("vid")

        assert output.startswith("[\n")
        assert json.loads(output)[0]["language_code"] == "en"
