"""Unit tests for transcript formatters."""

import json

import pytest

from youtube_transcripts.formatters import FormatterFactory, JSONFormatter, TextFormatter
from youtube_transcripts.models import Transcript, TranscriptLine


@pytest.fixture
def transcripts():
    return [
        Transcript(
            video_id="dQw4w9WgXcQ",
            video_title="Title",
            language="English",
            language_code="en",
            lines=[TranscriptLine("Hello", 0.0, 1.5), TranscriptLine("world", 1.5, 2.0)],
        ),
        Transcript(
            video_id="dQw4w9WgXcQ",
            video_title="Title",
            language="Español",
            language_code="es",
            lines=[TranscriptLine("Hola", 0.5, 1.0)],
        ),
    ]


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_structure(self, transcripts):
        # Act
        data = json.loads(JSONFormatter().format(transcripts))

        # Assert
        assert data == [
            {
                "language_code": "en",
                "transcripts": [
                    {"text": "Hello", "start": 0.0, "duration": 1.5},
                    {"text": "world", "start": 1.5, "duration": 2.0},
                ],
            },
            {"language_code": "es", "transcripts": [{"text": "Hola", "start": 0.5, "duration": 1.0}]},
        ]

    def test_pretty_print(self, transcripts):
        compact = JSONFormatter().format(transcripts)
        pretty = JSONFormatter(pretty_print=True).format(transcripts)

        assert "\n" not in compact
        assert '\n  {\n    "language_code": "en"' in pretty
        assert json.loads(pretty) == json.loads(compact)

    def test_non_ascii_kept(self, transcripts):
        transcripts[1].lines[0].text = "¡Hola!"

        assert "¡Hola!" in JSONFormatter().format(transcripts)

    def test_without_timestamps_or_language(self, transcripts):
        formatter = JSONFormatter(include_timestamps=False, include_language_code=False)

        data = formatter.to_data(transcripts)

        assert data[0] == {"transcripts": [{"text": "Hello"}, {"text": "world"}]}

    def test_empty(self):
        assert JSONFormatter().format([]) == "[]"


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_format(self, transcripts):
        output = TextFormatter().format(transcripts)

        assert output == (
            "Language: English\n"
            "0.000000: Hello\n"
            "1.500000: world\n"
            "\n"
            "Language: Español\n"
            "0.500000: Hola\n"
        )

    def test_format_plain(self, transcripts):
        formatter = TextFormatter(include_timestamps=False, include_language_code=False)

        assert formatter.format(transcripts[:1]) == "Hello\nworld\n"

    def test_language_code_fallback(self, transcripts):
        transcripts[0].language = ""

        assert TextFormatter().format(transcripts[:1]).startswith("Language: en\n")


class TestFormatterFactory:
    """Tests for FormatterFactory."""

    @pytest.mark.parametrize("name,expected", [
        ("json", JSONFormatter),
        ("JSON", JSONFormatter),
        ("text", TextFormatter),
    ])
    def test_create_formatter(self, name, expected):
        assert isinstance(FormatterFactory.create_formatter(name), expected)

    def test_kwargs_forwarded(self):
        formatter = FormatterFactory.create_formatter("json", pretty_print=True, include_timestamps=False)

        assert formatter.pretty_print is True
        assert formatter.include_timestamps is False

    def test_text_ignores_pretty_print(self):
        formatter = FormatterFactory.create_formatter("text", pretty_print=True)

        assert isinstance(formatter, TextFormatter)

    def test_unsupported(self):
        with pytest.raises(ValueError, match="Unsupported formatter type: srt"):
            FormatterFactory.create_formatter("srt")
