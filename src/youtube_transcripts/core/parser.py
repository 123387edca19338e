"""Timed-text XML parsing into transcript lines."""

import html
import re
from typing import Dict, Iterable, List, Optional, Pattern, Tuple, Union
from xml.etree.ElementTree import ParseError

from defusedxml import DefusedXmlException, ElementTree

from .config import config
from .exceptions import TranscriptParseError
from ..models import TranscriptLine

ALL_TAGS = re.compile(r"<[^>]*>", re.IGNORECASE)


class TagPatternCache:
    """Compiled tag-stripping patterns, built once and reused for every track."""

    def __init__(self, formatting_tags: Optional[Iterable[str]] = None):
        tags = config.transcript.formatting_tags if formatting_tags is None else formatting_tags
        self.formatting_tags: Tuple[str, ...] = tuple(tags)
        self._patterns: Dict[Tuple[str, ...], Pattern[str]] = {(): ALL_TAGS}

    def get(self, preserve_formatting: bool) -> Pattern[str]:
        """Pattern matching every tag that must be removed."""
        key = self.formatting_tags if preserve_formatting else ()
        pattern = self._patterns.get(key)
        if pattern is None:
            pattern = self._compile(key)
            self._patterns[key] = pattern
        return pattern

    @staticmethod
    def _compile(keep: Tuple[str, ...]) -> Pattern[str]:
        kept = "|".join(re.escape(tag) for tag in keep)
        return re.compile(r"<(?!/?(?:" + kept + r")\b)[^>]*>", re.IGNORECASE)


def _to_seconds(value: Optional[str]) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


class TranscriptParser:
    """Turns a caption track body into ordered transcript lines."""

    def __init__(self, pattern_cache: Optional[TagPatternCache] = None):
        self.patterns = pattern_cache or TagPatternCache()

    def clean_text(self, text: str, preserve_formatting: bool = False) -> str:
        """Strip markup (keeping inline formatting tags if asked) and unescape entities."""
        stripped = self.patterns.get(preserve_formatting).sub("", text)
        return html.unescape(stripped)

    def parse(self, xml_text: Union[str, bytes], preserve_formatting: bool = False) -> List[TranscriptLine]:
        """
        Parse a ``<transcript><text start=".." dur="..">..</text></transcript>`` document.

        One line is produced per ``<text>`` element, in document order. Unparseable
        ``start``/``dur`` values become 0.0.

        Raises:
            TranscriptParseError: If the document is not well-formed timed text
        """
        try:
            root = ElementTree.fromstring(xml_text)
        except (ParseError, DefusedXmlException) as e:
            raise TranscriptParseError(str(e)) from e

        if root.tag != "transcript":
            raise TranscriptParseError(f"expected <transcript> root element, got <{root.tag}>")

        return [
            TranscriptLine(
                text=self.clean_text("".join(element.itertext()), preserve_formatting),
                start=_to_seconds(element.get("start")),
                duration=_to_seconds(element.get("dur")),
            )
            for element in root.findall("text")
        ]
