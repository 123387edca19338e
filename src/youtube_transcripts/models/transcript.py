"""Data models for caption tracks and transcripts."""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any


@dataclass(frozen=True)
class CaptionTrack:
    """One language/variant of captions listed by the player API."""
    base_url: str
    language_code: str
    display_name: str = ""
    kind: Optional[str] = None
    is_translatable: bool = False

    @property
    def is_generated(self) -> bool:
        """True for automatic speech-recognition captions."""
        return self.kind == "asr"

    @property
    def transcript_url(self) -> str:
        """Track URL with the srv3 format flag removed so the body is plain timed text."""
        return self.base_url.replace("&fmt=srv3", "")


@dataclass(frozen=True)
class TranslationLanguage:
    """A language the provider offers machine translation into."""
    language_code: str
    language: str = ""


@dataclass
class TranscriptLine:
    """A single timed fragment of a transcript."""
    text: str
    start: float
    duration: float = 0.0

    @property
    def end(self) -> float:
        """Calculate end time."""
        return self.start + self.duration

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "text": self.text,
            "start": self.start,
            "duration": self.duration
        }


@dataclass
class Transcript:
    """Transcript of one caption track, lines in provider order."""
    video_id: str
    video_title: str
    language: str
    language_code: str
    is_generated: bool = False
    is_translatable: bool = False
    lines: List[TranscriptLine] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Get plain text transcript with all lines joined."""
        return " ".join(line.text for line in self.lines)

    @classmethod
    def from_track(cls, video_id: str, title: str, track: CaptionTrack, lines: List[TranscriptLine]) -> "Transcript":
        """Build the transcript for a parsed caption track."""
        return cls(
            video_id=video_id,
            video_title=title,
            language=track.display_name,
            language_code=track.language_code,
            is_generated=track.is_generated,
            is_translatable=track.is_translatable,
            lines=lines,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "video_id": self.video_id,
            "video_title": self.video_title,
            "language": self.language,
            "language_code": self.language_code,
            "is_generated": self.is_generated,
            "is_translatable": self.is_translatable,
            "lines": [line.to_dict() for line in self.lines]
        }


@dataclass
class VideoTranscriptData:
    """Caption catalog and title for a single retrieval call."""
    video_id: str
    title: str
    tracks: List[CaptionTrack] = field(default_factory=list)
    translation_languages: List[TranslationLanguage] = field(default_factory=list)

    @property
    def language_codes(self) -> List[str]:
        """Language codes in catalog order."""
        return [track.language_code for track in self.tracks]
