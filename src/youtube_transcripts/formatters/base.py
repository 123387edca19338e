from abc import ABC, abstractmethod
from typing import Sequence

from ..models import Transcript


class BaseFormatter(ABC):
    """Abstract interface for rendering transcripts to a string."""

    def __init__(self, include_timestamps: bool = True, include_language_code: bool = True):
        self.include_timestamps = include_timestamps
        self.include_language_code = include_language_code

    @abstractmethod
    def format(self, transcripts: Sequence[Transcript]) -> str:  # noqa: D401
        """Return *transcripts* rendered as a single string."""
