"""Output formatters for retrieved transcripts."""

from .base import BaseFormatter
from .json_formatter import JSONFormatter
from .text_formatter import TextFormatter
from .factory import FormatterFactory

__all__ = [
    "BaseFormatter",
    "JSONFormatter",
    "TextFormatter",
    "FormatterFactory"
]
