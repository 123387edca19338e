"""Plain text rendering of transcripts."""

from typing import Sequence

from .base import BaseFormatter
from ..models import Transcript


class TextFormatter(BaseFormatter):
    """One ``<start>: <text>`` line per transcript line, transcripts separated by a blank line."""

    def format(self, transcripts: Sequence[Transcript]) -> str:
        blocks = []
        for transcript in transcripts:
            out = []
            if self.include_language_code:
                language = transcript.language or transcript.language_code
                if language:
                    out.append(f"Language: {language}")

            for line in transcript.lines:
                if self.include_timestamps:
                    out.append(f"{line.start:f}: {line.text}")
                else:
                    out.append(line.text)

            blocks.append("".join(f"{row}\n" for row in out))

        return "\n".join(blocks)
