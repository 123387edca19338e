"""JSON rendering of transcripts."""

import json
from typing import Any, Dict, List, Sequence

from .base import BaseFormatter
from ..models import Transcript


class JSONFormatter(BaseFormatter):
    """Renders a list of ``{"language_code", "transcripts": [...]}`` objects."""

    def __init__(self, include_timestamps: bool = True, include_language_code: bool = True, pretty_print: bool = False):
        super().__init__(include_timestamps, include_language_code)
        self.pretty_print = pretty_print

    def to_data(self, transcripts: Sequence[Transcript]) -> List[Dict[str, Any]]:
        data = []
        for transcript in transcripts:
            if self.include_timestamps:
                lines = [line.to_dict() for line in transcript.lines]
            else:
                lines = [{"text": line.text} for line in transcript.lines]

            entry: Dict[str, Any] = {}
            if self.include_language_code:
                entry["language_code"] = transcript.language_code
            entry["transcripts"] = lines
            data.append(entry)
        return data

    def format(self, transcripts: Sequence[Transcript]) -> str:
        indent = 2 if self.pretty_print else None
        return json.dumps(self.to_data(transcripts), indent=indent, ensure_ascii=False)
