"""Concurrent fetch-and-parse of the selected caption tracks."""

import asyncio
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from .exceptions import TranscriptParseError
from .page_fetcher import PageFetcher
from .parser import TranscriptParser
from ..models import CaptionTrack, Transcript, TranscriptLine
from ..utils.logging import get_logger

logger = get_logger("track_processor")


@dataclass
class TrackOutcome:
    """What one track task reports: a transcript or the error that stopped it."""
    track: CaptionTrack
    transcript: Optional[Transcript] = None
    error: Optional[Exception] = None


class ConcurrentTrackProcessor:
    """
    Fetches and parses every selected track in its own task.

    Each task puts exactly one outcome on a queue sized to the number of tracks,
    and the coordinator drains it. The first error fails the whole call and the
    transcripts collected so far are dropped. Sibling tasks keep running and
    their outcomes are ignored; ``shutdown()`` cancels whatever is still in
    flight before the shared session is closed. Results arrive in completion
    order, not in the order of ``tracks``.
    """

    def __init__(self, fetcher: PageFetcher, parser: Optional[TranscriptParser] = None):
        self.fetcher = fetcher
        self.parser = parser or TranscriptParser()
        self._tasks: Set[asyncio.Task] = set()

    async def fetch_track(self, track: CaptionTrack, preserve_formatting: bool) -> List[TranscriptLine]:
        """Fetch one track body and parse it into lines."""
        body = await self.fetcher.fetch(track.transcript_url)
        try:
            return self.parser.parse(body, preserve_formatting)
        except TranscriptParseError as e:
            raise TranscriptParseError(e.detail, track.language_code) from e

    async def _run_track(
        self,
        queue: "asyncio.Queue[TrackOutcome]",
        video_id: str,
        track: CaptionTrack,
        title: str,
        preserve_formatting: bool
    ) -> None:
        try:
            lines = await self.fetch_track(track, preserve_formatting)
            transcript = Transcript.from_track(video_id, title, track, lines)
        except Exception as e:
            queue.put_nowait(TrackOutcome(track=track, error=e))
            return
        queue.put_nowait(TrackOutcome(track=track, transcript=transcript))

    async def shutdown(self) -> None:
        """Cancel track tasks left running by a failed call and wait for them to finish."""
        pending = [task for task in self._tasks if not task.done()]
        if not pending:
            return

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.debug(f"Cancelled {len(pending)} outstanding track tasks")

    async def process(
        self,
        video_id: str,
        tracks: Sequence[CaptionTrack],
        title: str,
        preserve_formatting: bool = False
    ) -> List[Transcript]:
        """
        Fetch and parse all tracks concurrently.

        Args:
            video_id: Video the tracks belong to
            tracks: Tracks to fetch
            title: Video title copied onto every transcript
            preserve_formatting: Keep inline formatting tags in line text

        Returns:
            One transcript per track, in completion order

        Raises:
            TranscriptError: The first error any track task reported
        """
        queue: "asyncio.Queue[TrackOutcome]" = asyncio.Queue(maxsize=len(tracks) or 1)
        spawned = []
        for track in tracks:
            task = asyncio.ensure_future(self._run_track(queue, video_id, track, title, preserve_formatting))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            spawned.append(task)

        logger.debug(f"Spawned {len(spawned)} track tasks for {video_id}")

        results: List[Transcript] = []
        try:
            for _ in range(len(spawned)):
                outcome = await queue.get()
                if outcome.error is not None:
                    logger.error(
                        f"Error processing '{outcome.track.language_code}' transcript for {video_id}: {outcome.error}"
                    )
                    raise outcome.error
                results.append(outcome.transcript)
        except asyncio.CancelledError:
            for task in spawned:
                task.cancel()
            raise

        logger.info(f"Processed {len(results)} transcripts for {video_id}")
        return results
