"""
Speech recognition events and transcript accumulation.

A recognizer turns one recorded clip into a lazy sequence of
``RecognitionEvent`` objects.  Each event carries every result of the
session so far plus ``result_index``, the first result that is new in this
event.  ``TranscriptAccumulator`` folds the finalized results into text.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Protocol

from src.ui.api_client import APIClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecognitionResult:
    """One recognized span; interim results may still change."""

    transcript: str
    is_final: bool = True


@dataclass(frozen=True)
class RecognitionEvent:
    results: tuple[RecognitionResult, ...] = field(default_factory=tuple)
    result_index: int = 0


class SpeechRecognizer(Protocol):
    """What the answer recorder needs from a speech recognizer."""

    continuous: bool
    interim_results: bool
    lang: str

    def session(self, audio: bytes) -> Iterator[RecognitionEvent]: ...


class RemoteSpeechRecognizer:
    """Recognizer that sends recorded clips to the backend ``/transcribe`` API.

    Every call to :meth:`session` starts a fresh, independent sequence.
    """

    def __init__(
        self,
        client: APIClient,
        lang: str = "en-US",
        continuous: bool = True,
        interim_results: bool = True,
    ) -> None:
        self._client = client
        self.lang = lang
        self.continuous = continuous
        self.interim_results = interim_results

    def session(self, audio: bytes) -> Iterator[RecognitionEvent]:
        """Yield one event per transcribed segment of *audio*.

        The backend call happens on first iteration, not on creation.
        """
        response = self._client.transcribe(audio, language=self.lang)
        results: list[RecognitionResult] = []
        for segment in response.get("segments", []):
            text = segment.get("text", "").strip()
            if not text:
                continue
            is_final = segment.get("is_final", True)
            if not is_final and not self.interim_results:
                continue
            results.append(RecognitionResult(text, is_final=is_final))
            yield RecognitionEvent(results=tuple(results), result_index=len(results) - 1)
            if not self.continuous:
                break


class TranscriptAccumulator:
    """Running transcript built from recognition events."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def reset(self) -> None:
        self.text = ""

    def feed(self, event: RecognitionEvent) -> str:
        """Append the finalized results new in *event*; return the transcript."""
        final = ""
        for result in event.results[event.result_index :]:
            if result.is_final:
                final += result.transcript + " "
        if final.strip():
            self.text = (self.text + " " + final).strip()
        return self.text

    def consume(self, events: Iterable[RecognitionEvent]) -> str:
        for event in events:
            self.feed(event)
        return self.text
