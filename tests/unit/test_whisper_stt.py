"""Unit tests for the faster-whisper STT provider (model mocked)."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from src.core.exceptions import TranscriptionError
from src.services.transcription import create_stt, stt_enabled
from src.services.transcription.whisper import WhisperSTT, load_model, whisper_language


def _settings():
    return SimpleNamespace(whisper_model="tiny", speech_language="en-US")


@pytest.fixture
def stt():
    return WhisperSTT(settings=_settings())


class TestWhisperLanguage:
    @pytest.mark.parametrize(("tag", "code"), [("en-US", "en"), ("de", "de"), ("PT-br", "pt")])
    def test_primary_subtag(self, tag, code):
        assert whisper_language(tag) == code

    def test_none(self):
        assert whisper_language(None) is None


class TestTranscribe:
    async def test_empty_audio_short_circuits(self, stt):
        with patch.object(stt, "_run_transcription") as run:
            result = await stt.transcribe(b"")
        run.assert_not_called()
        assert result.text == ""
        assert result.segments == []

    async def test_segments_returned(self, stt):
        segments = [
            SimpleNamespace(text=" Hello there ", start=0.0, end=1.0),
            SimpleNamespace(text="  ", start=1.0, end=1.2),
            SimpleNamespace(text="I am ready.", start=1.2, end=2.0),
        ]
        info = SimpleNamespace(language="en")
        with patch.object(stt, "_run_transcription", return_value=(segments, info)) as run:
            result = await stt.transcribe(b"audio", language="en-US")

        run.assert_called_once_with(b"audio", "en")
        assert result.text == "Hello there I am ready."
        assert [s.text for s in result.segments] == ["Hello there", "I am ready."]
        assert all(s.is_final for s in result.segments)

    async def test_failure_wrapped(self, stt):
        with patch.object(stt, "_run_transcription", side_effect=RuntimeError("bad codec")):
            with pytest.raises(TranscriptionError, match="bad codec"):
                await stt.transcribe(b"audio")

    def test_model_loaded_once(self, stt):
        model = MagicMock()
        model.transcribe.return_value = (iter([]), SimpleNamespace(language="en"))
        load_model.cache_clear()
        with patch("src.services.transcription.whisper.WhisperModel", return_value=model) as cls:
            stt._run_transcription(b"a", "en")
            stt._run_transcription(b"b", "en")
        load_model.cache_clear()
        cls.assert_called_once_with("tiny", device="cpu", compute_type="int8")


class TestFactory:
    def test_enabled(self):
        assert stt_enabled("local")
        assert not stt_enabled("none")
        assert not stt_enabled("")

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            create_stt("deepgram")
