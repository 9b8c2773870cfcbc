import logging
import struct
from datetime import timedelta

import pytest

from pcm_silence.audio.models import Silence
from pcm_silence.detector import detect_silences, format_silence, scan_audio, silence_to_payload
from pcm_silence.error.silence_error import UnsupportedEncodingError, UnsupportedSampleWidthError
from pcm_silence.io.wave_reader import PcmAudio


def _speech_with_gap(sample_rate: int = 1000) -> bytes:
    # 100ms loud, 300ms silent, 100ms loud, 50ms silent at the end
    loud = [8000, -8000] * 50
    samples = loud + [0] * 300 + loud + [0] * 50
    return struct.pack(f"<{len(samples)}h", *samples)


def test_detect_silences_in_wave_file(write_wave):
    path = write_wave(_speech_with_gap(), sample_rate=1000, sample_width=2)

    silences = detect_silences(path, min_silence_ms=100, threshold_db=-40)

    assert [(s.index_start, s.index_end) for s in silences] == [(200, 799), (1000, 1099)]
    assert silences[0].start == timedelta(milliseconds=100)
    assert silences[0].duration == timedelta(milliseconds=300)
    assert silences[1].start == timedelta(milliseconds=500)
    assert silences[1].duration == timedelta(milliseconds=50)


def test_detect_silences_logs_file_info(write_wave, caplog):
    path = write_wave(bytes(16000), sample_rate=8000, sample_width=2)

    with caplog.at_level(logging.INFO):
        detect_silences(path)

    assert "File: audio.wav" in caplog.text
    assert "Duration: 1.0s" in caplog.text
    assert "Found 1 silences in 1000ms of audio" in caplog.text


def test_detect_silences_rejects_non_wave(tmp_path):
    path = tmp_path / "fake.wav"
    path.write_bytes(b"fake audio data")

    with pytest.raises(UnsupportedEncodingError):
        detect_silences(str(path))


def test_scan_audio_rejects_24bit_audio():
    audio = PcmAudio(sample_rate=8000, channels=1, bytes_per_sample=3, frames=bytes(30))

    with pytest.raises(UnsupportedSampleWidthError):
        scan_audio(audio)


def test_silence_to_payload():
    silence = Silence(timedelta(milliseconds=500), timedelta(milliseconds=250), 4, 5)

    assert silence_to_payload(silence) == {
        "start_ms": 500.0,
        "duration_ms": 250.0,
        "end_ms": 750.0,
        "index_start": 4,
        "index_end": 5,
    }


def test_format_silence():
    silence = Silence(timedelta(milliseconds=1500), timedelta(milliseconds=250), 12, 13)

    assert format_silence(silence) == "Start: 1500 ms, duration: 250 ms, index start: 12, index end: 13"
