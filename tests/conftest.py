import io
import wave

import pytest

SILENT_8BIT = 0x80
LOUD_8BIT = 0x00


def _pcm8(pattern: str) -> bytes:
    """Build 8-bit PCM from a pattern of 'S' (silent) and 'L' (loud) samples."""
    return bytes(SILENT_8BIT if c == "S" else LOUD_8BIT for c in pattern)


def _wave_bytes(frames: bytes, sample_rate: int = 8000, channels: int = 1, sample_width: int = 2) -> bytes:
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav_handle:
        wav_handle.setnchannels(channels)
        wav_handle.setsampwidth(sample_width)
        wav_handle.setframerate(sample_rate)
        wav_handle.writeframes(frames)
    return buffer.getvalue()


@pytest.fixture
def pcm8():
    return _pcm8


@pytest.fixture
def wave_bytes():
    return _wave_bytes


@pytest.fixture
def write_wave(tmp_path):
    def _write(frames: bytes, name: str = "audio.wav", **kwargs) -> str:
        path = tmp_path / name
        path.write_bytes(_wave_bytes(frames, **kwargs))
        return str(path)

    return _write
