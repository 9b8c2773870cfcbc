from __future__ import annotations

import logging
import wave
from dataclasses import dataclass
from datetime import timedelta

from pcm_silence.audio.models import AudioFormat
from pcm_silence.error.silence_error import UnsupportedEncodingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PcmAudio:
    """Raw interleaved PCM frames together with the header fields the scanner needs."""
    sample_rate: int
    channels: int
    bytes_per_sample: int
    frames: bytes

    @property
    def audio_format(self) -> AudioFormat:
        return AudioFormat(self.sample_rate, self.channels, self.bytes_per_sample)

    @property
    def duration(self) -> timedelta:
        return self.audio_format.samples_to_time(len(self.frames) // self.bytes_per_sample)


def read_pcm_wave(file_path: str) -> PcmAudio:
    """
    Read the header and every frame of a PCM WAVE file.
    Raises UnsupportedEncodingError for non-RIFF files and non-PCM encodings.
    """
    try:
        with wave.open(file_path, 'rb') as wav_handle:
            channels = wav_handle.getnchannels()
            sample_rate = wav_handle.getframerate()
            sample_width = wav_handle.getsampwidth()
            frames = wav_handle.readframes(wav_handle.getnframes())
    except (wave.Error, EOFError) as e:
        raise UnsupportedEncodingError(f"Only PCM WAVE files are supported: {e}") from e

    logger.info(f"SampleRate: {sample_rate}, Channels: {channels}, BitsPerSample: {sample_width * 8}")
    logger.info(f"Buffer length: {len(frames)}")

    return PcmAudio(
        sample_rate=sample_rate,
        channels=channels,
        bytes_per_sample=sample_width,
        frames=frames,
    )
