from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from pcm_silence.config.constants import SUPPORTED_SAMPLE_WIDTHS, MILLISECONDS_PER_SECOND
from pcm_silence.error.silence_error import InvalidFormatError, UnsupportedSampleWidthError


@dataclass(frozen=True)
class AudioFormat:
    """
    Layout of an interleaved little-endian PCM buffer.
    Validated on construction so that a scan never starts on a malformed format.
    """
    sample_rate: int
    channels: int
    bytes_per_sample: int

    def __post_init__(self):
        if self.bytes_per_sample not in SUPPORTED_SAMPLE_WIDTHS:
            raise UnsupportedSampleWidthError(self.bytes_per_sample)
        if self.sample_rate <= 0:
            raise InvalidFormatError(f"Sample rate must be positive, got {self.sample_rate}")
        if self.channels <= 0:
            raise InvalidFormatError(f"Channel count must be positive, got {self.channels}")

    @property
    def samples_per_second(self) -> int:
        """Interleaved samples per second, all channels counted."""
        return self.sample_rate * self.channels

    def samples_to_time(self, sample_count: int) -> timedelta:
        return timedelta(milliseconds=sample_count * MILLISECONDS_PER_SECOND / self.samples_per_second)


@dataclass(frozen=True)
class Silence:
    start: timedelta
    duration: timedelta
    index_start: int
    # Inclusive byte offset of the last silent byte
    index_end: int

    @property
    def end(self) -> timedelta:
        return self.start + self.duration


@dataclass(frozen=True)
class SilenceMatch:
    """
    A silent run found by a single scan, positioned relative to the scanned window.
    """
    start: timedelta
    duration: timedelta
    index_start: int
    index_count: int

    @property
    def index_end(self) -> int:
        return self.index_start + self.index_count - 1

    def to_silence(self) -> Silence:
        return Silence(
            start=self.start,
            duration=self.duration,
            index_start=self.index_start,
            index_end=self.index_end,
        )
