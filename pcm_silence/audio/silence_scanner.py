from __future__ import annotations

import logging
from datetime import timedelta
from typing import List, Optional

from pcm_silence.audio.models import AudioFormat, Silence, SilenceMatch
from pcm_silence.audio.sample_decoder import decode_sample
from pcm_silence.config.constants import DEFAULT_SILENCE_THRESHOLD_DB, MILLISECONDS_PER_SECOND

logger = logging.getLogger(__name__)


def threshold_amplitude(threshold_db: float, bytes_per_sample: int) -> float:
    """
    Convert a dB threshold into a raw amplitude cutoff comparable with decoded samples.
    The full-scale reference is the unsigned range of the sample width, 2 ** bits.
    """
    return 10.0 ** (threshold_db / 20.0) * 2.0 ** (8 * bytes_per_sample)


def min_silence_samples(min_silence: timedelta, audio_format: AudioFormat) -> int:
    """
    Minimum run length in interleaved samples, truncated towards zero.
    """
    total_ms = min_silence / timedelta(milliseconds=1)
    return int(
        total_ms * audio_format.channels * audio_format.sample_rate
        / (MILLISECONDS_PER_SECOND * audio_format.bytes_per_sample)
    )


def _scan_window(
        buffer: memoryview,
        offset: int,
        audio_format: AudioFormat,
        min_samples: int,
        threshold: float,
) -> Optional[SilenceMatch]:
    """
    Find the first silent run in buffer[offset:].

    A run interrupted by a loud sample is kept only when it reaches `min_samples`;
    a run still open at the end of the buffer is kept whatever its length.
    The returned match is relative to `offset`.
    """
    width = audio_format.bytes_per_sample
    first_sample = offset // width
    sample_count = len(buffer) // width

    run_start = None
    run_length = 0

    for n in range(first_sample, sample_count):
        amplitude = decode_sample(buffer, n, width)
        if abs(amplitude) < threshold:
            if run_start is None:
                run_start = n
            run_length += 1
        elif run_start is not None:
            if run_length >= min_samples:
                break
            run_start = None
            run_length = 0

    if run_start is None:
        return None

    relative_start = run_start - first_sample
    return SilenceMatch(
        start=audio_format.samples_to_time(relative_start),
        duration=audio_format.samples_to_time(run_length),
        index_start=relative_start * width,
        index_count=run_length * width,
    )


def find_next(
        buffer,
        sample_rate: int,
        channels: int,
        bytes_per_sample: int,
        min_silence: timedelta,
        threshold_db: float = DEFAULT_SILENCE_THRESHOLD_DB,
) -> Optional[SilenceMatch]:
    """
    Return the first silence in a raw PCM buffer, or None when there is none.

    Args:
        buffer: Interleaved little-endian PCM bytes
        sample_rate: Frames per second
        channels: Number of interleaved channels
        bytes_per_sample: 1, 2 or 4
        min_silence: Shortest run accepted before a loud sample
        threshold_db: Samples quieter than this level count as silent
    """
    audio_format = AudioFormat(sample_rate, channels, bytes_per_sample)
    view = memoryview(buffer).cast("B")
    return _scan_window(
        view,
        0,
        audio_format,
        min_silence_samples(min_silence, audio_format),
        threshold_amplitude(threshold_db, bytes_per_sample),
    )


def find_all(
        buffer,
        sample_rate: int,
        channels: int,
        bytes_per_sample: int,
        min_silence: timedelta,
        threshold_db: float = DEFAULT_SILENCE_THRESHOLD_DB,
) -> List[Silence]:
    """
    Return every non-overlapping silence in a raw PCM buffer, ordered by position.

    The scan restarts right after each silence found, so the last entry may be a
    trailing run shorter than `min_silence`.
    """
    audio_format = AudioFormat(sample_rate, channels, bytes_per_sample)
    view = memoryview(buffer).cast("B")
    min_samples = min_silence_samples(min_silence, audio_format)
    threshold = threshold_amplitude(threshold_db, bytes_per_sample)

    silences: List[Silence] = []
    cursor = 0

    while cursor < len(view):
        match = _scan_window(view, cursor, audio_format, min_samples, threshold)
        if match is None:
            break

        index_start = cursor + match.index_start
        silences.append(Silence(
            # Derived from the absolute sample index, not summed per window
            start=audio_format.samples_to_time(index_start // audio_format.bytes_per_sample),
            duration=match.duration,
            index_start=index_start,
            index_end=cursor + match.index_end,
        ))
        cursor += match.index_start + match.index_count

    logger.debug(
        f"Scanned {len(view)} bytes ({audio_format.sample_rate}Hz, {audio_format.channels}ch, "
        f"{audio_format.bytes_per_sample * 8}bit): {len(silences)} silences")
    return silences
