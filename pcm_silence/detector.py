from __future__ import annotations

import logging
import os
from datetime import timedelta
from typing import Any, Dict, List

from pcm_silence.audio.models import Silence
from pcm_silence.audio.silence_scanner import find_all
from pcm_silence.config.constants import DEFAULT_MIN_SILENCE_MS, DEFAULT_SILENCE_THRESHOLD_DB
from pcm_silence.io.wave_reader import PcmAudio, read_pcm_wave

logger = logging.getLogger(__name__)


def _to_ms(value: timedelta) -> float:
    return value / timedelta(milliseconds=1)


def scan_audio(
        audio: PcmAudio,
        min_silence_ms: int = DEFAULT_MIN_SILENCE_MS,
        threshold_db: int = DEFAULT_SILENCE_THRESHOLD_DB,
) -> List[Silence]:
    silences = find_all(
        audio.frames,
        audio.sample_rate,
        audio.channels,
        audio.bytes_per_sample,
        timedelta(milliseconds=min_silence_ms),
        threshold_db,
    )
    logger.info(f"Found {len(silences)} silences in {_to_ms(audio.duration):.0f}ms of audio")
    return silences


def detect_silences(
        input_path: str,
        min_silence_ms: int = DEFAULT_MIN_SILENCE_MS,
        threshold_db: int = DEFAULT_SILENCE_THRESHOLD_DB,
) -> List[Silence]:
    """
    Detect every silence in a PCM WAVE file.

    Args:
        input_path: Path to a PCM WAVE file
        min_silence_ms: Minimum silence duration in milliseconds
        threshold_db: Level below which a sample counts as silent (e.g. -40)
    """
    logger.info(f"Detecting silences: {input_path} (min_silence={min_silence_ms}ms, threshold={threshold_db}dB)")
    audio = read_pcm_wave(input_path)
    file_size_mb = os.path.getsize(input_path) / (1024 * 1024)
    logger.info(
        f"File: {os.path.basename(input_path)} | Size: {file_size_mb:.2f}MB | Duration: {audio.duration.total_seconds():.1f}s")

    return scan_audio(audio, min_silence_ms, threshold_db)


def silence_to_payload(silence: Silence) -> Dict[str, Any]:
    return {
        "start_ms": _to_ms(silence.start),
        "duration_ms": _to_ms(silence.duration),
        "end_ms": _to_ms(silence.end),
        "index_start": silence.index_start,
        "index_end": silence.index_end,
    }


def format_silence(silence: Silence) -> str:
    """Single console line describing a silence."""
    return (f"Start: {_to_ms(silence.start):g} ms, duration: {_to_ms(silence.duration):g} ms, "
            f"index start: {silence.index_start}, index end: {silence.index_end}")
