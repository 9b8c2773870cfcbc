import argparse
import json
import logging
import sys
from typing import List, Optional

from pcm_silence.config.logging_config import setup_logging
from pcm_silence.config.settings import settings
from pcm_silence.detector import format_silence, scan_audio, silence_to_payload
from pcm_silence.error.silence_error import SilenceDetectionError
from pcm_silence.io.wave_reader import read_pcm_wave

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Detect silence ranges in a PCM WAVE file."
    )
    parser.add_argument(
        '-i', '--input', dest='input_file', required=True,
        help="Input PCM WAVE file path."
    )
    parser.add_argument(
        '-s', '--min-silence', dest='min_silence_ms', type=int, default=settings.MIN_SILENCE_MS,
        help="Minimum silence duration in milliseconds."
    )
    parser.add_argument(
        '-t', '--threshold', dest='threshold_db', type=int, default=settings.SILENCE_THRESHOLD_DB,
        help="Silence threshold in dB."
    )
    parser.add_argument(
        '-j', '--json', dest='as_json', action='store_true',
        help="Print silences as JSON."
    )
    parser.add_argument(
        '-d', '--debug', dest='debug', action='store_true',
        help="Enable debug logging."
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.debug else settings.LOG_LEVEL)

    try:
        audio = read_pcm_wave(args.input_file)
        silences = scan_audio(
            audio,
            min_silence_ms=args.min_silence_ms,
            threshold_db=args.threshold_db,
        )
    except (SilenceDetectionError, OSError) as e:
        logger.error(f"Silence detection failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.as_json:
        print(json.dumps([silence_to_payload(s) for s in silences], indent=2))
        return 0

    print(f"SampleRate: {audio.sample_rate}, Channels: {audio.channels}, "
          f"BitsPerSample: {audio.bytes_per_sample * 8}")
    print(f"Buffer length: {len(audio.frames)}")
    for silence in silences:
        print(format_silence(silence))
    return 0


if __name__ == "__main__":
    sys.exit(main())
