"""Application constants."""

# Default values
DEFAULT_AUDIO_NAME = "audio"
WAVE_FORMAT = "wav"

# Silence detection
DEFAULT_SILENCE_THRESHOLD_DB = -40
DEFAULT_MIN_SILENCE_MS = 500
SUPPORTED_SAMPLE_WIDTHS = (1, 2, 4)
MILLISECONDS_PER_SECOND = 1000.0
