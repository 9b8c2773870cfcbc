class SilenceDetectionError(Exception):
    """Base class for every failure raised while detecting silences."""


class UnsupportedSampleWidthError(SilenceDetectionError):
    def __init__(self, bytes_per_sample: int):
        super().__init__(f"Unsupported sample width: {bytes_per_sample} bytes (expected 1, 2 or 4)")
        self.bytes_per_sample = bytes_per_sample


class InvalidFormatError(SilenceDetectionError):
    """Sample rate or channel count cannot describe a PCM stream."""


class UnsupportedEncodingError(SilenceDetectionError):
    """The input file is not a PCM WAVE file."""
