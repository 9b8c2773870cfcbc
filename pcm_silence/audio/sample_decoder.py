import struct

from pcm_silence.error.silence_error import UnsupportedSampleWidthError

# 8-bit PCM is unsigned and centred on this value
UNSIGNED_8BIT_CENTER = 128

_SIGNED_LITTLE_ENDIAN = {
    2: struct.Struct("<h"),
    4: struct.Struct("<i"),
}


def decode_sample(buffer, index: int, bytes_per_sample: int) -> float:
    """
    Decode the sample at `index` (counted in samples, not bytes) as a raw amplitude.

    8-bit samples are unsigned and shifted to be centred on zero; 16 and 32-bit
    samples are read as little-endian signed integers. The value is not normalised.
    """
    if bytes_per_sample == 1:
        return float(buffer[index] - UNSIGNED_8BIT_CENTER)

    sample_struct = _SIGNED_LITTLE_ENDIAN.get(bytes_per_sample)
    if sample_struct is None:
        raise UnsupportedSampleWidthError(bytes_per_sample)

    return float(sample_struct.unpack_from(buffer, index * bytes_per_sample)[0])
