import pytest

from pcm_silence.audio.sample_decoder import decode_sample
from pcm_silence.error.silence_error import UnsupportedSampleWidthError


@pytest.mark.parametrize("raw, expected", [
    (0x80, 0.0),
    (0x00, -128.0),
    (0xFF, 127.0),
    (0x78, -8.0),
])
def test_decode_8bit_is_centred_on_zero(raw, expected):
    assert decode_sample(bytes([raw]), 0, 1) == expected


def test_decode_16bit_little_endian_signed():
    buffer = bytes([0xFF, 0x7F, 0x00, 0x80, 0x88, 0x78])
    assert decode_sample(buffer, 0, 2) == 32767.0
    assert decode_sample(buffer, 1, 2) == -32768.0
    assert decode_sample(buffer, 2, 2) == float(0x7888)


def test_decode_32bit_little_endian_signed():
    buffer = bytes([0x00, 0x00, 0x00, 0x80, 0x01, 0x00, 0x00, 0x00])
    assert decode_sample(buffer, 0, 4) == -2147483648.0
    assert decode_sample(buffer, 1, 4) == 1.0


def test_decode_reads_from_memoryview():
    view = memoryview(bytearray([0x00, 0x00, 0x10, 0x00]))
    assert decode_sample(view, 1, 2) == 16.0


@pytest.mark.parametrize("width", [0, 3, 8])
def test_decode_unsupported_width_raises(width):
    with pytest.raises(UnsupportedSampleWidthError) as exc_info:
        decode_sample(bytes(16), 0, width)
    assert exc_info.value.bytes_per_sample == width
