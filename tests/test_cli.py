import json
import struct

from pcm_silence.cli import main, parse_args
from pcm_silence.config.settings import settings


def _speech(write_wave) -> str:
    frames = bytes([0x78, 0x78, 0x80, 0x78])
    return write_wave(frames, sample_rate=4, sample_width=1)


def test_parse_args_defaults_come_from_settings():
    args = parse_args(["-i", "audio.wav"])

    assert args.input_file == "audio.wav"
    assert args.min_silence_ms == settings.MIN_SILENCE_MS
    assert args.threshold_db == settings.SILENCE_THRESHOLD_DB
    assert args.as_json is False


def test_main_prints_silences(write_wave, capsys):
    exit_code = main(["-i", _speech(write_wave), "-s", "200", "-t", "-40"])

    out = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert out == [
        "SampleRate: 4, Channels: 1, BitsPerSample: 8",
        "Buffer length: 4",
        "Start: 500 ms, duration: 250 ms, index start: 2, index end: 2",
    ]


def test_main_prints_json(write_wave, capsys):
    samples = [0] * 3 + [9000] * 3
    path = write_wave(struct.pack("<6h", *samples), sample_rate=1000, sample_width=2)

    exit_code = main(["-i", path, "-s", "2", "--json"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [{
        "start_ms": 0.0,
        "duration_ms": 3.0,
        "end_ms": 3.0,
        "index_start": 0,
        "index_end": 5,
    }]


def test_main_reports_errors(tmp_path, capsys):
    path = tmp_path / "fake.wav"
    path.write_bytes(b"fake audio data")

    exit_code = main(["-i", str(path)])

    assert exit_code == 1
    assert "Only PCM WAVE" in capsys.readouterr().err


def test_main_reports_missing_file(tmp_path, capsys):
    exit_code = main(["-i", str(tmp_path / "missing.wav")])

    assert exit_code == 1
    assert "error:" in capsys.readouterr().err
