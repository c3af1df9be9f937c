"""Readers for heart-rate monitor device log files."""

import re
from dataclasses import dataclass, field
from pathlib import Path

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_int(text):
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer at start of {text!r}")
    return int(match.group(1))


def _leading_float(text):
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at start of {text!r}")
    return float(match.group(1))


def _value_after(words, key):
    try:
        return words[words.index(key) + 1]
    except (ValueError, IndexError):
        raise ValueError(f"no value for {key!r} in line") from None


def _bracketed_time(word):
    return _leading_int(word[1:-1])


def _lines(path):
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            yield line.rstrip("\r\n")


@dataclass
class HRMServiceData:
    """Per-sample values from service log lines; timestamps start at zero."""

    timestamps: list = field(default_factory=list)
    red_led_adc_values: list = field(default_factory=list)
    lpf: list = field(default_factory=list)
    hpf: list = field(default_factory=list)
    zero_crossings: list = field(default_factory=list)


def find_latest_log_file(directory):
    """Return the path of the most recently modified ``.log`` file in ``directory``."""
    logs = [p for p in Path(directory).iterdir() if p.suffix == ".log"]
    if not logs:
        raise FileNotFoundError(f"No log files found in {directory}")
    return str(max(logs, key=lambda p: p.stat().st_mtime))


def read_service_samples(path):
    """Read lines such as ``... service ms 42710 red 27935 lpf 27905.8 hpf 233.1 z 0``."""
    data = HRMServiceData()
    first_time_ms = 0
    for line in _lines(path):
        if "service ms" not in line:
            continue
        words = line.split(" ")
        line_time_ms = _leading_int(words[5])
        red = _leading_int(words[7])
        lpf = _leading_float(words[9])
        hpf = _leading_float(words[11])
        zero_crossing = _leading_int(words[13])

        if first_time_ms == 0:
            first_time_ms = line_time_ms

        data.timestamps.append(line_time_ms - first_time_ms)
        data.red_led_adc_values.append(red)
        data.lpf.append(int(lpf))
        data.hpf.append(int(hpf))
        data.zero_crossings.append(zero_crossing)
    return data


def read_sensor_samples(path):
    """Read sensor lines carrying ``samples {"s":[...]}``.

    Returns ``(timestamps, values)``; timestamps are relative to the first
    line with samples and spread by the reported sample rate.
    """
    timestamps = []
    values = []
    first_time_ms = 0
    for line in _lines(path):
        if "samples" not in line:
            continue
        words = line.split(" ")
        line_time_ms = _bracketed_time(words[1])
        sample_rate = _leading_float(_value_after(words, "sampleRate"))
        num_samples = _leading_int(_value_after(words, "numSamples"))
        if num_samples == 0:
            continue

        samples_json = _value_after(words, "samples")
        samples = samples_json[6:len(samples_json) - 1].split(",")

        if first_time_ms == 0:
            first_time_ms = line_time_ms
        line_start_ms = line_time_ms - first_time_ms
        for i, text in enumerate(samples):
            values.append(_leading_int(text))
            timestamps.append(int(line_start_ms + (i / sample_rate) * 1000))
    return timestamps, values


def read_heart_rates(path):
    """Read ``service HR`` lines; returns ``(timestamps, rates_bpm)``."""
    timestamps = []
    rates = []
    for line in _lines(path):
        if "service HR" not in line:
            continue
        words = line.split(" ")
        timestamps.append(_bracketed_time(words[1]))
        rates.append(int(_leading_float(words[5]) * 60))
    return timestamps, rates