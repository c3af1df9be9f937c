"""Detectors for positive-to-negative zero crossings in a sample stream."""


class ZeroCrossingDetector:
    """Reports when a sample goes negative after a non-negative one.

    The first sample only primes the detector.
    """

    def __init__(self):
        self._last_sample = 0
        self._last_was_positive = False
        self._is_first = True

    def process(self, sample):
        """Feed a sample; return True on a falling zero crossing."""
        if self._is_first:
            self._last_sample = sample
            self._is_first = False
            return False
        crossed = self._last_was_positive and sample < 0
        self._last_was_positive = sample >= 0
        self._last_sample = sample
        return crossed


class TimedZeroCrossingDetector:
    """Zero-crossing detector that treats a zero last sample time as unprimed."""

    def __init__(self):
        self._last_sample = 0
        self._last_sample_time = 0
        self._last_was_positive = False

    def process(self, sample, sample_time):
        """Feed a timestamped sample; return True on a falling zero crossing."""
        if self._last_sample_time == 0:
            self._last_sample = sample
            self._last_sample_time = sample_time
            return False
        crossed = self._last_was_positive and sample < 0
        self._last_was_positive = sample >= 0
        self._last_sample = sample
        self._last_sample_time = sample_time
        return crossed