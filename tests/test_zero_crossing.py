from pulsefilters.zero_crossing import TimedZeroCrossingDetector, ZeroCrossingDetector


def test_first_sample_never_crosses():
    det = ZeroCrossingDetector()
    assert det.process(-5) is False


def test_first_sample_does_not_set_sign():
    det = ZeroCrossingDetector()
    assert [det.process(s) for s in (5, -3)] == [False, False]


def test_falling_crossing_detected():
    det = ZeroCrossingDetector()
    assert [det.process(s) for s in (5, 5, -3, -2, 4, -1)] == [
        False, False, True, False, False, True,
    ]


def test_zero_counts_as_positive():
    det = ZeroCrossingDetector()
    assert [det.process(s) for s in (1, 0, -1)] == [False, False, True]


def test_rising_crossing_ignored():
    det = ZeroCrossingDetector()
    assert [det.process(s) for s in (1, -1, -1, 3)] == [False, False, False, False]


def test_timed_detector_crossing():
    det = TimedZeroCrossingDetector()
    results = [det.process(s, t) for s, t in ((5, 10), (4, 20), (-1, 30))]
    assert results == [False, False, True]


def test_timed_detector_zero_time_stays_unprimed():
    det = TimedZeroCrossingDetector()
    assert det.process(5, 0) is False
    assert det.process(5, 0) is False
    assert det.process(4, 10) is False
    assert det.process(-1, 20) is False
    assert det.process(2, 30) is False
    assert det.process(-2, 40) is True