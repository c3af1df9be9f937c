import pytest

from pulsefilters.iir import (
    IIRFilter2ndOrder,
    IIRFilter4thOrder,
    IIRFilter4thOrderCascade,
    IIRFilter4thOrderScaled,
    IIRFilter8thOrder,
    default_bandpass,
)

SIGNAL = [3.0, -1.5, 4.0, 0.25, -2.0, 7.5, 1.0, -0.5, 2.0, 6.0]


def _run(filt, samples):
    return [filt.process(x) for x in samples]


def _unit(size, index):
    values = [0.0] * size
    values[index] = 1.0
    return values


def test_second_order_identity():
    filt = IIRFilter2ndOrder([1, 0, 0], [1, 0, 0], [0, 0])
    assert _run(filt, SIGNAL) == SIGNAL


def test_second_order_normalises_by_a0():
    filt = IIRFilter2ndOrder([2, 0, 0], [2, 0, 0], [0, 0])
    assert _run(filt, SIGNAL) == pytest.approx(SIGNAL)


def test_second_order_delay():
    filt = IIRFilter2ndOrder([1, 0, 0], [0, 0, 1], [0, 0])
    assert _run(filt, SIGNAL) == [0.0, 0.0] + SIGNAL[:-2]


def test_second_order_linear_with_scaled_initial_state():
    a, b, zi = [1, -0.5, 0.2], [0.3, 0.1, 0.4], [0.7, -0.2]
    base = _run(IIRFilter2ndOrder(a, b, zi), SIGNAL)
    scaled = _run(IIRFilter2ndOrder(a, b, zi), [3 * x for x in SIGNAL])
    assert scaled == pytest.approx([3 * y for y in base])


def test_second_order_rejects_wrong_length():
    with pytest.raises(ValueError):
        IIRFilter2ndOrder([1, 0], [1, 0, 0], [0, 0])


def test_default_bandpass_steady_state():
    filt = default_bandpass()
    outputs = _run(filt, [1000.0] * 200)
    assert outputs == pytest.approx([1000.0] * 200, rel=1e-6)


@pytest.mark.parametrize("delay", range(5))
def test_fourth_order_delay(delay):
    filt = IIRFilter4thOrder(_unit(5, 0), _unit(5, delay), [0] * 4)
    assert _run(filt, SIGNAL) == [0.0] * delay + SIGNAL[: len(SIGNAL) - delay]


def test_fourth_order_initial_state_decays_out():
    filt = IIRFilter4thOrder(_unit(5, 0), _unit(5, 0), [1.0, 2.0, 3.0, 4.0])
    outputs = _run(filt, [0.0] * 6)
    assert outputs == [1.0, 2.0, 3.0, 4.0, 0.0, 0.0]


def test_fourth_order_rejects_wrong_zi():
    with pytest.raises(ValueError):
        IIRFilter4thOrder(_unit(5, 0), _unit(5, 0), [0] * 5)


@pytest.mark.parametrize("delay", range(4))
def test_scaled_delay(delay):
    filt = IIRFilter4thOrderScaled(_unit(5, 0), _unit(5, delay), [0] * 4)
    assert _run(filt, SIGNAL) == [0.0] * delay + SIGNAL[: len(SIGNAL) - delay]


def test_scaled_linear():
    a = [1, -0.3, 0.1, 0.05, -0.02]
    b = [0.2, 0.1, 0.3, -0.1, 0.05]
    zi = [0.4, -0.2, 0.1, 0.3, 0.0]
    base = _run(IIRFilter4thOrderScaled(a, b, zi), SIGNAL)
    scaled = _run(IIRFilter4thOrderScaled(a, b, zi), [-2 * x for x in SIGNAL])
    assert scaled == pytest.approx([-2 * y for y in base])


def test_scaled_accepts_four_or_five_initial_values():
    a = [1, -0.3, 0.1, 0.05, -0.02]
    b = [0.2, 0.1, 0.3, -0.1, 0.05]
    four = _run(IIRFilter4thOrderScaled(a, b, [0.4, -0.2, 0.1, 0.3]), SIGNAL)
    five = _run(IIRFilter4thOrderScaled(a, b, [0.4, -0.2, 0.1, 0.3, 0.0]), SIGNAL)
    assert four == five


def test_scaled_rejects_bad_zi():
    with pytest.raises(ValueError):
        IIRFilter4thOrderScaled(_unit(5, 0), _unit(5, 0), [0] * 3)


def test_cascade_identity():
    filt = IIRFilter4thOrderCascade([1, 0, 0, 0, 0], _unit(5, 4), [0] * 4)
    assert _run(filt, SIGNAL) == SIGNAL


def test_cascade_linear_with_zero_state():
    a = [1, 0.2, -0.1, 0.05, 0.01]
    b = [0.1, 0.2, 0.3, 0.2, 0.1]
    base = _run(IIRFilter4thOrderCascade(a, b, [0] * 4), SIGNAL)
    scaled = _run(IIRFilter4thOrderCascade(a, b, [0] * 4), [4 * x for x in SIGNAL])
    assert scaled == pytest.approx([4 * y for y in base])


def test_cascade_rejects_wrong_length():
    with pytest.raises(ValueError):
        IIRFilter4thOrderCascade([1, 0, 0], _unit(5, 4), [0] * 4)


@pytest.mark.parametrize("delay", [0, 3, 8])
def test_eighth_order_delay(delay):
    filt = IIRFilter8thOrder(_unit(9, 0), _unit(9, delay), [0] * 8)
    assert _run(filt, SIGNAL) == [0.0] * delay + SIGNAL[: len(SIGNAL) - delay]


def test_eighth_order_rejects_wrong_length():
    with pytest.raises(ValueError):
        IIRFilter8thOrder(_unit(9, 0), _unit(9, 0), [0] * 9)