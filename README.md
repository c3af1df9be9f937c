# pulsefilters

Small, dependency-free building blocks for processing pulse sensor signals
one sample at a time, plus readers for the log files such sensors produce.

## What is inside

- `pulsefilters.iir`: streaming IIR filters of fixed order.
  - `IIRFilter2ndOrder(a, b, zi)`: initial state is `zi` scaled by the first
    sample.
  - `IIRFilter4thOrder(a, b, zi)`: transposed direct form II, `zi` is the
    initial state, output divided by `a[0]`.
  - `IIRFilter4thOrderScaled(a, b, zi)`: initial state is `zi` (four or five
    values) scaled by the first sample.
  - `IIRFilter4thOrderCascade(a, b, zi)`: output built from a chain of
    partial outputs.
  - `IIRFilter8thOrder(a, b, zi)`: transposed direct form II with `a[0]`
    taken as 1.
  - `default_bandpass()`: an `IIRFilter2ndOrder` with built-in band-pass
    coefficients for a pulse signal.

  Coefficient lists of the wrong length raise `ValueError`.
- `pulsefilters.biquad`: `Biquad`, a direct-form-I section with an output
  `offset`, its `BiquadCoefficients`, and `band_pass_coefficients(q, fc, fs)`
  for a second-order band-pass.
- `pulsefilters.state`: `DirectFormI`, `DirectFormII` and
  `TransposedDirectFormII` delay-line states, each with `reset()` and
  `filter(sample, coefficients)`, driven by `SectionCoefficients`
  (`b0`, `b1`, `b2`, `a1`, `a2`, with `a0` taken as 1).
- `pulsefilters.complex_types`: `ComplexPair`, `PoleZeroPair` and the helpers
  `is_nan`, `addmul`, `asinh`.
- `pulsefilters.layout`: `Layout(max_poles)`, a pole/zero layout with
  `add`, `add_pole_zero_conjugate_pairs`, `add_pairs`, `pair`, `reset` and a
  normalisation point set with `set_normal`.
- `pulsefilters.pole_transforms`: `LowPassTransform`, `HighPassTransform`,
  `BandPassTransform` and `BandStopTransform`, which map an analog `Layout`
  into a digital one with `apply(digital, analog)`, and `pole_zeros(layout)`.
  A cutoff at or above 0.5, or below 0, raises `ValueError`.
- `pulsefilters.zero_crossing`: `ZeroCrossingDetector` and
  `TimedZeroCrossingDetector`, which report a sample going negative after a
  non-negative one.
- `pulsefilters.hrm_log`: readers for device log files:
  `find_latest_log_file(directory)`, `read_service_samples(path)` (returns an
  `HRMServiceData`), `read_sensor_samples(path)` and `read_heart_rates(path)`
  (each returns `(timestamps, values)`).

## Installation

```
pip install .
```

## Examples

Band-pass a logged sensor stream and count falling zero crossings:

```python
from pulsefilters.hrm_log import find_latest_log_file, read_sensor_samples
from pulsefilters.iir import default_bandpass
from pulsefilters.zero_crossing import ZeroCrossingDetector

timestamps, values = read_sensor_samples(find_latest_log_file("logs"))

bandpass = default_bandpass()
crossings = ZeroCrossingDetector()
crossing_times = [
    t for t, raw in zip(timestamps, values)
    if crossings.process(int(bandpass.process(raw)))
]
print(len(crossing_times), "crossings")
```

Turn a one-pole analog prototype into a digital low pass:

```python
from pulsefilters.complex_types import INFINITY
from pulsefilters.layout import Layout
from pulsefilters.pole_transforms import LowPassTransform, pole_zeros

analog = Layout(1)
analog.add(-1.0, INFINITY)

digital = LowPassTransform(0.1).apply(Layout(1), analog)
for pair in pole_zeros(digital):
    print(pair.poles.first, pair.zeros.first)
```

## What it does not do

The package filters samples, detects zero crossings and reads logs. It does
not track beat frequency, predict the time of the next peak, estimate a
heart rate with a confidence figure, or provide a PID controller or moving
average. It has no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```