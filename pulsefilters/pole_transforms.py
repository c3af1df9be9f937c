"""Bilinear transforms that map an analog pole/zero layout to a digital one.

An analog prototype (a half-band low pass in the s-plane) is turned into a
digital low pass, high pass, band pass or band stop layout in the z-plane.
"""

import cmath
import math

from .complex_types import INFINITY, ComplexPair, addmul

_CUTOFF_ERROR = "The cutoff frequency needs to be below the Nyquist frequency."
_CUTOFF_NEGATIVE = "Cutoff frequency is negative."


def _check_cutoff(fc):
    if not fc < 0.5:
        raise ValueError(_CUTOFF_ERROR)
    if fc < 0.0:
        raise ValueError(_CUTOFF_NEGATIVE)


def _band_edges(fc, fw):
    ww = 2 * math.pi * fw
    wc2 = 2 * math.pi * fc - ww / 2
    wc = wc2 + ww
    wc2 = max(wc2, 1e-8)
    wc = min(wc, math.pi - 1e-8)
    return wc, wc2


def _sqrt_or_nan(value):
    return math.sqrt(value) if value >= 0 else math.nan


def _copy_mapped(digital, analog, transform):
    """Map each analog pair with ``transform`` into ``digital``, one-to-one."""
    digital.reset()
    num_poles = analog.num_poles
    pairs = num_poles // 2
    for i in range(pairs):
        pair = analog[i]
        digital.add_pole_zero_conjugate_pairs(
            transform(pair.poles.first), transform(pair.zeros.first)
        )
    if num_poles & 1:
        pair = analog[pairs]
        digital.add(transform(pair.poles.first), transform(pair.zeros.first))


class LowPassTransform:
    """Low pass to low pass at normalised cutoff ``fc`` (0 <= fc < 0.5)."""

    def __init__(self, fc):
        _check_cutoff(fc)
        self.fc = fc
        self.f = math.tan(math.pi * fc)

    def _transform(self, c):
        if c == INFINITY:
            return complex(-1, 0)
        c = self.f * complex(c)
        return (1.0 + c) / (1.0 - c)

    def apply(self, digital, analog):
        """Fill ``digital`` with the transformed poles and zeros of ``analog``."""
        _copy_mapped(digital, analog, self._transform)
        digital.set_normal(analog.normal_w, analog.normal_gain)
        return digital


class HighPassTransform:
    """Low pass to high pass at normalised cutoff ``fc`` (0 <= fc < 0.5)."""

    def __init__(self, fc):
        _check_cutoff(fc)
        self.fc = fc
        self.f = 1.0 / math.tan(math.pi * fc)

    def _transform(self, c):
        if c == INFINITY:
            return complex(1, 0)
        c = self.f * complex(c)
        return -(1.0 + c) / (1.0 - c)

    def apply(self, digital, analog):
        """Fill ``digital`` with the transformed poles and zeros of ``analog``."""
        _copy_mapped(digital, analog, self._transform)
        digital.set_normal(math.pi - analog.normal_w, analog.normal_gain)
        return digital


class BandPassTransform:
    """Low pass to band pass centred on ``fc`` with width ``fw``, both normalised."""

    def __init__(self, fc, fw):
        _check_cutoff(fc)
        self.fc = fc
        self.fw = fw
        self.wc, self.wc2 = _band_edges(fc, fw)
        self.a = (math.cos((self.wc + self.wc2) * 0.5)
                  / math.cos((self.wc - self.wc2) * 0.5))
        self.b = 1 / math.tan((self.wc - self.wc2) * 0.5)
        self._a2 = self.a * self.a
        self._b2 = self.b * self.b
        self._ab_2 = 2 * self.a * self.b

    def _transform(self, c):
        if c == INFINITY:
            return ComplexPair(-1, 1)
        c = complex(c)
        c = (1.0 + c) / (1.0 - c)
        a2, b2, b, ab_2 = self._a2, self._b2, self.b, self._ab_2

        v = addmul(0j, 4 * (b2 * (a2 - 1) + 1), c)
        v += 8 * (b2 * (a2 - 1) - 1)
        v *= c
        v += 4 * (b2 * (a2 - 1) + 1)
        v = cmath.sqrt(v)

        u = addmul(-v, ab_2, c) + ab_2
        v = addmul(v, ab_2, c) + ab_2
        d = addmul(0j, 2 * (b - 1), c) + 2 * (1 + b)
        return ComplexPair(u / d, v / d)

    def apply(self, digital, analog):
        """Fill ``digital`` with twice as many poles as ``analog`` holds."""
        digital.reset()
        num_poles = analog.num_poles
        pairs = num_poles // 2
        for i in range(pairs):
            pair = analog[i]
            p = self._transform(pair.poles.first)
            z = self._transform(pair.zeros.first)
            digital.add_pole_zero_conjugate_pairs(p.first, z.first)
            digital.add_pole_zero_conjugate_pairs(p.second, z.second)
        if num_poles & 1:
            poles = self._transform(analog[pairs].poles.first)
            zeros = self._transform(analog[pairs].zeros.first)
            digital.add_pairs(poles, zeros)

        wn = analog.normal_w
        product = (math.tan((self.wc + wn) * 0.5)
                   * math.tan((self.wc2 + wn) * 0.5))
        digital.set_normal(2 * math.atan(_sqrt_or_nan(product)),
                           analog.normal_gain)
        return digital


class BandStopTransform:
    """Low pass to band stop centred on ``fc`` with width ``fw``, both normalised."""

    def __init__(self, fc, fw):
        _check_cutoff(fc)
        self.fc = fc
        self.fw = fw
        self.wc, self.wc2 = _band_edges(fc, fw)
        self.a = (math.cos((self.wc + self.wc2) * 0.5)
                  / math.cos((self.wc - self.wc2) * 0.5))
        self.b = math.tan((self.wc - self.wc2) * 0.5)
        self._a2 = self.a * self.a
        self._b2 = self.b * self.b

    def _transform(self, c):
        if c == INFINITY:
            c = complex(-1, 0)
        else:
            c = complex(c)
            c = (1.0 + c) / (1.0 - c)
        a, b, a2, b2 = self.a, self.b, self._a2, self._b2

        u = addmul(0j, 4 * (b2 + a2 - 1), c)
        u += 8 * (b2 - a2 + 1)
        u *= c
        u += 4 * (a2 + b2 - 1)
        u = cmath.sqrt(u)

        v = addmul(u * -0.5 + a, -a, c)
        u = addmul(u * 0.5 + a, -a, c)
        d = addmul(complex(b + 1), b - 1, c)
        return ComplexPair(u / d, v / d)

    def apply(self, digital, analog):
        """Fill ``digital`` with twice as many poles as ``analog`` holds."""
        digital.reset()
        num_poles = analog.num_poles
        pairs = num_poles // 2
        for i in range(pairs):
            pair = analog[i]
            p = self._transform(pair.poles.first)
            z = self._transform(pair.zeros.first)
            z_second = z.second
            if z_second == z.first:
                z_second = z.first.conjugate()
            digital.add_pole_zero_conjugate_pairs(p.first, z.first)
            digital.add_pole_zero_conjugate_pairs(p.second, z_second)
        if num_poles & 1:
            poles = self._transform(analog[pairs].poles.first)
            zeros = self._transform(analog[pairs].zeros.first)
            digital.add_pairs(poles, zeros)

        normal_w = math.pi if self.fc < 0.25 else 0.0
        digital.set_normal(normal_w, analog.normal_gain)
        return digital


def pole_zeros(layout):
    """Return the pole/zero pairs held by ``layout`` as a list."""
    return [layout.pair(i) for i in range(len(layout))]