"""Delay-line states for running a second-order section over samples."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SectionCoefficients:
    """Second-order section coefficients normalised so that a0 is 1."""

    b0: float = 1.0
    b1: float = 0.0
    b2: float = 0.0
    a1: float = 0.0
    a2: float = 0.0


class DirectFormI:
    """Direct form I: keeps the last two inputs and outputs."""

    def __init__(self):
        self.reset()

    def reset(self):
        self._x1 = self._x2 = 0.0
        self._y1 = self._y2 = 0.0

    def filter(self, sample, coefficients):
        s = coefficients
        out = (s.b0 * sample + s.b1 * self._x1 + s.b2 * self._x2
               - s.a1 * self._y1 - s.a2 * self._y2)
        self._x2 = self._x1
        self._y2 = self._y1
        self._x1 = sample
        self._y1 = out
        return out


class DirectFormII:
    """Direct form II: keeps two intermediate values."""

    def __init__(self):
        self.reset()

    def reset(self):
        self._v1 = self._v2 = 0.0

    def filter(self, sample, coefficients):
        s = coefficients
        w = sample - s.a1 * self._v1 - s.a2 * self._v2
        out = s.b0 * w + s.b1 * self._v1 + s.b2 * self._v2
        self._v2 = self._v1
        self._v1 = w
        return out


class TransposedDirectFormII:
    """Transposed direct form II: keeps two running partial sums."""

    def __init__(self):
        self.reset()

    def reset(self):
        self._s1 = 0.0
        self._s2 = 0.0

    def filter(self, sample, coefficients):
        s = coefficients
        out = self._s1 + s.b0 * sample
        self._s1 = self._s2 + s.b1 * sample - s.a1 * out
        self._s2 = s.b2 * sample - s.a2 * out
        return out