"""Biquad section with direct-form-I state and a second-order band-pass design."""

import math
from dataclasses import dataclass, field


@dataclass
class BiquadCoefficients:
    """Feed-forward terms a0..a2, feedback terms b1, b2 and the c0/d0 mix terms."""

    a0: float = 0.0
    a1: float = 0.0
    a2: float = 0.0
    b1: float = 0.0
    b2: float = 0.0
    c0: float = 0.0
    d0: float = 0.0


@dataclass
class Biquad:
    """Second-order section: y = a0*x + a1*x1 + a2*x2 - b1*y1 - b2*y2, plus offset."""

    coefficients: BiquadCoefficients = field(default_factory=BiquadCoefficients)
    offset: float = 0.0
    _x1: float = field(default=0.0, init=False, repr=False)
    _x2: float = field(default=0.0, init=False, repr=False)
    _y1: float = field(default=0.0, init=False, repr=False)
    _y2: float = field(default=0.0, init=False, repr=False)

    def process(self, sample):
        """Filter one sample and return the output with the offset added."""
        c = self.coefficients
        y = (c.a0 * sample + c.a1 * self._x1 + c.a2 * self._x2
             - c.b1 * self._y1 - c.b2 * self._y2)
        self._x2 = self._x1
        self._x1 = sample
        self._y2 = self._y1
        self._y1 = y
        return y + self.offset


def band_pass_coefficients(q, fc, fs):
    """Coefficients of a second-order band-pass centred on ``fc`` at sample rate ``fs``.

    ``q`` controls the width of the peak (1 / bandwidth).
    """
    w = 2.0 * math.pi * fc / fs
    t = math.tan(w / (2.0 * q))
    beta = 0.5 * ((1.0 - t) / (1.0 + t))
    gamma = (0.5 + beta) * math.cos(w)
    return BiquadCoefficients(
        a0=0.5 - beta,
        a1=0.0,
        a2=-(0.5 - beta),
        b1=-2.0 * gamma,
        b2=2.0 * beta,
    )