"""Complex pole/zero pairs and small complex-number helpers."""

import cmath
import math
from dataclasses import dataclass

INFINITY = complex(math.inf, 0.0)


def is_nan(value):
    """True if a real value, or either part of a complex value, is NaN."""
    if isinstance(value, complex):
        return math.isnan(value.real) or math.isnan(value.imag)
    return math.isnan(value)


def addmul(c, v, c1):
    """Return ``c + v * c1`` with ``v`` real, computed part by part."""
    c = complex(c)
    c1 = complex(c1)
    return complex(c.real + v * c1.real, c.imag + v * c1.imag)


def asinh(x):
    """Inverse hyperbolic sine as ``log(x + sqrt(x*x + 1))``."""
    if isinstance(x, complex):
        return cmath.log(x + cmath.sqrt(x * x + 1))
    return math.log(x + math.sqrt(x * x + 1))


@dataclass(frozen=True)
class ComplexPair:
    """A conjugate pair or a pair of reals."""

    first: complex = 0j
    second: complex = 0j

    def __post_init__(self):
        object.__setattr__(self, "first", complex(self.first))
        object.__setattr__(self, "second", complex(self.second))

    @classmethod
    def single(cls, value):
        """A pair holding one real value and zero; complex values are rejected."""
        pair = cls(value, 0j)
        if not pair.is_real():
            raise ValueError("A single complex number needs to be real.")
        return pair

    def is_real(self):
        return self.first.imag == 0 and self.second.imag == 0

    def is_matched_pair(self):
        """True for a conjugate pair, or two reals neither of which is zero."""
        if self.first.imag != 0:
            return self.second == self.first.conjugate()
        return (self.second.imag == 0
                and self.second.real != 0
                and self.first.real != 0)

    def has_nan(self):
        return is_nan(self.first) or is_nan(self.second)


@dataclass(frozen=True)
class PoleZeroPair:
    """Poles and zeros that fit in one second-order section."""

    poles: ComplexPair = ComplexPair()
    zeros: ComplexPair = ComplexPair()

    @classmethod
    def single(cls, pole, zero):
        """A first-order pair: one real pole and one real zero."""
        return cls(ComplexPair.single(pole), ComplexPair.single(zero))

    def is_single_pole(self):
        return self.poles.second == 0 and self.zeros.second == 0

    def has_nan(self):
        return self.poles.has_nan() or self.zeros.has_nan()