"""Sample-by-sample IIR filters of fixed order."""


def _values(values, size, name):
    result = [float(v) for v in values]
    if len(result) != size:
        raise ValueError(f"{name} must have {size} values, got {len(result)}")
    return result


class IIRFilter2ndOrder:
    """Second-order IIR filter with initial conditions scaled by the first sample."""

    def __init__(self, a, b, zi):
        self.a = _values(a, 3, "a")
        self.b = _values(b, 3, "b")
        self.zi = _values(zi, 2, "zi")
        self._v1 = 0.0
        self._v2 = 0.0
        self._is_first = True

    def process(self, x):
        """Filter one sample."""
        a, b = self.a, self.b
        if self._is_first:
            self._v1 = self.zi[0] * x
            self._v2 = self.zi[1] * x
            self._is_first = False
        y = (b[0] * x + self._v1) / a[0]
        self._v1 = b[1] * x + self._v2 - a[1] * y
        self._v2 = b[2] * x - a[2] * y
        return y


class IIRFilter4thOrder:
    """Fourth-order transposed direct form II filter; zi is the initial state."""

    def __init__(self, a, b, zi):
        self.a = _values(a, 5, "a")
        self.b = _values(b, 5, "b")
        self.zi = _values(zi, 4, "zi")
        self._state = list(self.zi)

    def process(self, x):
        """Filter one sample; the output is divided by a[0]."""
        a, b, v = self.a, self.b, self._state
        y = b[0] * x + v[0]
        for i in range(3):
            v[i] = b[i + 1] * x + v[i + 1] - a[i + 1] * y
        v[3] = b[4] * x - a[4] * y
        return y / a[0]


class IIRFilter4thOrderScaled:
    """Fourth-order filter whose initial state is zi scaled by the first sample.

    ``zi`` may hold four or five values; a missing fifth value is zero.
    """

    def __init__(self, a, b, zi):
        self.a = _values(a, 5, "a")
        self.b = _values(b, 5, "b")
        zi = [float(v) for v in zi]
        if len(zi) == 4:
            zi.append(0.0)
        self.zi = _values(zi, 5, "zi")
        self._state = [0.0] * 5
        self._is_first = True

    def process(self, x):
        """Filter one sample."""
        a, b, v = self.a, self.b, self._state
        if self._is_first:
            v[:] = [z * x for z in self.zi]
            self._is_first = False
        y = (b[0] * x + v[0]) / a[0]
        for i in range(4):
            v[i] = b[i + 1] * x + v[i + 1] - a[i + 1] * y
        v[4] = b[4] * x - a[4] * y
        return y


class IIRFilter4thOrderCascade:
    """Fourth-order filter computed as a chain of partial outputs.

    The state holds four values; the fifth term in the last stage is zero.
    """

    def __init__(self, a, b, zi):
        self.a = _values(a, 5, "a")
        self.b = _values(b, 5, "b")
        self.zi = _values(zi, 4, "zi")
        self._state = list(self.zi)

    def process(self, x):
        """Filter one sample."""
        a, b = self.a, self.b
        z0, z1, z2, z3 = self._state
        y0 = b[0] * x + z0
        y1 = b[1] * x + b[0] * z0 - a[1] * z1
        y2 = b[2] * x + b[1] * z0 + b[0] * z1 - a[2] * z2
        y3 = b[3] * x + b[2] * z0 + b[1] * z1 + b[0] * z2 - a[3] * z3
        y4 = b[4] * x + b[3] * z0 + b[2] * z1 + b[1] * z2 + b[0] * z3
        self._state = [y0, y1, y2, y3]
        return y4


class IIRFilter8thOrder:
    """Eighth-order transposed direct form II filter; zi is the initial state."""

    def __init__(self, a, b, zi):
        self.a = _values(a, 9, "a")
        self.b = _values(b, 9, "b")
        self.zi = _values(zi, 8, "zi")
        self._state = list(self.zi)

    def process(self, x):
        """Filter one sample; a[0] is taken to be 1."""
        a, b, v = self.a, self.b, self._state
        y = b[0] * x + v[0]
        for i in range(7):
            v[i] = b[i + 1] * x + v[i + 1] - a[i + 1] * y
        v[7] = b[8] * x - a[8] * y
        return y


def default_bandpass():
    """Second-order filter with the built-in pulse-signal coefficients."""
    return IIRFilter2ndOrder(
        a=(1.0, -1.7786317778245846, 0.8008026466657073),
        b=(0.005542717210280682, 0.011085434420561363, 0.005542717210280682),
        zi=(0.9944572827897219, -0.7952599294554288),
    )