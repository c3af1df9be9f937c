"""Pole/zero layout of a filter with its normalisation point."""

from .complex_types import ComplexPair, PoleZeroPair, is_nan

_ORDER_TOO_HIGH = "Requested order is too high. Provide a higher order for the template."


class Layout:
    """Poles and zeros grouped in pairs, plus the gain to reach at a frequency."""

    def __init__(self, max_poles):
        if max_poles < 0:
            raise ValueError("max_poles must not be negative")
        self._max_poles = max_poles
        self._pairs = [PoleZeroPair() for _ in range((max_poles + 1) // 2)]
        self._num_poles = 0
        self.normal_w = 0.0
        self.normal_gain = 1.0

    @property
    def num_poles(self):
        return self._num_poles

    @property
    def max_poles(self):
        return self._max_poles

    def reset(self):
        """Forget all poles; storage and normalisation are kept."""
        self._num_poles = 0

    def _check_can_add(self):
        if self._num_poles & 1:
            raise ValueError("Can't add 2nd order after a 1st order filter.")
        if self._num_poles // 2 >= len(self._pairs):
            raise ValueError(_ORDER_TOO_HIGH)

    @staticmethod
    def _check_not_nan(pole, zero):
        if is_nan(complex(pole)):
            raise ValueError("Pole to add is NaN.")
        if is_nan(complex(zero)):
            raise ValueError("Zero to add is NaN.")

    def add(self, pole, zero):
        """Add a single real pole and zero."""
        self._check_can_add()
        self._check_not_nan(pole, zero)
        self._pairs[self._num_poles // 2] = PoleZeroPair.single(pole, zero)
        self._num_poles += 1

    def add_pole_zero_conjugate_pairs(self, pole, zero):
        """Add a pole and a zero together with their conjugates."""
        self._check_can_add()
        self._check_not_nan(pole, zero)
        pole = complex(pole)
        zero = complex(zero)
        self._pairs[self._num_poles // 2] = PoleZeroPair(
            ComplexPair(pole, pole.conjugate()),
            ComplexPair(zero, zero.conjugate()),
        )
        self._num_poles += 2

    def add_pairs(self, poles, zeros):
        """Add a matched pair of poles and a matched pair of zeros."""
        self._check_can_add()
        if not poles.is_matched_pair():
            raise ValueError("Poles not complex conjugate.")
        if not zeros.is_matched_pair():
            raise ValueError("Zeros not complex conjugate.")
        self._pairs[self._num_poles // 2] = PoleZeroPair(poles, zeros)
        self._num_poles += 2

    def pair(self, index):
        """Return the pole/zero pair at ``index``."""
        if index < 0 or index >= (self._num_poles + 1) // 2:
            raise IndexError("Pair index out of bounds.")
        return self._pairs[index]

    def __getitem__(self, index):
        return self.pair(index)

    def __len__(self):
        return (self._num_poles + 1) // 2

    def set_normal(self, w, gain):
        """Set the normalisation frequency and the gain wanted there."""
        self.normal_w = w
        self.normal_gain = gain