"""Second-order high pass filter applied to the APU output."""

from __future__ import annotations

import math

_Q = 1.0 / math.sqrt(2.0)


class HighPassFilter:
    """Biquad high pass filter with Q = 1/sqrt(2) (no resonance peak).

    Until a cutoff is set the filter passes samples through unchanged.
    """

    def __init__(self) -> None:
        self._b0 = 1.0
        self._b1 = 0.0
        self._b2 = 0.0
        self._a1 = 0.0
        self._a2 = 0.0
        self._yz1 = 0.0
        self._yz2 = 0.0
        self._xz1 = 0.0
        self._xz2 = 0.0

    def set_cutoff(self, fc: float, fs: float) -> None:
        """Compute coefficients for cutoff ``fc`` at sample rate ``fs``."""
        k = math.tan(math.pi * fc / fs)
        norm = 1.0 / (1.0 + k / _Q + k * k)
        self._b0 = norm
        self._b1 = -2.0 * self._b0
        self._b2 = self._b0
        self._a1 = 2.0 * (k * k - 1.0) * norm
        self._a2 = (1.0 - k / _Q + k * k) * norm

    def process(self, x0: float) -> float:
        """Filter one sample and return the output."""
        y0 = (
            self._b0 * x0
            + self._b1 * self._xz1
            + self._b2 * self._xz2
            - self._a1 * self._yz1
            - self._a2 * self._yz2
        )
        self._yz2 = self._yz1
        self._yz1 = y0
        self._xz2 = self._xz1
        self._xz1 = x0
        return y0