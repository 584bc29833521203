"""Polynomials in temperature and the internal-energy polynomial thermo."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping

from .functions import TSTD


@dataclass(frozen=True)
class Polynomial:
    """Polynomial sum(c_i x^i), optionally with a log_coeff*log(x) term."""

    coeffs: tuple[float, ...]
    log_coeff: float = 0.0
    log_active: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "coeffs", tuple(float(c) for c in self.coeffs))
        object.__setattr__(self, "log_coeff", float(self.log_coeff))

    def __len__(self) -> int:
        return len(self.coeffs)

    def value(self, x: float) -> float:
        """Evaluate the polynomial at x."""
        total = 0.0
        power = 1.0
        for c in self.coeffs:
            total += c * power
            power *= x
        if self.log_active:
            total += self.log_coeff * math.log(x)
        return total

    def _require_no_log(self) -> None:
        if self.log_active:
            raise ValueError(
                "Cannot integrate polynomial with logarithmic coefficients"
            )

    def integral(self) -> "Polynomial":
        """Integral with respect to x, with a zero constant; one coefficient longer."""
        self._require_no_log()
        return Polynomial(
            (0.0,) + tuple(c / (i + 1) for i, c in enumerate(self.coeffs))
        )

    def integral_minus1(self) -> "Polynomial":
        """Integral of the polynomial divided by x, with a zero constant."""
        self._require_no_log()
        if not self.coeffs:
            return Polynomial((), 0.0, True)
        rest = tuple(c / i for i, c in enumerate(self.coeffs) if i > 0)
        return Polynomial((0.0,) + rest, self.coeffs[0], True)

    def with_offset(self, delta: float) -> "Polynomial":
        """Copy with delta added to the constant coefficient."""
        if not self.coeffs:
            raise ValueError("Cannot offset an empty polynomial")
        return replace(self, coeffs=(self.coeffs[0] + delta,) + self.coeffs[1:])

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self) != len(other):
            raise ValueError(
                f"Cannot add polynomials of sizes {len(self)} and {len(other)}"
            )
        return Polynomial(
            tuple(a + b for a, b in zip(self.coeffs, other.coeffs)),
            self.log_coeff + other.log_coeff,
            self.log_active or other.log_active,
        )

    def __rmul__(self, s: float) -> "Polynomial":
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Polynomial(
            tuple(s * c for c in self.coeffs),
            s * self.log_coeff,
            self.log_active,
        )


def _read_coeffs(values: Iterable[float], size: int, key: str) -> Polynomial:
    coeffs = tuple(float(v) for v in values)
    if len(coeffs) != size:
        raise ValueError(
            f"{key} expects {size} coefficients, got {len(coeffs)}"
        )
    return Polynomial(coeffs)


@dataclass
class EPolynomialThermo:
    """Thermodynamics with polynomial Cv; e and s polynomials derived from it.

    The derived polynomials are relative to the standard temperature.
    """

    Hf: float
    Sf: float
    Cv_coeffs: Polynomial
    e_coeffs: Polynomial = field(init=False)
    s_coeffs: Polynomial = field(init=False)
    cp_coeff_table: tuple[tuple[float, ...], ...] = field(init=False)

    def __post_init__(self) -> None:
        e = self.Cv_coeffs.integral()
        s = self.Cv_coeffs.integral_minus1()
        self.e_coeffs = e.with_offset(-e.value(TSTD))
        self.s_coeffs = s.with_offset(-s.value(TSTD))
        self.cp_coeff_table = ((1.0,) * 7, (1.0,) * 7)

    @classmethod
    def from_dict(cls, data: Mapping, size: int = 8) -> "EPolynomialThermo":
        thermo = data["thermodynamics"]
        key = f"CvCoeffs<{size}>"
        return cls(
            float(thermo["Hf"]),
            float(thermo["Sf"]),
            _read_coeffs(thermo[key], size, key),
        )

    def to_dict(self) -> dict:
        key = f"CvCoeffs<{len(self.Cv_coeffs)}>"
        return {
            "thermodynamics": {
                "Hf": self.Hf,
                "Sf": self.Sf,
                key: list(self.Cv_coeffs.coeffs),
            }
        }