"""Perfect gas evaluated at a constant reference pressure."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

RR = 8314.47
"""Universal gas constant [J/kmol/K]."""

_SMALL = 1.0e-15
_VSMALL = 1.0e-300


def _no_departure(p: float, T: float) -> float:
    """Departure of a pressure-independent density: zero for any finite state."""
    if math.isfinite(p) and math.isfinite(T):
        return 0.0
    return math.nan


class ReferencePressureMismatch(ValueError):
    """Raised when gases with different reference pressures are combined."""


@dataclass(frozen=True)
class IncompressiblePerfectGas:
    """Perfect gas whose density varies only with temperature and composition.

    W is the molecular weight [kg/kmol] and Y the mass fraction of the specie.
    """

    p_ref: float
    W: float
    Y: float = 1.0
    name: str = ""

    incompressible: ClassVar[bool] = True
    isochoric: ClassVar[bool] = False

    def R(self) -> float:
        """Specific gas constant [J/kg/K]."""
        return RR / self.W

    def rho(self, p: float, T: float) -> float:
        """Density [kg/m^3]."""
        return self.p_ref / (self.R() * T)

    def H(self, p: float, T: float) -> float:
        """Enthalpy contribution [J/kg]."""
        return p / self.rho(p, T)

    def dHdT(self, p: float, T: float) -> float:
        """Temperature derivative of the enthalpy departure [J/kg/K]."""
        return _no_departure(p, T)

    def Cp(self, p: float, T: float) -> float:
        """Cp contribution [J/kg/K]."""
        return _no_departure(p, T)

    def E(self, p: float, T: float) -> float:
        """Internal energy contribution [J/kg]."""
        return _no_departure(p, T)

    def Cv(self, p: float, T: float) -> float:
        """Cv contribution [J/kg/K]."""
        return _no_departure(p, T)

    def Sp(self, p: float, T: float) -> float:
        """Entropy contribution to the integral of Cp/T [J/kg/K]."""
        return _no_departure(p, T)

    def Sv(self, p: float, T: float) -> float:
        """Entropy contribution to the integral of Cv/T [J/kg/K]."""
        return _no_departure(p, T)

    def psi(self, p: float, T: float) -> float:
        """Compressibility [s^2/m^2]."""
        return _no_departure(p, T)

    def Z(self, p: float, T: float) -> float:
        """Compression factor []."""
        return _no_departure(p, T)

    def CpMCv(self, p: float, T: float) -> float:
        """Cp - Cv [J/kg/K]."""
        return _no_departure(p, T)

    def check_compatible(self, other: "IncompressiblePerfectGas") -> None:
        """Raise if the two gases do not share a reference pressure."""
        if abs(self.p_ref - other.p_ref) > _VSMALL:
            raise ReferencePressureMismatch(
                f"pRef {self.p_ref} for {self.name or 'others'}"
                f" != {other.p_ref} for {other.name or 'others'}"
            )

    def __add__(self, other: object) -> "IncompressiblePerfectGas":
        if not isinstance(other, IncompressiblePerfectGas):
            return NotImplemented
        self.check_compatible(other)
        Y = self.Y + other.Y
        if abs(Y) < _SMALL:
            W = self.W
        else:
            W = Y / (self.Y / self.W + other.Y / other.W)
        return IncompressiblePerfectGas(self.p_ref, W, Y)

    def __rmul__(self, s: float) -> "IncompressiblePerfectGas":
        if not isinstance(s, (int, float)):
            return NotImplemented
        return IncompressiblePerfectGas(self.p_ref, self.W, s * self.Y, self.name)