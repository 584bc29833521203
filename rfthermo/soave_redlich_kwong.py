"""Soave-Redlich-Kwong real-gas equation of state."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .incompressible_perfect_gas import RR

_SMALL = 1.0e-15
_B_FLOOR = 1.0e-16


def _unmodelled(p: float, T: float) -> float:
    """Contribution this model does not carry: zero for any finite state."""
    if math.isfinite(p) and math.isfinite(T):
        return 0.0
    return math.nan


@dataclass
class SoaveRedlichKwong:
    """Cubic equation of state with a(T)*alpha(T) = coef1 - coef2*sqrt(T) + coef3*T.

    b is the co-volume parameter, W the molecular weight [kg/kmol] and Y the
    mass fraction of the specie.
    """

    b: float
    coef1: float
    coef2: float
    coef3: float
    W: float
    Y: float = 1.0
    name: str = ""

    incompressible: ClassVar[bool] = False
    isochoric: ClassVar[bool] = False

    def R(self) -> float:
        """Specific gas constant [J/kg/K]."""
        return RR / self.W

    def _a_alpha(self, T: float) -> float:
        return self.coef1 - self.coef2 * math.sqrt(T) + self.coef3 * T

    def _da_alpha(self, T: float) -> float:
        return -self.coef2 / (2 * math.sqrt(T)) + self.coef3

    def _A(self, p: float, T: float) -> float:
        return self._a_alpha(T) * p / (RR * T) ** 2

    def _B(self, p: float, T: float) -> float:
        return self.b * p / (RR * T)

    def _B_floored(self, p: float, T: float) -> float:
        B = self._B(p, T)
        return _B_FLOOR if B <= 0 else B

    def _dZdT(self, p: float, T: float) -> float:
        A = self._A(p, T)
        B = self._B(p, T)
        Z = self.Z(p, T)
        numerator = -(A + Z + 2 * B * Z) * self.b * p / (RR * T * T) + (
            (B - Z) * (self.coef3 * T - self.coef1) / (2 * T)
        ) * (p / (RR * T) ** 2)
        return numerator / (3 * Z**2 - 2 * Z + A - B - B * B)

    def _xterm(self, p: float, T: float) -> float:
        B = self._B(p, T)
        Z = self.Z(p, T)
        first = (
            3 * self.coef2 * math.log((Z + B) / Z) / (4 * self.b * math.sqrt(T))
        )
        factor = -self.coef1 / self.b + 0.5 * self.coef2 * math.sqrt(T) / self.b
        return first - factor * (
            self.b * p / ((Z + B) * RR * T * T)
            + (B / (Z**2 + Z * B)) * self._dZdT(p, T)
        )

    def rho(self, p: float, T: float) -> float:
        """Density [kg/m^3]."""
        return p / (self.Z(p, T) * self.R() * T)

    def H(self, p: float, T: float) -> float:
        """Enthalpy departure [J/kg]."""
        B = self._B_floored(p, T)
        a_alpha = self._a_alpha(T)
        da_alpha = self._da_alpha(T)
        Z = self.Z(p, T)
        if B == -Z:
            return RR * T * (Z - 1) / self.W
        return (
            RR * T * (Z - 1)
            + (T * da_alpha - a_alpha) / self.b * math.log((Z + B) / Z)
        ) / self.W

    def dHdT(self, p: float, T: float) -> float:
        """Temperature derivative of the enthalpy departure [J/kg/K]."""
        return (
            RR * (self.Z(p, T) - 1.0)
            + RR * T * self._dZdT(p, T)
            + self._xterm(p, T)
        ) / self.W

    def Cp(self, p: float, T: float) -> float:
        """Cp departure [J/kg/K]."""
        da_alpha = self._da_alpha(T)
        dda_alpha = self.coef2 / (4 * T * math.sqrt(T))
        A = self._A(p, T)
        B = self._B_floored(p, T)
        Z = self.Z(p, T)
        M = (Z**2 + B * Z) / (Z - B)
        N = da_alpha * B / (self.b * RR)
        return (
            (T / self.b) * dda_alpha * math.log((Z + B) / Z)
            + RR * (M - N) ** 2 / (M**2 - A * (2 * Z + B))
            - RR
        ) / self.W

    def E(self, p: float, T: float) -> float:
        """Internal energy contribution [J/kg]; not carried by this model."""
        return _unmodelled(p, T)

    def Cv(self, p: float, T: float) -> float:
        """Cv contribution [J/kg/K]; not carried by this model."""
        return _unmodelled(p, T)

    def Sp(self, p: float, T: float) -> float:
        """Entropy contribution to the integral of Cp/T [J/kg/K]."""
        da_alpha = self._da_alpha(T)
        B = self._B_floored(p, T)
        Z = self.Z(p, T)
        return (
            RR * math.log(Z - B) - da_alpha / self.b * math.log((Z + B) / Z)
        ) / self.W

    def Sv(self, p: float, T: float) -> float:
        """Entropy contribution to the integral of Cv/T; not carried by this model."""
        return _unmodelled(p, T)

    def psi(self, p: float, T: float) -> float:
        """Compressibility rho/p [s^2/m^2]."""
        return 1.0 / (self.Z(p, T) * self.R() * T)

    def Z(self, p: float, T: float) -> float:
        """Compression factor: the largest real root of the SRK cubic."""
        A = self._A(p, T)
        B = self._B(p, T)

        a2 = -1.0
        a1 = A - B - B**2
        a0 = -A * B

        Q = (3 * a1 - a2 * a2) / 9.0
        Rl = (9 * a2 * a1 - 27 * a0 - 2 * a2 * a2 * a2) / 54.0
        Q3 = Q * Q * Q
        D = Q3 + Rl * Rl

        if D <= 0:
            ratio = Rl / math.sqrt(-Q3) if Q3 < 0 else 0.0
            th = math.acos(max(-1.0, min(1.0, ratio)))
            qm = 2 * math.sqrt(-Q)
            roots = (
                qm * math.cos((th + k * 2 * math.pi) / 3.0) - a2 / 3.0
                for k in range(3)
            )
            return max(roots)

        D05 = math.sqrt(D)
        if Rl + D05 < 0:
            S = -(abs(Rl + D05) ** (1.0 / 3.0))
        else:
            S = (Rl + D05) ** (1.0 / 3.0)
        if D05 > Rl:
            Tl = -(abs(Rl - D05) ** (1.0 / 3.0))
        else:
            Tl = (Rl - D05) ** (1.0 / 3.0)
        return S + Tl - a2 / 3.0

    def CpMCv(self, p: float, T: float) -> float:
        """Cp - Cv [J/kg/K]."""
        da_alpha = self._da_alpha(T)
        A = self._A(p, T)
        B = self._B_floored(p, T)
        Z = self.Z(p, T)
        M = (Z**2 + B * Z) / (Z - B)
        N = da_alpha * B / (self.b * RR)
        return self.R() * (M - N) ** 2 / (M**2 - A * (2 * Z + B))

    def update_eos(
        self, b: float, coef1: float, coef2: float, coef3: float
    ) -> None:
        """Replace the equation-of-state coefficients, e.g. for a mixture."""
        self.b = b
        self.coef1 = coef1
        self.coef2 = coef2
        self.coef3 = coef3

    def _combined_specie(self, other: "SoaveRedlichKwong") -> tuple[float, float]:
        Y = self.Y + other.Y
        if abs(Y) < _SMALL:
            return self.W, Y
        return Y / (self.Y / self.W + other.Y / other.W), Y

    def __add__(self, other: object) -> "SoaveRedlichKwong":
        if not isinstance(other, SoaveRedlichKwong):
            return NotImplemented
        W, Y = self._combined_specie(other)
        return SoaveRedlichKwong(
            self.b, self.coef1, self.coef2, self.coef3, W, Y
        )

    def __rmul__(self, s: float) -> "SoaveRedlichKwong":
        if not isinstance(s, (int, float)):
            return NotImplemented
        return SoaveRedlichKwong(
            self.b, self.coef1, self.coef2, self.coef3, self.W, s * self.Y,
            self.name,
        )