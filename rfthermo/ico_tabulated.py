"""Incompressible equation of state with tabulated density vs temperature."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from .functions import NonUniformTable


def _no_departure(p: float, T: float) -> float:
    """Departure of a pressure-independent density: zero for any finite state."""
    if math.isfinite(p) and math.isfinite(T):
        return 0.0
    return math.nan


@dataclass(frozen=True)
class IcoTabulated:
    """Density interpolated from a non-uniform temperature table."""

    rho_table: NonUniformTable
    specie: Any = None

    incompressible: ClassVar[bool] = True
    isochoric: ClassVar[bool] = False

    @classmethod
    def from_dict(cls, data: Mapping) -> "IcoTabulated":
        return cls(NonUniformTable.from_dict(data["equationOfState"], "rho"))

    def rho(self, p: float, T: float) -> float:
        """Density [kg/m^3]."""
        return self.rho_table.f(p, T)

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

    def to_dict(self) -> dict:
        return {
            "equationOfState": {
                "rho": [[T, v] for T, v in self.rho_table.values]
            }
        }