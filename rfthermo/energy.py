"""Energy-form mappings and internal-energy relations derived from enthalpy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar


def cv(thermo: Any, p: float, T: float) -> float:
    """Heat capacity at constant volume [J/kg/K] from Cp and (Cp - Cv)."""
    return thermo.Cp(p, T) - thermo.CpMCv(p, T)


def es(thermo: Any, p: float, T: float) -> float:
    """Sensible internal energy [J/kg] from sensible enthalpy."""
    return thermo.Hs(p, T) - p / thermo.rho(p, T)


def ea(thermo: Any, p: float, T: float) -> float:
    """Absolute internal energy [J/kg] from absolute enthalpy."""
    return thermo.Ha(p, T) - p / thermo.rho(p, T)


@dataclass(frozen=True)
class SensibleInternalEnergy:
    """Expose the sensible internal energy functions of a thermo object."""

    type_name: ClassVar[str] = "sensibleInternalEnergy"
    energy_name: ClassVar[str] = "e"

    def Cpv(self, thermo: Any, p: float, T: float) -> float:
        """Heat capacity at constant volume [J/kg/K]."""
        return thermo.Cv(p, T)

    def CpByCpv(self, thermo: Any, p: float, T: float) -> float:
        """Cp/Cv []."""
        return thermo.gamma(p, T)

    def HE(self, thermo: Any, p: float, T: float) -> float:
        """Sensible internal energy [J/kg]."""
        return thermo.Es(p, T)

    def THE(self, thermo: Any, e: float, p: float, T0: float) -> float:
        """Temperature from sensible internal energy, starting from T0."""
        return thermo.TEs(e, p, T0)


@dataclass(frozen=True)
class AbsoluteInternalEnergy:
    """Expose the absolute internal energy functions of a thermo object."""

    type_name: ClassVar[str] = "absoluteInternalEnergy"
    energy_name: ClassVar[str] = "ea"

    def Cpv(self, thermo: Any, p: float, T: float) -> float:
        """Heat capacity at constant volume [J/kg/K]."""
        return thermo.Cv(p, T)

    def CpByCpv(self, thermo: Any, p: float, T: float) -> float:
        """Cp/Cv []."""
        return thermo.gamma(p, T)

    def HE(self, thermo: Any, p: float, T: float) -> float:
        """Absolute internal energy [J/kg]."""
        return thermo.Ea(p, T)

    def THE(self, thermo: Any, e: float, p: float, T0: float) -> float:
        """Temperature from absolute internal energy, starting from T0."""
        return thermo.TEa(e, p, T0)