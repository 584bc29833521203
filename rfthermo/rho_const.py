"""Equation of state with constant density."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class RhoConst:
    """Density that is the same at every pressure and temperature."""

    rho_value: float
    specie: Any = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "RhoConst":
        return cls(float(data["equationOfState"]["rho"]))

    def rho(self, p: float, T: float) -> float:
        """Density [kg/m^3]."""
        return self.rho_value

    def to_dict(self) -> dict:
        result = dict(self.specie.to_dict()) if self.specie is not None else {}
        result["equationOfState"] = {"rho": self.rho_value}
        return result