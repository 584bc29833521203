"""Solid transport with thermal conductivity polynomial in temperature."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .functions import FunctionNotDefinedError
from .polynomial_thermo import Polynomial


@dataclass(frozen=True)
class PolynomialSolidTransport:
    """Transport properties of a solid layered over a thermo object.

    The thermo object supplies Cp(p, T), a mass fraction Y, and supports
    ``a + b`` and ``s * a``. Unknown attributes are looked up on it.
    """

    thermo: Any
    kappa_coeffs: Polynomial

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or "thermo" not in vars(self):
            raise AttributeError(name)
        return getattr(vars(self)["thermo"], name)

    @classmethod
    def from_dict(
        cls, thermo: Any, data: Mapping, size: int = 8
    ) -> "PolynomialSolidTransport":
        key = f"kappaCoeffs<{size}>"
        coeffs = tuple(float(v) for v in data["transport"][key])
        if len(coeffs) != size:
            raise ValueError(
                f"{key} expects {size} coefficients, got {len(coeffs)}"
            )
        return cls(thermo, Polynomial(coeffs))

    def mu(self, p: float, T: float) -> float:
        """Dynamic viscosity: a solid has none, so this always raises."""
        raise FunctionNotDefinedError(
            f"dynamic viscosity is not defined for a solid (p={p}, T={T})"
        )

    def kappa(self, p: float, T: float) -> float:
        """Thermal conductivity [W/m/K]."""
        return self.kappa_coeffs.value(T)

    def Kappa(self, p: float, T: float) -> tuple[float, float, float]:
        """Isotropic conductivity as a vector."""
        k = self.kappa_coeffs.value(T)
        return (k, k, k)

    def alphah(self, p: float, T: float) -> float:
        """Thermal diffusivity of enthalpy [kg/m/s]."""
        return self.kappa(p, T) / self.thermo.Cp(p, T)

    def to_dict(self) -> dict:
        result = dict(self.thermo.to_dict())
        key = f"kappaCoeffs<{len(self.kappa_coeffs)}>"
        result["transport"] = {key: list(self.kappa_coeffs.coeffs)}
        return result

    def __add__(self, other: object) -> "PolynomialSolidTransport":
        if not isinstance(other, PolynomialSolidTransport):
            return NotImplemented
        t = self.thermo + other.thermo
        y1 = self.thermo.Y / t.Y
        y2 = other.thermo.Y / t.Y
        return PolynomialSolidTransport(
            t, y1 * self.kappa_coeffs + y2 * other.kappa_coeffs
        )

    def __rmul__(self, s: float) -> "PolynomialSolidTransport":
        if not isinstance(s, (int, float)):
            return NotImplemented
        return PolynomialSolidTransport(s * self.thermo, self.kappa_coeffs)