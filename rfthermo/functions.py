"""Thermophysical property functions of pressure and temperature."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

PSTD = 1.0e5
TSTD = 298.15


class FunctionNotDefinedError(RuntimeError):
    """Raised when a required property function has not been defined."""


class TableError(ValueError):
    """Raised for malformed tables or temperatures outside a table's range."""


@dataclass(frozen=True)
class Constant:
    """A property that does not vary with pressure or temperature."""

    value: float

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "Constant":
        return cls(float(data["value"]))

    def f(self, p: float, T: float) -> float:
        return self.value

    def to_dict(self) -> dict:
        return {"value": self.value}


@dataclass(frozen=True)
class NoneFunction:
    """Placeholder for a property that must not be evaluated."""

    dict_name: str = ""

    def f(self, p: float, T: float) -> float:
        raise FunctionNotDefinedError(
            f"Required Function\n    {self.dict_name}\n    is not defined."
        )

    def to_dict(self) -> dict:
        return {}


class NonUniformTable:
    """Linear interpolation in a non-uniformly spaced temperature table."""

    def __init__(
        self, values: Iterable[Sequence[float]], name: str = "values"
    ) -> None:
        self.name = name
        self.values: list[tuple[float, float]] = [
            (float(T), float(v)) for T, v in values
        ]
        if len(self.values) < 2:
            raise TableError(
                f"Table\n    {name}\n    has less than 2 entries."
            )

        temperatures = [T for T, _ in self.values]
        self.Tlow = temperatures[0]
        self.Thigh = temperatures[-1]

        spacing = min(b - a for a, b in zip(temperatures, temperatures[1:]))
        if spacing <= 0:
            raise TableError(
                f"Table {name} temperatures are not strictly increasing"
            )
        self.deltaT = 0.9 * spacing

        size = int((self.Thigh - self.Tlow) / self.deltaT + 1)
        self._jump_table: list[int] = []
        i = 0
        for j in range(size):
            T = self.Tlow + j * self.deltaT
            if T > temperatures[i + 1]:
                i += 1
            self._jump_table.append(i)

    @classmethod
    def from_dict(cls, data: Mapping, name: str = "values"):
        return cls(data[name], name)

    def index(self, p: float, T: float) -> int:
        """Index of the table interval containing T."""
        if T < self.Tlow or T > self.Thigh:
            raise TableError(
                f"Temperature {T} out of range {self.Tlow} to {self.Thigh}"
                f"\n    of table {self.name}"
            )
        i = self._jump_table[int((T - self.Tlow) / self.deltaT)]
        if i < len(self.values) - 1 and T > self.values[i + 1][0]:
            i += 1
        return i

    def f(self, p: float, T: float) -> float:
        i = self.index(p, T)
        Ti, fi = self.values[i]
        Tn, fn = self.values[i + 1]
        lam = (T - Ti) / (Tn - Ti)
        return fi + lam * (fn - fi)

    def dfdT(self, p: float, T: float) -> float:
        i = self.index(p, T)
        Ti, fi = self.values[i]
        Tn, fn = self.values[i + 1]
        return (fn - fi) / (Tn - Ti)

    def to_dict(self) -> dict:
        return {"values": [[T, v] for T, v in self.values]}


class IntegratedNonUniformTable(NonUniformTable):
    """Table that also provides the integrals of f and f/T over temperature.

    Both integrals are relative to the standard temperature.
    """

    def __init__(
        self, values: Iterable[Sequence[float]], name: str = "values"
    ) -> None:
        super().__init__(values, name)
        self._intf: list[float] = [0.0]
        self._intf_by_T: list[float] = [0.0]

        for i in range(len(self.values) - 1):
            T_next = self.values[i + 1][0]
            self._intf.append(self._intf[i] + self.intfdT(0.0, T_next))
            self._intf_by_T.append(
                self._intf_by_T[i] + self.intfByTdT(0.0, T_next)
            )

        intf_std = self.intfdT(PSTD, TSTD)
        intf_by_T_std = self.intfByTdT(PSTD, TSTD)
        self._intf = [v - intf_std for v in self._intf]
        self._intf_by_T = [v - intf_by_T_std for v in self._intf_by_T]

    def intfdT(self, p: float, T: float) -> float:
        """Integral of f with respect to T."""
        i = self.index(p, T)
        Ti, fi = self.values[i]
        Tn, fn = self.values[i + 1]
        dT = T - Ti
        lam = dT / (Tn - Ti)
        return self._intf[i] + (fi + 0.5 * lam * (fn - fi)) * dT

    def intfByTdT(self, p: float, T: float) -> float:
        """Integral of f/T with respect to T."""
        i = self.index(p, T)
        Ti, fi = self.values[i]
        Tn, fn = self.values[i + 1]
        gradf = (fn - fi) / (Tn - Ti)
        return self._intf_by_T[i] + (
            (fi - gradf * Ti) * math.log(T / Ti) + gradf * (T - Ti)
        )


@dataclass(frozen=True)
class NSRDS0:
    """NSRDS function 100: a fifth-order polynomial in temperature."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f_: float

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "NSRDS0":
        return cls(*(float(data[k]) for k in ("a", "b", "c", "d", "e", "f")))

    def f(self, p: float, T: float) -> float:
        return (
            ((((self.f_ * T + self.e) * T + self.d) * T + self.c) * T + self.b)
            * T
            + self.a
        )

    def to_dict(self) -> dict:
        return {
            "a": self.a,
            "b": self.b,
            "c": self.c,
            "d": self.d,
            "e": self.e,
            "f": self.f_,
        }


@dataclass(frozen=True)
class NSRDS3:
    """NSRDS function 103: a + b*exp(-c/T^d)."""

    a: float
    b: float
    c: float
    d: float

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "NSRDS3":
        return cls(*(float(data[k]) for k in ("a", "b", "c", "d")))

    def f(self, p: float, T: float) -> float:
        return self.a + self.b * math.exp(-self.c / T**self.d)

    def to_dict(self) -> dict:
        return {"a": self.a, "b": self.b, "c": self.c, "d": self.d}