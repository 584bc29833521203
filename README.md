# rfthermo

Thermophysical property models for gases, liquids and solids. The package
is plain Python and needs nothing beyond the standard library.

Temperatures are in K, pressures in Pa, and everything is in SI units per
kilogram unless a docstring says otherwise. Every property is called as
`model.property(p, T)`.

## Modules

### `rfthermo.functions`

This module holds functions of pressure and temperature. Each one has
`f(p, T)`.

- `Constant(value)` returns a fixed value.
- `NoneFunction(dict_name)` raises `FunctionNotDefinedError` when `f` is
  called.
- `NonUniformTable(values, name="values")` interpolates linearly in a table of
  `(T, value)` pairs.
  - `f` gives the interpolated value and `dfdT` the slope of the interval
    that holds `T`.
  - `index` gives the position of that interval.
  - `TableError` is raised for a table with fewer than two entries, for
    temperatures that are not strictly increasing, and for a `T` outside the
    table.
- `IntegratedNonUniformTable` is a `NonUniformTable` that adds two integrals,
  both relative to the standard temperature of 298.15 K:
  - `intfdT`, the integral of `f` over `T`;
  - `intfByTdT`, the integral of `f/T` over `T`.
- `NSRDS0(a, b, c, d, e, f_)` is a fifth-order polynomial in `T`.
- `NSRDS3(a, b, c, d)` is `a + b*exp(-c/T**d)`.

`Constant`, `NonUniformTable`, `NSRDS0` and `NSRDS3` read themselves with
`from_dict` and write themselves with `to_dict`.

### `rfthermo.polynomial_thermo`

- `Polynomial(coeffs)` is an immutable polynomial that can carry an optional
  `log(x)` term. It has:
  - `value(x)`;
  - `integral()` and `integral_minus1()`, the integral of `p(x)/x`;
  - `p + q` for polynomials of equal length;
  - scalar `s * p`.
- `EPolynomialThermo(Hf, Sf, Cv_coeffs)` takes `Cv` polynomial coefficients.
  - From them it derives `e_coeffs` and `s_coeffs`, both offset to be zero at
    298.15 K.
  - `from_dict(data, size=8)` reads `thermodynamics` with the keys `Hf`, `Sf`
    and `CvCoeffs<size>`. `to_dict` writes the same layout back.

### `rfthermo.solid_transport`

`PolynomialSolidTransport(thermo, kappa_coeffs)` gives a solid's thermal
conductivity as a polynomial in `T`.

- `kappa` returns the conductivity and `Kappa` returns it as an isotropic
  3-tuple.
- `alphah` is `kappa / thermo.Cp`.
- `mu` raises `FunctionNotDefinedError`.
- Attributes it does not define itself are looked up on the wrapped `thermo`.
- Mass-fraction-weighted mixing works with `a + b` and `s * a`. For this the
  wrapped thermo must support the same operations and have a `Y` attribute.

### `rfthermo.ico_tabulated`

`IcoTabulated(rho_table)` is an incompressible equation of state with density
interpolated from a `NonUniformTable`.

- `H` is `p/rho`.
- The other contributions are zero:
  - `dHdT`, `Cp`, `E`, `Cv`;
  - `Sp`, `Sv`;
  - `psi`, `Z`, `CpMCv`.
- `from_dict` reads `equationOfState` / `rho`.

### `rfthermo.incompressible_perfect_gas`

`IncompressiblePerfectGas(p_ref, W, Y=1.0, name="")` is a perfect gas
evaluated at the fixed reference pressure `p_ref`.

- Its density is `rho = p_ref/(R*T)`, and `H` is `p/rho`.
- The other contributions are zero.
- Gases can be combined with `+`. The molecular weight is mass-fraction
  weighted. Combining gases whose `p_ref` differ raises
  `ReferencePressureMismatch`; `check_compatible` makes the same check.
- `s * gas` scales the mass fraction.
- The module also exports `RR`, the universal gas constant in J/kmol/K.

### `rfthermo.rho_const`

`RhoConst(rho_value)` is a constant density, with `from_dict` and `to_dict`
working on `equationOfState` / `rho`.

### `rfthermo.soave_redlich_kwong`

`SoaveRedlichKwong(b, coef1, coef2, coef3, W, Y=1.0, name="")` is the
Soave-Redlich-Kwong cubic equation of state. In it
`a*alpha(T) = coef1 - coef2*sqrt(T) + coef3*T`.

- `Z` is the compression factor: the largest real root of the cubic.
- It gives `rho` and `psi`.
- It gives the departures `H`, `dHdT`, `Cp`, `Sp` and `CpMCv`.
- `E`, `Cv` and `Sv` return zero.
- `update_eos` replaces the coefficients.
- `+` and `s *` combine mass fraction and molecular weight. They keep the
  coefficients of the left-hand operand.

### `rfthermo.energy`

- `cv(thermo, p, T)`, `es(thermo, p, T)` and `ea(thermo, p, T)` build
  internal-energy quantities from an enthalpy-based thermo object:
  - `cv` is `Cp - CpMCv`;
  - `es` is `Hs - p/rho`;
  - `ea` is `Ha - p/rho`.
- `SensibleInternalEnergy` and `AbsoluteInternalEnergy` select an energy
  form. Their `Cpv`, `CpByCpv`, `HE` and `THE` forward to the thermo object
  they are given:
  - `Cv` and `gamma`;
  - `Es` / `TEs` for the sensible form, `Ea` / `TEa` for the absolute form.

## Example

```python
from rfthermo.functions import NonUniformTable

table = NonUniformTable.from_dict(
    {"values": [(200.0, 1010.0), (350.0, 1000.0), (400.0, 980.0)]}
)
print(table.f(1e5, 300.0))     # linear interpolation
print(table.dfdT(1e5, 300.0))  # slope of the bracketing interval
```

## What it does not do

The package provides the building blocks only.

- It has no complete specie thermo that joins an equation of state, a
  thermodynamics model and a transport model.
- It has no solver that gets temperature from energy. The energy-form classes
  expect a thermo object that provides `TEs` or `TEa`.
- It has no mixture models, no mesh or field handling, and no command-line
  tool.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```