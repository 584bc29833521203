import pytest

from rfthermo.incompressible_perfect_gas import (
    RR,
    IncompressiblePerfectGas,
    ReferencePressureMismatch,
)


@pytest.fixture
def air():
    return IncompressiblePerfectGas(p_ref=1e5, W=28.9, name="air")


def test_gas_constant_times_weight_is_universal(air):
    assert air.R() * air.W == pytest.approx(RR)


def test_density_satisfies_perfect_gas_at_reference_pressure(air):
    T = 300.0
    assert air.rho(5e5, T) * air.R() * T == pytest.approx(air.p_ref)


def test_density_independent_of_pressure(air):
    assert air.rho(1e4, 350.0) == air.rho(1e6, 350.0)


def test_density_decreases_with_temperature(air):
    assert air.rho(1e5, 400.0) < air.rho(1e5, 300.0)


def test_enthalpy_is_flow_work(air):
    p, T = 2e5, 320.0
    assert air.H(p, T) * air.rho(p, T) == pytest.approx(p)


@pytest.mark.parametrize(
    "method", ["dHdT", "Cp", "E", "Cv", "Sp", "Sv", "psi", "Z", "CpMCv"]
)
def test_zero_contributions(air, method):
    assert getattr(air, method)(1e5, 300.0) == 0.0


def test_mismatched_reference_pressure_raises(air):
    other = IncompressiblePerfectGas(p_ref=2e5, W=28.9, name="fuel")
    with pytest.raises(ReferencePressureMismatch, match="air"):
        air.check_compatible(other)
    with pytest.raises(ReferencePressureMismatch):
        air + other


def test_unnamed_gas_reported_as_others():
    a = IncompressiblePerfectGas(p_ref=1e5, W=28.9)
    b = IncompressiblePerfectGas(p_ref=3e5, W=16.0)
    with pytest.raises(ReferencePressureMismatch, match="others"):
        a.check_compatible(b)


def test_sum_of_identical_gases(air):
    mixed = air + air
    assert mixed.Y == pytest.approx(2 * air.Y)
    assert mixed.W == pytest.approx(air.W)
    assert mixed.p_ref == air.p_ref


def test_sum_weight_between_components():
    a = IncompressiblePerfectGas(p_ref=1e5, W=2.0, Y=0.5)
    b = IncompressiblePerfectGas(p_ref=1e5, W=32.0, Y=0.5)
    mixed = a + b
    assert 2.0 < mixed.W < 32.0
    assert mixed.Y == pytest.approx(1.0)


def test_scaling_changes_mass_fraction_only(air):
    scaled = 0.25 * air
    assert scaled.Y == pytest.approx(0.25 * air.Y)
    assert scaled.W == air.W
    assert scaled.rho(1e5, 300.0) == air.rho(1e5, 300.0)