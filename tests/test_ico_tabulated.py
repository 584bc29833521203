import pytest

from rfthermo.functions import TableError
from rfthermo.ico_tabulated import IcoTabulated

DATA = {
    "equationOfState": {
        "rho": [[200.0, 1010.0], [350.0, 1000.0], [400.0, 980.0]]
    }
}


@pytest.fixture
def eos():
    return IcoTabulated.from_dict(DATA)


def test_density_at_table_nodes(eos):
    assert eos.rho(1e5, 350.0) == pytest.approx(1000.0)
    assert eos.rho(1e5, 200.0) == pytest.approx(1010.0)
    assert eos.rho(1e5, 400.0) == pytest.approx(980.0)


def test_density_between_nodes_is_bounded(eos):
    r = eos.rho(1e5, 375.0)
    assert 980.0 < r < 1000.0


def test_density_independent_of_pressure(eos):
    assert eos.rho(1e5, 300.0) == eos.rho(5e6, 300.0)


@pytest.mark.parametrize("T", [250.0, 350.0, 390.0])
def test_enthalpy_times_density_is_pressure(eos, T):
    p = 2.0e5
    assert eos.H(p, T) * eos.rho(p, T) == pytest.approx(p)


def test_zero_contributions(eos):
    values = [
        method(1e5, 300.0)
        for method in (
            eos.dHdT, eos.Cp, eos.E, eos.Cv, eos.Sp, eos.Sv,
            eos.psi, eos.Z, eos.CpMCv,
        )
    ]
    assert values == [0.0] * 9


def test_flags(eos):
    assert eos.incompressible is True
    assert eos.isochoric is False


def test_round_trip(eos):
    assert eos.to_dict() == DATA
    again = IcoTabulated.from_dict(eos.to_dict())
    assert again.rho(1e5, 321.0) == eos.rho(1e5, 321.0)


def test_out_of_range_temperature_raises(eos):
    with pytest.raises(TableError):
        eos.rho(1e5, 500.0)


def test_short_table_raises():
    with pytest.raises(TableError):
        IcoTabulated.from_dict({"equationOfState": {"rho": [[300.0, 1000.0]]}})