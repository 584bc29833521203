import math

import pytest

from rfthermo.functions import (
    NSRDS0,
    NSRDS3,
    Constant,
    FunctionNotDefinedError,
    IntegratedNonUniformTable,
    NonUniformTable,
    NoneFunction,
    TableError,
)

TABLE = [(200.0, 1010.0), (350.0, 1000.0), (400.0, 980.0)]


def test_constant_returns_value_for_any_state():
    c = Constant.from_dict({"value": 4.5})
    assert c.f(1e5, 300.0) == 4.5
    assert c.f(0.0, 1000.0) == 4.5


def test_constant_round_trip():
    c = Constant(2.25)
    assert Constant.from_dict(c.to_dict()) == c


def test_none_function_raises_with_name():
    fn = NoneFunction("viscosity")
    with pytest.raises(FunctionNotDefinedError, match="viscosity"):
        fn.f(1e5, 300.0)


def test_none_function_writes_nothing():
    assert NoneFunction("x").to_dict() == {}


def test_table_reproduces_nodes():
    table = NonUniformTable(TABLE)
    for T, v in TABLE:
        assert table.f(1e5, T) == pytest.approx(v)


def test_table_exact_for_linear_data():
    data = [(100.0, 301.0), (130.0, 391.0), (210.0, 631.0), (215.0, 646.0)]
    table = NonUniformTable(data)
    for T in (100.0, 117.3, 150.0, 209.9, 212.0, 215.0):
        assert table.f(0.0, T) == pytest.approx(3 * T + 1)
        assert table.dfdT(0.0, T) == pytest.approx(3.0)


def test_table_index_selects_interval():
    table = NonUniformTable(TABLE)
    assert table.index(0.0, 200.0) == 0
    assert table.index(0.0, 349.0) == 0
    assert table.index(0.0, 351.0) == 1
    assert table.index(0.0, 400.0) == 1


def test_table_from_dict_named_entry_and_round_trip():
    table = NonUniformTable.from_dict({"rho": TABLE}, "rho")
    assert table.name == "rho"
    out = table.to_dict()
    again = NonUniformTable.from_dict(out)
    assert again.values == table.values


def test_table_too_short():
    with pytest.raises(TableError, match="less than 2 entries"):
        NonUniformTable([(300.0, 1.0)])


def test_table_not_increasing():
    with pytest.raises(TableError):
        NonUniformTable([(300.0, 1.0), (300.0, 2.0)])


def test_table_out_of_range():
    table = NonUniformTable(TABLE)
    with pytest.raises(TableError):
        table.f(0.0, 199.0)
    with pytest.raises(TableError):
        table.dfdT(0.0, 401.0)


def test_integrated_table_zero_at_standard_temperature():
    table = IntegratedNonUniformTable(TABLE)
    assert table.intfdT(1e5, 298.15) == pytest.approx(0.0, abs=1e-9)
    assert table.intfByTdT(1e5, 298.15) == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("T", [220.0, 298.15, 330.0])
def test_integrated_table_derivatives(T):
    table = IntegratedNonUniformTable(TABLE)
    h = 1e-3
    dint = (table.intfdT(0.0, T + h) - table.intfdT(0.0, T - h)) / (2 * h)
    dint_by_T = (
        table.intfByTdT(0.0, T + h) - table.intfByTdT(0.0, T - h)
    ) / (2 * h)
    assert dint == pytest.approx(table.f(0.0, T), rel=1e-6)
    assert dint_by_T == pytest.approx(table.f(0.0, T) / T, rel=1e-6)


def test_integrated_table_keeps_interpolation():
    table = IntegratedNonUniformTable.from_dict({"values": TABLE})
    for T, v in TABLE:
        assert table.f(0.0, T) == pytest.approx(v)


def test_integrated_table_needs_standard_temperature_in_range():
    with pytest.raises(TableError):
        IntegratedNonUniformTable([(400.0, 1.0), (500.0, 2.0)])


def test_nsrds0_constant_term_at_zero():
    fn = NSRDS0(7.0, 1.0, 2.0, 3.0, 4.0, 5.0)
    assert fn.f(0.0, 0.0) == 7.0


def test_nsrds0_only_linear_term():
    fn = NSRDS0.from_dict(
        {"a": 1.0, "b": 2.0, "c": 0.0, "d": 0.0, "e": 0.0, "f": 0.0}
    )
    for T in (10.0, 250.0):
        assert fn.f(0.0, T) == pytest.approx(1.0 + 2.0 * T)


def test_nsrds0_round_trip():
    fn = NSRDS0(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert NSRDS0.from_dict(fn.to_dict()) == fn


def test_nsrds3_limits():
    fn = NSRDS3.from_dict({"a": 2.0, "b": 3.0, "c": 0.0, "d": 1.0})
    assert fn.f(0.0, 300.0) == pytest.approx(5.0)
    fn2 = NSRDS3(2.0, 3.0, 100.0, 1.0)
    assert fn2.f(0.0, 100.0) == pytest.approx(2.0 + 3.0 * math.exp(-1.0))


def test_nsrds3_round_trip():
    fn = NSRDS3(1.5, 2.5, 3.5, 4.5)
    assert NSRDS3.from_dict(fn.to_dict()) == fn