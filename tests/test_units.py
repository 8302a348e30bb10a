import math
import pytest
import sinum as sn
from sinum import Number, Prefix, Quantity, Unit, unit_handler, unit_table


def test_convert():
    assert math.isclose(unit_handler.convert(1.0, Unit.TONNE, Unit.KILOGRAM),
                        1000.0)
    assert math.isclose(unit_handler.convert(1.0, 'bar', 'pascal'), 1e5)
    assert math.isclose(unit_handler.convert(1.0, Unit.LIGHTYEAR, Unit.METER),
                        9460730472580800.0)


def test_convert_mismatch():
    with pytest.raises(sn.UnitPhysicalQuantityMismatch):
        unit_handler.convert(1.0, Unit.KILOGRAM, Unit.SECOND)


def test_custom_unit_unknown_to_pint():
    with pytest.raises(sn.UnparseableUnitName):
        unit_handler.convert(1.0, Unit.custom('furlong'), Unit.METER)
    with pytest.raises(sn.UnparseableUnitName):
        unit_handler.to_pint(Quantity(1.0, Unit.custom('furlong')))


@pytest.mark.parametrize('unit', Unit.all(), ids=lambda unit: unit.key)
def test_factors_agree_with_pint(unit):
    # The dalton moved by 1.4e-9 between CODATA 2018 and 2022, and pint
    # releases ship either one
    assert math.isclose(unit_handler.convert(1.0, unit, unit.base_unit),
                        unit.factor_to_base, rel_tol=1e-8)


def test_dalton_codata_2022():
    assert Unit.DALTON.factor_to_base == 1.66053906892e-27


def test_to_pint():
    qty = unit_handler.to_pint(
        Quantity(Number(2.0).with_prefix(Prefix.KILO), Unit.METER))
    assert math.isclose(qty.magnitude, 2000.0)
    assert qty.units == unit_handler.ureg.meter


def test_to_pint_megagram():
    qty = unit_handler.to_pint(
        Quantity(Number(9.9).with_prefix(Prefix.KILO), Unit.KILOGRAM))
    assert math.isclose(qty.to('kilogram').magnitude, 9900.0)


def test_from_pint_base_unit():
    qty = unit_handler.from_pint(unit_handler.Q_(2.0, 'km'))
    assert qty.unit == Unit.METER
    assert qty.number.prefix is Prefix.NOTHING
    assert math.isclose(qty.number.mantissa, 2000.0)

    qty = unit_handler.from_pint(unit_handler.Q_(3.0, 'bar'))
    assert qty.unit == Unit.PASCAL
    assert math.isclose(qty.value, 3e5)


def test_from_pint_target_unit():
    qty = unit_handler.from_pint(unit_handler.Q_(1500.0, 'gram'), Unit.TONNE)
    assert qty.unit == Unit.TONNE
    assert math.isclose(qty.number.mantissa, 0.0015)


def test_from_pint_mismatch():
    with pytest.raises(sn.UnitPhysicalQuantityMismatch):
        unit_handler.from_pint(unit_handler.Q_(1.0, 'second'), Unit.METER)
    with pytest.raises(sn.UnitPhysicalQuantityMismatch):
        unit_handler.from_pint(unit_handler.Q_(1.0, 'meter / second'))


def test_unit_table():
    table = unit_table()
    for name in ('astronomical unit', 'kilogram', 'sievert', 'Base Unit'):
        assert name in table

    table = unit_table([Unit.BAR])
    assert 'bar' in table
    assert 'pascal' in table
    assert 'PRESSURE' in table
    assert 'kelvin' not in table
