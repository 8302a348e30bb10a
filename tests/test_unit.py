import math
import pytest
import sinum as sn
from sinum import PhysicalQuantity, Unit


def test_factor_to_base():
    assert Unit.AMPERE.factor_to_base == 1.0
    assert Unit.KILOGRAM.factor_to_base == 1.0
    assert Unit.TONNE.factor_to_base == 1e3
    assert Unit.GRAM.factor_to_base == 1e-3
    assert Unit.BAR.factor_to_base == 1e5


def test_base_unit():
    assert Unit.AMPERE.base_unit == Unit.AMPERE
    assert Unit.KILOGRAM.base_unit == Unit.KILOGRAM
    assert Unit.TONNE.base_unit == Unit.KILOGRAM
    assert Unit.GRAM.base_unit == Unit.KILOGRAM
    assert Unit.PARSEC.base_unit == Unit.METER
    assert Unit.LIGHTYEAR.base_unit == Unit.METER
    assert Unit.BAR.base_unit == Unit.PASCAL


def test_physical_quantity():
    assert Unit.GRAM.physical_quantity is PhysicalQuantity.MASS
    assert Unit.ASTRONOMICAL_UNIT.physical_quantity is PhysicalQuantity.LENGTH
    assert Unit.SIEVERT.physical_quantity is PhysicalQuantity.RADIATION
    assert Unit.custom('furlong').physical_quantity is PhysicalQuantity.CUSTOM


def test_quantity_units():
    assert set(PhysicalQuantity.MASS.units()) == {
        Unit.KILOGRAM, Unit.GRAM, Unit.TONNE, Unit.DALTON}
    assert PhysicalQuantity.CUSTOM.units() == []


def test_shared_base_within_quantity():
    for quantity in PhysicalQuantity:
        units = quantity.units()
        bases = {unit.base_unit for unit in units}
        assert len(bases) <= 1
        for base in bases:
            assert base.factor_to_base == 1.0


def test_display():
    assert str(Unit.AMPERE) == 'A'
    assert str(Unit.CANDELA) == 'cd'
    assert Unit.ASTRONOMICAL_UNIT.to_symbol() == 'au'
    assert Unit.ASTRONOMICAL_UNIT.to_display_name() == 'astronomical unit'
    assert Unit.ASTRONOMICAL_UNIT.key == 'astronomical_unit'
    assert str(Unit.custom('furlong')) == 'furlong'


@pytest.mark.parametrize('text, unit', [
    ('kg', Unit.KILOGRAM),
    ('KG', Unit.KILOGRAM),
    ('Kilogram', Unit.KILOGRAM),
    ('astronomical unit', Unit.ASTRONOMICAL_UNIT),
    ('astronomical_unit', Unit.ASTRONOMICAL_UNIT),
    ('Pa', Unit.PASCAL),
    ('pc', Unit.PARSEC),
    ('metre', Unit.METER),
    (' s ', Unit.SECOND),
])
def test_from_str(text, unit):
    assert Unit.from_str(text) == unit


def test_from_str_invalid():
    with pytest.raises(sn.UnparseableUnitName) as err:
        Unit.from_str('furlong')
    assert err.value.string == 'furlong'


def test_unknown_key():
    with pytest.raises(sn.UnparseableUnitName):
        Unit('furlong')


def test_convert_value():
    assert Unit.convert_value(1.0, Unit.TONNE, Unit.GRAM) == 1e6
    assert Unit.convert_value(2.0, Unit.BAR, Unit.PASCAL) == 2e5
    assert math.isclose(
        Unit.convert_value(1.0, Unit.PARSEC, Unit.ASTRONOMICAL_UNIT),
        206264.80624709636, rel_tol=1e-12)


def test_convert_value_mismatch():
    with pytest.raises(sn.UnitPhysicalQuantityMismatch) as err:
        Unit.convert_value(1.0, Unit.KILOGRAM, Unit.SECOND)
    assert err.value.units == [Unit.KILOGRAM, Unit.SECOND]


def test_custom_compatibility():
    furlong = Unit.custom('furlong')
    assert furlong.is_compatible(Unit.custom('furlong'))
    assert not furlong.is_compatible(Unit.custom('fortnight'))
    assert not furlong.is_compatible(Unit.METER)
    assert Unit.convert_value(3.0, furlong, Unit.custom('furlong')) == 3.0
    with pytest.raises(sn.UnitPhysicalQuantityMismatch):
        Unit.convert_value(3.0, furlong, Unit.custom('fortnight'))


def test_latex():
    assert Unit.METER.to_latex() == r'\meter'
    assert Unit.SECOND.to_latex(sn.TexOptions()) == r'\second'
    assert Unit.custom('furlong').to_latex() == 'furlong'
