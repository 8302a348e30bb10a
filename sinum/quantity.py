import operator
from functools import total_ordering
from sinum.errors import UnitPhysicalQuantityMismatch
from sinum.formatting import format_mantissa
from sinum.i18n import DisplayLocale
from sinum.latex import Latex, LatexLocale
from sinum.logger import logger
from sinum.number import Number, float_op, numeric_types
from sinum.prefix import Prefix
from sinum.unit import Unit


@total_ordering
class Quantity(DisplayLocale, Latex, LatexLocale):
    """
    A number combined with an SI prefix and a unit.

    The kilogram is the only base unit that already carries a prefix. A
    Quantity therefore keeps mass in a canonical form: a prefix on top of
    the kilogram is moved onto the gram (k kg -> Mg), and a kilo prefixed
    gram becomes a plain kilogram. Every operation returning a Quantity
    goes through this normalization.

    Unlike Number, two Quantities are only equal if their units measure the
    same physical quantity.
    """
    __slots__ = ['_number', '_unit']

    # Let numpy scalars defer to the reflected operators
    __array_ufunc__ = None

    def __init__(self, number, unit: Unit):
        """
        Args:
            number (Number or float): The numeric part. Plain scalars are
                                      used without prefix.
            unit (Unit): The unit of the quantity.
        """
        if isinstance(number, numeric_types):
            number = Number(number)
        elif not isinstance(number, Number):
            raise TypeError(f"Expected a Number or scalar, got "
                            f"{type(number).__name__}")

        if unit == Unit.KILOGRAM and number.prefix is not Prefix.NOTHING:
            # The prefix must be applied to the gram to be displayed as
            # 'mg' or 'Mg'
            prefix_new = Prefix.from_exponent(number.prefix.exponent + 3)
            logger.debug(f"{number.prefix.key}-kilogram rewritten to "
                         f"{prefix_new.key}gram")
            number, unit = number.with_prefix(prefix_new), Unit.GRAM
        elif unit == Unit.GRAM and number.prefix is Prefix.KILO:
            number, unit = number.with_prefix(Prefix.NOTHING), Unit.KILOGRAM

        self._number = number
        self._unit = unit

    @property
    def number(self) -> Number:
        return self._number

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def physical_quantity(self):
        return self._unit.physical_quantity

    @property
    def value(self) -> float:
        """The value with regard to the base unit (9.9 t -> 9900.0)."""
        return self._number.value * self._unit.factor_to_base

    def to_unit(self, unit: Unit) -> 'Quantity':
        """
        Convert the quantity into another unit of the same physical
        quantity. The prefix is kept.

        Raises:
            UnitPhysicalQuantityMismatch: If `unit` measures a different
                physical quantity.
        """
        if not self._unit.is_compatible(unit):
            raise UnitPhysicalQuantityMismatch(self._unit, unit)

        factor = self._unit.factor_to_base / unit.factor_to_base
        return Quantity(self._number * factor, unit)

    def to_prefix(self, prefix: Prefix) -> 'Quantity':
        """Convert the number to `prefix`, keeping the value."""
        return Quantity(self._number.to_prefix(prefix), self._unit)

    def shorten(self) -> 'Quantity':
        """Shorten the numeric part (see Number.shorten), keeping the unit."""
        return Quantity(self._number.shorten(), self._unit)

    def _from_base_value(self, value):
        # Express a base unit value in the unit and prefix of self
        return (Quantity(Number(value), self._unit.base_unit)
                .to_unit(self._unit)
                .to_prefix(self._number.prefix))

    def _check_compatible(self, other):
        if not self._unit.is_compatible(other.unit):
            raise UnitPhysicalQuantityMismatch(self._unit, other.unit)

    def abs(self) -> 'Quantity':
        return self._from_base_value(abs(self.value))

    def _combine(self, other, op, reflected=False):
        if isinstance(other, Quantity):
            self._check_compatible(other)
            val = float_op(op, self.value, other.value)
        elif isinstance(other, numeric_types):
            if reflected:
                val = float_op(op, other, self.value)
            else:
                val = float_op(op, self.value, other)
        else:
            return NotImplemented

        return self._from_base_value(val)

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __radd__(self, other):
        return self._combine(other, operator.add, reflected=True)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __rsub__(self, other):
        return self._combine(other, operator.sub, reflected=True)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        return self._combine(other, operator.mul, reflected=True)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._combine(other, operator.truediv, reflected=True)

    def __neg__(self):
        return self._from_base_value(-self.value)

    def __abs__(self):
        return self.abs()

    def __float__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, Quantity):
            return (self._unit.is_compatible(other.unit)
                    and self.value == other.value)
        if isinstance(other, numeric_types):
            return self.value == float(other)
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Quantity):
            self._check_compatible(other)
            return self.value < other.value
        if isinstance(other, numeric_types):
            return self.value < float(other)
        return NotImplemented

    def __hash__(self):
        # A Quantity compares equal to its base unit value
        return hash(self.value)

    def _suffix(self):
        return f"{self._number.prefix.to_symbol()}{self._unit.to_symbol()}"

    def to_string(self, significant_digits=None, decimal_separator='.'):
        mantissa = format_mantissa(self._number.mantissa, significant_digits,
                                   decimal_separator)
        return f"{mantissa} {self._suffix()}"

    def to_string_eng(self, significant_digits=None):
        """Engineering notation: '9.9e3 m' instead of '9.9 km'."""
        number = self._number.to_string_eng(significant_digits)
        return f"{number} {self._unit.to_symbol()}"

    def to_string_locale(self, locale, translator=None):
        """Return the quantity using the decimal separator of `locale`."""
        if translator is None:
            return self.to_string()
        return self.to_string(
            decimal_separator=translator.decimal_separator(locale))

    def to_latex(self, options=None) -> str:
        """
        Return the quantity as siunitx \\qty macro, e.g.
        '\\qty{9.9}{\\mega\\gram}'.
        """
        opts = str(options) if options is not None else ''
        mantissa = format_mantissa(self._number.mantissa)
        unit = f"{self._number.prefix.to_latex()}{self._unit.to_latex()}"
        return f"\\qty{opts}{{{mantissa}}}{{{unit}}}"

    def to_dict(self):
        data = self._number.to_dict()
        data['unit'] = self._unit.key
        if self._unit.is_custom:
            data['custom_unit'] = True
        return data

    @classmethod
    def from_dict(cls, data):
        """Rebuild a Quantity from the output of `to_dict`."""
        if data.get('custom_unit', False):
            unit = Unit.custom(data['unit'])
        else:
            unit = Unit.from_str(data['unit'])
        return cls(Number.from_dict(data), unit)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Quantity({self._number!r}, {self._unit!r})"
