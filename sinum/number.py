import math
import operator
from functools import total_ordering
import numpy as np
from sinum.errors import PrefixExponentOutOfRange
from sinum.formatting import format_mantissa
from sinum.i18n import DisplayLocale
from sinum.latex import Latex, LatexLocale
from sinum.logger import logger
from sinum.prefix import Prefix

# Plain scalars that combine with sinum values
numeric_types = (int, float, np.integer, np.floating)


def float_op(op, a, b):
    """
    Apply the binary operator `op` with IEEE 754 semantics.

    Division by zero, overflow and invalid powers yield inf or nan instead
    of raising, e.g. float_op(operator.truediv, 1.0, 0.0) == inf.

    Returns:
        float: The result of op(a, b).
    """
    with np.errstate(all='ignore'):
        return float(op(np.float64(a), np.float64(b)))


@total_ordering
class Number(DisplayLocale, Latex, LatexLocale):
    """
    A number in combination with an SI prefix.

    The represented value is mantissa * 10**prefix.exponent. Equality and
    ordering only look at this value, so 2 k == 2000.

    Arithmetic between two Numbers keeps the larger of both prefixes,
    arithmetic with a plain scalar keeps the prefix of the Number. This
    applies to products and quotients as well.
    """
    __slots__ = ['_mantissa', '_prefix']

    # Let numpy scalars defer to the reflected operators
    __array_ufunc__ = None

    def __init__(self, mantissa, prefix: Prefix = Prefix.NOTHING):
        """
        Args:
            mantissa (float): The number displayed before the prefix.
            prefix (Prefix, optional): Prefix applied to the mantissa
                                       (Default = Prefix.NOTHING).
        """
        self._mantissa = float(mantissa)
        self._prefix = prefix

    @classmethod
    def new(cls, value):
        """Create a Number representing `value` without any prefix."""
        return cls(value)

    @property
    def mantissa(self) -> float:
        """The number displayed before the prefix."""
        return self._mantissa

    @property
    def prefix(self) -> Prefix:
        return self._prefix

    @property
    def value(self) -> float:
        """The numeric value without any prefix."""
        return self._mantissa * self._prefix.factor

    def with_prefix(self, prefix: Prefix) -> 'Number':
        """
        Create a new Number from `self` by applying `prefix`.

        The mantissa stays the same, so the represented value changes:
        Number(9.9).with_prefix(Prefix.KILO).value == 9900.
        """
        return Number(self._mantissa, prefix)

    def to_prefix(self, prefix: Prefix) -> 'Number':
        """
        Create a new Number from `self` at the specified `prefix`.

        The mantissa is rescaled so the represented value stays the same
        (apart from floating point rounding).
        """
        factor = self._prefix.factor / prefix.factor
        return Number(self._mantissa * factor, prefix)

    def with_unit(self, unit):
        """Create a Quantity from `self` by applying `unit`."""
        from sinum.quantity import Quantity
        return Quantity(self, unit)

    def shorten(self) -> 'Number':
        """
        Reduce the number of digits of the mantissa.

        The prefix is moved in steps of three orders of magnitude until the
        mantissa has no more than 3 digits in front of the decimal point
        and no zero in front of it (1234 -> 1.234 k, 0.001 -> 1 m).

        Returns:
            Number: The shortened Number.

        Raises:
            PrefixExponentOutOfRange: If the value is too large or too small
                for any prefix.
            NoPrefixForExponent: If the new exponent falls between two
                prefixes (shortening a centi prefixed number by 6).
        """
        if self._mantissa == 0:
            return Number(0.0)

        if not math.isfinite(self._mantissa):
            raise PrefixExponentOutOfRange(self._mantissa)

        exps = (math.floor(math.log10(abs(self._mantissa))) // 3) * 3
        exp_new = self._prefix.exponent + exps

        if not Prefix.MIN_EXP <= exp_new <= Prefix.MAX_EXP:
            raise PrefixExponentOutOfRange(exp_new)

        prefix_new = Prefix.from_exponent(exp_new)
        if prefix_new is not self._prefix:
            logger.debug(f"Shortened {self!r} to prefix {prefix_new.key}")
        return self.to_prefix(prefix_new)

    def abs(self) -> 'Number':
        return Number(abs(self.value)).to_prefix(self._prefix)

    def powi(self, n: int) -> 'Number':
        """Raise the number to an integer power, keeping the prefix."""
        return Number(float_op(operator.pow, self.value, int(n))).to_prefix(
            self._prefix)

    def powf(self, n: float) -> 'Number':
        """Raise the number to a floating point power, keeping the prefix."""
        return Number(float_op(operator.pow, self.value, n)).to_prefix(
            self._prefix)

    def _combine(self, other, op, reflected=False):
        if isinstance(other, Number):
            prefix = max(self._prefix, other.prefix)
            val = float_op(op, self.value, other.value)
        elif isinstance(other, numeric_types):
            prefix = self._prefix
            if reflected:
                val = float_op(op, other, self.value)
            else:
                val = float_op(op, self.value, other)
        else:
            return NotImplemented

        return Number(val).to_prefix(prefix)

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
        return Number(-self.value).to_prefix(self._prefix)

    def __abs__(self):
        return self.abs()

    def __pow__(self, n):
        if isinstance(n, (int, np.integer)):
            return self.powi(n)
        if isinstance(n, numeric_types):
            return self.powf(n)
        return NotImplemented

    def __float__(self):
        return self.value

    def _other_value(self, other):
        if isinstance(other, Number):
            return other.value
        if isinstance(other, numeric_types):
            return float(other)
        return None

    def __eq__(self, other):
        val = self._other_value(other)
        if val is None:
            return NotImplemented
        return self.value == val

    def __lt__(self, other):
        val = self._other_value(other)
        if val is None:
            return NotImplemented
        return self.value < val

    def __hash__(self):
        return hash(self.value)

    def to_string(self, significant_digits=None, decimal_separator='.'):
        mantissa = format_mantissa(self._mantissa, significant_digits,
                                   decimal_separator)
        if self._prefix is Prefix.NOTHING:
            return mantissa
        return f"{mantissa} {self._prefix.to_symbol()}"

    def to_string_eng(self, significant_digits=None):
        """
        Return the number in engineering notation, writing the prefix as
        power of ten ('9.9e3' instead of '9.9 k').
        """
        mantissa = format_mantissa(self._mantissa, significant_digits)
        if self._prefix is Prefix.NOTHING:
            return mantissa
        return f"{mantissa}e{self._prefix.exponent}"

    def to_string_locale(self, locale, translator=None):
        """Return the number using the decimal separator of `locale`."""
        if translator is None:
            return self.to_string()
        return self.to_string(
            decimal_separator=translator.decimal_separator(locale))

    def to_latex(self, options=None) -> str:
        """
        Return the number as siunitx macro.

        Numbers without prefix use \\num, prefixed numbers \\qty with the
        prefix as unit: '\\qty{9.9}{\\kilo}'.
        """
        opts = str(options) if options is not None else ''
        mantissa = format_mantissa(self._mantissa)
        if self._prefix is Prefix.NOTHING:
            return f"\\num{opts}{{{mantissa}}}"
        return f"\\qty{opts}{{{mantissa}}}{{{self._prefix.to_latex()}}}"

    def to_dict(self):
        return {
            'mantissa': self._mantissa,
            'prefix': self._prefix.key,
        }

    @classmethod
    def from_dict(cls, data):
        """Rebuild a Number from the output of `to_dict`."""
        prefix = Prefix.from_str(data.get('prefix', 'nothing'))
        return cls(data['mantissa'], prefix)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Number({self._mantissa!r}, Prefix.{self._prefix.name})"
