from enum import Enum
from functools import total_ordering
from sinum.errors import NoPrefixForExponent, UnparseablePrefixName
from sinum.i18n import DisplayLocale
from sinum.latex import Latex


# Prefix symbols
_DISPLAY_FORMAT = {
    'quecto': 'q',
    'ronto': 'r',
    'yocto': 'y',
    'zepto': 'z',
    'atto': 'a',
    'femto': 'f',
    'pico': 'p',
    'nano': 'n',
    'micro': 'µ',
    'milli': 'm',
    'centi': 'c',
    'deci': 'd',
    'nothing': '',
    'deca': 'da',
    'hecto': 'h',
    'kilo': 'k',
    'mega': 'M',
    'giga': 'G',
    'tera': 'T',
    'peta': 'P',
    'exa': 'E',
    'zetta': 'Z',
    'yotta': 'Y',
    'ronna': 'R',
    'quetta': 'Q',
}

# Alternative spellings accepted when parsing symbols
_SYMBOL_ALIASES = {
    'u': 'micro',
    'μ': 'micro',  # Greek small letter mu, U+03BC
}


@total_ordering
class Prefix(DisplayLocale, Latex, Enum):
    """
    The SI prefixes like kilo, milli, nano etc.

    The value of each member is its base-10 exponent. Prefixes are ordered
    by exponent, so `max(a, b)` picks the larger prefix.
    """
    QUECTO = -30
    RONTO = -27
    YOCTO = -24
    ZEPTO = -21
    ATTO = -18
    FEMTO = -15
    PICO = -12
    NANO = -9
    MICRO = -6
    MILLI = -3
    CENTI = -2
    DECI = -1
    NOTHING = 0
    DECA = 1
    HECTO = 2
    KILO = 3
    MEGA = 6
    GIGA = 9
    TERA = 12
    PETA = 15
    EXA = 18
    ZETTA = 21
    YOTTA = 24
    RONNA = 27
    QUETTA = 30

    @property
    def exponent(self) -> int:
        """The base-10 exponent represented by this prefix."""
        return self.value

    @property
    def factor(self) -> float:
        """
        The factor represented by this prefix.

        Built from the decimal literal, so Prefix.QUECTO.factor == 1e-30
        exactly.
        """
        return float(f'1e{self.value}')

    @property
    def key(self) -> str:
        """Canonical key used by locale tables ('kilo', 'nothing')."""
        return self.name.lower()

    def to_symbol(self) -> str:
        return _DISPLAY_FORMAT[self.key]

    def to_display_name(self) -> str:
        if self is Prefix.NOTHING:
            return ''
        return self.key

    @classmethod
    def from_exponent(cls, exp):
        """
        Return the prefix with exponent `exp`.

        Args:
            exp (int): Base-10 exponent.

        Returns:
            Prefix: The matching prefix.

        Raises:
            NoPrefixForExponent: If no prefix has this exponent.
        """
        try:
            return cls(exp)
        except ValueError:
            raise NoPrefixForExponent(exp) from None

    @classmethod
    def from_str(cls, text):
        """
        Parse a prefix from its symbol or name.

        Symbols are matched case-sensitively since several of them only
        differ in case (m/M, p/P). Names are matched case-insensitively.

        Raises:
            UnparseablePrefixName: If nothing matches.
        """
        string = str(text).strip()

        for key, symbol in _DISPLAY_FORMAT.items():
            if symbol and string == symbol:
                return cls[key.upper()]
        if string in _SYMBOL_ALIASES:
            return cls[_SYMBOL_ALIASES[string].upper()]

        name = string.lower()
        if name in _DISPLAY_FORMAT:
            return cls[name.upper()]

        raise UnparseablePrefixName(text)

    def to_latex(self, options=None) -> str:
        """
        Return the prefix as siunitx macro, e.g. '\\kilo'.

        Prefix.NOTHING yields an empty string.
        """
        if self is Prefix.NOTHING:
            return ''
        return f'\\{self.key}'

    def to_string_locale(self, locale, translator=None):
        """Return the localized name of the prefix."""
        if translator is None:
            return self.to_display_name()
        return translator.translate(f'prefixes.{self.key}', locale,
                                    self.to_display_name())

    def __lt__(self, other):
        if not isinstance(other, Prefix):
            return NotImplemented
        return self.value < other.value

    def __str__(self):
        return self.to_symbol()


# Exponent range covered by Prefix
Prefix.MIN_EXP = min(prefix.value for prefix in Prefix)
Prefix.MAX_EXP = max(prefix.value for prefix in Prefix)
