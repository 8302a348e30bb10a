import inspect
from dataclasses import dataclass
from enum import Enum
from sinum import unitSystems
from sinum.errors import UnparseableUnitName, UnitPhysicalQuantityMismatch
from sinum.i18n import DisplayLocale
from sinum.latex import Latex
from sinum.logger import logger
from sinum.unitSystems import _DISPLAY_FORMAT, _LATEX_FORMAT, _PINT_FORMAT


def get_classes_from_module(module):
    """
    Collect all classes defined in a given module.

    Args:
        module (module): The module to collect classes from.

    Returns:
        dict: A dictionary where keys are class names and values are
              class objects.
    """
    return {
        name: cls for name, cls in inspect.getmembers(module, inspect.isclass)
        if cls.__module__ == module.__name__
    }


# Load the physical quantity tables
quantityTables = get_classes_from_module(unitSystems)


class PhysicalQuantity(Enum):
    """
    The physical quantity measured by a unit.

    Only units of the same physical quantity can be converted into each
    other. CUSTOM groups all user defined units.
    """
    CUSTOM = 'CUSTOM'
    CURRENT = 'CURRENT'
    LUMINOUS_INTENSITY = 'LUMINOUS_INTENSITY'
    TEMPERATURE = 'TEMPERATURE'
    MASS = 'MASS'
    LENGTH = 'LENGTH'
    AMOUNT = 'AMOUNT'
    TIME = 'TIME'
    PRESSURE = 'PRESSURE'
    RADIATION = 'RADIATION'

    def units(self):
        """Return the named units measuring this quantity."""
        if self is PhysicalQuantity.CUSTOM:
            return []
        return [Unit(key) for key in quantityTables[self.value].units]


def _index_units():
    """
    Build the lookup of unit key to (PhysicalQuantity, factor to base).

    Every quantity table must exist, list its base unit with factor 1 and
    only use keys that have a display symbol.
    """
    index = {}
    for quantity in PhysicalQuantity:
        if quantity is PhysicalQuantity.CUSTOM:
            continue

        table = quantityTables.get(quantity.value)
        if table is None:
            logger.critical(f"No unit table for '{quantity.value}'")

        if table.units.get(table.base) != 1.0:
            logger.critical(f"Base unit '{table.base}' of '{quantity.value}' "
                            "must have a factor of 1")

        for key, factor in table.units.items():
            if key in index:
                logger.critical(f"Unit '{key}' is assigned to more than one "
                                "physical quantity")
            if key not in _DISPLAY_FORMAT or key not in _LATEX_FORMAT:
                logger.critical(f"Unit '{key}' has no display format")
            index[key] = (quantity, factor)

    unknown = set(quantityTables) - {q.value for q in PhysicalQuantity}
    if unknown:
        logger.critical(f"Unit tables without physical quantity: {unknown}")

    return index


_UNIT_INDEX = _index_units()


@dataclass(frozen=True)
class Unit(DisplayLocale, Latex):
    """
    A physical unit.

    Named units are available as class attributes (Unit.METER,
    Unit.KILOGRAM, ...). Units outside of the built in set can be created
    with `Unit.custom(name)`; such units only ever match a custom unit of
    the same name.

    Attributes:
        key (str): Canonical key of the unit ('astronomical_unit'), or the
                   name of a custom unit.
        is_custom (bool): True for user defined units.
    """
    key: str
    is_custom: bool = False

    def __post_init__(self):
        if self.is_custom:
            if not isinstance(self.key, str) or not self.key.strip():
                raise UnparseableUnitName(self.key)
        elif self.key not in _UNIT_INDEX:
            raise UnparseableUnitName(self.key)

    @classmethod
    def custom(cls, name):
        """Create a user defined unit displayed as `name`."""
        return cls(name, is_custom=True)

    @classmethod
    def all(cls):
        """Return all named units."""
        return [cls(key) for key in _UNIT_INDEX]

    @classmethod
    def from_str(cls, text):
        """
        Parse a named unit from its key, name or symbol, ignoring case.

        Args:
            text (str): e.g. 'kg', 'Kilogram' or 'astronomical unit'.

        Returns:
            Unit: The matching named unit.

        Raises:
            UnparseableUnitName: If no named unit matches.
        """
        string = str(text).strip().lower()
        string = unitSystems._ALIASES.get(string, string)

        for key in _UNIT_INDEX:
            names = {key, key.replace('_', ' '), _DISPLAY_FORMAT[key].lower()}
            if string in names:
                return cls(key)

        raise UnparseableUnitName(text)

    @property
    def physical_quantity(self) -> PhysicalQuantity:
        if self.is_custom:
            return PhysicalQuantity.CUSTOM
        return _UNIT_INDEX[self.key][0]

    @property
    def factor_to_base(self) -> float:
        """Factor converting 1 of this unit into the base unit."""
        if self.is_custom:
            return 1.0
        return _UNIT_INDEX[self.key][1]

    @property
    def base_unit(self) -> 'Unit':
        """The base unit of the physical quantity (gram -> kilogram)."""
        if self.is_custom:
            return self
        return Unit(quantityTables[self.physical_quantity.value].base)

    @property
    def pint_name(self) -> str:
        return _PINT_FORMAT.get(self.key, self.key)

    def is_compatible(self, other) -> bool:
        """
        Check if `self` and `other` measure the same physical quantity.

        Custom units are only compatible with custom units of the same name.
        """
        return self._compatibility_key() == other._compatibility_key()

    def _compatibility_key(self):
        if self.is_custom:
            return (PhysicalQuantity.CUSTOM, self.key)
        return (self.physical_quantity, None)

    @staticmethod
    def convert_value(value, from_unit, to_unit):
        """
        Convert a plain number between two units.

        Args:
            value (float): Value in `from_unit`.
            from_unit (Unit): Unit of `value`.
            to_unit (Unit): Target unit.

        Returns:
            float: The value expressed in `to_unit`.

        Raises:
            UnitPhysicalQuantityMismatch: If the units measure different
            physical quantities.
        """
        if not from_unit.is_compatible(to_unit):
            raise UnitPhysicalQuantityMismatch(from_unit, to_unit)
        return value * from_unit.factor_to_base / to_unit.factor_to_base

    def to_symbol(self) -> str:
        if self.is_custom:
            return self.key
        return _DISPLAY_FORMAT[self.key]

    def to_display_name(self) -> str:
        if self.is_custom:
            return self.key
        return self.key.replace('_', ' ')

    def to_latex(self, options=None) -> str:
        """
        Return the unit as siunitx macro, e.g. '\\meter'.

        Custom units are returned verbatim.
        """
        if self.is_custom:
            return self.key
        return _LATEX_FORMAT[self.key]

    def to_string_locale(self, locale, translator=None):
        """Return the localized full name of the unit."""
        if self.is_custom or translator is None:
            return self.to_display_name()
        return translator.translate(f'units.{self.key}', locale,
                                    self.to_display_name())

    def __str__(self):
        return self.to_symbol()

    def __repr__(self):
        if self.is_custom:
            return f"Unit.custom({self.key!r})"
        return f"Unit.{self.key.upper()}"


# Base units
Unit.AMPERE = Unit('ampere')
Unit.CANDELA = Unit('candela')
Unit.KELVIN = Unit('kelvin')
Unit.KILOGRAM = Unit('kilogram')
Unit.METER = Unit('meter')
Unit.MOLE = Unit('mole')
Unit.SECOND = Unit('second')
# Additional mass units
Unit.GRAM = Unit('gram')
Unit.TONNE = Unit('tonne')
Unit.DALTON = Unit('dalton')
# Additional length units
Unit.ASTRONOMICAL_UNIT = Unit('astronomical_unit')
Unit.LIGHTYEAR = Unit('lightyear')
Unit.PARSEC = Unit('parsec')
# Pressure
Unit.PASCAL = Unit('pascal')
Unit.BAR = Unit('bar')
# Radiation
Unit.SIEVERT = Unit('sievert')
