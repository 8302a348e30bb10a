# __init__.py

from sinum.DEFAULTS import DEFAULTS
from sinum.logger import logger
from sinum.errors import (SinumError, PrefixError, NoPrefixForExponent,
                          PrefixExponentOutOfRange, UnparseablePrefixName,
                          UnitError, UnparseableUnitName,
                          UnitPhysicalQuantityMismatch)
from sinum.latex import Latex, LatexLocale, TexOptions
from sinum.i18n import DisplayLocale, Translator
from sinum.prefix import Prefix
from sinum.unit import PhysicalQuantity, Unit
from sinum.number import Number
from sinum.quantity import Quantity
from sinum.units import UnitHandler, unit_handler, unit_table
