from dataclasses import dataclass


_DISPLAY_FORMAT = {
    # Base units
    'ampere': 'A',                     # Ampere
    'candela': 'cd',                   # Candela
    'kelvin': 'K',                     # Kelvin
    'kilogram': 'kg',                  # Kilogram
    'meter': 'm',                      # Meter
    'mole': 'mol',                     # Mole
    'second': 's',                     # Second

    # Additional mass units
    'gram': 'g',                       # Gram
    'tonne': 't',                      # Metric ton
    'dalton': 'Da',                    # Unified atomic mass unit

    # Additional length units
    'astronomical_unit': 'au',         # Astronomical unit
    'lightyear': 'ly',                 # Lightyear
    'parsec': 'pc',                    # Parsec

    # Pressure
    'pascal': 'Pa',                    # Pascal
    'bar': 'bar',                      # Bar

    # Radiation
    'sievert': 'Sv',                   # Sievert
    }

# siunitx macros, plain text where siunitx has no macro
_LATEX_FORMAT = {
    'ampere': r'\ampere',
    'candela': r'\candela',
    'kelvin': r'\kelvin',
    'kilogram': r'\kilogram',
    'meter': r'\meter',
    'mole': r'\mole',
    'second': r'\second',
    'gram': r'\gram',
    'tonne': r'\tonne',
    'dalton': r'\dalton',
    'astronomical_unit': r'\astronomicalunit',
    'lightyear': 'ly',
    'parsec': 'pc',
    'pascal': r'\pascal',
    'bar': r'\bar',
    'sievert': r'\sievert',
    }

# Unit names understood by pint, where they differ from the sinum key
_PINT_FORMAT = {
    'lightyear': 'light_year',
    }

# Alternative spellings accepted when parsing unit names
_ALIASES = {
    'metre': 'meter',
    'amp': 'ampere',
    'sec': 'second',
    'ton': 'tonne',
    'metric ton': 'tonne',
    'light year': 'lightyear',
    'light_year': 'lightyear',
    'u': 'dalton',
    }


@dataclass
class CURRENT:
    """Electric current, measured in ampere."""
    base = 'ampere'
    units = {
        'ampere': 1.0,
    }


@dataclass
class LUMINOUS_INTENSITY:
    """Luminous intensity, measured in candela."""
    base = 'candela'
    units = {
        'candela': 1.0,
    }


@dataclass
class TEMPERATURE:
    """Thermodynamic temperature, measured in kelvin."""
    base = 'kelvin'
    units = {
        'kelvin': 1.0,
    }


@dataclass
class MASS:
    """
    Mass units.

    The SI base unit is the kilogram, not the gram, so the gram carries a
    factor of 1e-3.
    """
    base = 'kilogram'
    units = {
        'kilogram': 1.0,
        'gram': 1e-3,
        'tonne': 1e3,
        'dalton': 1.66053906892e-27,   # CODATA 2022
    }


@dataclass
class LENGTH:
    """Length units."""
    base = 'meter'
    units = {
        'meter': 1.0,
        'astronomical_unit': 149597870700.0,   # IAU 2012, exact
        'lightyear': 9460730472580800.0,       # Julian year at c, exact
        'parsec': 3.0856775814913673e16,       # 648000/pi au
    }


@dataclass
class AMOUNT:
    """Amount of substance, measured in mole."""
    base = 'mole'
    units = {
        'mole': 1.0,
    }


@dataclass
class TIME:
    """Time, measured in second."""
    base = 'second'
    units = {
        'second': 1.0,
    }


@dataclass
class PRESSURE:
    """Pressure units."""
    base = 'pascal'
    units = {
        'pascal': 1.0,
        'bar': 1e5,
    }


@dataclass
class RADIATION:
    """Equivalent radiation dose, measured in sievert."""
    base = 'sievert'
    units = {
        'sievert': 1.0,
    }
