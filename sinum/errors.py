"""Exceptions raised by sinum for invalid prefixes, units and conversions."""


class SinumError(Exception):
    """Base class for all errors raised by sinum."""


class PrefixError(SinumError, ValueError):
    """An SI prefix could not be determined."""


class NoPrefixForExponent(PrefixError):
    """There is no SI prefix with the requested exponent."""

    def __init__(self, exponent: int) -> None:
        self.exponent = exponent
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"There is no Prefix with exponent `{self.exponent}`"


class PrefixExponentOutOfRange(PrefixError):
    """A value is too extreme to be expressed with any SI prefix."""

    def __init__(self, exponent) -> None:
        self.exponent = exponent
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"There is no SI prefix for `{self.exponent}`"


class UnparseablePrefixName(PrefixError):
    """A string does not name any SI prefix."""

    def __init__(self, string: str) -> None:
        self.string = string
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Could not determine the SI prefix of '{self.string}'"


class UnitError(SinumError, ValueError):
    """A unit could not be determined or converted."""


class UnparseableUnitName(UnitError):
    """A string does not name any known unit."""

    def __init__(self, string: str) -> None:
        self.string = string
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Unrecognized unit '{self.string}'"


class UnitPhysicalQuantityMismatch(UnitError):
    """Units of different physical quantities were combined."""

    def __init__(self, *units) -> None:
        self.units = list(units)
        super().__init__(str(self))

    def __str__(self) -> str:
        names = ', '.join(str(unit) for unit in self.units)
        return ("Not all units represent the same physical quantity: "
                f"{names}")
