import pint
from rich.console import Console
from rich.table import Table
from sinum.errors import UnitPhysicalQuantityMismatch, UnparseableUnitName
from sinum.formatting import format_mantissa
from sinum.logger import logger
from sinum.number import Number
from sinum.quantity import Quantity
from sinum.unit import PhysicalQuantity, Unit


class UnitHandler:
    """Class for exchanging sinum values with the pint library."""

    def __init__(self):
        """Initialize the UnitHandler with a pint UnitRegistry."""
        self.ureg = pint.UnitRegistry()
        self.Q_ = self.ureg.Quantity

    def _pint_unit(self, unit):
        if isinstance(unit, str):
            return unit
        if unit.is_custom:
            raise UnparseableUnitName(unit.key)
        return unit.pint_name

    def convert(self, value, input_unit, output_unit):
        """
        Convert quantities between different units using pint.

        Args:
            value: The numeric value to convert.
            input_unit (Unit or str): The unit of the input value.
            output_unit (Unit or str): The desired unit of the output value.

        Returns:
            float: The converted value in the desired units.
        """
        try:
            return self.Q_(value, self._pint_unit(input_unit)).to(
                self._pint_unit(output_unit)).magnitude
        except pint.DimensionalityError:
            raise UnitPhysicalQuantityMismatch(input_unit,
                                               output_unit) from None

    def to_pint(self, quantity):
        """
        Convert a sinum Quantity into a pint Quantity.

        The pint quantity holds the prefix free value in the unit of
        `quantity` (2 km -> 2000 meter).

        Raises:
            UnparseableUnitName: For custom units, which pint does not know.
        """
        return self.Q_(quantity.number.value, self._pint_unit(quantity.unit))

    def from_pint(self, pint_quantity, unit=None):
        """
        Convert a pint Quantity into a sinum Quantity.

        Args:
            pint_quantity (pint.Quantity): The quantity to convert.
            unit (Unit, optional): Target unit. If omitted the base unit of
                                   the matching physical quantity is used.

        Returns:
            Quantity: The converted quantity, without prefix.

        Raises:
            UnitPhysicalQuantityMismatch: If the dimensionality does not
                match `unit`, or no physical quantity matches at all.
        """
        if unit is None:
            unit = self._find_base_unit(pint_quantity)

        try:
            magnitude = pint_quantity.to(self._pint_unit(unit)).magnitude
        except pint.DimensionalityError:
            raise UnitPhysicalQuantityMismatch(str(pint_quantity.units),
                                               unit) from None
        return Quantity(Number(magnitude), unit)

    def _find_base_unit(self, pint_quantity):
        for quantity in PhysicalQuantity:
            if quantity is PhysicalQuantity.CUSTOM:
                continue
            base = quantity.units()[0].base_unit
            dimensionality = self.Q_(1.0, base.pint_name).dimensionality
            if pint_quantity.dimensionality == dimensionality:
                return base

        logger.debug(f"No physical quantity with dimensionality "
                     f"{pint_quantity.dimensionality}")
        raise UnitPhysicalQuantityMismatch(str(pint_quantity.units))


# Create an instance of UnitHandler
unit_handler = UnitHandler()


def unit_table(units=None):
    """
    Create a formatted table of units using rich.

    Args:
        units (list, optional): Units to list. Defaults to all named units.

    Returns:
        str: The rendered table.
    """
    if units is None:
        units = Unit.all()

    table = Table()
    table.add_column("Unit", style="bold")
    table.add_column("Symbol")
    table.add_column("Quantity")
    table.add_column("Factor", justify="right")
    table.add_column("Base Unit")

    for unit in units:
        table.add_row(unit.to_display_name(), unit.to_symbol(),
                      unit.physical_quantity.value,
                      format_mantissa(unit.factor_to_base),
                      unit.base_unit.to_display_name())

    # Capture the table output using the rich console
    console = Console(width=160)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
