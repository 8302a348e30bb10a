"""LaTeX output following the conventions of the siunitx package."""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class TexOptions:
    """
    Options forwarded to the siunitx macros produced by `to_latex`.

    Options that are left as None are not written at all, so LaTeX falls
    back to whatever the document configures.

    Attributes:
        drop_zero_decimal (bool, optional): Omit a decimal part that is
            only zeros ("2.0" is typeset as "2").
        minimum_decimal_digits (int, optional): Pad the mantissa to at least
            this many decimal digits.
    """
    drop_zero_decimal: Optional[bool] = None
    minimum_decimal_digits: Optional[int] = None

    @classmethod
    def none(cls):
        """Create options without any option active."""
        return cls()

    def with_drop_zero_decimal(self, sw: bool = True) -> 'TexOptions':
        return replace(self, drop_zero_decimal=sw)

    def with_minimum_decimal_digits(self, digits: int) -> 'TexOptions':
        if digits < 0:
            raise ValueError(
                f"minimum_decimal_digits must not be negative, got {digits}")
        return replace(self, minimum_decimal_digits=digits)

    def __str__(self):
        opts = []
        if self.drop_zero_decimal:
            opts.append('drop-zero-decimal')
        if self.minimum_decimal_digits is not None:
            opts.append(
                f'minimum-decimal-digits={self.minimum_decimal_digits}')

        if not opts:
            return ''
        return f"[{', '.join(opts)}]"


class Latex:
    """Capability of being converted into LaTeX code."""

    def to_latex(self, options: Optional[TexOptions] = None) -> str:
        """
        Convert the entity into a LaTeX string.

        Args:
            options (TexOptions, optional): siunitx options. Entities that
                do not render a number ignore them.

        Returns:
            str: LaTeX code, requiring the siunitx package.
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not provide LaTeX output")


class LatexLocale:
    """Capability of a localized LaTeX representation."""

    def to_latex_locale(self, locale, options: Optional[TexOptions] = None,
                        translator=None) -> str:
        """
        Return the localized LaTeX representation of `self`.

        The standard implementation ignores `locale` and returns the same
        string as `to_latex`. siunitx applies the decimal marker configured
        in the document.
        """
        return self.to_latex(options)
