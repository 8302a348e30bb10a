import numpy as np
from sinum.DEFAULTS import DEFAULTS


def format_mantissa(value, significant_digits=None, decimal_separator='.'):
    """
    Render a float in plain positional notation.

    The value is rounded to a fixed number of significant digits first so
    floating point noise (9999899999999.998 instead of 9999900000000) does
    not show up. Scientific notation is never used and a zero decimal part
    is dropped.

    Args:
        value (float): The number to render.
        significant_digits (int, optional): Digits to keep. Defaults to
            DEFAULTS.significant_digits.
        decimal_separator (str, optional): Separator between integer and
            decimal part.

    Returns:
        str: The rendered number, e.g. '9.9' or '9999900000000'.
    """
    if significant_digits is None:
        significant_digits = DEFAULTS.significant_digits

    value = float(value)
    if not np.isfinite(value):
        return str(value)

    rounded = float(f"{value:.{significant_digits}g}")
    text = np.format_float_positional(rounded, trim='-')

    if decimal_separator != '.':
        text = text.replace('.', decimal_separator)
    return text
