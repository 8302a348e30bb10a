from dataclasses import dataclass
from typing import Literal


@dataclass
class SinumSettings:
    """Default settings for sinum formatting and diagnostics."""
    # Significant digits kept when rendering a mantissa as text
    significant_digits: int = 12
    # Locale used when a translation is missing for the requested one
    locale: str = 'en-US'
    log_level: Literal['silent', 'debug', 'info', 'warning', 'error',
                       'critical'] = 'warning'


# Create the default instance
DEFAULTS = SinumSettings()
