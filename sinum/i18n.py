"""
Localized display strings.

Translations are kept in plain YAML tables, one file per locale, keyed by
the canonical keys of prefixes and units (`prefixes.kilo`,
`units.astronomical_unit`). A `Translator` is always constructed explicitly
and handed to `to_string_locale`, so any table can be swapped in.
"""
from pathlib import Path
import yaml
from sinum.DEFAULTS import DEFAULTS
from sinum.logger import logger

# Locale tables shipped with sinum
LOCALE_DIR = Path(__file__).parent / 'locales'


def normalize_locale(tag):
    """
    Normalize a locale tag to the 'll-CC' form used as table key.

    Args:
        tag (str): Locale tag like 'de_de', 'de-DE' or 'de'.

    Returns:
        str: The normalized tag, e.g. 'de-DE'.
    """
    parts = str(tag).strip().replace('_', '-').split('-')
    language = parts[0].lower()
    subtags = [part.upper() if len(part) == 2 else part.title()
               for part in parts[1:] if part]
    return '-'.join([language] + subtags)


def yaml_loader(yaml_path):
    """
    Load a YAML locale table.

    Args:
        yaml_path (str or Path): Path to the YAML file

    Returns:
        dict: Parsed table (empty if the file holds no data)
    """
    try:
        with open(yaml_path, 'r', encoding='utf-8') as file:
            table = yaml.safe_load(file)
    except yaml.YAMLError as e:
        logger.critical(f"Error parsing YAML file: {e}")
    except FileNotFoundError:
        logger.critical(f"Could not find file: {yaml_path}")

    if table is None:
        return {}
    if not isinstance(table, dict):
        logger.critical(f"Locale file {yaml_path} must contain a mapping")
    return table


def _dig(table, key):
    # Walk a dotted key ('units.kilogram') through nested mappings
    node = table
    for part in key.split('.'):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


class Translator:
    """
    Lookup service mapping canonical keys to localized strings.

    Lookups try the requested locale, then any table of the same language,
    then the fallback locale. Callers provide the non-localized default for
    when all of those miss.
    """

    def __init__(self, tables=None, fallback=None):
        """
        Args:
            tables (dict, optional): Mapping of locale tag to its nested
                                     translation table.
            fallback (str, optional): Locale used when a key is missing.
                                      Defaults to DEFAULTS.locale.
        """
        self._tables = {normalize_locale(tag): dict(table or {})
                        for tag, table in (tables or {}).items()}
        self.fallback = normalize_locale(fallback or DEFAULTS.locale)

    @classmethod
    def from_yaml(cls, *paths, fallback=None):
        """
        Build a Translator from YAML files named after their locale
        ('de-DE.yaml').
        """
        tables = {Path(path).stem: yaml_loader(path) for path in paths}
        return cls(tables, fallback=fallback)

    @classmethod
    def default(cls, fallback=None):
        """Build a Translator from the locale tables bundled with sinum."""
        return cls.from_yaml(*sorted(LOCALE_DIR.glob('*.yaml')),
                             fallback=fallback)

    @property
    def locales(self):
        """Sorted list of the locales with a table."""
        return sorted(self._tables)

    def _candidates(self, locale):
        tag = normalize_locale(locale)
        language = tag.split('-')[0]
        yield tag
        for known in sorted(self._tables):
            if known != tag and known.split('-')[0] == language:
                yield known
        yield self.fallback

    def lookup(self, key, locale):
        """
        Find the translation of `key` for `locale`.

        Args:
            key (str): Dotted canonical key, e.g. 'units.kilogram'.
            locale (str): Requested locale tag.

        Returns:
            str or None: The translation, None if no table has one.
        """
        for tag in self._candidates(locale):
            value = _dig(self._tables.get(tag), key)
            if value is not None:
                if tag != normalize_locale(locale):
                    logger.debug(f"'{key}' missing for '{locale}', "
                                 f"using '{tag}'")
                return str(value)
        return None

    def translate(self, key, locale, default):
        """Return the translation of `key`, or `default` if there is none."""
        value = self.lookup(key, locale)
        if value is None:
            logger.debug(f"No translation of '{key}' for '{locale}'")
            return default
        return value

    def decimal_separator(self, locale):
        return self.translate('decimal_separator', locale, '.')


class DisplayLocale:
    """Capability of providing a localized string representation."""

    def to_string_locale(self, locale, translator=None):
        """
        Return the localized string representation of `self`.

        The standard implementation ignores `locale` and returns the same
        string as `str()`.
        """
        return str(self)
