import pytest
from sinum import DisplayLocale, Number, Prefix, Quantity, Translator, Unit
from sinum.i18n import normalize_locale


@pytest.fixture(scope='module')
def translator():
    return Translator.default()


def test_bundled_locales(translator):
    assert translator.locales == ['de-DE', 'en-US']
    assert translator.fallback == 'en-US'


def test_normalize_locale():
    assert normalize_locale('de_de') == 'de-DE'
    assert normalize_locale('EN-us') == 'en-US'
    assert normalize_locale('de') == 'de'
    assert normalize_locale('zh-hant-tw') == 'zh-Hant-TW'


def test_unit_names(translator):
    assert Unit.KILOGRAM.to_string_locale('de-DE', translator) == 'Kilogramm'
    assert Unit.ASTRONOMICAL_UNIT.to_string_locale('de-DE', translator) \
        == 'Astronomische Einheit'
    assert Unit.ASTRONOMICAL_UNIT.to_string_locale('en-US', translator) \
        == 'astronomical unit'


def test_language_match(translator):
    assert Unit.SECOND.to_string_locale('de', translator) == 'Sekunde'
    assert Unit.SECOND.to_string_locale('de_AT', translator) == 'Sekunde'


def test_fallback_locale(translator):
    assert Unit.GRAM.to_string_locale('fr-FR', translator) == 'gram'
    assert translator.decimal_separator('fr-FR') == '.'


def test_without_translator():
    assert Unit.LIGHTYEAR.to_string_locale('de-DE') == 'lightyear'
    assert Prefix.KILO.to_string_locale('de-DE') == 'kilo'
    assert Quantity(9.9, Unit.KILOGRAM).to_string_locale('de-DE') == '9.9 kg'


def test_custom_unit(translator):
    assert Unit.custom('furlong').to_string_locale('de-DE', translator) \
        == 'furlong'


def test_prefix_names(translator):
    assert Prefix.MICRO.to_string_locale('de-DE', translator) == 'Mikro'
    assert Prefix.MICRO.to_string_locale('en-US', translator) == 'micro'
    assert Prefix.NOTHING.to_string_locale('de-DE', translator) == ''


def test_decimal_separator(translator):
    assert translator.decimal_separator('de-DE') == ','
    assert Quantity(9.9, Unit.KILOGRAM).to_string_locale(
        'de-DE', translator) == '9,9 kg'
    assert Number(1.25).with_prefix(Prefix.MEGA).to_string_locale(
        'de-DE', translator) == '1,25 M'
    assert Quantity(9.9, Unit.KILOGRAM).to_string_locale(
        'en-US', translator) == '9.9 kg'


def test_injected_tables():
    translator = Translator({'fr_FR': {'units': {'meter': 'mètre'},
                                       'decimal_separator': ','}},
                            fallback='fr-FR')
    assert translator.locales == ['fr-FR']
    assert Unit.METER.to_string_locale('fr-FR', translator) == 'mètre'
    assert Unit.METER.to_string_locale('it-IT', translator) == 'mètre'
    assert Unit.SECOND.to_string_locale('fr-FR', translator) == 'second'
    assert translator.lookup('units.second', 'fr-FR') is None
    assert translator.translate('units.second', 'fr-FR', 'sec') == 'sec'


def test_from_yaml(tmp_path):
    path = tmp_path / 'it-IT.yaml'
    path.write_text('decimal_separator: ","\nunits:\n  meter: metro\n',
                    encoding='utf-8')
    translator = Translator.from_yaml(path)
    assert translator.locales == ['it-IT']
    assert Unit.METER.to_string_locale('it-IT', translator) == 'metro'
    assert Quantity(2.5, Unit.METER).to_string_locale('it-IT', translator) \
        == '2,5 m'


def test_from_yaml_empty(tmp_path):
    path = tmp_path / 'nl-NL.yaml'
    path.write_text('', encoding='utf-8')
    translator = Translator.from_yaml(path)
    assert translator.lookup('units.meter', 'nl-NL') is None


def test_from_yaml_missing(tmp_path):
    with pytest.raises(RuntimeError):
        Translator.from_yaml(tmp_path / 'xx-XX.yaml')


def test_from_yaml_invalid(tmp_path):
    path = tmp_path / 'xx-XX.yaml'
    path.write_text('units: [meter\n', encoding='utf-8')
    with pytest.raises(RuntimeError):
        Translator.from_yaml(path)


def test_display_locale_default():
    class Named(DisplayLocale):
        def __str__(self):
            return 'named'

    assert Named().to_string_locale('de-DE') == 'named'
