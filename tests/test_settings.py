import logging

import pytest
from config.settings import load_settings, settings_for_variant, parse_bool, VARIANTS
from config.logging_config import configure_logging


def test_defaults_without_env():
    s = load_settings({})
    assert s.variant == 'lead-flow'
    assert s.lead_flow and s.csv_export and s.series_toggle
    assert s.pdf_export is False
    assert s.show_footer is True
    assert s.log_level == 'INFO'


def test_variant_toggles():
    classic = settings_for_variant('classic')
    assert not (classic.lead_flow or classic.csv_export or classic.pdf_export)
    audit = load_settings({'ROI_VARIANT': 'audit'})
    assert audit.pdf_export and audit.csv_export
    assert set(VARIANTS) == {'classic', 'lead-flow', 'audit'}


def test_env_overrides():
    s = load_settings({
        'ROI_APP_TITLE': 'Smile ROI',
        'ROI_SHOW_FOOTER': 'no',
        'ROI_PDF_EXPORT': 'true',
        'ROI_BRAND_URL': ' https://example.com ',
        'ROI_LOG_LEVEL': 'debug',
    })
    assert s.title == 'Smile ROI'
    assert s.show_footer is False
    assert s.pdf_export is True
    assert s.brand_url == 'https://example.com'
    assert s.log_level == 'DEBUG'


def test_bad_values():
    with pytest.raises(ValueError):
        load_settings({'ROI_VARIANT': 'deluxe'})
    with pytest.raises(ValueError):
        parse_bool('maybe', True)
    assert parse_bool('', False) is False
    assert parse_bool(None, True) is True


def test_configure_logging_level():
    configure_logging('WARNING')
    assert logging.getLogger().level == logging.WARNING
    configure_logging('nonsense')
    assert logging.getLogger().level == logging.INFO
