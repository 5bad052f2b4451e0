import pytest

from config.settings import Settings

ENV_VARS = ['CREATIVE_TARGET_CPL', 'CREATIVE_CURRENCY_SYMBOL', 'CREATIVE_MIN_DAYS_ACTIVE', 'CREATIVE_LOG_LEVEL']


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.load()

    assert settings.target_cpl == 300.0
    assert settings.currency_symbol == '฿'
    assert settings.min_days_active == 4
    assert settings.log_level == 'INFO'


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv('CREATIVE_TARGET_CPL', '150.5')
    monkeypatch.setenv('CREATIVE_CURRENCY_SYMBOL', 'AED ')
    monkeypatch.setenv('CREATIVE_MIN_DAYS_ACTIVE', '7')
    monkeypatch.setenv('CREATIVE_LOG_LEVEL', 'debug')

    settings = Settings.load()

    assert settings.target_cpl == 150.5
    assert settings.currency_symbol == 'AED'
    assert settings.min_days_active == 7
    assert settings.log_level == 'DEBUG'


@pytest.mark.parametrize("value", ["abc", "-10", "  "])
def test_invalid_target_falls_back_to_default(monkeypatch, value):
    monkeypatch.setenv('CREATIVE_TARGET_CPL', value)

    assert Settings.load().target_cpl == 300.0


def test_invalid_min_days_falls_back_to_default(monkeypatch):
    monkeypatch.setenv('CREATIVE_MIN_DAYS_ACTIVE', '3.5')

    assert Settings.load().min_days_active == 4


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv('CREATIVE_LOG_LEVEL', 'chatty')

    assert Settings.load().log_level == 'INFO'
