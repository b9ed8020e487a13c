import pytest

CONFIG_KEYS = (
    "MONEY_DEFAULTS_PRECISION",
    "MONEY_DEFAULTS_ROUNDING_MODE",
    "MONEY_DEFAULTS_MATH_CONTEXT",
)


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)

    from decimoney.domain.services import reset_default_context
    from decimoney.shared.config import get_settings

    get_settings.cache_clear()
    reset_default_context()

    yield

    get_settings.cache_clear()
    reset_default_context()
