"""Config loading from the environment."""
import pytest

from img2txt.config import Config
from img2txt.errors import ConfigurationError

ENV_VARS = ("IMG2TXT_API_KEY", "IMG2TXT_BASE_URL", "IMG2TXT_SETTLE_DELAY", "IMG2TXT_TIMEOUT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr("img2txt.config.load_dotenv", lambda **_: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_config_from_env_success(monkeypatch):
    monkeypatch.setenv("IMG2TXT_API_KEY", "sk-live-123")
    monkeypatch.setenv("IMG2TXT_BASE_URL", "https://staging.img2txt.io/api/")
    monkeypatch.setenv("IMG2TXT_SETTLE_DELAY", "0.5")
    monkeypatch.setenv("IMG2TXT_TIMEOUT", "30")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = Config.from_env()

    assert config.api_key == "sk-live-123"
    assert config.base_url == "https://staging.img2txt.io/api/"
    assert config.settle_delay == 0.5
    assert config.timeout == 30.0
    assert config.log_level == "DEBUG"


def test_config_defaults(monkeypatch):
    monkeypatch.setenv("IMG2TXT_API_KEY", "k")

    config = Config.from_env()

    assert config.base_url == "https://img2txt.io/api/"
    assert config.settle_delay == 0.2
    assert config.timeout is None
    assert config.log_level == "INFO"


@pytest.mark.parametrize("value", [None, ""])
def test_config_missing_api_key_fails(monkeypatch, value):
    if value is not None:
        monkeypatch.setenv("IMG2TXT_API_KEY", value)

    with pytest.raises(ConfigurationError, match="IMG2TXT_API_KEY"):
        Config.from_env()


@pytest.mark.parametrize("name", ["IMG2TXT_SETTLE_DELAY", "IMG2TXT_TIMEOUT"])
@pytest.mark.parametrize("value", ["soon", "-1", "inf", "nan"])
def test_config_rejects_bad_seconds(monkeypatch, name, value):
    monkeypatch.setenv("IMG2TXT_API_KEY", "k")
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError, match=name):
        Config.from_env()


def test_config_zero_settle_delay_is_kept(monkeypatch):
    monkeypatch.setenv("IMG2TXT_API_KEY", "k")
    monkeypatch.setenv("IMG2TXT_SETTLE_DELAY", "0")

    assert Config.from_env().settle_delay == 0.0


def test_config_immutable():
    config = Config(api_key="k")

    with pytest.raises(Exception):
        config.api_key = "other"
