"""Unit tests for client settings & loaders."""

from pathlib import Path

import pytest

from socketlabs_client.config import (
    DEFAULT_ENDPOINT_URL,
    ClientSettings,
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

_KEYS = (
    "SOCKETLABS_SERVER_ID",
    "SOCKETLABS_API_KEY",
    "SOCKETLABS_ENDPOINT_URL",
    "SOCKETLABS_PROXY_URL",
    "SOCKETLABS_MAX_RECIPIENTS",
    "SOCKETLABS_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also removes values loaded from .env files
    for key in _KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


class TestClientSettings:
    def test_defaults(self) -> None:
        settings = ClientSettings(server_id=1, api_key="k")
        assert settings.endpoint_url == DEFAULT_ENDPOINT_URL
        assert settings.proxy_url is None
        assert settings.max_recipients == 50
        assert settings.timeout is None

    def test_non_positive_max_recipients(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ClientSettings(server_id=1, api_key="k", max_recipients=0)
        assert exc_info.value.setting_name == "max_recipients"

    def test_empty_endpoint(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ClientSettings(server_id=1, api_key="k", endpoint_url="")

    def test_repr_redacts_api_key(self) -> None:
        assert "secret" not in repr(ClientSettings(server_id=1, api_key="secret"))

    def test_frozen(self) -> None:
        settings = ClientSettings(server_id=1, api_key="k")
        with pytest.raises(Exception):
            settings.api_key = "other"  # type: ignore[misc]


class TestEnvSettingsLoader:
    def test_loads_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOCKETLABS_SERVER_ID", "12345")
        monkeypatch.setenv("SOCKETLABS_API_KEY", "abc")
        settings = EnvSettingsLoader().load()
        assert settings.server_id == 12345
        assert settings.api_key == "abc"

    def test_loads_optional(self) -> None:
        settings = EnvSettingsLoader(
            {
                "SOCKETLABS_SERVER_ID": "1",
                "SOCKETLABS_API_KEY": "k",
                "SOCKETLABS_ENDPOINT_URL": "https://e.test",
                "SOCKETLABS_PROXY_URL": "http://proxy:3128",
                "SOCKETLABS_MAX_RECIPIENTS": "10",
                "SOCKETLABS_TIMEOUT": "2.5",
            }
        ).load()
        assert settings.endpoint_url == "https://e.test"
        assert settings.proxy_url == "http://proxy:3128"
        assert settings.max_recipients == 10
        assert settings.timeout == 2.5

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({"SOCKETLABS_API_KEY": "k"}).load()
        assert exc_info.value.setting_name == "SOCKETLABS_SERVER_ID"

    def test_non_numeric_server_id(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"SOCKETLABS_SERVER_ID": "abc", "SOCKETLABS_API_KEY": "k"}).load()

    def test_invalid_value_is_config_error(self) -> None:
        env = {"SOCKETLABS_SERVER_ID": "1", "SOCKETLABS_API_KEY": "k", "SOCKETLABS_MAX_RECIPIENTS": "-1"}
        with pytest.raises(ConfigError):
            EnvSettingsLoader(env).load()


class TestDotenvSettingsLoader:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SOCKETLABS_SERVER_ID=42\nSOCKETLABS_API_KEY=from-dotenv\n")
        settings = DotenvSettingsLoader(str(env_file)).load()
        assert settings.server_id == 42
        assert settings.api_key == "from-dotenv"
