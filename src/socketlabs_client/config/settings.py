"""Config – ClientSettings dataclass."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from socketlabs_client.errors import SocketLabsError

DEFAULT_ENDPOINT_URL = "https://inject.socketlabs.com/api/v1/email"


class ConfigError(SocketLabsError):
    """Client settings could not be loaded or are unusable."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A ``SOCKETLABS_*`` variable needed to build a client is not set."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} must be set to configure a SocketLabs client")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A client setting is present but cannot be used."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        shown = "[REDACTED]" if "api_key" in setting_name.lower() else repr(value)
        super().__init__(f"Client setting {setting_name}={shown} {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


@dataclasses.dataclass(frozen=True)
class ClientSettings:
    """Construction-time configuration for :class:`~socketlabs_client.SocketLabsClient`.

    Credentials are not checked here; the send pipeline reports bad
    credentials as ``InvalidServerId`` / ``InvalidApiKey`` outcomes.
    """

    _prefix: ClassVar[str] = "SOCKETLABS"

    server_id: int
    api_key: str
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    proxy_url: str | None = None
    max_recipients: int = 50
    timeout: float | None = None

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not self.endpoint_url:
            raise InvalidSettingValueError("endpoint_url", self.endpoint_url, "must not be empty")
        if self.max_recipients <= 0:
            raise InvalidSettingValueError("max_recipients", self.max_recipients, "must be positive")
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")

    def __repr__(self) -> str:
        return (
            f"ClientSettings(server_id={self.server_id!r}, api_key='[REDACTED]', "
            f"endpoint_url={self.endpoint_url!r}, max_recipients={self.max_recipients!r})"
        )


__all__ = [
    "DEFAULT_ENDPOINT_URL",
    "ClientSettings",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
