"""Config – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any

from dotenv import load_dotenv

from socketlabs_client.config.settings import (
    ClientSettings,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


class SettingsLoader(abc.ABC):
    """Port: load client settings from an external source."""

    @abc.abstractmethod
    def load(self) -> ClientSettings: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from ``SOCKETLABS_*`` environment variables."""

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self) -> ClientSettings:
        environ = os.environ if self._environ is None else self._environ
        prefix = ClientSettings._prefix.upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(ClientSettings):
            env_key = f"{prefix}_{field.name}".upper()
            raw = environ.get(env_key)

            if raw is None or raw == "":
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, f"could not be parsed: {exc}") from exc

        try:
            return ClientSettings(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        hint = str(type_hint).replace(" ", "")
        if hint in ("int", "int|None"):
            return int(value)
        if hint in ("float", "float|None"):
            return float(value)
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self) -> ClientSettings:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load()


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
