"""Config – settings loaders and SettingsFactory.

Precedence, lowest first: field defaults, each loader in order, explicit
overrides::

    settings = SettingsFactory.create(
        ExportSettings,
        loaders=[DotenvSettingsLoader(".env")],
        overrides={"output_dir": "/srv/downloads"},
    )
"""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Sequence, TypeVar

from dotenv import load_dotenv

from hr_export.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from hr_export.config.settings import Settings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsFactory", "SettingsLoader"]

T = TypeVar("T", bound=Settings)


def _is_required(field: dataclasses.Field) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Reads ``<PREFIX>_<FIELD>`` environment variables, coerced by field type."""

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            if raw is None:
                if _is_required(field):
                    raise MissingRequiredSettingError(env_key)
                continue
            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        return settings_class(**kwargs)

    @staticmethod
    def _coerce(value: str, type_hint: Any) -> Any:
        # annotations are strings under ``from __future__ import annotations``
        name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
        if name == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if name == "int":
            return int(value)
        if name == "float":
            return float(value)
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Loads a ``.env`` file into the environment, then defers to :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


class SettingsFactory:
    """Merge loader outputs and overrides into one settings instance.

    A loader failing with :class:`ConfigError` is skipped so the remaining
    sources still contribute.  Values that fail the settings class's own
    validation raise :class:`InvalidSettingValueError`.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigError:
                continue
            merged.update(dataclasses.asdict(instance))

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):
            if field.name not in merged and _is_required(field):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc
