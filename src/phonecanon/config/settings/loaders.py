"""Config settings – environment and ``.env`` loaders."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Callable, Mapping
from typing import Any, Final, TypeVar

from dotenv import dotenv_values

from phonecanon.config.settings.base import Settings
from phonecanon.config.validation import InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUTHY: Final = frozenset({"1", "true", "yes", "on"})


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


_COERCERS: Final[dict[str, Callable[[str], Any]]] = {
    "bool": lambda value: value.strip().lower() in _TRUTHY,
    "int": int,
    "float": float,
    "list": _split_list,
}


def _type_name(type_hint: Any) -> str:
    # Annotations are strings under ``from __future__ import annotations``.
    if isinstance(type_hint, str):
        return type_hint.split("[", 1)[0].strip()
    origin = getattr(type_hint, "__origin__", None) or type_hint
    return getattr(origin, "__name__", "")


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` for every field of a settings dataclass.

    *environ* defaults to :data:`os.environ`. ``bool``, ``int``, ``float``
    and ``list`` fields are coerced; lists are comma-separated.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        required = settings_class.required_fields()
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            raw = environ.get(key)
            if raw is None:
                if field.name in required:
                    raise MissingRequiredSettingError(key)
                continue
            values[field.name] = self._coerce(key, raw, field.type)

        return settings_class.build(values)

    @staticmethod
    def _coerce(key: str, raw: str, type_hint: Any) -> Any:
        coerce = _COERCERS.get(_type_name(type_hint))
        if coerce is None:
            return raw
        try:
            return coerce(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(key, raw, str(exc)) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Read a ``.env`` file underneath the process environment.

    Variables already set in the environment win unless *override* is true.
    The file is never written back into :data:`os.environ`.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        from_file = {key: value for key, value in dotenv_values(self._env_file).items() if value is not None}
        if self._override:
            environ = {**os.environ, **from_file}
        else:
            environ = {**from_file, **os.environ}
        return EnvSettingsLoader(environ).load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
