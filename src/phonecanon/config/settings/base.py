"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from phonecanon.config.validation import ConfigError

T = TypeVar("T", bound="Settings")


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses set ``_prefix`` and override :meth:`_validate` for checks
    spanning several fields.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook called after construction; raise a ``ConfigError`` to reject."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def required_fields(cls) -> frozenset[str]:
        return frozenset(
            field.name
            for field in dataclasses.fields(cls)
            if field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING
        )

    @classmethod
    def build(cls: type[T], values: Mapping[str, Any]) -> T:
        """Construct from *values*, turning constructor failures into ``ConfigError``."""
        try:
            return cls(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["Settings"]
