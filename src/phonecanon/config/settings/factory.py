"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Sequence, TypeVar

from phonecanon.config.settings.base import Settings
from phonecanon.config.settings.loaders import SettingsLoader
from phonecanon.config.validation.errors import MissingRequiredSettingError
from phonecanon.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


class SettingsFactory:
    """Layer several loaders and explicit overrides into one settings object."""

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            :class:`~phonecanon.config.settings.base.Settings` subclass to build.
        loaders:
            Applied in order, each replacing the values of the previous
            ones. A loader missing a required field is logged and skipped.
        overrides:
            Applied last, e.g. by tests.

        Raises
        ------
        MissingRequiredSettingError
            When a required field has no value once every source is merged.
        InvalidSettingValueError
            When any source supplies a value the settings reject.
        ConfigError
            When the merged values cannot build *settings_cls* at all.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                instance = loader.load(settings_cls)
            except MissingRequiredSettingError as exc:
                logger.warning(
                    "config.loader_skipped",
                    loader=type(loader).__name__,
                    setting=exc.setting_name,
                )
                continue
            merged.update(dataclasses.asdict(instance))

        merged.update(overrides or {})

        missing = settings_cls.required_fields() - merged.keys()
        if missing:
            raise MissingRequiredSettingError(min(missing))
        return settings_cls.build(merged)


__all__ = ["SettingsFactory"]
