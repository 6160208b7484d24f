"""Config settings – ParserSettings for the default phone parser."""
from __future__ import annotations

import dataclasses
import logging
import re
from typing import ClassVar, Final

from phonecanon.config.settings.base import Settings
from phonecanon.config.settings.factory import SettingsFactory
from phonecanon.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader
from phonecanon.config.validation import InvalidSettingValueError

_ISO_CODE: Final = re.compile(r"^[A-Za-z]{2}$")
_LOG_LEVELS: Final = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class ParserSettings(Settings):
    """Settings read from ``PHONECANON_*`` environment variables.

    ``regions`` restricts the default metadata store to the listed ISO
    codes; empty means every region.
    """

    _prefix: ClassVar[str] = "PHONECANON"

    regions: list[str] = dataclasses.field(default_factory=list)
    log_level: str = "INFO"

    def _validate(self) -> None:
        for region in self.regions:
            if not _ISO_CODE.match(region):
                raise InvalidSettingValueError("regions", region, "expected a two-letter ISO code")
        self.regions = [region.upper() for region in self.regions]
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        self.log_level = self.log_level.upper()

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(env_file: str | None = None) -> ParserSettings:
    """Build :class:`ParserSettings` from the environment (and *env_file*)."""
    loader = EnvSettingsLoader() if env_file is None else DotenvSettingsLoader(env_file)
    return SettingsFactory.create(ParserSettings, [loader])


__all__ = ["ParserSettings", "load_settings"]
