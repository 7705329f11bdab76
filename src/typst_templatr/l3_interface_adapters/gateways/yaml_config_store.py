"""Gateway: YAML configuration store — implements ConfigStore port."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from typst_templatr.l1_entities.config import TemplatrConfig
from typst_templatr.l1_entities.errors import (
    ConfigMalformedError,
    ConfigNotFoundError,
    ConfigUnreadableError,
    ConfigWriteError,
    HomeDirectoryError,
)
from typst_templatr.l3_interface_adapters.gateways.paths import CONFIG_FILE_NAME

log = logging.getLogger('ttr.config')


class YamlConfigStore:
    """Reads and writes TemplatrConfig as a YAML document in the user's home directory."""

    def __init__(self, home: Path | None = None) -> None:
        self._home = home

    def resolve_path(self) -> Path:
        return self._home_dir() / CONFIG_FILE_NAME

    def load(self) -> TemplatrConfig:
        path = self.resolve_path()
        try:
            text = path.read_text(encoding='utf-8')
        except FileNotFoundError as e:
            raise ConfigNotFoundError(path) from e
        except OSError as e:
            raise ConfigUnreadableError(f'Failed to read config file {path} ({e})') from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigMalformedError(f'Config file {path} is not valid YAML ({e})') from e
        if not isinstance(data, dict):
            raise ConfigMalformedError(f'Config file {path} must contain a mapping with templates_path')
        try:
            config = TemplatrConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigMalformedError(f'Config file {path} is invalid ({e.error_count()} error(s))') from e
        log.debug('Loaded config from %s: templates_path=%s', path, config.templates_path)
        return config

    def save(self, config: TemplatrConfig) -> Path:
        path = self.resolve_path()
        content = yaml.safe_dump(config.model_dump(), sort_keys=False, allow_unicode=True)
        try:
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise ConfigWriteError(f'Failed to write config file {path} ({e})') from e
        log.info('Wrote config to %s', path)
        return path

    def _home_dir(self) -> Path:
        if self._home is not None:
            return self._home
        try:
            return Path.home()
        except (RuntimeError, KeyError) as e:
            raise HomeDirectoryError(f'Cannot determine the home directory ({e})') from e
