"""Shared path constants for configuration, library defaults and logs."""

from __future__ import annotations

from platformdirs import user_log_path

APP_NAME = 'typst-templatr'

CONFIG_FILE_NAME = '.typst-templatr.yaml'
DEFAULT_TEMPLATES_PATH = '~/.typst-templates'

LOG_DIR = user_log_path(APP_NAME)
