"""Configuration Pydantic model — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from typst_templatr.l1_entities.errors import HomeDirectoryError


class TemplatrConfig(BaseModel):
    templates_path: str  # stored as typed; '~' is expanded on use

    @property
    def library_dir(self) -> Path:
        try:
            return Path(self.templates_path).expanduser()
        except RuntimeError as e:
            raise HomeDirectoryError(f"Cannot expand templates_path '{self.templates_path}' ({e})") from e
