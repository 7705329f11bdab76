"""Port: configuration store."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from typst_templatr.l1_entities.config import TemplatrConfig


class ConfigStore(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract store for the single per-user configuration record."""

    def resolve_path(self) -> Path:
        """Return the fixed configuration file location."""
        ...

    def load(self) -> TemplatrConfig:
        """Read and validate the configuration record."""
        ...

    def save(self, config: TemplatrConfig) -> Path:
        """Overwrite the configuration record; return the file written."""
        ...
