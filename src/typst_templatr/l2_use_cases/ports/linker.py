"""Port: filesystem link capability."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Linker(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Creates and deletes references to library entries."""

    def link(self, source: Path, destination: Path) -> None:
        """Create *destination* as a reference to *source* (file or directory variant)."""
        ...

    def unlink(self, destination: Path) -> None:
        """Delete the reference at *destination*, leaving its target untouched."""
        ...
