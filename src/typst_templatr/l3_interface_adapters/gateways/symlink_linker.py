"""Gateway: symbolic-link linker — implements Linker port."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path


class SymlinkLinker:
    """Creates OS symbolic links, picking the file or directory variant from the source."""

    def link(self, source: Path, destination: Path) -> None:
        # Windows distinguishes file and directory symlinks; POSIX ignores the flag.
        os.symlink(source, destination, target_is_directory=source.is_dir())

    def unlink(self, destination: Path) -> None:
        if sys.platform == 'win32' and _is_directory_link(destination):
            os.rmdir(destination)
        else:
            destination.unlink()


def _is_directory_link(path: Path) -> bool:
    """Read the link's own attributes so a dangling directory link still counts."""
    attributes = getattr(os.lstat(path), 'st_file_attributes', 0)
    return bool(attributes & stat.FILE_ATTRIBUTE_DIRECTORY)
