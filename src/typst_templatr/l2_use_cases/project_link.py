"""Use case: activate and deactivate library templates in a project directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from typst_templatr.l1_entities.errors import (
    LinkExistsError,
    LinkNotFoundError,
    LinkWriteError,
    NotATemplateLinkError,
    TemplateNotFoundError,
)
from typst_templatr.l1_entities.template_name import canonical_name
from typst_templatr.l2_use_cases.ports.linker import Linker

log = logging.getLogger('ttr.link')


class ProjectLinks:
    """Places references to library templates in a working directory without copying content."""

    def __init__(self, library_dir: Path, cwd: Path, linker: Linker) -> None:
        self._library_dir = Path(os.path.abspath(cwd / library_dir))
        self._cwd = cwd
        self._linker = linker

    def add(self, name: str) -> Path:
        """Link library template *name* into the working directory; return the link path."""
        name = canonical_name(name)
        source = self._library_dir / name
        dest = self._cwd / name
        if not source.exists():
            raise TemplateNotFoundError(f"Template '{name}' not found in {self._library_dir}.")
        # lexists: a dangling link still occupies the name
        if os.path.lexists(dest):
            raise LinkExistsError(f"'{name}' already exists in {self._cwd}.")
        try:
            self._linker.link(source, dest)
        except OSError as e:
            raise LinkWriteError(f"Failed to link '{name}' ({e})") from e
        log.info('Linked %s -> %s', dest, source)
        return dest

    def remove(self, name: str) -> Path:
        """Delete the working-directory link for *name*; the library copy is untouched."""
        name = canonical_name(name)
        dest = self._cwd / name
        if not os.path.lexists(dest):
            raise LinkNotFoundError(f"'{name}' does not exist in {self._cwd}.")
        if not self._links_into_library(dest):
            raise NotATemplateLinkError(f"'{name}' is not a link to a library template; refusing to delete it.")
        try:
            self._linker.unlink(dest)
        except OSError as e:
            raise LinkWriteError(f"Failed to remove '{name}' ({e})") from e
        log.info('Removed link %s', dest)
        return dest

    def _links_into_library(self, path: Path) -> bool:
        if not path.is_symlink():
            return False
        target = Path(os.readlink(path))
        if not target.is_absolute():
            target = path.parent / target
        return os.path.realpath(target.parent) == os.path.realpath(self._library_dir)
