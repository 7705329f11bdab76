"""Use case: enumerate, install and uninstall entries of the template library."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterator
from pathlib import Path

from typst_templatr.l1_entities.errors import (
    InvalidTemplateNameError,
    LibraryUnreadableError,
    LibraryWriteError,
    SourceMissingError,
    TemplateAlreadyInstalledError,
    TemplateNotInstalledError,
)
from typst_templatr.l1_entities.template_name import (
    TEMPLATE_EXTENSION,
    canonical_name,
    has_separator,
    normalize_name,
)

log = logging.getLogger('ttr.library')


class TemplateLibrary:
    """Owns the authoritative copies of template files in the library directory."""

    def __init__(self, library_dir: Path, cwd: Path) -> None:
        self._library_dir = Path(os.path.abspath(cwd / library_dir))
        self._cwd = cwd

    @property
    def library_dir(self) -> Path:
        return self._library_dir

    def list_templates(self) -> Iterator[str]:
        """Return a one-shot iterator of installed template names in directory order.

        An unreadable library fails here rather than on first iteration. No
        directory handle is held until iteration starts.
        """
        try:
            with os.scandir(self._library_dir):
                pass
        except OSError as e:
            raise _unreadable(self._library_dir, e) from e
        return _template_names(self._library_dir)

    def install(self, source: str, *, overwrite: bool = False) -> str:
        """Copy *source* into the library and return its canonical name."""
        source_path = self._resolve_source(normalize_name(source))
        name = canonical_name(source_path.name)
        if not source_path.is_file():
            raise SourceMissingError(f'Template file not found: {source_path}')

        dest = self._library_dir / name
        if not overwrite and os.path.lexists(dest):
            raise TemplateAlreadyInstalledError(
                f"Template '{name}' is already installed. Use --force to overwrite it."
            )
        try:
            self._library_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source_path, dest)
        except OSError as e:
            raise LibraryWriteError(f"Failed to install '{name}' into {self._library_dir} ({e})") from e
        log.info('Installed %s -> %s (overwrite=%s)', source_path, dest, overwrite)
        return name

    def uninstall(self, name: str) -> str:
        """Delete *name* from the library and return its canonical name."""
        name = canonical_name(name)
        path = self._library_dir / name
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise TemplateNotInstalledError(f"Template '{name}' is not installed.") from e
        except OSError as e:
            raise LibraryWriteError(f"Failed to uninstall '{name}' ({e})") from e
        log.info('Uninstalled %s', path)
        return name

    def _resolve_source(self, source: str) -> Path:
        path = Path(source)
        # a bare name like "~draft" is a file in cwd, not a user directory
        if has_separator(source):
            try:
                path = path.expanduser()
            except RuntimeError as e:
                raise SourceMissingError(f"Cannot expand '{source}' ({e})") from e
        if not path.is_absolute():
            path = self._cwd / path
        if not path.name or path.name == TEMPLATE_EXTENSION:
            raise InvalidTemplateNameError(f"Cannot derive a template name from '{source}'")
        return path


def _unreadable(library_dir: Path, error: OSError) -> LibraryUnreadableError:
    return LibraryUnreadableError(f'Failed to read templates directory: {library_dir} ({error})')


def _template_names(library_dir: Path) -> Iterator[str]:
    try:
        entries = os.scandir(library_dir)
    except OSError as e:
        raise _unreadable(library_dir, e) from e
    with entries:
        for entry in entries:
            if entry.name.endswith(TEMPLATE_EXTENSION) and _is_text_name(entry.name):
                yield entry.name


def _is_text_name(name: str) -> bool:
    # undecodable bytes come back as surrogate escapes that cannot be printed
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True
