"""Canonical template names — pure string rules, no I/O."""

from __future__ import annotations

import os

from typst_templatr.l1_entities.errors import InvalidTemplateNameError

TEMPLATE_EXTENSION = '.typ'

_SEPARATORS = {sep for sep in ('/', os.sep, os.altsep) if sep}


def has_separator(value: str) -> bool:
    return any(sep in value for sep in _SEPARATORS)


def normalize_name(name: str) -> str:
    """Append the template extension if absent. Idempotent."""
    if name.endswith(TEMPLATE_EXTENSION):
        return name
    return name + TEMPLATE_EXTENSION


def canonical_name(name: str) -> str:
    """Normalize a bare template name and reject anything that is not one.

    Names must be a single path segment with a non-empty stem, so they can
    only ever address an entry directly inside the library or the working
    directory.
    """
    if has_separator(name):
        raise InvalidTemplateNameError(f"Template name must not contain a path separator: '{name}'")
    canonical = normalize_name(name)
    stem = canonical.removesuffix(TEMPLATE_EXTENSION)
    if stem in ('', '.', '..'):
        raise InvalidTemplateNameError(f"Invalid template name: '{name}'")
    return canonical
