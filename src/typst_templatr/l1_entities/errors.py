"""Domain error types."""

from __future__ import annotations

from pathlib import Path


class TemplatrError(Exception):
    """Base exception for typst-templatr."""


class InvalidTemplateNameError(TemplatrError):
    """Raised when a template name cannot address a single library entry."""


# --- configuration ---


class ConfigError(TemplatrError):
    """Raised when the configuration file cannot be resolved, read, or written."""


class HomeDirectoryError(ConfigError):
    """Raised when the user's home directory cannot be determined."""


class ConfigNotFoundError(ConfigError):
    """Raised when no configuration file exists yet."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        super().__init__(
            'Config file does not exist. Use `typst-templatr init --templates_path <path>` to create it.'
        )


class ConfigUnreadableError(ConfigError):
    """Raised on I/O failure while opening the configuration file."""


class ConfigMalformedError(ConfigError):
    """Raised when the configuration file does not parse into a TemplatrConfig."""


class ConfigWriteError(ConfigError):
    """Raised when the configuration file cannot be written."""


# --- template library ---


class LibraryError(TemplatrError):
    """Raised by operations against the template library directory."""


class LibraryUnreadableError(LibraryError):
    """Raised when the library directory cannot be enumerated."""


class SourceMissingError(LibraryError):
    """Raised when the file to install does not exist or is not a regular file."""


class TemplateAlreadyInstalledError(LibraryError):
    """Raised when install would replace an existing library entry without overwrite."""


class TemplateNotInstalledError(LibraryError):
    """Raised when uninstalling a name the library does not hold."""


class LibraryWriteError(LibraryError):
    """Raised when copying into or deleting from the library fails."""


# --- project links ---


class LinkError(TemplatrError):
    """Raised by operations against the working directory."""


class TemplateNotFoundError(LinkError):
    """Raised when adding a template that is not in the library."""


class LinkExistsError(LinkError):
    """Raised when the destination name is already taken in the working directory."""


class LinkNotFoundError(LinkError):
    """Raised when removing a name that does not exist in the working directory."""


class NotATemplateLinkError(LinkError):
    """Raised when the local entry is not a link into the library; nothing is deleted."""


class LinkWriteError(LinkError):
    """Raised when creating or deleting a link fails at the OS level."""
