"""Exceptions raised while reading, editing and writing a modpack manifest."""

from pathlib import Path


class ManifestError(Exception):
    """
    Base manifest error
    """


class ManifestNotFoundError(ManifestError):
    """The manifest file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"No manifest found at {str(path)!r}; run `mcpack new` to create one"
        )


class ManifestReadError(ManifestError):
    """The manifest file exists but could not be read."""


class ManifestFormatError(ManifestError):
    """The manifest is not valid JSON or does not match the manifest schema."""


class ManifestWriteError(ManifestError):
    """The manifest could not be written."""


class InvalidArgumentError(ManifestError, ValueError):
    """A command argument could not be parsed."""
