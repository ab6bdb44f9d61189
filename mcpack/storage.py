import logging
import os
import stat
import tempfile
from pathlib import Path

from pydantic import ValidationError

from mcpack.config import get_config, get_manifest_params
from mcpack.errors import (
    ManifestFormatError,
    ManifestNotFoundError,
    ManifestReadError,
    ManifestWriteError,
)
from mcpack.models import Manifest

logger = logging.getLogger(__name__)


class ManifestStorage:
    """Reads and writes a single manifest file."""

    def __init__(
        self,
        path: str | Path | None = None,
        indent: int | None = None,
        atomic_write: bool | None = None,
    ):
        params = get_manifest_params(get_config())

        self.path = Path(path if path is not None else params["path"])
        self.indent = indent if indent is not None else params["indent"]
        self.atomic_write = (
            atomic_write if atomic_write is not None else params["atomic_write"]
        )

        logger.debug(f"Using manifest file {self.path}")

    def exists(self) -> bool:
        return self.path.is_file()

    def load_manifest(self) -> Manifest:
        """Load the manifest.

        Returns:
            Manifest stored at this location

        Raises:
            ManifestNotFoundError: If the file does not exist
            ManifestReadError: If the file cannot be read
            ManifestFormatError: If the file is not a valid manifest
        """
        logger.debug(f"Loading manifest from {self.path}")
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError as e:
            raise ManifestNotFoundError(self.path) from e
        except OSError as e:
            raise ManifestReadError(f"Cannot read {str(self.path)!r}: {e}") from e

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ManifestFormatError(
                f"Manifest {str(self.path)!r} is not valid UTF-8: {e}"
            ) from e

        try:
            manifest = Manifest.model_validate_json(text)
        except ValidationError as e:
            raise ManifestFormatError(
                f"Manifest {str(self.path)!r} is malformed: {e}"
            ) from e

        logger.info(
            f"Loaded manifest {manifest.name!r} with {len(manifest.loaders)} loaders "
            f"and {len(manifest.files)} files"
        )
        return manifest

    def store_manifest(self, manifest: Manifest) -> Path:
        """Write the manifest, replacing any existing file.

        Args:
            manifest: Manifest to store

        Returns:
            Path where the manifest was stored

        Raises:
            ManifestWriteError: If the file cannot be written
        """
        manifest_json = manifest.to_json(indent=self.indent)

        logger.info(f"Storing manifest at {self.path}")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self.atomic_write:
                self._replace(manifest_json)
            else:
                self.path.write_text(manifest_json, encoding="utf-8")
        except OSError as e:
            raise ManifestWriteError(f"Cannot write {str(self.path)!r}: {e}") from e

        logger.debug(f"Successfully stored manifest at {self.path}")
        return self.path

    def _target_mode(self) -> int:
        """Permission bits of the existing manifest, or 0666 minus the umask for a new one."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def _replace(self, text: str) -> None:
        """Write to a temporary file in the same directory, then rename over the target."""
        mode = self._target_mode()
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp creates the file as 0600
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
