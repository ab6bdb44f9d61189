from pathlib import Path
import logging

from mcpack.models import Manifest
from mcpack.storage import ManifestStorage
from mcpack.utils.parsing import parse_bool, parse_u64

# Set up logging
logger = logging.getLogger(__name__)


class ManifestManager:
    def __init__(
        self,
        path: str | Path | None = None,
        storage: ManifestStorage | None = None,
    ):
        """Initialize the manifest manager.

        Args:
            path: Location of the manifest file. If None, uses config value.
            storage: Storage to use instead of one built from `path`.
        """
        self.storage = storage or ManifestStorage(path)
        logger.info(f"Using manifest file: {self.storage.path}")

    def initialize(
        self, name: str, version: str, author: str, mc_version: str
    ) -> Manifest:
        """Create a new manifest, overwriting any existing one.

        Args:
            name: Modpack name
            version: Modpack version
            author: Modpack author
            mc_version: Target Minecraft version

        Returns:
            The new manifest
        """
        if self.storage.exists():
            logger.warning(f"Overwriting existing manifest at {self.storage.path}")

        manifest = Manifest.new(name, version, author, mc_version)
        self.storage.store_manifest(manifest)
        logger.info(f"Created manifest for {name!r} targeting Minecraft {mc_version}")
        return manifest

    def add_loader(self, loader_id: str, primary: bool | str) -> Manifest:
        """Append a mod loader to the stored manifest.

        Args:
            loader_id: Loader identifier, e.g. "forge-47.1.0"
            primary: Whether this is the primary loader, as a bool or "true"/"false"

        Returns:
            The updated manifest
        """
        is_primary = parse_bool(primary)

        manifest = self.storage.load_manifest()
        manifest.add_mod_loader(loader_id, is_primary)
        self.storage.store_manifest(manifest)
        logger.info(f"Added mod loader {loader_id!r} (primary={is_primary})")
        return manifest

    def add_file(self, project_id: int | str, file_id: int | str) -> Manifest:
        """Append a required file reference to the stored manifest.

        Args:
            project_id: Project ID on the mod repository
            file_id: File ID of the project's release

        Returns:
            The updated manifest
        """
        project = parse_u64(project_id, "project ID")
        file = parse_u64(file_id, "file ID")

        manifest = self.storage.load_manifest()
        manifest.add_file(project, file)
        self.storage.store_manifest(manifest)
        logger.info(f"Added file {file} of project {project}")
        return manifest

    def get_manifest(self) -> Manifest:
        """Load the stored manifest without modifying it."""
        return self.storage.load_manifest()
