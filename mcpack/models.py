"""Data model of a modpack manifest.

The on-disk schema mixes camelCase keys with the all-caps `projectID` and
`fileID` keys of file references, and nests the platform version and loader
list under a `minecraft` object. Every key is listed in FIELD_KEYS and applied
through the pydantic alias generator.
"""

import logging
from typing import Annotated, List, Literal

from pydantic import BaseModel, ConfigDict, Field

from mcpack.utils.parsing import U64_MAX

logger = logging.getLogger(__name__)

MANIFEST_TYPE = "minecraftModpack"
MANIFEST_VERSION = 1
OVERRIDES_DIR = "overrides"

# Python field name -> JSON key
FIELD_KEYS = {
    "minecraft": "minecraft",
    "version": "version",
    "mod_loaders": "modLoaders",
    "id": "id",
    "primary": "primary",
    "manifest_type": "manifestType",
    "manifest_version": "manifestVersion",
    "name": "name",
    "author": "author",
    "files": "files",
    "project_id": "projectID",
    "file_id": "fileID",
    "required": "required",
    "overrides": "overrides",
}

U64 = Annotated[int, Field(ge=0, le=U64_MAX)]


def _wire_key(field_name: str) -> str:
    return FIELD_KEYS[field_name]


class _ManifestModel(BaseModel):
    # Only the on-disk keys are accepted; every field is required on read
    model_config = ConfigDict(
        alias_generator=_wire_key,
        strict=True,
        validate_assignment=True,
    )


class ModLoader(_ManifestModel):
    """A loader plugin and its version, e.g. ``forge-47.1.0``."""

    id: str
    primary: bool


class ManifestFile(_ManifestModel):
    """A reference to a file hosted on the mod repository."""

    project_id: U64
    file_id: U64
    required: bool


class Minecraft(_ManifestModel):
    version: str
    mod_loaders: List[ModLoader]


class Manifest(_ManifestModel):
    """A modpack manifest."""

    minecraft: Minecraft
    manifest_type: Literal["minecraftModpack"]
    manifest_version: Literal[1]
    name: str
    version: str
    author: str
    files: List[ManifestFile]
    overrides: str

    @classmethod
    def new(
        cls, name: str, version: str, author: str, mc_version: str
    ) -> "Manifest":
        """Create an empty manifest with no loaders and no files.

        Args:
            name: Modpack name
            version: Modpack version
            author: Modpack author
            mc_version: Target Minecraft version

        Returns:
            New manifest
        """
        return cls(
            minecraft=Minecraft(version=mc_version, modLoaders=[]),
            manifestType=MANIFEST_TYPE,
            manifestVersion=MANIFEST_VERSION,
            name=name,
            version=version,
            author=author,
            files=[],
            overrides=OVERRIDES_DIR,
        )

    @property
    def platform_version(self) -> str:
        return self.minecraft.version

    @property
    def loaders(self) -> List[ModLoader]:
        return self.minecraft.mod_loaders

    def add_mod_loader(self, loader_id: str, primary: bool) -> ModLoader:
        """Append a loader. Duplicates and multiple primary loaders are allowed."""
        loader = ModLoader(id=loader_id, primary=primary)
        self.minecraft.mod_loaders.append(loader)
        logger.debug(f"Added mod loader {loader_id} (primary={primary})")
        return loader

    def add_file(self, project_id: int, file_id: int) -> ManifestFile:
        """Append a required file reference. Duplicates are allowed."""
        entry = ManifestFile(projectID=project_id, fileID=file_id, required=True)
        self.files.append(entry)
        logger.debug(f"Added file {file_id} of project {project_id}")
        return entry

    def to_json(self, indent: int = 2) -> str:
        """Serialize to the on-disk JSON form."""
        return self.model_dump_json(by_alias=True, indent=indent)
