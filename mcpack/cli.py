import logging
import sys
from typing import Sequence

import fire
from fire.decorators import SetParseFn

from .config import get_config, get_log_level
from .errors import InvalidArgumentError, ManifestError
from .utils.manifest import ManifestManager

logger = logging.getLogger(__name__)

COMMANDS = ("new", "modloader", "add")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(log_level: str) -> None:
    """Configure logging with the specified level."""
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise InvalidArgumentError(
            f"Invalid log level {log_level!r}. Expected one of: {', '.join(LOG_LEVELS)}"
        )
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class ManifestCLI:
    """Create and edit a modpack manifest.json."""

    def __init__(self, path: str | None = None, log_level: str | None = None) -> None:
        """
        Args:
            path: Manifest file to edit. If None, uses the path from config.
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        self.config = get_config()
        setup_logging(str(log_level) if log_level else get_log_level(self.config))
        self.manifest = ManifestManager(str(path) if path is not None else None)

    # Positional arguments stay raw strings so values like "1.20" are not
    # turned into floats by fire
    @SetParseFn(str)
    def new(self, name: str, version: str, author: str, mc_version: str) -> None:
        """
        Create a new manifest, overwriting any existing one.

        Args:
            name: Modpack name
            version: Modpack version
            author: Modpack author
            mc_version: Target Minecraft version, e.g. 1.20.1
        """
        self.manifest.initialize(name, version, author, mc_version)

    @SetParseFn(str)
    def modloader(self, loader_id: str, primary: str) -> None:
        """
        Add a mod loader to the manifest.

        Args:
            loader_id: Loader identifier, e.g. forge-47.1.0
            primary: "true" if this is the primary loader, otherwise "false"
        """
        self.manifest.add_loader(loader_id, primary)

    @SetParseFn(str)
    def add(self, project: str, file: str) -> None:
        """
        Add a required file to the manifest.

        Args:
            project: Project ID
            file: File ID
        """
        self.manifest.add_file(project, file)


def main(argv: Sequence[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)

    if not any(arg in COMMANDS for arg in args) and not {"--help", "-h"} & set(args):
        positional = [arg for arg in args if not arg.startswith("-")]
        if positional:
            message = f"Unknown command {positional[0]!r}"
        else:
            message = "No command given"
        print(
            f"{message}. Expected one of: {', '.join(COMMANDS)}",
            file=sys.stderr,
        )
        sys.exit(2)

    try:
        fire.Fire(ManifestCLI, command=args, name="mcpack")
    except ManifestError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
