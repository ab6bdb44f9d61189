import os
import yaml
from pathlib import Path
from typing import Any, Dict
from dotenv import dotenv_values, find_dotenv
import logging

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_PATH = "manifest.json"
DEFAULT_INDENT = 2
DEFAULT_LOG_LEVEL = "WARNING"

# Environment keys that may override values from config.yaml
ENV_KEYS = ("MCPACK_MANIFEST_PATH", "MCPACK_LOG_LEVEL")


def get_project_root() -> Path:
    """Get the package root directory, where config.yaml lives.

    Returns:
        Path to the package root directory
    """
    return Path(__file__).parent


def get_config() -> Dict[str, Any]:
    """Get configuration by merging config.yaml and environment variables.
    Values from .env and the process environment take precedence over config.yaml values.

    Returns:
        Dictionary containing merged configuration
    """
    config_path = Path(
        os.getenv("MCPACK_CONFIG_PATH", str(get_project_root() / "config.yaml"))
    )
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}

    # The modpack lives in the working directory, so look for .env there
    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        logger.debug("No .env file found")
    else:
        env_vars = dotenv_values(dotenv_path)
        config.update({k: v for k, v in env_vars.items() if k in ENV_KEYS})

    for key in ENV_KEYS:
        if key in os.environ:
            config[key] = os.environ[key]

    return config  # type: ignore[no-any-return]


def get_manifest_params(config: dict) -> dict:
    """Get manifest storage parameters from config with defaults.

    Args:
        config: Config dictionary containing a `manifest` section

    Returns:
        Dictionary of manifest parameters with the following keys:
        - path: Location of the manifest file (default: manifest.json)
        - indent: Indentation used when writing JSON (default: 2)
        - atomic_write: Write through a temporary file and rename (default: True)
    """
    manifest_config = config.get("manifest") or {}
    return {
        "path": config.get("MCPACK_MANIFEST_PATH")
        or manifest_config.get("path", DEFAULT_MANIFEST_PATH),
        "indent": manifest_config.get("indent", DEFAULT_INDENT),
        "atomic_write": manifest_config.get("atomic_write", True),
    }


def get_log_level(config: dict) -> str:
    """Get the configured log level name, e.g. ``WARNING``."""
    logging_config = config.get("logging") or {}
    level = config.get("MCPACK_LOG_LEVEL") or logging_config.get(
        "level", DEFAULT_LOG_LEVEL
    )
    return str(level).upper()
