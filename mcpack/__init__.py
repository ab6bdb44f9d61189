"""Create and edit modpack manifests."""

__version__ = "0.1.0"
