"""Runtime package for the header-tool comment banner formatter."""

from importlib import metadata

from .banner import Banner, print_banner, render_banner


try:
    __version__ = metadata.version("header-tool")
except metadata.PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.1.0"

__all__ = ["Banner", "__version__", "print_banner", "render_banner"]
