"""Top-level package for cc-switch-tools.

Installer and README version maintenance for the cc-switch CLI.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cc-switch-tools")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
