"""cc-minimal-statusline - status-line installer for Claude Code settings."""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("cc-minimal-statusline")
except PackageNotFoundError:
    __version__ = "1.0.0"  # fallback for editable installs / dev
