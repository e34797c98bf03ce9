"""Top-level package for iowalk.

Filesystem lifecycle, path construction and byte-stream copy
demonstrations driven from a small command-line interface.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("iowalk")
except PackageNotFoundError:
    # Running from a source checkout without installation
    __version__ = "dev"
