"""Protocols the core services depend on."""

from iowalk.core.protocols.filesystem import FilesystemPort

__all__ = ["FilesystemPort"]
