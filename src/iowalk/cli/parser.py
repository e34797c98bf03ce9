"""CLI argument parser for iowalk.

Options that have a settings-file default are parsed as ``None`` when
absent; command handlers fill them in from the loaded settings.
"""

import argparse
from argparse import Namespace

from iowalk.domain.types import CopyMode


class CLIParser:
    """Command-line argument parser for iowalk."""

    def parse_args(self, argv: list[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to ``sys.argv[1:]``)

        Returns:
            Parsed arguments namespace

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Build the full parser with global options and subcommands."""
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="iowalk",
            description="Filesystem lifecycle and byte-stream demonstrations",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Stage, inspect and tear down ~/iowalk/staging (settings default)
  %(prog)s lifecycle

  # Same walk with a smaller placeholder batch
  %(prog)s lifecycle /tmp/staging/hi1.txt --count 3

  # Inspect any path
  %(prog)s inspect ~/.bashrc

  # Copy a file with buffered 1 KiB batches
  %(prog)s copy video.mov video_cloned.mov --mode batch-buffer

  # Show equivalent constructions of one path
  %(prog)s paths /tmp/staging/hi1.txt

  # Write a commented settings file
  %(prog)s config --init
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show iowalk version and exit",
        )
        parser.add_argument(
            "--config",
            type=str,
            default=None,
            metavar="PATH",
            help="Settings file (default: ~/.config/iowalk/settings.conf)",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        self._add_lifecycle_command(subparsers)
        self._add_inspect_command(subparsers)
        self._add_copy_command(subparsers)
        self._add_paths_command(subparsers)
        self._add_config_command(subparsers)

    @staticmethod
    def _add_verbose(command_parser: argparse.ArgumentParser) -> None:
        command_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging for this command",
        )

    def _add_lifecycle_command(self, subparsers) -> None:
        lifecycle_parser = subparsers.add_parser(
            "lifecycle",
            help="Create, inspect and delete a staging directory",
            epilog="""
The staging directory is the parent of TARGET. When TARGET is absent the
directory is created and filled with placeholder files, TARGET is
inspected, and the directory is deleted: first while still populated
(fails, not empty), then after clearing it (succeeds), then once more
(fails, not found).
            """,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        lifecycle_parser.add_argument(
            "target",
            nargs="?",
            default=None,
            help="File inside the staging directory (default from settings)",
        )
        lifecycle_parser.add_argument(
            "--count",
            type=int,
            default=None,
            help="Number of placeholder files to create",
        )
        lifecycle_parser.add_argument(
            "--name-template",
            default=None,
            help="Placeholder name format containing {index}",
        )
        lifecycle_parser.add_argument(
            "--json",
            action="store_true",
            help="Print the run report as JSON",
        )
        self._add_verbose(lifecycle_parser)

    def _add_inspect_command(self, subparsers) -> None:
        inspect_parser = subparsers.add_parser(
            "inspect", help="Show metadata of a file or directory"
        )
        inspect_parser.add_argument("target", help="Path to inspect")
        inspect_parser.add_argument(
            "--json",
            action="store_true",
            help="Print the metadata as JSON",
        )
        self._add_verbose(inspect_parser)

    def _add_copy_command(self, subparsers) -> None:
        copy_parser = subparsers.add_parser(
            "copy",
            help="Copy a file with a chosen byte-stream strategy",
        )
        copy_parser.add_argument(
            "source",
            nargs="?",
            default=None,
            help="File to copy (default from settings)",
        )
        copy_parser.add_argument(
            "destination",
            nargs="?",
            default=None,
            help="File to write (default from settings)",
        )
        copy_parser.add_argument(
            "--mode",
            choices=[mode.value for mode in CopyMode],
            default=CopyMode.BATCH_BUFFER.value,
            help="Copy strategy (default: %(default)s)",
        )
        copy_parser.add_argument(
            "--batch-size",
            type=int,
            default=None,
            help="Bytes per read in the batched modes",
        )
        copy_parser.add_argument(
            "--buffer-size",
            type=int,
            default=None,
            help="Buffer size of the buffered modes",
        )
        self._add_verbose(copy_parser)

    def _add_paths_command(self, subparsers) -> None:
        paths_parser = subparsers.add_parser(
            "paths",
            help="Show equivalent ways of constructing a path",
        )
        paths_parser.add_argument(
            "target",
            nargs="?",
            default=None,
            help="Path to construct (default: staging target from settings)",
        )
        paths_parser.add_argument(
            "--base",
            default=None,
            help="Base directory for the joined forms (default: grandparent)",
        )

    def _add_config_command(self, subparsers) -> None:
        config_parser = subparsers.add_parser(
            "config", help="Show or initialize the settings file"
        )
        group = config_parser.add_mutually_exclusive_group(required=True)
        group.add_argument(
            "--show",
            action="store_true",
            help="Print the effective settings",
        )
        group.add_argument(
            "--init",
            action="store_true",
            help="Write a settings file with the current values",
        )
        config_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing settings file with --init",
        )
