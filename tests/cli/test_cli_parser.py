"""Tests for the iowalk argument parser."""

import pytest

from iowalk.cli.parser import CLIParser


@pytest.fixture
def parser() -> CLIParser:
    """Provide a CLI parser."""
    return CLIParser()


def test_lifecycle_defaults(parser: CLIParser):
    """Test options with settings defaults parse as None."""
    args = parser.parse_args(["lifecycle"])

    assert args.command == "lifecycle"
    assert args.target is None
    assert args.count is None
    assert args.name_template is None
    assert args.json is False
    assert args.verbose is False


def test_lifecycle_options(parser: CLIParser):
    """Test lifecycle arguments are parsed."""
    args = parser.parse_args(
        [
            "lifecycle",
            "/tmp/staging/hi1.txt",
            "--count",
            "3",
            "--name-template",
            "f{index}",
            "--json",
            "--verbose",
        ]
    )

    assert args.target == "/tmp/staging/hi1.txt"
    assert args.count == 3
    assert args.name_template == "f{index}"
    assert args.json is True
    assert args.verbose is True


def test_copy_defaults_to_batch_buffer(parser: CLIParser):
    """Test the copy mode default."""
    args = parser.parse_args(["copy"])

    assert args.mode == "batch-buffer"
    assert args.source is None
    assert args.destination is None
    assert args.batch_size is None


def test_copy_rejects_unknown_mode(parser: CLIParser):
    """Test an unknown copy mode exits with a usage error."""
    with pytest.raises(SystemExit):
        parser.parse_args(["copy", "a", "b", "--mode", "teleport"])


def test_inspect_requires_target(parser: CLIParser):
    """Test inspect needs a path."""
    with pytest.raises(SystemExit):
        parser.parse_args(["inspect"])


def test_config_requires_action(parser: CLIParser):
    """Test config needs --show or --init, not both."""
    with pytest.raises(SystemExit):
        parser.parse_args(["config"])
    with pytest.raises(SystemExit):
        parser.parse_args(["config", "--show", "--init"])

    args = parser.parse_args(["config", "--init", "--force"])
    assert args.init is True
    assert args.force is True


def test_global_options(parser: CLIParser):
    """Test --version and --config parse without a command."""
    args = parser.parse_args(["--version", "--config", "/tmp/s.conf"])

    assert args.version is True
    assert args.config == "/tmp/s.conf"
    assert args.command is None
