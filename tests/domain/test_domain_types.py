"""Tests for domain types and failure classification."""

import errno
from pathlib import Path

import pytest

from iowalk.domain.types import (
    DeleteOutcome,
    Failure,
    FailureKind,
    LifecycleReport,
    LifecycleState,
)


class TestFailureFromOsError:
    """Tests for Failure.from_os_error."""

    def test_file_not_found_is_not_found(self):
        """Test FileNotFoundError maps to NOT_FOUND."""
        exc = FileNotFoundError(errno.ENOENT, "No such file or directory")
        failure = Failure.from_os_error(Path("/x"), exc)
        assert failure.kind is FailureKind.NOT_FOUND
        assert failure.message == "No such file or directory"
        assert failure.path == Path("/x")

    @pytest.mark.parametrize("code", [errno.ENOTEMPTY, errno.EEXIST])
    def test_not_empty_when_removing_directory(self, code):
        """Test ENOTEMPTY and EEXIST from rmdir map to NOT_EMPTY."""
        exc = OSError(code, "Directory not empty")
        failure = Failure.from_os_error(
            Path("/x"), exc, removing_directory=True
        )
        assert failure.kind is FailureKind.NOT_EMPTY

    def test_eexist_outside_removal_is_io_failure(self):
        """Test EEXIST while creating a file stays a generic failure."""
        exc = FileExistsError(errno.EEXIST, "File exists")
        failure = Failure.from_os_error(Path("/x/hi0.txt"), exc, index=0)
        assert failure.kind is FailureKind.IO_FAILURE
        assert failure.index == 0

    def test_permission_error_is_io_failure(self):
        """Test permission problems map to IO_FAILURE even for rmdir."""
        exc = PermissionError(errno.EACCES, "Permission denied")
        failure = Failure.from_os_error(
            Path("/x"), exc, removing_directory=True
        )
        assert failure.kind is FailureKind.IO_FAILURE

    def test_message_falls_back_to_str(self):
        """Test errors without strerror still get a message."""
        failure = Failure.from_os_error(Path("/x"), OSError("disk full"))
        assert failure.message == "disk full"
        assert failure.kind is FailureKind.IO_FAILURE


def test_delete_outcome_ok_and_kind():
    """Test DeleteOutcome reports success and failure kind."""
    ok = DeleteOutcome(path=Path("/x"))
    failed = DeleteOutcome(
        path=Path("/x"),
        failure=Failure(FailureKind.NOT_EMPTY, Path("/x"), "not empty"),
    )
    assert ok.ok
    assert ok.kind is None
    assert not failed.ok
    assert failed.kind is FailureKind.NOT_EMPTY


def test_lifecycle_report_final_state():
    """Test final_state is the last visited state."""
    report = LifecycleReport(target=Path("/x/hi1.txt"))
    assert report.final_state is None
    report.states += [LifecycleState.POPULATED, LifecycleState.INSPECTED]
    assert report.final_state is LifecycleState.INSPECTED
