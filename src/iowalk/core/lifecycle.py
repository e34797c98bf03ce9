"""Staging lifecycle: create, inspect and tear down a staging directory.

A run walks one target file path through a fixed sequence:

    ABSENT -> CREATING -> POPULATED -> INSPECTED
           -> DELETING (expected to fail: directory not empty)
           -> CLEARING -> DELETED

Filesystem errors never escape the walk. Each one is recorded as a
``Failure`` whose ``FailureKind`` keeps "not found", "not empty" and other
I/O errors apart, and the step that hit it reports it.
"""

from pathlib import Path

from iowalk.constants import DEFAULT_NAME_TEMPLATE, DEFAULT_PLACEHOLDER_COUNT
from iowalk.core.protocols import FilesystemPort
from iowalk.domain.types import (
    DeleteOutcome,
    EntryMetadata,
    Failure,
    LifecycleReport,
    LifecycleState,
    StagingReport,
    TeardownReport,
)
from iowalk.exceptions import ValidationError
from iowalk.infrastructure.filesystem import LocalFilesystem
from iowalk.logger import get_logger

logger = get_logger(__name__)


def placeholder_names(count: int, template: str) -> list[str]:
    """Return the placeholder file names for ``count`` files.

    Args:
        count: Number of names
        template: Format string with an ``{index}`` field

    Returns:
        Names for indices ``0`` to ``count - 1``

    """
    return [template.format(index=i) for i in range(count)]


def check_name_template(template: str) -> None:
    """Check that ``template`` yields a distinct name for every index.

    Args:
        template: Placeholder name format

    Raises:
        ValidationError: If the template cannot name distinct placeholder
            files

    """
    if "{index}" not in template:
        msg = "name template must contain '{index}'"
        raise ValidationError(msg, target=template)
    try:
        first, second = placeholder_names(2, template)
    except (KeyError, IndexError, ValueError, AttributeError, TypeError) as e:
        msg = f"name template cannot be formatted: {e!r}"
        raise ValidationError(msg, target=template) from e
    if first == second:
        msg = "name template gives the same name for every index"
        raise ValidationError(msg, target=template)


class StagingLifecycle:
    """Walks a target path through staging, inspection and teardown."""

    def __init__(
        self,
        filesystem: FilesystemPort | None = None,
        count: int = DEFAULT_PLACEHOLDER_COUNT,
        name_template: str = DEFAULT_NAME_TEMPLATE,
    ) -> None:
        """Initialize the lifecycle.

        Args:
            filesystem: Filesystem operations (defaults to LocalFilesystem)
            count: Number of placeholder files created when staging
            name_template: Placeholder name format with an ``{index}`` field

        Raises:
            ValidationError: If ``count`` is negative or the template is not
                usable (see ``check_name_template``)

        """
        if count < 0:
            msg = f"placeholder count must not be negative, got {count}"
            raise ValidationError(msg, target="count")
        check_name_template(name_template)

        self.filesystem = filesystem or LocalFilesystem()
        self.count = count
        self.name_template = name_template

    def ensure_staging(self, target: Path) -> StagingReport:
        """Create the staging directory and its placeholders if needed.

        Nothing happens when ``target`` already exists. Otherwise the
        parent directory is created first, then ``count`` empty files. The
        first failure stops the loop; files created before it are kept.

        Args:
            target: File path whose parent is the staging directory

        Returns:
            Staging report

        """
        directory = target.parent
        report = StagingReport(directory=directory, requested=self.count)

        if self.filesystem.exists(target):
            logger.debug("Target exists, staging skipped: %s", target)
            return report

        report.performed = True
        try:
            report.directory_created = self.filesystem.create_dirs(directory)
        except OSError as e:
            report.failure = Failure.from_os_error(directory, e)
            logger.warning(
                "Cannot create staging directory %s: %s", directory, e
            )
            return report

        for index, name in enumerate(
            placeholder_names(self.count, self.name_template)
        ):
            child = directory / name
            try:
                self.filesystem.create_file(child)
            except OSError as e:
                report.failure = Failure.from_os_error(child, e, index=index)
                logger.warning(
                    "Placeholder creation stopped at %s: %s", child.name, e
                )
                break
            report.created += 1

        logger.debug(
            "Created %d of %d placeholders in %s",
            report.created,
            self.count,
            directory,
        )
        return report

    def inspect(self, target: Path) -> EntryMetadata | None:
        """Read metadata of ``target`` if it exists.

        Args:
            target: Path to inspect

        Returns:
            Metadata, or None when the target does not exist

        Raises:
            OSError: If the entry exists but its metadata cannot be read

        """
        if not self.filesystem.exists(target):
            logger.debug("Nothing to inspect, target absent: %s", target)
            return None
        return self.filesystem.stat_metadata(target)

    def _delete(self, path: Path) -> DeleteOutcome:
        try:
            self.filesystem.delete(path)
        except OSError as e:
            failure = Failure.from_os_error(path, e, removing_directory=True)
            logger.debug("Delete failed (%s): %s", failure.kind.value, path)
            return DeleteOutcome(path=path, failure=failure)
        return DeleteOutcome(path=path)

    def teardown(self, target: Path) -> TeardownReport:
        """Delete the staging directory around ``target``.

        The directory is deleted once while still populated, which is
        expected to fail as not empty. Its entries are then removed through
        a scoped listing, and the directory is deleted again. When that
        succeeds, a last attempt shows the not-found outcome.

        Args:
            target: File path whose parent is the staging directory

        Returns:
            Teardown report

        """
        directory = target.parent
        report = TeardownReport(
            directory=directory, first_attempt=self._delete(directory)
        )

        try:
            with self.filesystem.list_entries(directory) as entries:
                for child in entries:
                    outcome = self._delete(child)
                    if outcome.failure is not None:
                        report.clear_failures.append(outcome.failure)
                    else:
                        report.cleared += 1
        except OSError as e:
            report.clear_failures.append(Failure.from_os_error(directory, e))

        report.final_attempt = self._delete(directory)
        if report.final_attempt.ok:
            report.repeat_attempt = self._delete(directory)

        logger.debug(
            "Teardown of %s: cleared=%d failures=%d",
            directory,
            report.cleared,
            len(report.clear_failures),
        )
        return report

    def run(self, target: Path) -> LifecycleReport:
        """Run the whole walk against ``target``.

        Teardown only follows when inspection found a regular file.

        Args:
            target: File path at the centre of the walk

        Returns:
            Report with every visited state

        """
        report = LifecycleReport(target=target)

        report.staging = self.ensure_staging(target)
        if report.staging.performed:
            report.states += [LifecycleState.ABSENT, LifecycleState.CREATING]
        if not report.staging.ok:
            return report
        report.states.append(LifecycleState.POPULATED)

        try:
            report.metadata = self.inspect(target)
        except OSError as e:
            report.inspect_failure = Failure.from_os_error(target, e)
            return report
        report.states.append(LifecycleState.INSPECTED)

        if report.metadata is None or not report.metadata.is_file:
            return report

        report.states.append(LifecycleState.DELETING)
        report.teardown = self.teardown(target)
        report.states.append(LifecycleState.CLEARING)
        final = report.teardown.final_attempt
        if final is not None and final.ok:
            report.states.append(LifecycleState.DELETED)
        return report
