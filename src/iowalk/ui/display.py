"""Console output for iowalk reports.

Core services return reports; the functions here turn them into the
status lines a user sees. Output goes through ``print()`` so it is shown
whatever the console log level is.
"""

from pathlib import Path
from typing import Any

import orjson

from iowalk.domain.types import (
    CopyResult,
    DeleteOutcome,
    EntryMetadata,
    Failure,
    FailureKind,
    LifecycleReport,
    PathForm,
    Settings,
    StagingReport,
    TeardownReport,
)

_FIRST_DELETE_MESSAGES = {
    None: "✅ Staging folder is deleted successfully!",
    FailureKind.NOT_FOUND: (
        "❌ Staging folder is deleted failed because the folder "
        "doesn't exist!"
    ),
    FailureKind.NOT_EMPTY: (
        "❌ Staging folder is deleted failed because the folder is not empty"
    ),
    FailureKind.IO_FAILURE: (
        "❌ Staging folder is deleted failed because other reasons"
    ),
}

_COPY_FAILURE_MESSAGES = {
    FailureKind.NOT_FOUND: "File not found.",
    FailureKind.NOT_EMPTY: "IO Exception.",
    FailureKind.IO_FAILURE: "IO Exception.",
}


def _default(obj: Any) -> Any:  # noqa: ANN401
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError


def to_json(obj: Any) -> bytes:  # noqa: ANN401
    """Serialize a report (dataclasses, enums, datetimes, paths) to JSON."""
    return orjson.dumps(obj, default=_default, option=orjson.OPT_INDENT_2)


def print_json(obj: Any) -> None:  # noqa: ANN401
    """Print ``obj`` as indented JSON."""
    print(to_json(obj).decode("utf-8"))


def _reason(failure: Failure) -> str:
    return f"{failure.message} ({failure.path})"


def display_staging(report: StagingReport) -> None:
    """Print the outcome of ensuring the staging directory."""
    if not report.performed:
        print(
            "ℹ️  Target already exists, staging skipped: "
            f"{report.directory}"
        )
        return

    if report.failure is not None and report.failure.index is None:
        print(
            "❌ Staging folder could not be created: "
            f"{_reason(report.failure)}"
        )
        return

    if report.directory_created:
        print("✅ Staging folder is created successfully!")
    else:
        print(f"ℹ️  Staging folder already exists: {report.directory}")

    if report.failure is not None:
        print(
            f"❌ Failed in creating {report.failure.path.name}: "
            f"{report.failure.message}"
        )
        print(
            f"⚠️  {report.created} of {report.requested} files created, "
            "stopped"
        )
        return

    print(f"✅ {report.created} files created successfully!")


def display_inspection(
    metadata: EntryMetadata | None, failure: Failure | None = None
) -> None:
    """Print the metadata of an inspected entry.

    File-only attributes are printed only for regular files.
    """
    if failure is not None:
        print(f"❌ Cannot read metadata: {_reason(failure)}")
        return
    if metadata is None:
        print("ℹ️  Target does not exist, nothing to inspect")
        return

    print(f"Name: {metadata.name}")
    print(f"Absolute Path: {metadata.absolute_path}")
    print(f"Is File: {metadata.is_file}")
    print(f"Is Directory: {metadata.is_dir}")

    if metadata.is_file:
        print(f"Last Modified: {metadata.last_modified.isoformat()}")
        print(f"Length: {metadata.size}")
        print(f"Is Hidden: {metadata.hidden}")


def _display_final(outcome: DeleteOutcome) -> None:
    if outcome.ok:
        print("✅ Attempt to delete the staging folder again successfully!")
    else:
        print(
            "❌ Staging folder is deleted failed! "
            f"{_reason(outcome.failure)}"
        )


def display_teardown(report: TeardownReport) -> None:
    """Print every delete attempt of a teardown."""
    print(_FIRST_DELETE_MESSAGES[report.first_attempt.kind])

    print(f"🗑️  Removed {report.cleared} entries from {report.directory}")
    for failure in report.clear_failures:
        print(f"❌ Could not remove {failure.path.name}: {failure.message}")

    if report.final_attempt is not None:
        _display_final(report.final_attempt)

    if report.repeat_attempt is not None:
        if report.repeat_attempt.kind is FailureKind.NOT_FOUND:
            print(
                "ℹ️  Deleting the staging folder once more fails: "
                "the folder doesn't exist"
            )
        elif report.repeat_attempt.ok:
            print("⚠️  Deleting the staging folder once more succeeded")
        else:
            print(
                "❌ Deleting the staging folder once more failed: "
                f"{_reason(report.repeat_attempt.failure)}"
            )


def display_lifecycle(report: LifecycleReport) -> None:
    """Print a whole lifecycle run, step by step."""
    if report.staging is not None:
        display_staging(report.staging)
        if not report.staging.ok:
            return

    display_inspection(report.metadata, report.inspect_failure)

    if report.teardown is not None:
        display_teardown(report.teardown)

    states = " -> ".join(state.name for state in report.states)
    print(f"States: {states}")


def display_copy_result(result: CopyResult) -> None:
    """Print the outcome of a byte-stream copy, then ``Done!``."""
    if result.failure is not None:
        print(_COPY_FAILURE_MESSAGES[result.failure.kind])
    else:
        print(
            f"✅ Copied {result.bytes_copied} bytes "
            f"({result.mode.value}): {result.source} -> {result.destination}"
        )
    print("Done!")


def display_path_forms(
    forms: list[PathForm],
    equivalent: bool,  # noqa: FBT001
) -> None:
    """Print each path construction with its absolute form."""
    width = max((len(form.label) for form in forms), default=0)
    for form in forms:
        print(f"{form.label:<{width}}  {form.absolute}")
    if equivalent:
        print("✅ All forms name the same path")
    else:
        print("❌ Forms disagree")


def display_settings(settings: Settings, source: Path) -> None:
    """Print effective settings grouped by section."""
    print(f"Settings file: {source}")
    print(f"  config_version = {settings['config_version']}")
    print(f"  log_level = {settings['log_level']}")
    print(f"  console_log_level = {settings['console_log_level']}")
    for section in ("staging", "streams"):
        print(f"[{section}]")
        for key, value in settings[section].items():
            print(f"  {key} = {value}")
