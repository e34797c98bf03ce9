"""Equivalent ways of constructing the same filesystem path."""

import os
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from iowalk.domain.types import PathForm
from iowalk.exceptions import ValidationError


def path_from_uri(uri: str) -> Path:
    """Convert a ``file://`` URI into a path.

    Args:
        uri: URI with the ``file`` scheme

    Returns:
        Path the URI points to

    Raises:
        ValidationError: If the URI does not use the ``file`` scheme

    """
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        msg = "only file:// URIs name local paths"
        raise ValidationError(msg, target=uri)
    return Path(url2pathname(parsed.path))


def build_path_forms(
    target: Path, base: Path | None = None
) -> list[PathForm]:
    """Construct ``target`` several ways.

    Args:
        target: Path to construct; made absolute against the working
            directory when relative
        base: Directory used for the base-plus-remainder forms (defaults to
            the grandparent of ``target``)

    Returns:
        One entry per construction

    Raises:
        ValidationError: If ``target`` does not lie under ``base``

    """
    target = target.absolute()
    base = (base or target.parent.parent).absolute()
    try:
        remainder = target.relative_to(base)
    except ValueError as e:
        msg = f"{target} is not inside {base}"
        raise ValidationError(msg, target=str(base)) from e

    anchor = Path(target.anchor)
    first, *rest = base.relative_to(anchor).parts or ("",)

    return [
        PathForm("string", Path(str(target))),
        PathForm(
            "base and remainder strings", Path(str(base), str(remainder))
        ),
        PathForm("base path joined", base / remainder),
        PathForm(
            "string parts",
            Path(str(anchor), first, *rest, *remainder.parts),
        ),
        PathForm(
            "os.path.join",
            Path(os.path.join(base, remainder)),  # noqa: PTH118
        ),
        PathForm("file URI", path_from_uri(target.as_uri())),
    ]


def all_equivalent(forms: list[PathForm]) -> bool:
    """Return whether every form resolves to the same absolute path."""
    return len({form.absolute for form in forms}) <= 1
