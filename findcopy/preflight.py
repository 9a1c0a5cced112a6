from __future__ import annotations

import os
from pathlib import Path
from typing import NamedTuple

from .errors import PathResolutionError, PreconditionError

EXIT_LIST_MISSING = 2
EXIT_SOURCE_MISSING = 3
EXIT_TARGET_MISSING = 4
EXIT_TARGET_NOT_EMPTY = 5


class Preflight(NamedTuple):
    file_list: str
    source_dir: str
    target_dir: str


def resolve_path(path: Path | str) -> str:
    raw = os.fspath(path)
    if not raw:
        raise PathResolutionError("Cannot resolve an empty path")
    if "\0" in raw:
        raise PathResolutionError(f"Path contains a NUL byte: {raw!r}")
    try:
        return os.path.abspath(raw)
    except (OSError, ValueError) as e:
        raise PathResolutionError(f"Problem with path {raw!r}: {e}") from e


def _is_empty_dir(path: str) -> bool:
    with os.scandir(path) as it:
        return next(it, None) is None


def run_preflight(
    file_list: Path | str, source_dir: Path | str, target_dir: Path | str
) -> Preflight:
    """Check inputs in a fixed order and stop at the first problem.

    Missing paths and a non-empty target raise ``PreconditionError``; a path
    that cannot be made absolute raises ``PathResolutionError``.
    """
    list_path = os.fspath(file_list)
    if not os.path.isfile(list_path):
        raise PreconditionError(
            f"Path to file list `{list_path}` does not exist or is not a file",
            list_path,
            EXIT_LIST_MISSING,
        )

    source = resolve_path(source_dir)
    if not os.path.isdir(source):
        raise PreconditionError(
            f"Source path `{source}` does not exist or is not a directory",
            source,
            EXIT_SOURCE_MISSING,
        )

    target = resolve_path(target_dir)
    if not os.path.isdir(target):
        raise PreconditionError(
            f"Target path `{target}` does not exist or is not a directory",
            target,
            EXIT_TARGET_MISSING,
        )

    if not _is_empty_dir(target):
        raise PreconditionError(
            f"Target path `{target}` is not empty", target, EXIT_TARGET_NOT_EMPTY
        )

    return Preflight(list_path, source, target)
