from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path


def _raise(err: OSError):
    raise err


def build_index(
    source: Path | str,
    on_insert: Callable[[str, str], None] | None = None,
) -> dict[str, str]:
    """Map every file's base name under ``source`` to its full path.

    Names are visited in sorted order at each level, so when two files share
    a base name the one walked last wins the same way on every platform.
    Symlinks to directories are not followed and not indexed; symlinks to
    files are indexed like regular files.
    """
    index: dict[str, str] = {}
    for root, dirs, files in os.walk(source, onerror=_raise):
        dirs.sort()
        for f in sorted(files):
            full_path = os.path.join(root, f)
            if on_insert is not None:
                on_insert(f, full_path)
            index[f] = full_path
    return index


def reconcile(names: Iterable[str], index: Mapping[str, str]) -> list[tuple[str, str]]:
    wanted = set(names)
    return [(name, index[name]) for name in sorted(index) if name in wanted]


def unmatched(names: Iterable[str], index: Mapping[str, str]) -> list[str]:
    return sorted(name for name in set(names) if name not in index)
