from __future__ import annotations

from pathlib import Path


def load_names(path: Path | str) -> frozenset[str]:
    names: set[str] = set()
    try:
        with open(path, "r", encoding="utf-8", newline="") as fh:
            for line in fh:
                name = line.rstrip("\r\n")
                # blank and whitespace-only lines never name a file
                if not name.strip():
                    continue
                names.add(name)
    except UnicodeDecodeError as e:
        raise OSError(f"Cannot decode file list `{path}` as UTF-8: {e}") from e
    return frozenset(names)
