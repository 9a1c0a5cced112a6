from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .errors import PreconditionError
from .index import build_index, reconcile, unmatched
from .namelist import load_names
from .preflight import run_preflight

EXIT_PARTIAL = 6
EXIT_COPY_FAILED = 7
EXIT_INTERRUPTED = 8


@dataclass
class CopyReport:
    dry_run: bool
    copied: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)
    bytes_copied: int = 0


def _format_size(n: int) -> str:
    units = ["B", "KB", "MB", "GB", "TB"]
    size = float(n)
    for u in units:
        if size < 1024.0 or u == units[-1]:
            return f"{size:.1f} {u}"
        size /= 1024.0


def _copy_file(src: str, dst: str, chunk_size: int = 1024 * 1024) -> int:
    written = 0
    with open(src, "rb") as rf, open(dst, "wb") as wf:
        while True:
            buf = rf.read(chunk_size)
            if not buf:
                break
            wf.write(buf)
            written += len(buf)
    try:
        shutil.copystat(src, dst, follow_symlinks=True)
    except OSError:
        # timestamps and mode only; contents are already in place
        pass
    return written


def execute_copies(
    pairs: list[tuple[str, str]],
    target_dir: str,
    apply: bool,
    keep_going: bool = False,
) -> CopyReport:
    """Copy (or, in dry-run mode, only announce) each ``(name, source)`` pair.

    The first failed copy raises unless ``keep_going`` is set, in which case
    the failure is recorded and the remaining files are still copied. Files
    copied before a failure are left in place.
    """
    report = CopyReport(dry_run=not apply)
    for name, src in pairs:
        dst = os.path.join(target_dir, name)
        if not apply:
            print(f"DRY RUN. Not copying `{src}` to `{dst}`")
            continue
        print(f"Copying `{src}` to `{dst}`")
        try:
            report.bytes_copied += _copy_file(src, dst)
        except OSError as e:
            if not keep_going:
                raise
            print(f"Failed to copy `{src}`: {e}")
            report.failed.append((src, str(e)))
            continue
        report.copied.append(dst)
    return report


def run_find_copy(
    file_list: Path | str,
    source_dir: Path | str,
    target_dir: Path | str,
    apply: bool = False,
    keep_going: bool = False,
) -> CopyReport:
    try:
        checked = run_preflight(file_list, source_dir, target_dir)
    except PreconditionError as e:
        print(f"ERROR: {e}")
        sys.exit(e.exit_code)

    failure = "ERROR"
    try:
        names = load_names(checked.file_list)

        print(f"Reading files from: {checked.source_dir}")
        index = build_index(
            checked.source_dir,
            on_insert=lambda name, _path: print(f"Inserting: `{name}`"),
        )

        pairs = reconcile(names, index)
        missing = unmatched(names, index)

        failure = "Copy failed"
        report = execute_copies(pairs, checked.target_dir, apply, keep_going=keep_going)
    except KeyboardInterrupt:
        print("\nAborted by user.")
        sys.exit(EXIT_INTERRUPTED)
    except OSError as e:
        print(f"\n{failure}: {e}")
        sys.exit(EXIT_COPY_FAILED)

    print()
    print(f"Matched: {len(pairs)} of {len(names)} requested file name(s)")
    if missing:
        print(f"Not found in source: {len(missing)}")
    if report.dry_run:
        print("Dry run: nothing was copied. Pass --disable-dry-run to copy for real.")
    else:
        print(f"Copied: {len(report.copied)} file(s), {_format_size(report.bytes_copied)}")
    if report.failed:
        print(f"Failed: {len(report.failed)} file(s)")
        sys.exit(EXIT_PARTIAL)
    return report
