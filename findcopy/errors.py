from __future__ import annotations


class PreconditionError(Exception):
    """Input check failed before any work started; the user can fix and rerun."""

    def __init__(self, message: str, path: str, exit_code: int):
        super().__init__(message)
        self.path = path
        self.exit_code = exit_code


class PathResolutionError(Exception):
    """A path could not be made absolute. Not recoverable by rerunning."""
