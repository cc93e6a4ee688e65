"""Filesystem checks for CLI inputs."""

from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Fail early when an input file the run depends on is missing.

    Raises:
        FileNotFoundError: If nothing exists at `path`
        IsADirectoryError: If `path` is a directory where a file is expected
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Expected a file for {what}, found a directory: {path}")
