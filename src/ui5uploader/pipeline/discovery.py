"""Find the files to upload below a base directory."""

import glob
import os
from pathlib import Path, PurePath


class FileDiscoveryError(Exception):
    """Raised when a glob pattern cannot be expanded against the base dir."""


def normalize_base(base: str) -> str:
    """Strip a single trailing ``/`` or ``\\`` from the base dir."""
    if base.endswith(("/", "\\")):
        return base[:-1]
    return base


def find_files(base: str, pattern: str) -> list[str]:
    """
    Expand a glob pattern relative to a base directory.

    ``**`` matches any number of directories. Hidden files are not matched
    unless the pattern names them, and directories are never returned.

    Args:
        base: Directory the pattern is relative to
        pattern: Glob pattern, e.g. ``**`` or ``webapp/**/*.js``

    Returns:
        Sorted, de-duplicated relative paths using ``/`` as separator

    Raises:
        FileDiscoveryError: If the base dir is missing or unreadable, or the
            pattern cannot be expanded
    """
    root = Path(normalize_base(base))

    if not root.exists():
        raise FileDiscoveryError(f"Base dir not found: {root}")

    if not root.is_dir():
        raise FileDiscoveryError(f"Base dir is not a directory: {root}")

    if not os.access(root, os.R_OK | os.X_OK):
        raise FileDiscoveryError(f"Base dir is not readable: {root}")

    try:
        matches = glob.glob(pattern, root_dir=root, recursive=True)
    except (OSError, ValueError) as e:
        raise FileDiscoveryError(f"Cannot expand pattern '{pattern}': {e}") from e

    files = {
        PurePath(match).as_posix()
        for match in matches
        if (root / match).is_file()
    }
    return sorted(files)
