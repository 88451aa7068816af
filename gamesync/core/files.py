"""
File system utilities for Game Sync.

Directory enumeration is best-effort (unreadable folders are skipped).
Copy and delete helpers raise FilesystemError so a sync fails fast.
"""

import os
import shutil
from pathlib import Path
from typing import Iterator, List

from ..errors import FilesystemError


def iter_directories(root: Path) -> Iterator[str]:
    """
    Yield every directory nested under root, depth-first.

    Paths are relative to root and always use "/" as separator.
    Symlinked directories are not followed.
    """
    def scan_dir(dir_path: Path, prefix: str = ""):
        try:
            with os.scandir(dir_path) as entries:
                subdirs = [e for e in entries if e.is_dir(follow_symlinks=False)]
        except OSError:
            return
        for entry in subdirs:
            rel_path = f"{prefix}{entry.name}"
            yield rel_path
            yield from scan_dir(Path(entry.path), f"{rel_path}/")

    yield from scan_dir(Path(root))


def list_directories(root: Path) -> List[str]:
    """Sorted list of every directory under root (see iter_directories)."""
    return sorted(iter_directories(root))


def remove_tree(path: Path):
    """Recursively delete path. A missing path is not an error."""
    path = Path(path)
    if not path.exists() and not path.is_symlink():
        return
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        raise FilesystemError("remove", path, e) from e


def copy_file(src: Path, dest: Path):
    """Copy a single file, contents and permission bits."""
    try:
        shutil.copyfile(src, dest)
        shutil.copymode(src, dest)
    except OSError as e:
        raise FilesystemError("copy", src, e) from e


def copy_tree(src: Path, dest: Path) -> int:
    """
    Recursively copy src into dest, creating directories on demand.

    Returns number of files copied.
    """
    copied = 0
    try:
        Path(dest).mkdir(parents=True, exist_ok=True)
        with os.scandir(src) as it:
            entries = list(it)
    except OSError as e:
        raise FilesystemError("copy", src, e) from e

    for entry in entries:
        src_path = Path(entry.path)
        dest_path = Path(dest) / entry.name
        if entry.is_dir():
            copied += copy_tree(src_path, dest_path)
        else:
            copy_file(src_path, dest_path)
            copied += 1

    return copied
