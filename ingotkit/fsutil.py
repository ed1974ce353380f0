"""File system helpers."""

from __future__ import annotations

import os
import shutil

__all__ = ["empty_dir", "remove_files", "has_file_with_ext"]


def empty_dir(dir_path: str | os.PathLike[str]) -> None:
    """Remove everything inside ``dir_path``, creating the directory if it is missing."""
    try:
        shutil.rmtree(dir_path)
    except FileNotFoundError:
        pass
    os.mkdir(dir_path)


def remove_files(ext_name: str, dir_path: str | os.PathLike[str]) -> None:
    """Remove, recursively, every file in ``dir_path`` whose name ends with ``.ext_name``.

    ``ext_name`` is given without the leading dot.
    """
    suffix = f".{ext_name}"
    with os.scandir(dir_path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                remove_files(ext_name, entry.path)
            elif entry.name.endswith(suffix):
                os.remove(entry.path)


def has_file_with_ext(ext_name: str, dir_path: str | os.PathLike[str]) -> bool:
    """Check whether ``dir_path`` directly holds an entry whose name ends with ``.ext_name``."""
    suffix = f".{ext_name}"
    with os.scandir(dir_path) as entries:
        return any(entry.name.endswith(suffix) for entry in entries)