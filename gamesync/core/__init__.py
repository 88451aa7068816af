"""
Core filesystem helpers shared by the sync and manifest modules.
"""

from .files import iter_directories, list_directories, copy_tree, remove_tree, copy_file

__all__ = [
    "iter_directories",
    "list_directories",
    "copy_tree",
    "remove_tree",
    "copy_file",
]
