"""
Path helpers for volume resolution.

Volumes are POSIX paths: they end up mounted inside Linux containers, so
comparisons are purely lexical and never touch the disk.
"""
#region Imports
import posixpath
from typing import Iterator

from sandsync.sync.errors import InvalidVolumePathError
#endregion


#region Constants
ROOT = "/"
#endregion


#region Functions


def normalize_volume_path(path: str) -> str:
    """
    Normalize an absolute volume path.

    Removes duplicate separators, "." segments and trailing slashes, and
    collapses ".." lexically.

    Args:
        path: Path as written in the deployment descriptor

    Returns:
        Normalized absolute path

    Raises:
        InvalidVolumePathError: If path is empty or relative
    """
    if not path or not path.strip():
        raise InvalidVolumePathError(path, "Volume path is empty")
    if not posixpath.isabs(path):
        raise InvalidVolumePathError(path)

    normalized = posixpath.normpath(path)
    # normpath keeps a leading "//" (POSIX allows it to mean something else)
    if normalized.startswith("//"):
        normalized = ROOT + normalized.lstrip("/")
    return normalized


def parent_dir(path: str) -> str:
    """Get the directory containing path ("/" is its own parent)."""
    return posixpath.dirname(path) or ROOT


def is_ancestor(ancestor: str, path: str) -> bool:
    """
    Check whether ancestor is a proper ancestor of path.

    Only whole components count: "/a" contains "/a/b" but not "/ab".
    Both arguments must already be normalized.
    """
    if ancestor == path:
        return False
    if ancestor == ROOT:
        return True
    return path.startswith(ancestor + "/")


def is_within(root: str, path: str) -> bool:
    """Check whether path equals root or lies beneath it."""
    return root == path or is_ancestor(root, path)


def ancestors(path: str) -> Iterator[str]:
    """Yield the proper ancestors of path, nearest first, ending with "/"."""
    current = path
    while current != ROOT:
        current = parent_dir(current)
        yield current


def relative_to(path: str, root: str) -> str:
    """
    Express path relative to root.

    Args:
        path: Normalized path at or beneath root
        root: Normalized directory path

    Returns:
        Relative path using "/" separators ("." when path equals root)
    """
    return posixpath.relpath(path, root)


#endregion
