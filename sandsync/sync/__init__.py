"""
Sync module for sandsync.

Computes the watch roots the sync agent is configured with:
- classifiers: tell directories from files
- resolver: reduce volume paths to a minimal Mount list
- mounts: the Mount records and their .stignore rendering
"""
#region Imports
from sandsync.sync.classifiers import (
    FilesystemClassifier,
    PathClassifier,
    StaticClassifier,
    get_classifier,
)
from sandsync.sync.errors import InvalidVolumePathError, PathNotFoundError, VolumeError
from sandsync.sync.mounts import Mount
from sandsync.sync.resolver import MountResolver, find_uncovered, resolve_mounts
#endregion


__all__ = [
    "FilesystemClassifier",
    "InvalidVolumePathError",
    "Mount",
    "MountResolver",
    "PathClassifier",
    "PathNotFoundError",
    "StaticClassifier",
    "VolumeError",
    "find_uncovered",
    "get_classifier",
    "resolve_mounts",
]
