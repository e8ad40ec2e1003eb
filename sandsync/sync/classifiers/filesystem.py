"""
Filesystem path classifier.

Stats the local disk. Symlinks are followed, matching what Docker mounts
for a bind volume.
"""
#region Imports
import logging
import posixpath
import stat
from pathlib import Path

from sandsync.sync.classifiers.base import PathClassifier
from sandsync.sync.errors import InvalidVolumePathError, PathNotFoundError, VolumeError
#endregion


logger = logging.getLogger(__name__)


#region Classifier


class FilesystemClassifier(PathClassifier):
    """Classifies paths by stat'ing them on the local filesystem."""

    @property
    def name(self) -> str:
        return "Filesystem"

    def is_dir(self, path: str) -> bool:
        if not posixpath.isabs(path):
            raise InvalidVolumePathError(path)

        try:
            mode = Path(path).stat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            raise PathNotFoundError(path)
        except PermissionError:
            raise VolumeError(path, "Permission denied while reading volume")
        except (OSError, ValueError) as e:
            # Symlink loops, over-long names, embedded NUL bytes
            raise VolumeError(path, f"Cannot read volume: {e}")

        logger.debug(f"Classified {path} (mode {stat.filemode(mode)})")
        return stat.S_ISDIR(mode)


#endregion
