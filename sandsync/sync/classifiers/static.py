"""
In-memory path classifier.

Answers from fixed sets of paths instead of the disk. Used for dry runs
from the CLI and throughout the test suite.
"""
#region Imports
from typing import Iterable, Optional

from sandsync.sync.classifiers.base import PathClassifier
from sandsync.sync.errors import PathNotFoundError
from sandsync.sync.paths import normalize_volume_path
#endregion


#region Classifier


class StaticClassifier(PathClassifier):
    """
    Classifier backed by a known answer set.

    With only dirs given, every other path is a file. When files is also
    given, the classifier is closed-world and unknown paths do not exist.
    """

    def __init__(
        self,
        dirs: Iterable[str] = (),
        files: Optional[Iterable[str]] = None,
        **kwargs,
    ):
        """
        Initialize the static classifier.

        Args:
            dirs: Paths to report as directories
            files: Paths to report as files (None: anything not in dirs)
        """
        self.dirs = frozenset(normalize_volume_path(d) for d in dirs)
        self.files = None if files is None else frozenset(
            normalize_volume_path(f) for f in files
        )

    @property
    def name(self) -> str:
        return "Static"

    def is_dir(self, path: str) -> bool:
        path = normalize_volume_path(path)
        if path in self.dirs:
            return True
        if self.files is not None and path not in self.files:
            raise PathNotFoundError(path)
        return False


#endregion
