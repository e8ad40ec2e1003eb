"""
Base class for path classifiers.

Defines the capability the mount resolver uses to tell directories from
files. Passing it in keeps the resolver free of filesystem access.
"""
#region Imports
from abc import ABC, abstractmethod
#endregion


#region Base Class


class PathClassifier(ABC):
    """
    Abstract base class for path classifiers.

    Implementations answer a single question per path. They may raise
    VolumeError subclasses for paths that cannot be classified; the resolver
    decides whether to skip or propagate them.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable classifier name."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """
        Check whether path is a directory.

        Args:
            path: Normalized absolute path

        Returns:
            True for a directory, False for any other existing entry

        Raises:
            PathNotFoundError: If nothing exists at path
            InvalidVolumePathError: If path is not absolute
        """
        pass


#endregion
