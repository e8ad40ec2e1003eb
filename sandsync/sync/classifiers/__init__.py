"""
Path classifiers for sandsync.

Each classifier implements the PathClassifier interface used by the
mount resolver.
"""
#region Imports
from sandsync.sync.classifiers.base import PathClassifier
from sandsync.sync.classifiers.filesystem import FilesystemClassifier
from sandsync.sync.classifiers.static import StaticClassifier
#endregion


#region Constants
CLASSIFIERS = {
    "filesystem": FilesystemClassifier,
    "static": StaticClassifier,
}
#endregion


#region Factory


def get_classifier(classifier_name: str, **config) -> PathClassifier:
    """
    Get a path classifier instance by name.

    Args:
        classifier_name: Classifier identifier (filesystem, static)
        **config: Classifier-specific configuration (e.g. dirs for static)

    Returns:
        PathClassifier instance

    Raises:
        ValueError: If classifier_name is unknown
    """
    if classifier_name not in CLASSIFIERS:
        raise ValueError(
            f"Unknown classifier: {classifier_name}. Must be one of {list(CLASSIFIERS)}"
        )

    return CLASSIFIERS[classifier_name](**config)


#endregion


__all__ = [
    "CLASSIFIERS",
    "PathClassifier",
    "FilesystemClassifier",
    "StaticClassifier",
    "get_classifier",
]
