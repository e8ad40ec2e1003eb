"""
Errors raised while preparing volumes for sync.

All of them are configuration problems the user can fix in the deployment
descriptor, so each carries the offending path and a readable message.
"""


#region Exceptions


class VolumeError(Exception):
    """Base class for volume paths that cannot be synchronized."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path!r}")


class PathNotFoundError(VolumeError):
    """The requested volume does not exist on disk."""

    def __init__(self, path: str):
        super().__init__(path, "Volume path does not exist")


class InvalidVolumePathError(VolumeError):
    """The requested volume is empty or not an absolute path."""

    def __init__(self, path: str, reason: str = "Volume path must be absolute"):
        super().__init__(path, reason)


#endregion
