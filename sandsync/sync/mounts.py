"""
Mount records handed to the Syncthing config writer.

A Mount is one watch root. It either syncs its whole subtree or only the
entries listed in include, which become "!/entry" lines in .stignore.
"""
#region Imports
import hashlib
import posixpath
from dataclasses import dataclass, field

from sandsync.sync.paths import is_within
#endregion


#region Constants
FOLDER_ID_PREFIX = "sandsync-"
#endregion


#region Types


@dataclass(frozen=True, order=True)
class Mount:
    """
    A single watch root for the sync agent.

    Attributes:
        path: Absolute directory rooting the watch
        sync_all: True when the whole subtree under path is synchronized
        include: Entries relative to path synchronized individually
            (only used when sync_all is False)
    """

    path: str
    sync_all: bool = False
    include: tuple[str, ...] = field(default=())

    def __post_init__(self):
        # Lists are accepted for convenience but stored as tuples so the
        # record stays hashable
        if not isinstance(self.include, tuple):
            object.__setattr__(self, "include", tuple(self.include))

    @property
    def folder_id(self) -> str:
        """Stable Syncthing folder ID for this mount."""
        digest = hashlib.sha1(self.path.encode("utf-8")).hexdigest()
        return f"{FOLDER_ID_PREFIX}{digest[:12]}"

    def covers(self, path: str) -> bool:
        """
        Check whether a normalized absolute path is synchronized by this mount.

        Args:
            path: Path to check

        Returns:
            True if path is the mount root of a SyncAll mount, lies beneath
            it, or is (or lies beneath) one of the include entries
        """
        if self.sync_all:
            return is_within(self.path, path)
        return any(
            is_within(posixpath.join(self.path, entry), path)
            for entry in self.include
        )

    def ignore_patterns(self) -> list[str]:
        """
        Build the .stignore lines for this mount.

        Returns:
            Empty list for SyncAll mounts, otherwise one negated pattern per
            include entry followed by a catch-all ignore
        """
        if self.sync_all:
            return []

        patterns = [f"!/{entry}" for entry in self.include]
        patterns.append("*")
        return patterns

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict."""
        return {
            "path": self.path,
            "sync_all": self.sync_all,
            "include": list(self.include),
        }


#endregion
