"""
Sync mount resolver.

Turns the bind-mount sources of a deployment into the smallest set of
Syncthing watch roots that covers every one of them exactly once:

- a requested directory is synced whole, and swallows every other request
  beneath it
- files are grouped under their parent directory, which is synced with an
  include list instead of one root per file
- a request that lands beneath such a partial root is folded into it, so
  no two roots ever nest
"""
#region Imports
import logging
from typing import Iterable, Optional

from sandsync.sync.classifiers import FilesystemClassifier, PathClassifier
from sandsync.sync.errors import VolumeError
from sandsync.sync.mounts import Mount
from sandsync.sync.paths import ancestors, normalize_volume_path, parent_dir, relative_to
#endregion


logger = logging.getLogger(__name__)


#region Resolver


class MountResolver:
    """
    Computes the minimal covering Mount list for a set of volume paths.

    The resolver itself never raises: volumes the classifier rejects are
    skipped with a warning so the remaining volumes still sync. Pass
    strict=True to propagate the first VolumeError instead.
    """

    def __init__(self, classifier: Optional[PathClassifier] = None, strict: bool = False):
        """
        Initialize the resolver.

        Args:
            classifier: Directory check to use (default: the local filesystem)
            strict: Raise on the first invalid volume instead of skipping it
        """
        self.classifier = classifier or FilesystemClassifier()
        self.strict = strict
        self.last_skipped: list[tuple[str, str]] = []

    def resolve(self, volumes: Iterable[str]) -> list[Mount]:
        """
        Resolve volume paths into mounts.

        Args:
            volumes: Absolute paths of files or directories to sync

        Returns:
            Mounts sorted by path

        Raises:
            VolumeError: Only in strict mode, for the first invalid volume
        """
        self.last_skipped = []
        requests = self._classify(volumes)

        requested_dirs = {path for path, is_dir in requests.items() if is_dir}
        surviving = []
        for path, is_dir in requests.items():
            dominator = next((a for a in ancestors(path) if a in requested_dirs), None)
            if dominator is not None:
                logger.debug(f"{path} is already covered by {dominator}")
                continue
            surviving.append((path, is_dir))

        # Parents of requested files that were never requested themselves
        inferred = {parent_dir(path) for path, is_dir in surviving if not is_dir}

        whole: list[str] = []
        partial: dict[str, list[str]] = {}
        for path, is_dir in surviving:
            key = path if is_dir else parent_dir(path)
            root = self._outermost(key, inferred)
            if root is None:
                whole.append(path)
                continue
            if root != key:
                logger.debug(f"Folding {path} into {root}")
            partial.setdefault(root, []).append(relative_to(path, root))

        mounts = [Mount(path, sync_all=True) for path in whole]
        mounts.extend(Mount(root, include=tuple(entries)) for root, entries in partial.items())
        mounts.sort(key=lambda mount: mount.path)

        logger.info(
            f"Resolved {len(requests)} volume(s) into {len(mounts)} mount(s)"
            + (f", skipped {len(self.last_skipped)}" if self.last_skipped else "")
        )
        return mounts

    def _classify(self, volumes: Iterable[str]) -> dict[str, bool]:
        """Normalize, dedupe and classify volumes, keeping first-seen order."""
        requests: dict[str, bool] = {}
        for volume in volumes:
            try:
                path = normalize_volume_path(volume)
                if path in requests:
                    continue
                requests[path] = self.classifier.is_dir(path)
            except VolumeError as e:
                if self.strict:
                    raise
                logger.warning(f"Skipping volume {e.path!r}: {e.message}")
                self.last_skipped.append((e.path, e.message))
        return requests

    @staticmethod
    def _outermost(key: str, inferred: set[str]) -> Optional[str]:
        """Find the highest inferred directory at or above key."""
        found = key if key in inferred else None
        for ancestor in ancestors(key):
            if ancestor in inferred:
                found = ancestor
        return found


#endregion


#region Functions


def resolve_mounts(
    volumes: Iterable[str],
    classifier: Optional[PathClassifier] = None,
    strict: bool = False,
) -> list[Mount]:
    """
    Resolve volume paths into mounts with a one-off resolver.

    Args:
        volumes: Absolute paths of files or directories to sync
        classifier: Directory check to use (default: the local filesystem)
        strict: Raise on the first invalid volume instead of skipping it

    Returns:
        Mounts sorted by path
    """
    return MountResolver(classifier, strict=strict).resolve(volumes)


def find_uncovered(volumes: Iterable[str], mounts: list[Mount]) -> list[str]:
    """
    List volumes that are not covered by exactly one mount.

    Args:
        volumes: Normalized absolute volume paths
        mounts: Resolved mounts

    Returns:
        Volumes covered by zero or by several mounts, in input order
    """
    return [
        volume for volume in volumes
        if sum(1 for mount in mounts if mount.covers(volume)) != 1
    ]


#endregion
