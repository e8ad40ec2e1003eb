"""
sandsync - keeps local files in step with remote development sandboxes.

The core of the package is the sync mount resolver, which turns the bind-mount
paths of a deployment into the minimal set of watch roots for Syncthing.
"""
__version__ = "0.1.0"
