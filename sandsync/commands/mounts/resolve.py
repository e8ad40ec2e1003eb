"""
Resolve command for sandsync mounts.

Shows which watch roots the sync agent would be configured with for a set
of volume paths.
"""
#region Imports
import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from sandsync.config import user_config
from sandsync.sync import MountResolver, VolumeError, find_uncovered, get_classifier
from sandsync.sync.paths import normalize_volume_path
#endregion


#region Helper Functions


def build_resolver(dirs: Optional[list[str]], strict: Optional[bool]) -> MountResolver:
    """
    Build a resolver from command options and stored defaults.

    Args:
        dirs: Paths to treat as directories; switches to the static classifier
        strict: Strict mode override (None: use the stored default)

    Returns:
        Configured MountResolver
    """
    classifier_name = "static" if dirs else user_config.get_classifier_name()
    if classifier_name == "static":
        classifier = get_classifier(classifier_name, dirs=dirs or [])
    else:
        classifier = get_classifier(classifier_name)
    if strict is None:
        strict = user_config.get_strict()
    return MountResolver(classifier, strict=strict)


def run_resolver(console: Console, resolver: MountResolver, paths: list[str]):
    """Resolve paths, turning a strict-mode failure into exit code 1."""
    try:
        return resolver.resolve(paths)
    except VolumeError as e:
        console.print(f"[red]Error:[/red] {e.message}: {e.path}")
        raise typer.Exit(1)


def checked_volumes(paths: list[str], skipped: list[tuple[str, str]]) -> list[str]:
    """Normalize the paths that made it through classification."""
    skipped_paths = {path for path, _ in skipped}
    volumes = []
    for path in paths:
        if path in skipped_paths:
            continue
        try:
            normalized = normalize_volume_path(path)
        except VolumeError:
            continue
        if normalized not in skipped_paths and normalized not in volumes:
            volumes.append(normalized)
    return volumes


#endregion


#region Command


def resolve_command(
    paths: list[str] = typer.Argument(
        ...,
        help="Absolute volume paths (files or directories)"
    ),
    dirs: Optional[list[str]] = typer.Option(
        None, "--dir", "-d",
        help="Treat this path as a directory instead of checking the disk (repeatable)"
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict",
        help="Fail on the first invalid volume instead of skipping it"
    ),
    as_json: bool = typer.Option(
        False, "--json",
        help="Print mounts as JSON"
    ),
    check: bool = typer.Option(
        False, "--check",
        help="Verify every volume is covered by exactly one mount"
    ),
):
    """
    Resolve volume paths into sync agent watch roots.

    Requested directories are synced whole. Files are grouped under their
    parent directory, which is synced with an include list.

    Example:
      sandsync mounts resolve /src/app /src/config.yml --dir /src/app
    """
    # Keep stdout clean for JSON consumers
    console = Console(stderr=as_json)

    resolver = build_resolver(dirs, strict)
    mounts = run_resolver(console, resolver, paths)

    if as_json:
        typer.echo(json.dumps([mount.to_dict() for mount in mounts], indent=2))
    else:
        table = Table(title="Sync Mounts", padding=(0, 2))
        table.add_column("Path", style="bold")
        table.add_column("Mode")
        table.add_column("Include")

        for mount in mounts:
            if mount.sync_all:
                table.add_row(mount.path, "[green]all[/green]", "")
            else:
                table.add_row(mount.path, "[yellow]partial[/yellow]", ", ".join(mount.include))

        console.print()
        console.print(table)

    for path, message in resolver.last_skipped:
        console.print(f"[yellow]Skipped {path}: {message}[/yellow]")

    if check:
        uncovered = find_uncovered(checked_volumes(paths, resolver.last_skipped), mounts)
        if uncovered:
            for path in uncovered:
                console.print(f"[red]Not covered exactly once:[/red] {path}")
            raise typer.Exit(1)
        console.print("[green]Every volume is covered exactly once[/green]")


#endregion
