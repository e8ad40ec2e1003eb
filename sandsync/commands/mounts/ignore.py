"""
Ignore command for sandsync mounts.

Prints the .stignore content Syncthing needs for every partial watch root.
"""
#region Imports
import posixpath
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from sandsync.commands.mounts.resolve import build_resolver, run_resolver
#endregion


#region Command


def ignore_command(
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
):
    """
    Show the .stignore file for each partial watch root.

    Roots that sync their whole directory need no ignore file and are
    only listed.
    """
    console = Console()

    resolver = build_resolver(dirs, strict)
    mounts = run_resolver(console, resolver, paths)

    if not mounts:
        console.print("[dim]No mounts to configure.[/dim]")
        return

    for mount in mounts:
        console.print()
        if mount.sync_all:
            console.print(f"[bold]{mount.path}[/bold] [dim]({mount.folder_id})[/dim]: syncs everything")
            continue

        console.print(Panel(
            "\n".join(mount.ignore_patterns()),
            title=posixpath.join(mount.path, ".stignore"),
            subtitle=mount.folder_id,
            border_style="blue",
        ))


#endregion
