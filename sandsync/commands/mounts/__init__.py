"""
Mount commands for sandsync.

Provides subcommands for inspecting sync mounts:
- resolve: Show the watch roots for a set of volumes
- ignore: Show the .stignore files for partial watch roots
- config: Show or change resolution defaults
"""
#region Imports
import typer

from sandsync.commands.mounts import resolve, ignore, config
#endregion


#region App Setup
app = typer.Typer(
    name="mounts",
    help="Sync mount resolution",
    no_args_is_help=True,
)
#endregion


#region Command Registration
app.command(name="resolve")(resolve.resolve_command)
app.command(name="ignore")(ignore.ignore_command)
app.command(name="config")(config.config_command)
#endregion
