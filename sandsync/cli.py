"""
Command-line entry point for sandsync.
"""
#region Imports
import typer

from sandsync.commands import mounts
from sandsync.config import user_config
from sandsync.logging_config import setup_logging
#endregion


#region App Setup
app = typer.Typer(
    name="sandsync",
    help="Keep local files in sync with remote development sandboxes",
    no_args_is_help=True,
)
#endregion


#region Callbacks


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Show debug logging"
    ),
):
    """Configure logging before any subcommand runs."""
    setup_logging("DEBUG" if verbose else user_config.get_log_level())


#endregion


#region Command Registration
app.add_typer(mounts.app, name="mounts")
#endregion


def main():
    app()


if __name__ == "__main__":
    main()
