"""
Config command for sandsync mounts.

Shows or updates the defaults used when resolving mounts.
"""
#region Imports
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from sandsync.config import user_config
#endregion


#region Command


def config_command(
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict",
        help="Fail on the first invalid volume instead of skipping it"
    ),
    classifier: Optional[str] = typer.Option(
        None, "--classifier", "-c",
        help=f"Default path classifier ({', '.join(user_config.VALID_CLASSIFIERS)})"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level",
        help=f"Log level ({', '.join(user_config.VALID_LOG_LEVELS)})"
    ),
):
    """
    Show or change mount resolution defaults.

    Without options, prints the current configuration.
    """
    console = Console()

    try:
        if strict is not None:
            user_config.set_strict(strict)
        if classifier is not None:
            user_config.set_classifier_name(classifier)
        if log_level is not None:
            user_config.set_log_level(log_level)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(
        title="Mount Configuration",
        show_header=False,
        box=None,
        padding=(0, 2),
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("Config file", str(user_config.get_config_path()))
    table.add_row("Classifier", user_config.get_classifier_name())
    table.add_row(
        "Invalid volumes",
        "[red]abort[/red]" if user_config.get_strict() else "[yellow]skip and warn[/yellow]"
    )
    table.add_row("Log level", user_config.get_log_level())

    console.print()
    console.print(table)


#endregion
