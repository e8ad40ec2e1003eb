#region Imports
import logging

from rich.console import Console
from rich.logging import RichHandler
#endregion


#region Functions


def setup_logging(level: str = "WARNING") -> None:
    """
    Route all logging through a rich handler on stderr.

    Args:
        level: Log level name for the root logger
    """
    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=level == "DEBUG",
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(rich_handler)


#endregion
