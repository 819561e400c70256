import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING", console: Console = None):
    """Route all diagtask loggers through a RichHandler on stderr."""
    level_value = getattr(logging, str(level).upper(), logging.WARNING)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
    )
    logging.basicConfig(level=level_value, format="%(message)s", handlers=[handler], force=True)
