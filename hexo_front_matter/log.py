import datetime
from typing import Any

from rich.console import Console, ConsoleRenderable
from rich.text import Text

from .config import is_debug


def log_time_formatter(x: datetime.datetime) -> Text:
    return Text(f"debug: [{x.isoformat()}]")


# stderr=True makes the consoles resolve sys.stderr on every write, so
# redirected or captured streams are honored.
DEBUG_CONSOLE = Console(stderr=True, log_time_format=log_time_formatter)
LOG_CONSOLE = Console(stderr=True, highlight=False, soft_wrap=True)

Renderable = str | ConsoleRenderable


def D(
    message: Renderable,
    *objects: Any,
    sep: str = " ",
    end: str = "\n",
) -> None:
    if not is_debug():
        return

    return DEBUG_CONSOLE.log(
        message,
        *objects,
        sep=sep,
        end=end,
        _stack_offset=2,
    )


def W(
    message: Renderable,
    *objects: Any,
    sep: str = " ",
    end: str = "\n",
) -> None:
    return LOG_CONSOLE.print(
        f"[bold yellow]warn:[/bold yellow] {message}",
        *objects,
        sep=sep,
        end=end,
    )
