"""CLI display implementation using Rich library."""

from rich.console import Console

from .Display import Display


class CLIDisplay(Display):
    """Plain-line CLI display.

    Every message goes to the console's stdout stream exactly as given.
    Messages carry user data (paths, file content), so they bypass rich's
    text rendering, which would expand tabs, strip control codes and
    interpret markup.
    """

    def __init__(self, console: Console | None = None):
        # No explicit file: the console follows whatever sys.stdout is at print time
        self.console = console or Console()

    def _print(self, message: str) -> None:
        stream = self.console.file
        stream.write(f"{message}\n")
        stream.flush()

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._print(message)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._print(message)

    def error(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._print(message)

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._print(message)

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._print(message)
