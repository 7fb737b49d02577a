"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod


class Display(ABC):
    """Abstract base for user-facing output."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message, such as a prompt.

        Args:
            message: Status text to display
            kwargs: Implementation-specific options
        """

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message.

        Args:
            message: Success text
            kwargs: Implementation-specific options
        """

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options
        """

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message.

        Args:
            message: Warning text
            kwargs: Implementation-specific options
        """

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message.

        Args:
            message: Info text
            kwargs: Implementation-specific options
        """
