"""Presenter protocol for output abstraction."""

from typing import Protocol

from ydict.models import ValidationResult


class PresenterProtocol(Protocol):
    """Interface for presenting output to user.

    This protocol abstracts all output operations, allowing the same
    lookup logic to print to a terminal or stay silent under test.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_report(self, report: str) -> None:
        """Display a rendered lookup report verbatim.

        Args:
            report: The report text to display
        """
        ...

    def show_validation_result(self, result: ValidationResult) -> None:
        """Display the result of setup validation.

        Args:
            result: The validation result to display
        """
        ...
