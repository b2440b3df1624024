"""Null presenter for testing (no output)."""

from ydict.models import ValidationResult


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_report(self, report: str) -> None:
        """Display a rendered lookup report (no-op)."""
        pass

    def show_validation_result(self, result: ValidationResult) -> None:
        """Display the result of setup validation (no-op)."""
        pass
