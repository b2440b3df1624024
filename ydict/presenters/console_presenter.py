"""Console presenter for CLI output."""

import sys

from ydict.models import ValidationResult


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}", file=sys.stderr)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}", file=sys.stderr)

    def show_report(self, report: str) -> None:
        """Display a rendered lookup report."""
        print(report)

    def show_validation_result(self, result: ValidationResult) -> None:
        """Display the result of setup validation."""
        print("\nValidation Results:")
        print(f"  {'[OK]' if result.deck_configured else '[FAIL]'} Deck name configured")
        print(f"  {'[OK]' if result.ankiconnect_ok else '[FAIL]'} AnkiConnect")
        print(f"  {'[OK]' if result.deck_exists else '[FAIL]'} Anki Deck")
        print(f"  {'[OK]' if result.ffmpeg_ok else '[WARN]'} ffmpeg (pronunciation playback)")

        if result.issues:
            print("\nIssues:")
            for issue in result.issues:
                print(f"  {issue}")

        if result.all_passed and result.has_warnings:
            print("\n[OK] All required validations passed (pronunciation playback unavailable)")
        elif result.all_passed:
            print("\n[OK] All validations passed")
        else:
            print("\n[FAIL] Some validations failed")
