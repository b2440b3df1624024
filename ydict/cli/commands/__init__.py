"""CLI sub-command implementations."""
