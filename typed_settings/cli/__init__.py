"""Command-line interface helpers."""

from typed_settings.cli.arguments import parse_arguments, split_assignment

__all__ = ["parse_arguments", "split_assignment"]
