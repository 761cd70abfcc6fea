"""Subcommands of the snakecase CLI."""
