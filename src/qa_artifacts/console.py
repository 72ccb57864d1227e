"""Shared rich consoles."""

from rich.console import Console

# Emoji codes are printed literally
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)
