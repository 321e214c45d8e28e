# Argx Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for argx reports and errors."""
from rich.console import Console

console = Console(color_system="truecolor")
error_console = Console(stderr=True)
