# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argwalk help output."""
from rich.console import Console
from rich.theme import Theme

argwalk_theme = Theme(
    {
        "argwalk.heading": "bold",
        "argwalk.usage": "bold",
        "argwalk.flag": "cyan",
        "argwalk.command": "green",
    }
)

console = Console(color_system="truecolor", theme=argwalk_theme)
