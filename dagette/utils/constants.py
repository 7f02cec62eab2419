"""
Centralized UI constants for consistent styling across dagette.

This module defines standard symbols, colors, and styles used in Rich
console output throughout the application.
"""

# Colorblind-friendly symbols and styles
SYMBOLS = {
    "graph": "🕸️ ",
    "success": "[bold green]✓[/bold green] ",
    "error": "[bold red]![/bold red] ",
    "warning": "[bold yellow]⚠[/bold yellow] ",
    "edge": "→ ",
    "band": "▤ ",
    "node": "● ",
    "info": "[bold blue]i[/bold blue] ",
}

STYLE = {
    "header": "bold cyan",
    "dim": "dim",
    "info": "blue",
    "warning": "yellow",
    "error": "red",
    "success": "green",
    "node": "cyan",
    "band": "magenta",
}

# Sidebar checklist marks
CHECK = "✓"
CROSS = "✗"
