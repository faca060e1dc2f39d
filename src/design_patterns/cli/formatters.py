"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialisation
- Rich tables for pattern listings and details
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

CONSOLE_WIDTH = 120


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_pattern_table(data["pattern"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_pattern_list(data["pattern"])
    else:
        return json.dumps(data, indent=2, default=str)


def _render(*renderables) -> str:
    """Capture Rich output as a string."""
    console = Console(width=CONSOLE_WIDTH, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        for renderable in renderables:
            console.print(renderable)
    return capture.get()


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format pattern summaries as a table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Intent")

    for pattern in patterns:
        table.add_row(
            pattern.get("slug", "N/A"),
            pattern.get("name", "N/A"),
            pattern.get("category", "N/A"),
            pattern.get("intent", ""),
        )
    return _render(table)


def format_pattern_table(pattern: Dict) -> str:
    """Format one pattern's details as a field table plus a participants table."""
    details = Table(show_header=False, box=None)
    details.add_column("Field", style="bold cyan")
    details.add_column("Value")
    details.add_row("Name", pattern.get("name", "N/A"))
    details.add_row("Slug", pattern.get("slug", "N/A"))
    details.add_row("Category", pattern.get("category", "N/A"))
    details.add_row("Intent", pattern.get("intent", ""))
    applicability = pattern.get("applicability") or []
    if applicability:
        details.add_row("Use when", "\n".join(f"- {item}" for item in applicability))

    participants = Table(show_header=True, header_style="bold magenta", title="Participants")
    participants.add_column("Role", style="green")
    participants.add_column("Class", style="cyan")
    participants.add_column("Description")
    for participant in pattern.get("participants", []):
        participants.add_row(
            participant.get("role", ""),
            participant.get("class_name", ""),
            participant.get("description", ""),
        )
    return _render(details, participants)


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format pattern summaries as a detailed list."""
    if not patterns:
        return "No patterns found."

    lines = []
    for i, pattern in enumerate(patterns):
        if i > 0:
            lines.append("")  # Blank line between patterns
        lines.append(f"Pattern: {pattern.get('slug', 'N/A')}")
        lines.append(f"  Name: {pattern.get('name', 'N/A')}")
        lines.append(f"  Category: {pattern.get('category', 'N/A')}")
        lines.append(f"  Intent: {pattern.get('intent', '')}")
    return "\n".join(lines)


def format_pattern_list(pattern: Dict) -> str:
    """Format one pattern's details as a list."""
    lines = [
        f"Pattern: {pattern.get('slug', 'N/A')}",
        f"  Name: {pattern.get('name', 'N/A')}",
        f"  Category: {pattern.get('category', 'N/A')}",
        f"  Intent: {pattern.get('intent', '')}",
        "  Participants:",
    ]
    for participant in pattern.get("participants", []):
        line = f"    {participant.get('role', '')}: {participant.get('class_name', '')}"
        if participant.get("description"):
            line += f" - {participant['description']}"
        lines.append(line)

    applicability = pattern.get("applicability") or []
    if applicability:
        lines.append("  Applicability:")
        lines.extend(f"    - {item}" for item in applicability)
    return "\n".join(lines)
