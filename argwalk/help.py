# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help rendering for `Getopt`.

`Help` reads the definitions registered on a `Getopt` and renders a usage line
followed by option, operand and command sections. `render()` prints through a Rich
console; `get_help_text()` and `get_usage()` return plain strings.

Example output:
    usage: backup [options] [--] <source> [<target>]

    options:
      -v, --verbose             Print more
      -o, --output <file>       Write to file

    operands:
      <source>                  Directory to back up
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from argwalk.arity import Arity
from argwalk.console import console as default_console
from argwalk.option import Option

if TYPE_CHECKING:
    from argwalk.getopt import Getopt


class Help:
    """
    Renders help output for a `Getopt`.

    Args:
        console (Console | None): Console used by `render()`.
        column_width (int): Width of the flag column before descriptions start.
    """

    def __init__(self, console: Console | None = None, column_width: int = 26) -> None:
        self.console: Console = console or default_console
        self.column_width: int = column_width

    def get_option_text(self, option: Option) -> str:
        """Return the flag column for an option, e.g. `-o, --output <file>`."""
        flags = ", ".join(option.flags)
        placeholder = f"<{option.argument.name}>"
        if option.arity == Arity.REQUIRED:
            return f"{flags} {placeholder}"
        if option.arity == Arity.OPTIONAL:
            return f"{flags} [{placeholder}]"
        if option.arity == Arity.MULTIPLE:
            return f"{flags} {placeholder}..."
        return flags

    def get_usage(self, getopt: Getopt, plain_text: bool = True) -> str:
        """Return the usage line."""
        script_name = getopt.get("script_name") or "program"
        parts = [script_name]
        selected = getopt.selected_command()
        if selected is not None:
            parts.append(selected.name)
        elif getopt.has_commands():
            parts.append("<command>")
        if getopt.options or any(command.options for command in getopt.commands):
            parts.append("[options]")
        operands = getopt.operands
        if operands:
            parts.append("[--]")
            parts.extend(operand.get_usage_text() for operand in operands)
        usage = " ".join(parts)
        if plain_text:
            return usage
        return escape(usage)

    def _row(self, left: str, right: str) -> str:
        if not right:
            return f"  {left}"
        if len(left) > self.column_width:
            return f"  {left}\n  {'':<{self.column_width}} {right}"
        return f"  {left:<{self.column_width}} {right}"

    def _option_description(self, option: Option) -> str:
        description = option.description
        default = option.argument.default
        if default is not None and option.arity.takes_value:
            description = f"{description} (default: {default})".strip()
        return description

    def _sections(self, getopt: Getopt) -> list[tuple[str, list[tuple[str, str]]]]:
        sections: list[tuple[str, list[tuple[str, str]]]] = []
        options = [
            (self.get_option_text(option), self._option_description(option))
            for option in getopt.options
        ]
        if options:
            sections.append(("options", options))
        operands = [
            (operand.get_usage_text(), operand.description) for operand in getopt.operands
        ]
        if operands:
            sections.append(("operands", operands))
        if getopt.selected_command() is None:
            commands = [
                (command.name, command.short_description) for command in getopt.commands
            ]
            if commands:
                sections.append(("commands", commands))
        return sections

    def get_help_text(self, getopt: Getopt) -> str:
        """Return the full help output as plain text."""
        lines = [f"usage: {self.get_usage(getopt)}", ""]
        selected = getopt.selected_command()
        if selected is not None and selected.description:
            lines.extend([selected.description, ""])
        for title, rows in self._sections(getopt):
            lines.append(f"{title}:")
            lines.extend(self._row(left, right) for left, right in rows)
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"

    def render(self, getopt: Getopt) -> None:
        """Print the help output through the Rich console."""
        self.console.print(
            f"[argwalk.usage]usage: {self.get_usage(getopt, plain_text=False)}[/]\n"
        )
        selected = getopt.selected_command()
        if selected is not None and selected.description:
            self.console.print(escape(selected.description) + "\n")
        for title, rows in self._sections(getopt):
            self.console.print(f"[argwalk.heading]{title}:[/]")
            for left, right in rows:
                self.console.print(escape(self._row(left, right)), highlight=False)
            self.console.print()
