#!/usr/bin/env python3
"""Write docs/reference/cli-commands.md from the click commands behind the ymd app."""

from pathlib import Path

import click
import typer

from ymd.cli import app


def describe_option(option: click.Option) -> str:
    """One markdown bullet: flags, help, and any non-trivial default."""
    line = "- " + ", ".join(f"`{flag}`" for flag in option.opts + option.secondary_opts)
    if option.help:
        line += f": {option.help}"
    if not option.is_flag and option.default not in (None, False, ()):
        line += f" (default: {option.default})"
    return line


def describe_argument(argument: click.Argument) -> str:
    name = argument.human_readable_name
    if argument.nargs == -1:
        name += "..."
    line = f"- `{name}`" + (" (required)" if argument.required else "")
    help_text = getattr(argument, "help", None)
    if help_text:
        line += f": {help_text}"
    return line


def usage_line(name: str, command: click.Command) -> str:
    pieces = ["ymd", name]
    for param in command.params:
        if isinstance(param, click.Argument):
            pieces.append(param.human_readable_name + ("..." if param.nargs == -1 else ""))
    if any(isinstance(param, click.Option) for param in command.params):
        pieces.append("[OPTIONS]")
    return " ".join(pieces)


def command_section(name: str, command: click.Command) -> list[str]:
    """Markdown for one subcommand."""
    lines = [
        f"### {name}",
        "",
        (command.help or "No description available.").strip(),
        "",
        "**Usage:**",
        "",
        "```bash",
        usage_line(name, command),
        "```",
        "",
    ]

    arguments = [p for p in command.params if isinstance(p, click.Argument)]
    options = [p for p in command.params if isinstance(p, click.Option)]

    if arguments:
        lines += ["**Arguments:**", "", *(describe_argument(a) for a in arguments), ""]
    if options:
        lines += ["**Options:**", "", *(describe_option(o) for o in options), ""]
    return lines


def generate_cli_reference(typer_app: typer.Typer = app) -> str:
    """Render the markdown reference for every command of a typer app."""
    group = typer.main.get_command(typer_app)
    assert isinstance(group, click.Group)

    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# CLI Commands Reference",
        "",
        "```bash",
        "ymd [OPTIONS] COMMAND [ARGS]...",
        "```",
        "",
        "## Global Options",
        "",
        "| Option | Description |",
        "|--------|-------------|",
    ]
    for option in group.params:
        if isinstance(option, click.Option):
            flags = ", ".join(f"`{flag}`" for flag in option.opts)
            lines.append(f"| {flags} | {option.help or ''} |")
    lines += ["", "## Commands", ""]

    for name in sorted(group.commands):
        lines += command_section(name, group.commands[name])

    return "\n".join(lines)


def main() -> None:
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
