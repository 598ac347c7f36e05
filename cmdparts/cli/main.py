"""CLI for previewing bundled command shapes.

Renders the token list a configuration would assemble to. Nothing is executed.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cmdparts.commands import COMMANDS, get_command
from cmdparts.constants import DEFAULT_ENCODING, JSON_INDENT
from cmdparts.errors import CmdPartsError
from cmdparts.exit_codes import ExitCode
from cmdparts.logging import get_logger, setup_logging

logger = get_logger(__name__)
console = Console()


def _load_document(path: Path) -> Dict[str, Any]:
    """Load a ``{command: ..., options: {...}}`` YAML document."""
    data = yaml.safe_load(path.read_text(encoding=DEFAULT_ENCODING))
    if not isinstance(data, dict) or "command" not in data:
        raise click.ClickException(f"{path}: expected a mapping with a 'command' key")
    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise click.ClickException(f"{path}: 'options' must be a mapping")
    return {"command": str(data["command"]), "options": options}


@click.group(context_settings={"max_content_width": 120})
def main() -> None:
    """Assemble command-line token lists from configuration files."""
    setup_logging()


@main.command(name="list")
def list_commands() -> None:
    """List bundled command shapes."""
    table = Table(show_header=True, header_style="bold magenta", box=None, expand=False)
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Rules", style="white", justify="right")
    table.add_column("Description", style="white")

    for name in sorted(COMMANDS):
        shape = COMMANDS[name]
        summary = (shape.__doc__ or "").strip().split("\n")[0]
        table.add_row(name, str(len(shape.assembler.rules)), summary)

    console.print("\n[bold]Available Commands[/bold]\n")
    console.print(table)


@main.command(name="render")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print tokens as a JSON array")
def render(config_file: Path, as_json: bool) -> None:
    """Render the tokens a configuration file assembles to.

    \b
    Example file:
      command: kill
      options:
        force: true
        pids: [12, 34]
    """
    try:
        document = _load_document(config_file)
        shape = get_command(document["command"])
        parts = shape.from_mapping(document["options"]).to_parts()
    except yaml.YAMLError as e:
        console.print(f"[red]Invalid YAML:[/red] {escape(str(e))}")
        sys.exit(ExitCode.USER_ERROR)
    except CmdPartsError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(ExitCode.USER_ERROR)

    logger.debug("Rendered command", command=parts[0], tokens=len(parts))

    if as_json:
        click.echo(json.dumps(parts, indent=JSON_INDENT))
    else:
        click.echo(" ".join(parts))


if __name__ == "__main__":
    main()
