"""
Weft CLI - Command line interface.

Usage:
    weft check-name window.app.config --path
    weft script bindings.yaml --kind const --tag
    weft dump page.html --attrs
    weft check page.html
"""

import json
import os
from pathlib import Path
from typing import Any, get_args

import typer
import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from weft import __version__
from weft.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, LogLevel
from weft.exceptions import CheckError, ConfigurationError, WeftError
from weft.js import DeclarationKind, declaration, is_identifier, is_property_access
from weft.logging import logger, setup_logging

# Load .env file if present
load_dotenv()

app = typer.Typer(
    name="weft",
    help="Fluent HTML building and script-safe JavaScript literals",
    add_completion=False,
)

console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    plain: bool = typer.Option(False, "--plain", help="Plain single-line log output"),
    log_file: str | None = typer.Option(None, "--log-file", help="Write JSON logs to file"),
) -> None:
    """Configure logging for every command."""
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if level not in get_args(LogLevel):
        raise typer.BadParameter(f"{LOG_LEVEL_ENV}={level} is not a valid log level")
    setup_logging(level=level, json_file=log_file, plain=plain)


@app.command("check-name")
def check_name(
    name: str = typer.Argument(..., help="Binding name or dotted property path"),
    path: bool = typer.Option(False, "--path", "-p", help="Validate as a property path"),
) -> None:
    """Check whether a name can be used as a script binding."""
    valid = is_property_access(name) if path else is_identifier(name)
    if valid:
        console.print(f"[green]✓ valid[/green] {escape(name)}")
        return
    console.print(f"[red]✗ invalid[/red] {escape(name)}")
    raise typer.Exit(1)


@app.command()
def script(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML or JSON bindings"),
    kind: DeclarationKind = typer.Option(
        DeclarationKind.CONST, "--kind", "-k", help="Declaration keyword"
    ),
    tag: bool = typer.Option(False, "--tag", "-t", help="Wrap output in a <script> element"),
) -> None:
    """Render one declaration per binding in FILE."""
    try:
        bindings = _load_bindings(file)
        lines = []
        for name, value in bindings.items():
            statement = declaration(kind, str(name), value)
            if statement.fallback:
                logger.fallback(statement.origin, str(name))
            else:
                logger.binding(str(statement))
            lines.append(str(statement))
    except WeftError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if tag:
        from weft.dom import script as script_element

        typer.echo(script_element(lines).render())
    else:
        typer.echo("\n".join(lines))


@app.command()
def dump(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="HTML file"),
    attrs: bool = typer.Option(False, "--attrs", "-a", help="Show attributes"),
) -> None:
    """Print the parsed tree of an HTML file."""
    from weft.dom import dump_tree, parse_html

    try:
        document = parse_html(file.read_bytes())
    except WeftError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    logger.parsed(str(file), len(document.contents))
    console.print(dump_tree(document, attrs=attrs))


@app.command()
def check(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="HTML file"),
) -> None:
    """Run the id checkers against an HTML file."""
    from weft.dom import DEFAULT_CHECKERS, parse_html

    try:
        document = parse_html(file.read_bytes())
    except WeftError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    failures = 0
    for checker in DEFAULT_CHECKERS:
        try:
            document.render(checker)
            logger.check(checker.__name__, True)
        except CheckError as e:
            failures += 1
            logger.check(checker.__name__, False, str(e))
            console.print(f"[red]✗ {checker.__name__}: {escape(str(e))}[/red]")

    if failures:
        raise typer.Exit(1)
    console.print("[green]✓ All checks passed[/green]")


def _load_bindings(path: Path) -> dict[str, Any]:
    """Load a binding mapping from YAML or JSON."""
    content = path.read_text()

    try:
        data = yaml.safe_load(content) if path.suffix in [".yaml", ".yml"] else json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError, RecursionError) as e:
        raise ConfigurationError(f"could not parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping of names to values")
    return data


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"Weft v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
