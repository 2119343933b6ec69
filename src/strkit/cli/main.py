import logging
import sys
from pathlib import Path

import regex
import typer
import yaml
from rich.console import Console

from strkit import __version__
from strkit.config import load_config
from strkit.logging_utils import setup_logging
from strkit.patterns import PatternFlags, compile_pattern, escape_literal
from strkit.pipeline import run_pipeline
from strkit.replace import replace as replace_all
from strkit.replace import replace_first
from strkit.splitting import split as split_text
from strkit.splitting import split_lines

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="StrKit: split, replace and transform text from the command line.",
    add_completion=False,
)

_INPUT_HELP = "Read the text from this file instead of stdin."
_DEBUG_HELP = "Enable debug mode with verbose logging."
_LOG_FILE_HELP = "With --debug, also write a detailed log to this file."


def _read_input(input_path: Path | None) -> str:
    """Read the command input from ``input_path`` or stdin."""
    if input_path is None:
        return sys.stdin.read()
    return input_path.read_text(encoding="utf-8")


def _print_parts(parts: list[str]) -> None:
    """Print a list of strings as JSON on stdout."""
    Console().print_json(data=parts, highlight=False)


@app.command()
def run(
    name: str = typer.Argument(..., help="The name of the pipeline to run."),
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to the YAML pipeline configuration file.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    input_path: Path = typer.Option(None, "--input", "-i", help=_INPUT_HELP, exists=True, dir_okay=False),
    debug: bool = typer.Option(False, "--debug", "-d", help=_DEBUG_HELP),
    log_file: Path = typer.Option(None, "--log-file", help=_LOG_FILE_HELP, dir_okay=False),
):
    """
    Apply a configured pipeline of transforms to the input text.
    """
    setup_logging(__version__, debug=debug, log_file=log_file)

    try:
        strkit_config = load_config(config)
        result = run_pipeline(strkit_config, name, _read_input(input_path))
    except FileNotFoundError as e:
        logger.error("Configuration file not found: %s", e)
        raise typer.Abort() from e
    except (yaml.YAMLError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        raise typer.Abort() from e
    except KeyError as e:
        logger.error("%s", e.args[0])
        raise typer.Abort() from e

    typer.echo(result, nl=False)


@app.command()
def split(
    pattern: str = typer.Argument(..., help="The regular expression to split on."),
    limit: int = typer.Option(0, "--limit", "-l", help="Maximum number of parts. 0 drops trailing empty parts, negative keeps them."),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-I", help="Match case-insensitively."),
    input_path: Path = typer.Option(None, "--input", "-i", help=_INPUT_HELP, exists=True, dir_okay=False),
    debug: bool = typer.Option(False, "--debug", "-d", help=_DEBUG_HELP),
    log_file: Path = typer.Option(None, "--log-file", help=_LOG_FILE_HELP, dir_okay=False),
):
    """
    Split the input text on a regular expression and print the parts as JSON.
    """
    setup_logging(__version__, debug=debug, log_file=log_file)

    try:
        compiled = compile_pattern(pattern, PatternFlags(ignore_case=ignore_case))
    except regex.error as e:
        logger.error("Invalid regex pattern '%s': %s", pattern, e)
        raise typer.Abort() from e

    parts = split_text(_read_input(input_path), compiled, limit)
    logger.debug("Split produced %d part(s).", len(parts))
    _print_parts(parts)


@app.command()
def lines(
    input_path: Path = typer.Option(None, "--input", "-i", help=_INPUT_HELP, exists=True, dir_okay=False),
    debug: bool = typer.Option(False, "--debug", "-d", help=_DEBUG_HELP),
    log_file: Path = typer.Option(None, "--log-file", help=_LOG_FILE_HELP, dir_okay=False),
):
    """
    Split the input text into lines and print them as JSON.
    """
    setup_logging(__version__, debug=debug, log_file=log_file)

    parts = split_lines(_read_input(input_path))
    logger.debug("Split produced %d line(s).", len(parts))
    _print_parts(parts)


@app.command()
def replace(
    match: str = typer.Argument(..., help="The text (or, with --regex, the pattern) to replace."),
    replacement: str = typer.Argument(..., help="The replacement. With --regex, $1, $2, ... refer to groups."),
    use_regex: bool = typer.Option(False, "--regex", "-r", help="Treat MATCH as a regular expression."),
    first: bool = typer.Option(False, "--first", "-f", help="Replace only the first occurrence."),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-I", help="Match case-insensitively."),
    input_path: Path = typer.Option(None, "--input", "-i", help=_INPUT_HELP, exists=True, dir_okay=False),
    debug: bool = typer.Option(False, "--debug", "-d", help=_DEBUG_HELP),
    log_file: Path = typer.Option(None, "--log-file", help=_LOG_FILE_HELP, dir_okay=False),
):
    """
    Replace occurrences of MATCH in the input text and print the result.
    """
    setup_logging(__version__, debug=debug, log_file=log_file)

    target: object = match
    value: object = replacement
    try:
        if use_regex:
            target = compile_pattern(match, PatternFlags(ignore_case=ignore_case))
        elif ignore_case:
            # A literal match needs a pattern to ignore case; keep the replacement literal.
            target = compile_pattern(escape_literal(match), PatternFlags(ignore_case=True))
            value = lambda _matched: replacement  # noqa: E731
    except regex.error as e:
        logger.error("Invalid regex pattern '%s': %s", match, e)
        raise typer.Abort() from e

    handler = replace_first if first else replace_all
    typer.echo(handler(_read_input(input_path), target, value), nl=False)


@app.command()
def version():
    """
    Show the StrKit version.
    """
    typer.echo(f"StrKit {__version__}")
