"""Command-line entry points for the path algebra."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from pathalg.algebra.parent import parent as parent_of
from pathalg.algebra.prefix import classify
from pathalg.algebra.segments import name_of
from pathalg.config import ConfigError, PathContext, build_context, load_config
from pathalg.services.pure_path import PurePathText
from pathalg.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Lexical path algebra for Unix, Windows, UNC and ~ paths")

ConfigOption = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON config file")
HomeOption = typer.Option(None, "--home", help="Home directory used to expand ~")
CwdOption = typer.Option(None, "--cwd", help="Working directory used for absolute paths")


def _prepare(
    config_path: Optional[Path], home: Optional[str], cwd: Optional[str]
) -> tuple[logging.Logger, PathContext]:
    try:
        cfg = load_config(config_path)
        logger = configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path)
        context = build_context(cfg, home=home, working_directory=cwd)
    except ConfigError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    return logger, context


@app.command("classify")
def classify_command(
    text: str = typer.Argument(..., help="Path text"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of key=value lines"),
) -> None:
    """Show the root prefix metadata of a path."""

    info = classify(text)
    payload = info.to_dict()
    payload["prefix"] = info.prefix(text)
    if as_json:
        typer.echo(json.dumps(payload))
        return
    for key, value in payload.items():
        typer.echo(f"{key}={value}")


@app.command("normalize")
def normalize_command(
    text: str = typer.Argument(..., help="Path text"),
    directory: bool = typer.Option(False, "--directory", "-d", help="Treat the path as a directory"),
    config_path: Optional[Path] = ConfigOption,
    home: Optional[str] = HomeOption,
) -> None:
    """Print the normalized form of a path."""

    logger, context = _prepare(config_path, home, None)
    path = PurePathText(text, context, is_directory=directory)
    logger.debug("normalize %r", text)
    typer.echo(path.normalized)


@app.command("split")
def split_command(
    text: str = typer.Argument(..., help="Path text"),
    config_path: Optional[Path] = ConfigOption,
    home: Optional[str] = HomeOption,
) -> None:
    """Print the normalized segments of a path, one per line."""

    _, context = _prepare(config_path, home, None)
    for segment in PurePathText(text, context).split():
        typer.echo(segment)


@app.command("parent")
def parent_command(text: str = typer.Argument(..., help="Path text")) -> None:
    """Print the lexical parent; exits with code 1 when there is none."""

    result = parent_of(text)
    if result is None:
        raise typer.Exit(code=1)
    typer.echo(result)


@app.command("name")
def name_command(text: str = typer.Argument(..., help="Path text")) -> None:
    """Print the last name of a path."""

    typer.echo(name_of(text))


@app.command("join")
def join_command(
    base: str = typer.Argument(..., help="Starting path"),
    parts: List[str] = typer.Argument(..., help="Paths to join, like successive cd commands"),
    normalized: bool = typer.Option(False, "--normalize", "-n", help="Normalize the joined path"),
    config_path: Optional[Path] = ConfigOption,
    home: Optional[str] = HomeOption,
) -> None:
    """Join paths; a rooted part replaces everything before it."""

    _, context = _prepare(config_path, home, None)
    joined = PurePathText(base, context).join(*parts)
    typer.echo(joined.normalized if normalized else joined.text)


@app.command("absolute")
def absolute_command(
    text: str = typer.Argument(..., help="Path text"),
    config_path: Optional[Path] = ConfigOption,
    home: Optional[str] = HomeOption,
    cwd: Optional[str] = CwdOption,
) -> None:
    """Resolve a relative path against the working directory."""

    logger, context = _prepare(config_path, home, cwd)
    logger.debug("absolute %r against %r", text, context.working_directory)
    typer.echo(PurePathText(text, context).absolute)


@app.command("relative")
def relative_command(
    source: str = typer.Argument(..., help="Path to start from"),
    target: str = typer.Argument(..., help="Path to reach"),
    config_path: Optional[Path] = ConfigOption,
    home: Optional[str] = HomeOption,
) -> None:
    """Print the relative path leading from SOURCE to TARGET."""

    _, context = _prepare(config_path, home, None)
    typer.echo(PurePathText(source, context).relative_to(target).text)


def main() -> None:
    app()


__all__ = ["main", "app"]
