"""Command line interface for locating private keys."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from pemfinder import KeyResolutionError, KeyResolver, ResolvedKey, load_config

app = typer.Typer(help="Locate the private key for a GitHub App")


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, case_sensitive=False, help="Logging level for diagnostics"
    ),
) -> None:
    """pemfinder CLI entry point."""
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve(private_key: Optional[Path], config: Optional[Path]) -> ResolvedKey:
    resolver = KeyResolver(config=load_config(str(config) if config else None))
    try:
        return resolver.resolve_with_source(str(private_key) if private_key else None)
    except KeyResolutionError as exc:
        typer.secho(exc.message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except OSError as exc:
        typer.secho(f"Could not read private key: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("resolve")
def resolve(
    private_key: Optional[Path] = typer.Option(
        None, "--private-key", help="Explicit path to the private key file"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to a pemfinder YAML config"
    ),
) -> None:
    """
    Print the resolved private key.

    Sources are tried in order: the --private-key flag, the PRIVATE_KEY
    environment variable, the PRIVATE_KEY_PATH environment variable and
    finally a single .pem file in the current directory.

    Example:
        pemfinder resolve --private-key ./my-app.private-key.pem
        PRIVATE_KEY_PATH=/etc/app/key.pem pemfinder resolve
    """
    resolved = _resolve(private_key, config)
    typer.echo(resolved.material, nl=False)


@app.command("source")
def source(
    private_key: Optional[Path] = typer.Option(
        None, "--private-key", help="Explicit path to the private key file"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to a pemfinder YAML config"
    ),
) -> None:
    """
    Show where the private key would be loaded from, without printing it.

    Example:
        pemfinder source
        # Output: Source: directory scan
        #         Path: my-app.private-key.pem
    """
    resolved = _resolve(private_key, config)
    typer.echo(f"Source: {resolved.source.description}")
    if resolved.variable:
        typer.echo(f"Variable: {resolved.variable}")
    if resolved.path:
        typer.echo(f"Path: {resolved.path}")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    app()
