"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and chunk listings.
"""

from __future__ import annotations

import json
from typing import NoReturn

import typer

from .errors import SegmentationError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, SegmentationError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_chunks(chunks: list[str], as_json: bool = False) -> None:
    """Print chunks as numbered lines or as one JSON array."""

    if as_json:
        typer.echo(json.dumps(chunks, ensure_ascii=False))
        return
    width = len(str(len(chunks)))
    for index, chunk in enumerate(chunks, start=1):
        typer.echo(f"{index:>{width}}. {chunk}")
