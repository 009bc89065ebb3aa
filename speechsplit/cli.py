"""Command-line interface for speechsplit.

Responsibilities:
- Expose user-facing commands for segmentation and pre-processing.
- Convert CLI arguments into `SegmenterConfig` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import sys
from typing import Annotated

import typer

from .cli_rendering import echo_chunks, exit_with_command_error
from .config import ConfigLoader, SegmenterConfig
from .errors import SegmentationError
from .pipeline import SegmentationPipeline
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="speechsplit",
    no_args_is_help=True,
    help="Split text into bounded chunks for speech synthesis.",
)

_STDIN_MARKER = "-"


def _load_env_config() -> SegmenterConfig:
    """Load `SPEECHSPLIT_*` environment settings and map failures to stage errors."""

    try:
        return ConfigLoader.from_env()
    except ValueError as exc:
        raise SegmentationError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the `SPEECHSPLIT_*` variables and rerun.",
        ) from exc


def _load_base_config(config_path: Path | None) -> SegmenterConfig:
    """Load the YAML config file, or environment settings when none is given."""

    if config_path is None:
        return _load_env_config()

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise SegmentationError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise SegmentationError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise SegmentationError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_config(config_file: Path | None, max_size: int | None) -> SegmenterConfig:
    """Resolve effective config from YAML or environment and explicit CLI overrides."""

    config = _load_base_config(config_file)
    if max_size is not None:
        config = replace(config, max_chunk_size=max_size)
    return config


def _read_input_text(text: str | None, input_file: Path | None) -> str:
    """Return text from the argument, a file, or stdin (`-`)."""

    if text is None and input_file is None:
        raise SegmentationError(
            stage="input",
            detail="<text> or `--file <path>` is required.",
            hint="Pass text as an argument, or `--file -` to read stdin.",
        )
    if text is not None and input_file is not None:
        raise SegmentationError(
            stage="input",
            detail="<text> and `--file <path>` can't be used together.",
        )

    if input_file is not None:
        if str(input_file) == _STDIN_MARKER:
            return sys.stdin.read()
        try:
            return input_file.read_text(encoding="utf-8")
        except OSError as exc:
            raise SegmentationError(
                stage="input",
                detail=f"Failed to read input file `{input_file}`: {exc}",
                hint="Verify the file exists and is readable UTF-8 text.",
            ) from exc

    if text == _STDIN_MARKER:
        return sys.stdin.read()
    return text or ""


TextArgument = Annotated[
    str | None,
    typer.Argument(help="Text to segment. Use `-` to read stdin."),
]
FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Read text from <file> (`-` for stdin)."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Path to YAML config file (defaults to `SPEECHSPLIT_*` environment variables).",
    ),
]
DebugOption = Annotated[
    bool,
    typer.Option("--debug", help="Show stage debug logs on stderr."),
]


@app.command("segment")
def segment_command(
    text: TextArgument = None,
    input_file: FileOption = None,
    max_size: Annotated[
        int | None,
        typer.Option(
            "--max-size",
            help="Maximum chunk length in characters (overrides config file value).",
        ),
    ] = None,
    config_file: ConfigOption = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print chunks as a JSON array."),
    ] = False,
    debug: DebugOption = False,
) -> None:
    """Split text into ordered chunks and print them."""

    try:
        config = _resolve_config(config_file, max_size)
        raw_text = _read_input_text(text, input_file)
        run_logger = RunLogger(level="DEBUG") if debug else None
        pipeline = SegmentationPipeline(config, run_logger=run_logger)
        chunks = pipeline.segment(raw_text)
    except Exception as exc:
        exit_with_command_error("segment", exc)

    echo_chunks(chunks, as_json=as_json)


@app.command("preprocess")
def preprocess_command(
    text: TextArgument = None,
    input_file: FileOption = None,
    config_file: ConfigOption = None,
    debug: DebugOption = False,
) -> None:
    """Print text after the configured pre-processing stages."""

    try:
        config = _resolve_config(config_file, None)
        raw_text = _read_input_text(text, input_file)
        run_logger = RunLogger(level="DEBUG") if debug else None
        pipeline = SegmentationPipeline(config, run_logger=run_logger)
        preprocessed = pipeline.preprocess(raw_text)
    except Exception as exc:
        exit_with_command_error("preprocess", exc)

    typer.echo(preprocessed)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
