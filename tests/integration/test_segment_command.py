"""CLI tests for the `segment` and `preprocess` commands."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from speechsplit.cli import app


def test_segment_command_prints_numbered_chunks() -> None:
    """Short input should be printed as one numbered, pre-processed chunk."""

    result = CliRunner().invoke(app, ["segment", "Dr. Smith went home."])

    assert result.exit_code == 0
    assert result.output == "1. Dr Smith went home.\n"


def test_segment_command_prints_json_with_max_size(multi_sentence_text: str) -> None:
    """`--json --max-size` should print the bounded chunk list as JSON."""

    result = CliRunner().invoke(
        app, ["segment", multi_sentence_text, "--max-size", "40", "--json"]
    )

    assert result.exit_code == 0
    assert json.loads(result.output) == [
        "Hello there",
        "my friend",
        "This is a test of the segmenter!",
        "Does it work?",
        "Yes",
        "it does.",
    ]


def test_segment_command_reads_file_and_stdin(tmp_path: Path) -> None:
    """`--file <path>` and `--file -` should both supply the input text."""

    input_path = tmp_path / "input.txt"
    input_path.write_text("won-\nderful", encoding="utf-8")
    runner = CliRunner()

    from_file = runner.invoke(app, ["segment", "--file", str(input_path), "--json"])
    from_stdin = runner.invoke(app, ["segment", "--file", "-", "--json"], input="Hi there")
    from_dash = runner.invoke(app, ["segment", "-", "--json"], input="Bye now")

    assert json.loads(from_file.output) == ["wonderful"]
    assert json.loads(from_stdin.output) == ["Hi there"]
    assert json.loads(from_dash.output) == ["Bye now"]


def test_segment_command_uses_config_file(tmp_path: Path) -> None:
    """Values from `--config` should apply unless overridden on the command line."""

    config_path = tmp_path / "speechsplit.yml"
    config_path.write_text("max_chunk_size: 6\npre_processors: []\n", encoding="utf-8")
    runner = CliRunner()

    from_config = runner.invoke(
        app, ["segment", "alpha beta gamma", "--config", str(config_path), "--json"]
    )
    overridden = runner.invoke(
        app,
        ["segment", "alpha beta gamma", "--config", str(config_path), "--max-size", "50"],
    )

    assert json.loads(from_config.output) == ["alpha", "beta", "gamma"]
    assert overridden.output == "1. alpha beta gamma\n"


def test_segment_command_reports_missing_input() -> None:
    """Omitting both text and `--file` should fail at the input stage."""

    result = CliRunner().invoke(app, ["segment"])

    assert result.exit_code == 1
    assert "segment failed at stage `input`" in result.output


def test_segment_command_reports_empty_text() -> None:
    """Whitespace-only text should fail with a hint."""

    result = CliRunner().invoke(app, ["segment", "   "])

    assert result.exit_code == 1
    assert "segment failed at stage `input`: No text to segment." in result.output
    assert "Hint: Provide non-blank text." in result.output


def test_segment_command_rejects_non_positive_size() -> None:
    """`--max-size 0` should fail at the config stage."""

    result = CliRunner().invoke(app, ["segment", "text", "--max-size", "0"])

    assert result.exit_code == 1
    assert "segment failed at stage `config`" in result.output


def test_segment_command_reports_missing_config_file(tmp_path: Path) -> None:
    """A missing config path should be reported with a config-stage hint."""

    result = CliRunner().invoke(
        app, ["segment", "text", "--config", str(tmp_path / "missing.yml")]
    )

    assert result.exit_code == 1
    assert "Config file not found" in result.output
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in result.output


def test_segment_command_debug_logs_stage_events() -> None:
    """`--debug` should emit structured stage logs."""

    result = CliRunner().invoke(app, ["segment", "Hello world", "--debug"])

    assert result.exit_code == 0
    assert "[segment] level=INFO stage=preprocess event=start" in result.output
    assert "1. Hello world" in result.output


def test_preprocess_command_prints_normalized_text() -> None:
    """`preprocess` should print text after all default stages."""

    result = CliRunner().invoke(app, ["preprocess", "Dr. Who?Yes-\nterday"])

    assert result.exit_code == 0
    assert result.output == "Dr Who? Yesterday\n"


def test_segment_command_reads_environment_settings(tmp_path: Path) -> None:
    """`SPEECHSPLIT_*` variables should apply when no `--config` is given."""

    config_path = tmp_path / "speechsplit.yml"
    config_path.write_text("max_chunk_size: 50\n", encoding="utf-8")
    runner = CliRunner()
    env = {"SPEECHSPLIT_MAX_CHUNK_SIZE": "6", "SPEECHSPLIT_PRE_PROCESSORS": "end_of_line"}

    from_env = runner.invoke(app, ["segment", "alpha beta gamma", "--json"], env=env)
    preprocessed = runner.invoke(app, ["preprocess", "Dr. Who-\nm"], env=env)
    from_config = runner.invoke(
        app, ["segment", "alpha beta gamma", "--config", str(config_path)], env=env
    )

    assert json.loads(from_env.output) == ["alpha", "beta", "gamma"]
    assert preprocessed.output == "Dr. Whom\n"
    assert from_config.output == "1. alpha beta gamma\n"


def test_segment_command_reports_invalid_environment_settings() -> None:
    """Invalid `SPEECHSPLIT_*` values should fail at the config stage."""

    result = CliRunner().invoke(
        app, ["segment", "text"], env={"SPEECHSPLIT_SPLIT_RULES": "semicolon"}
    )

    assert result.exit_code == 1
    assert "segment failed at stage `config`: Invalid environment configuration" in result.output
    assert "unknown name(s): semicolon" in result.output
