import json
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from tauri_config import __version__
from tauri_config.cli import cli

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def runner(monkeypatch):
    for name in (
        "TAURI_CONFIG_CHANNEL", "TAURI_CONFIG_SCHEMA", "TAURI_CONFIG_OUTPUT", "TAURI_CONFIG_TYPES_OUTPUT",
        "TAURI_CONFIG_LOG_LEVEL", "TAURI_CONFIG_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(cli, ["--log-level", "WARNING", "--log-format", "simple", *args])


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_validate_accepts_valid_config(runner):
    result = invoke(runner, "validate", str(DATA_DIR / "tauri.conf.json"))
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "OK"


def test_validate_reports_errors(runner):
    result = invoke(runner, "validate", str(DATA_DIR / "tauri.invalid.conf.json"))
    assert result.exit_code == 1
    assert "tauri.bundle.identifier: Field required" in result.output
    assert "validation error(s)" in result.output


def test_validate_needs_an_existing_file(runner, tmp_path):
    result = invoke(runner, "validate", str(tmp_path / "missing.json"))
    assert result.exit_code == 2


def test_extract_from_local_schema(runner, tmp_path, mini_schema_path):
    output = tmp_path / "generated" / "tauri_schemas.py"
    types_output = tmp_path / "generated" / "tauri_types.py"
    result = invoke(
        runner, "extract",
        "--schema", str(mini_schema_path),
        "--output", str(output),
        "--types-output", str(types_output),
    )

    assert result.exit_code == 0, result.output
    assert result.output.startswith("Welcome to the tauri config extractor!\n")
    assert result.output.rstrip().endswith("Et voilà! 🥳")
    text = output.read_text(encoding="utf-8")
    assert "class Config(_ClosedModel):" in text
    assert f"Generated from {mini_schema_path}." in text
    assert "class BundleConfig(TypedDict, total=False):" in types_output.read_text(encoding="utf-8")


@pytest.mark.parametrize("name", ["out #1.py", "a: b.py", "'quoted' [x].py"])
def test_extract_output_path_is_taken_verbatim(runner, tmp_path, mini_schema_path, name):
    output = tmp_path / name
    result = invoke(runner, "extract", "--schema", str(mini_schema_path), "--output", str(output))
    assert result.exit_code == 0, result.output
    assert output.exists()
    assert [p.name for p in tmp_path.iterdir()] == [name]


def test_extract_writes_log_file(runner, tmp_path, mini_schema_path):
    log_file = tmp_path / "extract.log"
    result = runner.invoke(cli, [
        "--log-level", "INFO", "--log-file", str(log_file),
        "extract", "--schema", str(mini_schema_path), "--output", str(tmp_path / "schemas.py"),
    ])
    assert result.exit_code == 0, result.output
    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert any("Validators written to" in r["message"] for r in records)
    assert {r["logger"] for r in records} == {"tauri-config"}


def test_extract_output_from_environment(runner, tmp_path, mini_schema_path, monkeypatch):
    output = tmp_path / "env_schemas.py"
    monkeypatch.setenv("TAURI_CONFIG_OUTPUT", str(output))
    monkeypatch.setenv("TAURI_CONFIG_SCHEMA", str(mini_schema_path))
    result = invoke(runner, "extract")
    assert result.exit_code == 0, result.output
    assert output.exists()


def test_extract_prompts_for_channel(runner, tmp_path, mini_schema_path, monkeypatch):
    output = tmp_path / "schemas.py"
    monkeypatch.setattr(click, "prompt", lambda message, **kwargs: kwargs["default"])
    monkeypatch.setattr("tauri_config.elements.select.SCHEMA_CHANNELS", {"dev": str(mini_schema_path)})
    result = invoke(runner, "extract", "--output", str(output))
    assert result.exit_code == 0, result.output
    assert output.exists()


def test_extract_cancelled(runner, tmp_path, monkeypatch):
    def prompt(*args, **kwargs):
        raise click.Abort()

    monkeypatch.setattr(click, "prompt", prompt)
    output = tmp_path / "schemas.py"
    result = invoke(runner, "extract", "--output", str(output))
    assert result.exit_code == 1
    assert "Aborted" in result.output
    assert not output.exists()


def test_extract_rejects_unknown_channel(runner):
    result = invoke(runner, "extract", "--channel", "nightly")
    assert result.exit_code == 2
