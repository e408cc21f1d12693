"""Unit tests for the sigscan Typer CLI."""

import json
from types import SimpleNamespace
from unittest.mock import ANY, MagicMock, patch

import pytest
from typer.testing import CliRunner

from sigscan.cli import main
from sigscan.cli._create_app import _create_app
from sigscan.cli._handle_stage_result import _extract_display_format

pytestmark = [pytest.mark.cli, pytest.mark.timeout(30)]

runner = CliRunner()


def test_no_command_shows_help():
    result = runner.invoke(_create_app(), [])

    assert result.exit_code == 0
    assert "Usage: " in result.stdout


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "signatures"])

    assert result.exit_code == 1


@patch("sigscan.cli.scan.cmd_scan")
@patch("sigscan.cli.scan.handle_stage_result")
def test_scan_passes_arguments(mock_handle_stage_result, mock_cmd_scan, scan_root):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(_create_app(), ["scan", str(scan_root), "--remove"])

    assert result.exit_code == 0
    mock_handle_stage_result.assert_called_with(mock_cmd_scan, ANY)
    mock_executor.assert_called_with(str(scan_root), None, True)


@patch("sigscan.cli.scan.cmd_scan")
@patch("sigscan.cli.scan.handle_stage_result")
def test_scan_with_launcher(mock_handle_stage_result, mock_cmd_scan):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    result = runner.invoke(_create_app(), ["scan", "--launcher", "prism"])

    assert result.exit_code == 0
    mock_executor.assert_called_with(None, "prism", False)


def test_scan_without_target_shows_help():
    result = runner.invoke(_create_app(), ["scan"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Usage: " in result.output
    assert "--launcher" in result.output


def test_scan_custom_launcher_without_path_shows_help():
    result = runner.invoke(_create_app(), ["scan", "--launcher", "custom"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Usage: " in result.output


def test_scan_clean_directory_end_to_end(scan_root):
    (scan_root / "hello.txt").write_text("hello")

    result = runner.invoke(_create_app(), ["--display", "json", "scan", str(scan_root)])

    assert result.exit_code == 0
    assert '"clean": true' in result.stdout
    assert '"discovered": 1' in result.stdout


def test_scan_with_matches_exits_nonzero(scan_root, use_signatures):
    use_signatures(b"evil")
    (scan_root / "evil.jar").write_bytes(b"evil")

    result = runner.invoke(_create_app(), ["--display", "json", "scan", str(scan_root)])

    assert result.exit_code == 1
    assert (scan_root / "evil.jar").exists()


def test_scan_remove_end_to_end(scan_root, use_signatures):
    use_signatures(b"evil")
    (scan_root / "evil.jar").write_bytes(b"evil")

    result = runner.invoke(_create_app(), ["scan", str(scan_root), "--remove"])

    assert result.exit_code == 0
    assert not (scan_root / "evil.jar").exists()


def test_remove_command(tmp_path):
    target = tmp_path / "x.jar"
    target.write_bytes(b"x")

    result = runner.invoke(_create_app(), ["remove", str(target)])

    assert result.exit_code == 0
    assert not target.exists()


def test_signatures_command_json():
    result = runner.invoke(_create_app(), ["--display", "json", "signatures"])

    assert result.exit_code == 0
    assert "179b5da318604f97616b5108f305e2a8e4609484" in result.stdout


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("sigscan ")


def test_status_file_written(scan_root, sigscan_home):
    runner.invoke(_create_app(), ["scan", str(scan_root)])

    status = json.loads((sigscan_home / "last_scan.json").read_text())
    assert status["discovered"] == 0


def test_display_json_reaches_the_command_output():
    result = runner.invoke(_create_app(), ["--display", "json", "signatures"])

    assert result.exit_code == 0
    assert '"count": 4' in result.stdout
    assert "count: 4" not in result.stdout


def test_display_defaults_to_yaml():
    result = runner.invoke(_create_app(), ["signatures"])

    assert result.exit_code == 0
    assert "count: 4" in result.stdout
    assert '"count"' not in result.stdout


def test_main_returns_command_exit_code(scan_root, use_signatures, capsys):
    use_signatures(b"evil")
    (scan_root / "evil.jar").write_bytes(b"evil")

    assert main(["scan", str(scan_root)]) == 1
    assert main(["signatures"]) == 0
    capsys.readouterr()


def test_main_usage_error_returns_nonzero(capsys):
    assert main(["no-such-command"]) != 0
    capsys.readouterr()


def test_extract_display_format_reads_parent_context():
    parent = SimpleNamespace(obj={"display_format": "json"}, parent=None)
    child = SimpleNamespace(obj=None, parent=parent)

    assert _extract_display_format(child) == "json"


def test_extract_display_format_missing_is_an_error():
    with pytest.raises(RuntimeError):
        _extract_display_format(SimpleNamespace(obj=None, parent=None))
