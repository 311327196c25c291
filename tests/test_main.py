"""Tests for the command-line entry point."""

import logging
from pathlib import Path

import pytest
import structlog

from checksums import __version__
from checksums.main import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, build_cli_parser, run


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "sub").mkdir()
    (tmp_path / "root.txt").write_text("r")
    (tmp_path / "sub" / "nested.txt").write_text("n")
    return tmp_path


def test_success_prints_configuration(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = run([str(tree), "-c", "-a", "md5"])

    out = capsys.readouterr().out
    assert exit_code == EXIT_OK
    assert f"Directory: {tree.resolve()}" in out
    assert "Algorithm: MD5" in out
    assert "Mode:      create" in out
    assert "Depth:     last level" in out
    assert "root.txt" in out
    assert "nested.txt" not in out


def test_infinite_depth_lists_nested_files(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = run([str(tree), "--depth", "-1"])

    out = capsys.readouterr().out
    assert exit_code == EXIT_OK
    assert "Depth:     infinite" in out
    assert "sub/nested.txt" in out


@pytest.mark.parametrize(
    ("args", "fragment"),
    [
        (["--depth", "a234"], "Malformed depth"),
        (["--algorithm", "whirlpool"], "Unsupported algorithm"),
        (["root.txt"], "Invalid directory"),
    ],
)
def test_config_errors_exit_with_usage_code(
    tree: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    args: list[str],
    fragment: str,
) -> None:
    monkeypatch.chdir(tree)

    exit_code = run(args)

    captured = capsys.readouterr()
    assert exit_code == EXIT_USAGE
    assert fragment in captured.err
    assert "Suggested actions:" in captured.err
    assert "Directory:" not in captured.out


def test_unreadable_directory_exits_with_failure(
    tree: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def refuse(self: Path):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", refuse)

    exit_code = run([str(tree)])

    assert exit_code == EXIT_FAILURE
    assert "Cannot read directory" in capsys.readouterr().err


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_cli_parser().parse_args(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_log_options_parsed(tmp_path: Path) -> None:
    ns = build_cli_parser().parse_args(["--log-level", "DEBUG", "--log-dir", str(tmp_path)])

    assert ns.log_level == "DEBUG"
    assert ns.log_dir == tmp_path
    assert ns.directory == "."


@pytest.mark.parametrize("value", ["-1x", "-a234"])
def test_malformed_negative_looking_depth_exits_with_usage_code(
    tree: Path,
    capsys: pytest.CaptureFixture[str],
    value: str,
) -> None:
    exit_code = run([str(tree), "-d", value])

    captured = capsys.readouterr()
    assert exit_code == EXIT_USAGE
    assert "Malformed depth" in captured.err
    assert captured.out == ""


def test_debug_logging_keeps_stdout_to_listing(tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = run([str(tree), "--log-level", "DEBUG", "-d", "-1"])

    captured = capsys.readouterr()
    assert exit_code == EXIT_OK
    assert "Configuration resolved" in captured.err
    assert "Configuration resolved" not in captured.out
    listing = [line for line in captured.out.splitlines() if ":" not in line]
    assert listing == ["root.txt", "sub/nested.txt"]
