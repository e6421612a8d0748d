"""Unit tests for the agentfs CLI.

Tests for the rmtree, relpath and config commands. Each test points
XDG_CONFIG_HOME at a temporary directory so no user settings leak in.
"""

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from agentfs import __version__
from agentfs.cli.main import app
from agentfs.filesystem.errors import CancelledError
from agentfs.filesystem.models import DeletionResult
from rich.logging import RichHandler
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def env(tmp_path: Path) -> dict[str, str]:
    """Environment with an isolated config directory."""
    return {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}


def _write_config(env: dict[str, str], content: str) -> None:
    config_dir = Path(env["XDG_CONFIG_HOME"]) / "agentfs"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text(content)


class TestMain:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Running without a command shows usage."""
        result = runner.invoke(app, [])

        assert "rmtree" in result.output
        assert "relpath" in result.output

    def test_verbose_enables_debug_logging(self, env: dict[str, str]) -> None:
        """--verbose lowers the agentfs log level to DEBUG."""
        logger = logging.getLogger("agentfs")
        previous = logger.level
        try:
            result = runner.invoke(app, ["-v", "relpath", "/a/b", "/a"], env=env)

            assert result.exit_code == 0
            assert logger.level == logging.DEBUG
            assert any(isinstance(h, RichHandler) for h in logger.handlers)
        finally:
            logger.setLevel(previous)


class TestRelpath:
    """Tests for agentfs relpath."""

    def test_posix_style(self, env: dict[str, str]) -> None:
        """The relative form is printed."""
        result = runner.invoke(
            app, ["relpath", "/user/src/project/foo.cpp", "/user/src", "--style", "posix"], env=env
        )

        assert result.exit_code == 0
        assert result.stdout == "project/foo.cpp\n"

    def test_windows_style(self, env: dict[str, str]) -> None:
        """Windows paths are relativized with backslashes."""
        result = runner.invoke(
            app, ["relpath", "d:/src/project/foo.cpp", "d:\\src", "-s", "windows"], env=env
        )

        assert result.exit_code == 0
        assert result.stdout == "project\\foo.cpp\n"

    def test_unrelated_base(self, env: dict[str, str]) -> None:
        """A non-ancestor base prints the target unchanged."""
        result = runner.invoke(
            app, ["relpath", "/user/src/project", "/user/src/proj", "--style", "posix"], env=env
        )

        assert result.stdout == "/user/src/project\n"

    def test_style_from_config(self, env: dict[str, str]) -> None:
        """Without --style the configured path style applies."""
        _write_config(env, 'path_style = "windows"\n')

        result = runner.invoke(app, ["relpath", "d:/src/a", "D:\\SRC"], env=env)

        assert result.exit_code == 0
        assert result.stdout == "a\n"

    def test_invalid_config(self, env: dict[str, str]) -> None:
        """A broken settings file exits with code 1."""
        _write_config(env, "path_style = ")

        result = runner.invoke(app, ["relpath", "/a/b", "/a"], env=env)

        assert result.exit_code == 1
        assert "Invalid TOML" in result.output


class TestRmtree:
    """Tests for agentfs rmtree."""

    def test_deletes_tree(self, tmp_path: Path, env: dict[str, str]) -> None:
        """A tree is deleted after --yes."""
        root = tmp_path / "work"
        (root / "a" / "b").mkdir(parents=True)
        (root / "a" / "file.txt").write_text("content")

        result = runner.invoke(app, ["rmtree", str(root), "--yes"], env=env)

        assert result.exit_code == 0
        assert not root.exists()
        assert "All 1 path(s) deleted." in result.stdout

    def test_confirmation_declined(self, tmp_path: Path, env: dict[str, str]) -> None:
        """Answering no leaves everything in place."""
        root = tmp_path / "work"
        root.mkdir()

        result = runner.invoke(app, ["rmtree", str(root)], input="n\n", env=env)

        assert result.exit_code == 0
        assert "Aborted." in result.stdout
        assert root.exists()

    def test_confirmation_accepted(self, tmp_path: Path, env: dict[str, str]) -> None:
        """Answering yes deletes."""
        root = tmp_path / "work"
        root.mkdir()

        result = runner.invoke(app, ["rmtree", str(root)], input="y\n", env=env)

        assert result.exit_code == 0
        assert not root.exists()

    def test_contents_only(self, tmp_path: Path, env: dict[str, str]) -> None:
        """--contents-only keeps the directory."""
        root = tmp_path / "work"
        (root / "a").mkdir(parents=True)

        result = runner.invoke(app, ["rmtree", str(root), "--contents-only", "-y"], env=env)

        assert result.exit_code == 0
        assert root.is_dir()
        assert list(root.iterdir()) == []

    def test_failure_exits_1(self, tmp_path: Path, env: dict[str, str]) -> None:
        """A failed path makes the command exit with code 1."""
        file = tmp_path / "file.txt"
        file.write_text("content")

        result = runner.invoke(app, ["rmtree", str(file), "--contents-only", "-y"], env=env)

        assert result.exit_code == 1
        assert "0 succeeded, 1 failed" in result.output
        assert file.exists()

    def test_timeout_cancels(self, tmp_path: Path, env: dict[str, str]) -> None:
        """An expired timeout stops the deletion with exit code 130."""
        root = tmp_path / "work"
        (root / "a").mkdir(parents=True)

        result = runner.invoke(app, ["rmtree", str(root), "--timeout", "0", "-y"], env=env)

        assert result.exit_code == 130
        assert "cancelled" in result.output
        assert (root / "a").exists()

    def test_keep_going_from_config(self, env: dict[str, str]) -> None:
        """continue_on_error and timeout_seconds come from settings by default."""
        _write_config(env, "continue_on_error = true\ntimeout_seconds = 60\n")
        mock_deleter = MagicMock()
        mock_deleter.delete_many.return_value = [DeletionResult(path="/w/x", success=True)]

        with (
            patch("agentfs.cli.commands.rmtree.TreeDeleter", return_value=mock_deleter) as cls,
            patch("agentfs.cli.commands.rmtree.CancellationToken") as token_cls,
        ):
            result = runner.invoke(app, ["rmtree", "/w/x", "-y"], env=env)

        assert result.exit_code == 0
        cls.assert_called_once_with(continue_on_content_error=True)
        token_cls.assert_called_once_with(timeout=60)

    def test_flags_override_config(self, env: dict[str, str]) -> None:
        """--stop-on-error wins over the configured default."""
        _write_config(env, "continue_on_error = true\n")
        mock_deleter = MagicMock()
        mock_deleter.delete_many.return_value = [DeletionResult(path="/w/x", success=True)]

        with patch("agentfs.cli.commands.rmtree.TreeDeleter", return_value=mock_deleter) as cls:
            result = runner.invoke(app, ["rmtree", "/w/x", "--stop-on-error", "-y"], env=env)

        assert result.exit_code == 0
        cls.assert_called_once_with(continue_on_content_error=False)

    def test_cancelled_error_reported(self, env: dict[str, str]) -> None:
        """A CancelledError from the deleter maps to exit code 130."""
        mock_deleter = MagicMock()
        mock_deleter.delete_many.side_effect = CancelledError("/w/x/deep")

        with patch("agentfs.cli.commands.rmtree.TreeDeleter", return_value=mock_deleter):
            result = runner.invoke(app, ["rmtree", "/w/x", "-y"], env=env)

        assert result.exit_code == 130
        assert "partially deleted" in result.output


class TestConfigCommands:
    """Tests for agentfs config show/init."""

    def test_show_defaults(self, env: dict[str, str]) -> None:
        """show prints default values when no file exists."""
        result = runner.invoke(app, ["config", "show"], env=env)

        assert result.exit_code == 0
        assert "path_style" in result.stdout
        assert "defaults" in result.stdout

    def test_init_writes_file(self, env: dict[str, str]) -> None:
        """init creates the settings file once."""
        config_path = Path(env["XDG_CONFIG_HOME"]) / "agentfs" / "config.toml"

        first = runner.invoke(app, ["config", "init"], env=env)
        second = runner.invoke(app, ["config", "init"], env=env)

        assert first.exit_code == 0
        assert config_path.exists()
        assert second.exit_code == 0
        assert "already exists" in second.stdout

    def test_init_force_overwrites(self, env: dict[str, str]) -> None:
        """--force replaces an existing file with defaults."""
        _write_config(env, 'path_style = "windows"\n')

        result = runner.invoke(app, ["config", "init", "--force"], env=env)

        assert result.exit_code == 0
        config_path = Path(env["XDG_CONFIG_HOME"]) / "agentfs" / "config.toml"
        assert 'path_style = "auto"' in config_path.read_text()
