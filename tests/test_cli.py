"""Tests for the command line entry point."""

import logging
import os
from unittest.mock import patch

import pytest
from enforce_tool_versions import __version__
from enforce_tool_versions.cli import main, run
from enforce_tool_versions.config.settings import SettingsManager


OUTPUTS = {
    "make": "GNU Make 4.4\n",
    "git": "git version 2.39.1\n",
}


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run each CLI test in an empty directory with no settings in the environment."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("ENFORCE_TOOL_VERSIONS_"):
            monkeypatch.delenv(key)
    yield
    package_logger = logging.getLogger("enforce_tool_versions")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)


class TestCli:
    """Test CLI exit codes and output."""

    def test_version(self, capsys):
        assert run(["--version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_all_pass(self, write_config, version_commands, capsys):
        path = write_config({"binary": [
            {"name": "make", "version": ">= 4.0"},
            {"name": "git", "version": "~2"},
        ]})
        with patch('subprocess.run', side_effect=version_commands(OUTPUTS)):
            assert run(["--config", str(path)]) == 0
        assert "Error:" not in capsys.readouterr().out

    def test_verbose_prints_success(self, write_config, version_commands, capsys):
        path = write_config({"binary": [{"name": "git", "version": "~2"}]})
        with patch('subprocess.run', side_effect=version_commands(OUTPUTS)):
            assert run(["-c", str(path), "--verbose"]) == 0
        out = capsys.readouterr().out
        assert "Success:" in out
        assert "git version 2.39.1 satisfies requirement ~2" in out

    def test_unsatisfied_requirement(self, write_config, version_commands, capsys):
        path = write_config({"binary": [{"name": "make", "version": "^4.5"}]})
        with patch('subprocess.run', side_effect=version_commands(OUTPUTS)):
            assert run(["--config", str(path)]) == 1
        out = capsys.readouterr().out
        assert "Error:" in out
        assert "make version 4.4 does not satisfy requirement ^4.5" in out

    def test_tool_not_installed(self, write_config, version_commands, capsys):
        path = write_config({"binary": [{"name": "git", "version": "~2"}]})
        with patch('subprocess.run', side_effect=version_commands({})):
            assert run(["--config", str(path)]) == 1
        assert "could not be identified" in capsys.readouterr().out

    def test_bad_config(self, write_config, capsys):
        path = write_config({"binary": [{"name": "git", "version": "1.x"}]})
        assert run(["--config", str(path)]) == 1
        assert "Invalid version requirement" in capsys.readouterr().out

    def test_default_config_from_environment(self, write_config, version_commands, monkeypatch):
        path = write_config({"binary": [{"name": "git", "version": "2.39.1"}]}, name="tools.json")
        monkeypatch.setenv("ENFORCE_TOOL_VERSIONS_CONFIG", str(path))
        with patch('subprocess.run', side_effect=version_commands(OUTPUTS)):
            assert run([]) == 0

    def test_uses_loaded_settings(self, mock_settings, write_config, version_commands):
        """Should take the default config file and command timeout from settings."""
        mock_settings.command_timeout = 4.0
        write_config({"binary": [{"name": "git", "version": "~2"}]})
        with patch.object(SettingsManager, "load", return_value=mock_settings):
            with patch('subprocess.run', side_effect=version_commands(OUTPUTS)) as mock_run:
                assert run([]) == 0
        assert mock_run.call_args.kwargs["timeout"] == 4.0

    def test_missing_default_config(self, capsys):
        assert run([]) == 1
        assert "tool-enforcer.json" in capsys.readouterr().out

    def test_invalid_settings(self, monkeypatch, capsys):
        monkeypatch.setenv("ENFORCE_TOOL_VERSIONS_TIMEOUT", "soon")
        assert run([]) == 1
        assert "ENFORCE_TOOL_VERSIONS_TIMEOUT" in capsys.readouterr().out

    def test_main_exits_with_code(self, write_config, version_commands):
        path = write_config({"binary": [{"name": "git", "version": "~3"}]})
        with patch('sys.argv', ["enforce-tool-versions", "--config", str(path)]):
            with patch('subprocess.run', side_effect=version_commands(OUTPUTS)):
                with pytest.raises(SystemExit) as exc_info:
                    main()
        assert exc_info.value.code == 1
