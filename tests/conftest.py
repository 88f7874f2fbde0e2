"""
Shared pytest fixtures for enforce-tool-versions tests

Provides a settings mock, config file writers and a fake
`subprocess.run` for version banners.
"""

import json
import sys
from pathlib import Path
import pytest
from unittest.mock import Mock
from typing import Any, Dict, Optional

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ============================================================================
# Mock Helper Classes
# ============================================================================

class FakeVersionCommands:
    """
    Stand-in for subprocess.run that answers `<tool> --version`.

    Usage:
        fake = FakeVersionCommands({'make': 'GNU Make 4.4\\n'})
        with patch('subprocess.run', side_effect=fake):
            ...
        assert fake.calls == [['make', '--version']]
    """

    def __init__(self, outputs: Optional[Dict[str, str]] = None, returncode: int = 0):
        self.outputs = outputs or {}
        self.returncode = returncode
        self.calls = []

    def __call__(self, cmd, *args, **kwargs):
        self.calls.append(list(cmd))
        name = cmd[0]
        if name not in self.outputs:
            raise FileNotFoundError(name)
        return Mock(returncode=self.returncode, stdout=self.outputs[name])


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def mock_settings():
    """Standard mock settings for all tests."""
    from enforce_tool_versions.config.settings import Settings

    settings = Mock(spec=Settings)
    settings.log_level = "DEBUG"
    settings.config_file = "tool-enforcer.json"
    settings.command_timeout = 10.0
    return settings


@pytest.fixture
def write_config(tmp_path):
    """
    Write a config file and return its path.

    Usage:
        def test_something(write_config):
            path = write_config({'binary': [{'name': 'git', 'version': '~2'}]})
    """
    def _write(data: Any, name: str = "tool-enforcer.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data)
        else:
            path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def version_commands():
    """Factory for FakeVersionCommands."""
    return FakeVersionCommands


@pytest.fixture(autouse=True)
def reset_settings_singleton():
    """Drop any SettingsManager loaded by a previous test."""
    from enforce_tool_versions.config.settings import SettingsManager
    SettingsManager._instance = None
    yield
    SettingsManager._instance = None
