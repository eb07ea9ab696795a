"""
Pytest fixtures for AgentPanel config tests.

Provides an in-memory FileSystem double and helpers for writing config
documents.
"""

import textwrap
from pathlib import Path
from typing import Dict, Set

import pytest

from agent_panel.core.parser import ConfigParser


class MemoryFileSystem:
    """In-memory FileSystem double.

    Operations named in ``failing`` ("read", "write", "mkdir") raise OSError.
    Writes require the parent directory to exist, like a real file system.
    """

    def __init__(self):
        self.files: Dict[Path, bytes] = {}
        self.directories: Set[Path] = {Path("/")}
        self.failing: Set[str] = set()

    def exists(self, path: Path) -> bool:
        return path in self.files or path in self.directories

    def read_bytes(self, path: Path) -> bytes:
        if "read" in self.failing:
            raise PermissionError(f"Permission denied: '{path}'")
        if path not in self.files:
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        return self.files[path]

    def write_bytes(self, path: Path, data: bytes) -> None:
        if "write" in self.failing:
            raise OSError(f"Read-only file system: '{path}'")
        if path.parent not in self.directories:
            raise FileNotFoundError(f"No such file or directory: '{path.parent}'")
        self.files[path] = data

    def create_directory(self, path: Path) -> None:
        if "mkdir" in self.failing:
            raise PermissionError(f"Permission denied: '{path}'")
        self.directories.add(path)
        self.directories.update(path.parents)

    def write_text(self, path: Path, text: str) -> None:
        """Test helper: place a file, creating its directory."""
        self.create_directory(path.parent)
        self.files[path] = text.encode("utf-8")

    def read_text(self, path: Path) -> str:
        return self.files[path].decode("utf-8")


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Empty in-memory file system."""
    return MemoryFileSystem()


@pytest.fixture
def memory_config_path() -> Path:
    """Config path inside the in-memory file system."""
    return Path("/home/tester/.config/agent-panel/config.toml")


@pytest.fixture
def parse():
    """Parse a dedented TOML snippet with ConfigParser."""
    def _parse(text: str):
        return ConfigParser.parse(textwrap.dedent(text))
    return _parse


@pytest.fixture
def write_config(tmp_path):
    """Write a dedented config.toml under tmp_path and return its path."""
    def _write(text: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_config_text() -> str:
    """A valid config with every section and three projects."""
    return textwrap.dedent("""\
        [app]
        autoStartAtLogin = true

        [agentLayer]
        enabled = false

        [chrome]
        pinnedTabs = ["https://dashboard.example.com"]
        defaultTabs = ["https://docs.example.com"]
        openGitRemote = true

        [layout]
        smallScreenThreshold = 27.5
        windowHeight = 85
        maxWindowWidth = 20
        idePosition = "right"
        justification = "left"
        maxGap = 5

        [[project]]
        name = "AgentPanel"
        path = "/home/tester/src/agent-panel"
        color = "indigo"
        chromePinnedTabs = ["https://api.example.com"]

        [[project]]
        name = "Remote ML"
        remote = "ssh-remote+tester@ml-box.local"
        path = "/srv/ml"
        color = "#1A2b3C"

        [[project]]
        name = "Dotfiles"
        path = "/home/tester/dotfiles"
        useAgentLayer = true
    """)
