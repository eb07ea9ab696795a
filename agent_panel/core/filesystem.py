"""
File system access and canonical AgentPanel paths.

The loader and writer take a FileSystem so tests can swap in an in-memory
double. DefaultFileSystem is the real pathlib-backed implementation.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

CONFIG_PATH_ENV = "AGENT_PANEL_CONFIG"


class FileSystem(Protocol):
    """Minimal file operations used by the config pipeline.

    Failing operations raise OSError.
    """

    def exists(self, path: Path) -> bool: ...

    def read_bytes(self, path: Path) -> bytes: ...

    def write_bytes(self, path: Path, data: bytes) -> None: ...

    def create_directory(self, path: Path) -> None:
        """Create the directory and any missing parents; no-op if it exists."""
        ...


class DefaultFileSystem:
    """FileSystem backed by pathlib."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        # Atomic replace via sibling temp file
        tmp_path = path.with_name(f".{path.name}.tmp")
        tmp_path.write_bytes(data)
        os.replace(tmp_path, path)

    def create_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class DataPaths:
    """
    Canonical AgentPanel file locations.

    Attributes:
        home: Home directory all paths are derived from
    """

    home: Path

    @classmethod
    def default(cls) -> "DataPaths":
        return cls(home=Path.home())

    @property
    def config_directory(self) -> Path:
        return self.home / ".config" / "agent-panel"

    @property
    def config_file(self) -> Path:
        """~/.config/agent-panel/config.toml"""
        return self.config_directory / "config.toml"


def resolve_config_path(explicit: Optional[str] = None) -> Path:
    """
    Pick the config file path.

    Precedence: explicit argument, then $AGENT_PANEL_CONFIG, then
    DataPaths.default().config_file.
    """
    if explicit:
        return Path(explicit).expanduser()

    from_env = os.environ.get(CONFIG_PATH_ENV)
    if from_env:
        return Path(from_env).expanduser()

    return DataPaths.default().config_file
