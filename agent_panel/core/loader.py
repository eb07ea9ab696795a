"""
Config loader.

Obtains config.toml text (bootstrapping a starter file on first run) and
hands it to ConfigParser. I/O problems raise ConfigError; content problems
come back as findings.
"""

import logging
from pathlib import Path
from typing import Optional

from ..errors import ConfigError, ConfigErrorKind, ConfigLoadError, ErrorCategory
from ..models.config import Config, ConfigLoadResult
from .filesystem import DataPaths, DefaultFileSystem, FileSystem
from .parser import ConfigParser
from .writer import STARTER_CONFIG_TEMPLATE

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and parses the AgentPanel configuration file."""

    @staticmethod
    def load(path: Path, file_system: Optional[FileSystem] = None) -> ConfigLoadResult:
        """
        Load and parse config.toml.

        A missing file is replaced by the starter template and reported as
        FILE_NOT_FOUND, so the next load succeeds.

        Args:
            path: Config file path
            file_system: FileSystem to use (DefaultFileSystem if None)

        Returns:
            Parse result (may contain FAIL findings)

        Raises:
            ConfigError: FILE_NOT_FOUND after writing the starter config,
                CREATE_FAILED if that write failed, READ_FAILED if the file
                could not be read or is not UTF-8
        """
        fs = file_system or DefaultFileSystem()
        path = Path(path)

        if not fs.exists(path):
            logger.info(f"Config not found at {path}, writing starter config")
            try:
                fs.create_directory(path.parent)
                fs.write_bytes(path, STARTER_CONFIG_TEMPLATE.encode("utf-8"))
            except OSError as e:
                logger.warning(f"Failed to create starter config at {path}: {e}")
                raise ConfigError(
                    ConfigErrorKind.CREATE_FAILED,
                    str(path),
                    f"Failed to create config at {path}",
                    detail=str(e),
                ) from e

            raise ConfigError(
                ConfigErrorKind.FILE_NOT_FOUND,
                str(path),
                f"Config file not found. Created a starter config at {path}. Edit it to add projects.",
            )

        try:
            text = fs.read_bytes(path).decode("utf-8")
        except OSError as e:
            logger.warning(f"Failed to read config at {path}: {e}")
            raise ConfigError(
                ConfigErrorKind.READ_FAILED,
                str(path),
                f"Failed to read config at {path}",
                detail=str(e),
            ) from e
        except UnicodeDecodeError as e:
            logger.warning(f"Config at {path} is not valid UTF-8")
            raise ConfigError(
                ConfigErrorKind.READ_FAILED,
                str(path),
                f"Failed to read config at {path}: file is not valid UTF-8.",
                detail=str(e),
            ) from e

        logger.debug(f"Read {len(text)} characters from {path}")
        return ConfigParser.parse(text)

    @staticmethod
    def load_default(data_paths: Optional[DataPaths] = None) -> ConfigLoadResult:
        """Load ~/.config/agent-panel/config.toml (or data_paths.config_file)."""
        paths = data_paths or DataPaths.default()
        return ConfigLoader.load(paths.config_file)


def load_config(path: Optional[Path] = None, file_system: Optional[FileSystem] = None) -> Config:
    """
    Load a fully valid Config or raise.

    Args:
        path: Config file path (default: DataPaths.default().config_file)
        file_system: FileSystem to use (DefaultFileSystem if None)

    Returns:
        Config with no FAIL findings

    Raises:
        ConfigLoadError: category CONFIGURATION (file was missing),
            FILE_SYSTEM (create/read failed), PARSE (TOML syntax error) or
            VALIDATION (FAIL findings attached)
    """
    path = path or DataPaths.default().config_file

    try:
        result = ConfigLoader.load(path, file_system)
    except ConfigError as e:
        raise ConfigLoadError(e.category, e.message, detail=e.detail) from e

    if result.has_parse_error:
        detail = result.failures[0].detail if result.failures else None
        raise ConfigLoadError(ErrorCategory.PARSE, "Config TOML parse error", detail=detail)

    failures = result.failures
    if failures:
        raise ConfigLoadError(
            ErrorCategory.VALIDATION,
            f"Config has {len(failures)} error(s)",
            detail="; ".join(finding.title for finding in failures),
            findings=failures,
        )

    for warning in result.warnings:
        logger.warning(f"Config warning: {warning.title}")

    return result.config
