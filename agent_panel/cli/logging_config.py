"""Logging for the agent-panel-config CLI.

Library modules log through ``logging.getLogger(__name__)``. The CLI installs
one stderr handler on the ``agent_panel`` package logger and reports each
config load as a one-line summary:

- WARNING (default): only problems, e.g. a config that is not valid TOML
- INFO (--verbose): load summaries with project and finding counts
- DEBUG (--debug): every finding, plus module and line of each record
"""

import logging
import sys
from pathlib import Path

from ..errors import ConfigError
from ..models.config import ConfigLoadResult

PACKAGE_LOGGER = "agent_panel"

_FORMATS = {
    logging.WARNING: "%(levelname)s: %(message)s",
    logging.INFO: "[%(levelname)s] %(name)s: %(message)s",
    logging.DEBUG: "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
}


def configure_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Point the agent_panel logger at stderr.

    Safe to call repeatedly; the previous handler is replaced.

    Returns:
        The package logger
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMATS[level]))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def log_load_result(logger: logging.Logger, path: Path, result: ConfigLoadResult, elapsed_ms: float) -> None:
    """Summarize a finished load, then list its findings at DEBUG."""
    if result.has_parse_error:
        logger.warning(f"{path} is not valid TOML; no config was loaded")
    else:
        logger.info(
            f"Loaded {path} in {elapsed_ms:.1f}ms: {len(result.projects)} project(s), "
            f"{len(result.failures)} FAIL, {len(result.warnings)} WARN"
        )

    for finding in result.findings:
        if finding.detail:
            logger.debug(f"{finding} ({finding.detail})")
        else:
            logger.debug(str(finding))


def log_config_error(logger: logging.Logger, error: ConfigError) -> None:
    logger.info(f"Could not load {error.path}: {error.kind.value}")
