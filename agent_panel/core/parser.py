"""
Config TOML parser.

Turns config.toml text into a ConfigLoadResult. Content problems become
findings; only a TOML syntax error leaves the result without a Config.
"""

import logging
import tomllib
from typing import List

from ..models.config import Config, ConfigLoadResult
from ..models.findings import ConfigFinding
from .readers import check_unknown_keys
from .projects import parse_projects
from .sections import (
    parse_agent_layer_section,
    parse_app_section,
    parse_chrome_section,
    parse_layout_section,
)

logger = logging.getLogger(__name__)

KNOWN_TOP_LEVEL_KEYS = frozenset({"app", "agentLayer", "chrome", "layout", "project"})


class ConfigParser:
    """Parses and validates config.toml contents."""

    @staticmethod
    def parse(text: str) -> ConfigLoadResult:
        """
        Parse config.toml text.

        Args:
            text: Raw TOML contents

        Returns:
            ConfigLoadResult with the parsed Config (None on syntax error),
            all findings in encounter order, and the valid projects
        """
        try:
            root = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            logger.debug(f"TOML syntax error: {e}")
            return ConfigLoadResult(
                config=None,
                findings=(ConfigFinding.fail(
                    "Config TOML parse error",
                    detail=str(e),
                    fix="Fix the TOML syntax in config.toml."
                ),),
                has_parse_error=True,
            )

        findings: List[ConfigFinding] = []

        check_unknown_keys(root, KNOWN_TOP_LEVEL_KEYS, "top-level", findings)

        app = parse_app_section(root, findings)
        chrome = parse_chrome_section(root, findings)
        agent_layer = parse_agent_layer_section(root, findings)
        layout = parse_layout_section(root, findings)
        projects = parse_projects(root, agent_layer.enabled, findings)

        config = Config(
            app=app,
            agent_layer=agent_layer,
            chrome=chrome,
            layout=layout,
            projects=projects,
        )

        logger.debug(f"Parsed config: {len(projects)} projects, {len(findings)} findings")

        return ConfigLoadResult(
            config=config,
            findings=findings,
            projects=projects,
        )
