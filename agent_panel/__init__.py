"""AgentPanel config - configuration loading and validation for AgentPanel.

This package provides:
- config.toml parsing with PASS/WARN/FAIL findings instead of crashes
- Starter config bootstrap and targeted [app] write-back
- Unified error taxonomy (ApCoreError) for I/O, parse and validation failures
- Project ranking for the interactive switcher
- The agent-panel-config CLI
"""

__version__ = "0.1.0"
__author__ = "AgentPanel contributors"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
