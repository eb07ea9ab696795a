"""
Services module for AgentPanel config

Project ranking for the interactive switcher.
"""

from .project_sorter import MatchTier, match_tier, sorted_projects

__all__ = [
    "MatchTier",
    "match_tier",
    "sorted_projects",
]
