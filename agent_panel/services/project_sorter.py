"""
Project ranking for the switcher.

Sorting rules:
- Empty query: most recently activated first, then config order
- Non-empty query: match tier, then recency, then config order;
  non-matching projects are dropped
"""

from enum import IntEnum
from typing import Dict, Iterable, List, Optional, Sequence

from ..models.config import ProjectConfig


class MatchTier(IntEnum):
    """How a project matched a query (lower is better)."""
    NAME_PREFIX = 0
    ID_PREFIX = 1
    NAME_SUBSTRING = 2
    ID_SUBSTRING = 3


def match_tier(project: ProjectConfig, query: str) -> Optional[MatchTier]:
    """
    Classify how a project matches a lowercased query.

    Returns:
        The best MatchTier, or None if neither name nor id contains the query
    """
    name = project.name.lower()
    project_id = project.id.lower()

    if name.startswith(query):
        return MatchTier.NAME_PREFIX
    if project_id.startswith(query):
        return MatchTier.ID_PREFIX
    if query in name:
        return MatchTier.NAME_SUBSTRING
    if query in project_id:
        return MatchTier.ID_SUBSTRING
    return None


def _recency_ranks(recent_activations: Sequence[Optional[str]]) -> Dict[str, int]:
    ranks: Dict[str, int] = {}
    for index, project_id in enumerate(recent_activations):
        if project_id is None:
            continue
        # First occurrence is the most recent
        ranks.setdefault(project_id, index)
    return ranks


def sorted_projects(
    projects: Iterable[ProjectConfig],
    query: str = "",
    recent_activations: Sequence[Optional[str]] = (),
) -> List[ProjectConfig]:
    """
    Filter and order projects for the switcher.

    Args:
        projects: Projects in config order
        query: Search text (trimmed, case-insensitive; empty means no filter)
        recent_activations: Activated project ids, newest first; None
            entries (activations without a project) are skipped

    Returns:
        Ordered projects

    Examples:
        Projects A, B, C with recent_activations ["b", "a"] and an empty
        query sort as [B, A, C].
    """
    ranks = _recency_ranks(recent_activations)
    no_history_rank = len(recent_activations)
    normalized_query = query.strip().lower()

    indexed = list(enumerate(projects))

    if not normalized_query:
        indexed.sort(key=lambda item: (ranks.get(item[1].id, no_history_rank), item[0]))
        return [project for _, project in indexed]

    matches = []
    for order, project in indexed:
        tier = match_tier(project, normalized_query)
        if tier is not None:
            matches.append((tier, ranks.get(project.id, no_history_rank), order, project))

    matches.sort(key=lambda item: item[:3])
    return [project for _, _, _, project in matches]
