"""Move-selection policies."""

from .policies import Policy, RandomPolicy, SearchPolicy, select_action

__all__ = ["Policy", "RandomPolicy", "SearchPolicy", "select_action"]
