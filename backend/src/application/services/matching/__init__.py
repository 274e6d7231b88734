"""
Matching Services
Keyword matching, scoring, ranking and tier mapping for applicants
"""
from .keyword_matcher import KeywordMatcher
from .score_calculator import ScoreCalculator
from .ranking import rank_applications, sort_applications, passes_threshold
from .tier_mapper import score_tier, describe_score

__all__ = [
    "KeywordMatcher",
    "ScoreCalculator",
    "rank_applications",
    "sort_applications",
    "passes_threshold",
    "score_tier",
    "describe_score",
]
