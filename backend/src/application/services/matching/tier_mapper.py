"""
Score Presentation Mapper
Turns a numeric match score into a display tier
"""
from typing import Optional, Union

from domain.value_objects import MatchScore, ScoreTier


def score_tier(score: Optional[Union[int, MatchScore]]) -> ScoreTier:
    """Map a score (or None when unscored) to its ScoreTier"""
    if isinstance(score, MatchScore):
        score = score.value
    return ScoreTier.for_score(score)


def describe_score(score: Optional[Union[int, MatchScore]]) -> dict:
    """Tier plus the label/weight/color the UI renders"""
    tier = score_tier(score)
    return {
        "tier": tier.value,
        "label": tier.label,
        "weight": tier.weight,
        "color": tier.color,
    }
