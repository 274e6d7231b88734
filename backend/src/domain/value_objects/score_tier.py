"""
Score Tier Enum
Display buckets for applicant match scores
"""
from enum import Enum
from typing import Optional


class ScoreTier(str, Enum):
    """Presentation tier derived from a match score"""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    WEAK = "weak"
    UNSCORED = "unscored"

    @property
    def label(self) -> str:
        return _TIER_LABELS[self]

    @property
    def weight(self) -> int:
        """Visual emphasis, 4 (strongest) down to 0 (no score)"""
        return _TIER_WEIGHTS[self]

    @property
    def color(self) -> str:
        return _TIER_COLORS[self]

    @classmethod
    def for_score(cls, score: Optional[int]) -> "ScoreTier":
        """Map a score (or None) to its tier"""
        if score is None:
            return cls.UNSCORED
        if score >= 80:
            return cls.EXCELLENT
        if score >= 60:
            return cls.GOOD
        if score >= 40:
            return cls.FAIR
        return cls.WEAK


_TIER_LABELS = {
    ScoreTier.EXCELLENT: "Excellent Match",
    ScoreTier.GOOD: "Good Match",
    ScoreTier.FAIR: "Fair Match",
    ScoreTier.WEAK: "Weak Match",
    ScoreTier.UNSCORED: "No Score",
}

_TIER_WEIGHTS = {
    ScoreTier.EXCELLENT: 4,
    ScoreTier.GOOD: 3,
    ScoreTier.FAIR: 2,
    ScoreTier.WEAK: 1,
    ScoreTier.UNSCORED: 0,
}

_TIER_COLORS = {
    ScoreTier.EXCELLENT: "green",
    ScoreTier.GOOD: "blue",
    ScoreTier.FAIR: "yellow",
    ScoreTier.WEAK: "orange",
    ScoreTier.UNSCORED: "gray",
}
