"""
MatchScore Value Object
Type-safe applicant match score with validation (0-100)
"""
from dataclasses import dataclass

from .score_tier import ScoreTier


MIN_SCORE = 0
MAX_SCORE = 100


@dataclass(frozen=True)
class MatchScore:
    """Applicant match score value object - immutable"""

    value: int

    def __post_init__(self):
        """Validate match score range"""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Match score must be an integer")

        if not MIN_SCORE <= self.value <= MAX_SCORE:
            raise ValueError(f"Match score must be between {MIN_SCORE} and {MAX_SCORE}")

    @classmethod
    def clamped(cls, raw: int) -> "MatchScore":
        """Build a score from an unbounded sum"""
        return cls(max(MIN_SCORE, min(MAX_SCORE, int(raw))))

    @property
    def tier(self) -> ScoreTier:
        return ScoreTier.for_score(self.value)

    def meets(self, threshold: int) -> bool:
        """Check if score meets a minimum threshold"""
        return self.value >= threshold

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}%"

    def __repr__(self) -> str:
        return f"MatchScore({self.value})"
