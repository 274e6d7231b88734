"""
Score Calculator
Fixed-weight heuristic producing a bounded applicant match score
"""
from typing import Optional, Sequence

from loguru import logger

from core.exceptions import ValidationException
from domain.value_objects import MatchScore
from .keyword_matcher import KeywordMatcher


BASE_SCORE = 50
POINTS_PER_KEYWORD = 5
EXPERIENCE_BONUSES = (
    (3, 10),  # 3+ years
    (5, 15),  # 5+ years, on top of the 3-year bonus
)


class ScoreCalculator:
    """
    Score one candidate against one job posting.

    score = 50 + 5 * matched keywords + experience bonuses, clamped to
    [0, 100]. Qualifications are accepted but carry no weight.
    """

    def __init__(self, matcher: Optional[KeywordMatcher] = None):
        self.matcher = matcher or KeywordMatcher()

    def calculate(
        self,
        title: str,
        description: Optional[str],
        years_of_experience: int,
        skills: Sequence[str],
        qualifications: Optional[Sequence[str]] = None,
    ) -> MatchScore:
        """
        Compute the match score

        Raises:
            ValidationException: experience is negative or not an integer
        """
        if isinstance(years_of_experience, bool) or not isinstance(years_of_experience, int):
            raise ValidationException("years_of_experience", "must be an integer")
        if years_of_experience < 0:
            raise ValidationException("years_of_experience", "cannot be negative")

        matches = self.matcher.count_matches(title, description, skills)

        raw = BASE_SCORE + POINTS_PER_KEYWORD * matches
        for min_years, bonus in EXPERIENCE_BONUSES:
            if years_of_experience >= min_years:
                raw += bonus

        score = MatchScore.clamped(raw)
        logger.debug(
            f"Scored candidate: keywords={matches}, experience={years_of_experience}, "
            f"raw={raw}, score={score.value}"
        )
        return score
