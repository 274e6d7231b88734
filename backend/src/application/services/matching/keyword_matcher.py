"""
Keyword Matcher
Counts vocabulary keywords shared by a job's text and a candidate's skills
"""
from typing import Iterable, List, Optional, Sequence

from core.config import settings


def _normalize(text: Optional[str]) -> str:
    return (text or "").lower()


class KeywordMatcher:
    """
    Substring matcher over a fixed keyword vocabulary.

    A keyword counts once when it appears in the job title (and, if
    enabled, the description) and inside at least one candidate skill.
    Comparison is case-insensitive containment only: no stemming and no
    word-boundary handling, so "java" is found inside "javascript".
    """

    def __init__(
        self,
        keywords: Optional[Sequence[str]] = None,
        search_description: Optional[bool] = None,
    ):
        vocabulary = settings.MATCH_KEYWORDS if keywords is None else keywords
        # Lower-case and drop duplicates, keep first-seen order
        self.keywords: List[str] = list(dict.fromkeys(
            k.strip().lower() for k in vocabulary if k and k.strip()
        ))
        self.search_description = (
            settings.MATCH_SEARCH_DESCRIPTION if search_description is None else search_description
        )

    def matched_keywords(
        self,
        title: str,
        description: Optional[str],
        skills: Iterable[str],
    ) -> List[str]:
        """Return the vocabulary keywords found on both sides"""
        job_text = _normalize(title)
        if self.search_description:
            job_text = f"{job_text}\n{_normalize(description)}"

        candidate_skills = [_normalize(s) for s in skills or [] if s]
        if not job_text.strip() or not candidate_skills:
            return []

        return [
            keyword for keyword in self.keywords
            if keyword in job_text and any(keyword in skill for skill in candidate_skills)
        ]

    def count_matches(
        self,
        title: str,
        description: Optional[str],
        skills: Iterable[str],
    ) -> int:
        return len(self.matched_keywords(title, description, skills))
