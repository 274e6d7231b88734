"""
Applicant Ranking
Ordering and threshold filtering for an employer's review queue
"""
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from core.exceptions import ValidationException
from domain.entities import Application
from domain.value_objects import MatchScore


_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _as_aware(value: Optional[datetime]) -> datetime:
    if value is None:
        return _EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _sort_key(application: Application) -> Tuple[int, int, float]:
    # Ascending sort: scored first, higher score first, newer first
    scored = application.is_scored()
    return (
        0 if scored else 1,
        -(application.match_score or 0),
        -_as_aware(application.submitted_at).timestamp(),
    )


def sort_applications(applications: Iterable[Application]) -> List[Application]:
    """Order by match score desc (unscored last), then submitted_at desc"""
    return sorted(applications, key=_sort_key)


def passes_threshold(application: Application, min_score: int) -> bool:
    """Unscored applications always pass; scored ones need >= min_score"""
    if not application.is_scored():
        return True
    return MatchScore(application.match_score).meets(min_score)


def rank_applications(
    applications: Iterable[Application],
    min_score: int = 0,
    limit: Optional[int] = None,
) -> List[Application]:
    """
    Filter by minimum score, order for review and cap the result count

    Args:
        applications: Applications of a single job
        min_score: Scored applications below this are dropped (0-100)
        limit: Maximum number returned, None for unbounded

    Raises:
        ValidationException: min_score outside [0, 100] or limit < 1
    """
    if isinstance(min_score, bool) or not isinstance(min_score, int) or not 0 <= min_score <= 100:
        raise ValidationException("min_score", "must be an integer between 0 and 100")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
        raise ValidationException("limit", "must be a positive integer")

    ranked = sort_applications(a for a in applications if passes_threshold(a, min_score))
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
