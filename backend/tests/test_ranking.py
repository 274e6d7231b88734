"""
Tests for applicant ranking and threshold filtering
"""
import random
from datetime import datetime

import pytest

from application.services.matching import rank_applications, sort_applications, passes_threshold
from core.exceptions import ValidationException


class TestRankApplications:
    """Test ordering, filtering and limits"""

    def test_orders_by_score_with_unscored_last(self, make_application):
        apps = [make_application(score=s) for s in (75, 50, None, 90)]

        ranked = rank_applications(apps, min_score=60)

        assert [a.match_score for a in ranked] == [90, 75, None]

    def test_min_score_zero_keeps_everything(self, make_application):
        apps = [make_application(score=s) for s in (0, 100, None, 40)]

        ranked = rank_applications(apps)

        assert [a.match_score for a in ranked] == [100, 40, 0, None]

    def test_threshold_is_inclusive(self, make_application):
        apps = [make_application(score=s) for s in (59, 60, 61)]

        ranked = rank_applications(apps, min_score=60)

        assert [a.match_score for a in ranked] == [61, 60]

    def test_min_score_100_keeps_perfect_and_unscored(self, make_application):
        apps = [make_application(score=s) for s in (99, 100, None)]

        ranked = rank_applications(apps, min_score=100)

        assert [a.match_score for a in ranked] == [100, None]

    def test_ties_broken_by_newest_submission(self, make_application):
        older = make_application(score=70, minutes=0)
        newer = make_application(score=70, minutes=30)
        newest_unscored = make_application(score=None, minutes=90)
        older_unscored = make_application(score=None, minutes=10)

        ranked = rank_applications([older, older_unscored, newer, newest_unscored])

        assert ranked == [newer, older, newest_unscored, older_unscored]

    def test_naive_timestamps_compare_as_utc(self, make_application):
        naive = make_application(score=70, submitted_at=datetime(2026, 1, 15, 12, 0))
        aware = make_application(score=70, minutes=0)

        assert rank_applications([aware, naive]) == [naive, aware]

    def test_limit_applied_after_ordering(self, make_application):
        apps = [make_application(score=s) for s in (10, 95, None, 60, 80)]

        ranked = rank_applications(apps, limit=2)

        assert [a.match_score for a in ranked] == [95, 80]

    def test_empty_input(self):
        assert rank_applications([], min_score=50, limit=10) == []

    def test_does_not_mutate_input(self, make_application):
        apps = [make_application(score=s) for s in (10, 90)]
        snapshot = list(apps)

        rank_applications(apps)

        assert apps == snapshot

    @pytest.mark.parametrize("min_score", [-1, 101, 50.5, True])
    def test_invalid_min_score_rejected(self, min_score):
        with pytest.raises(ValidationException) as exc_info:
            rank_applications([], min_score=min_score)
        assert exc_info.value.field == "min_score"

    @pytest.mark.parametrize("limit", [0, -5])
    def test_invalid_limit_rejected(self, limit):
        with pytest.raises(ValidationException) as exc_info:
            rank_applications([], limit=limit)
        assert exc_info.value.field == "limit"

    def test_random_inputs_stay_ordered_and_filtered(self, make_application):
        rng = random.Random(20261018)
        for _ in range(50):
            apps = [
                make_application(
                    score=rng.choice([None] + list(range(0, 101))),
                    minutes=rng.randint(0, 10000),
                )
                for _ in range(rng.randint(0, 25))
            ]
            min_score = rng.randint(0, 100)

            ranked = rank_applications(apps, min_score=min_score)

            expected_ids = {a.id for a in apps if passes_threshold(a, min_score)}
            assert {a.id for a in ranked} == expected_ids

            scored = [a for a in ranked if a.match_score is not None]
            unscored = [a for a in ranked if a.match_score is None]
            assert ranked == scored + unscored
            for first, second in zip(scored, scored[1:]):
                assert first.match_score >= second.match_score
                if first.match_score == second.match_score:
                    assert first.submitted_at >= second.submitted_at
            for first, second in zip(unscored, unscored[1:]):
                assert first.submitted_at >= second.submitted_at


class TestSortApplications:
    """Test the unfiltered review order"""

    def test_sort_keeps_low_scores(self, make_application):
        apps = [make_application(score=s) for s in (5, None, 50)]

        assert [a.match_score for a in sort_applications(apps)] == [50, 5, None]

    def test_passes_threshold(self, make_application):
        assert passes_threshold(make_application(score=None), 100)
        assert passes_threshold(make_application(score=60), 60)
        assert not passes_threshold(make_application(score=59), 60)
