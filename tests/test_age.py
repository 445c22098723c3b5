"""Unit tests for the age estimation cascade."""

import pytest

from profilecheck.analysis.age import estimate_age
from profilecheck.models.profile import Post, ProfileData

YEAR = 2026


def estimate(bio: str = "", posts: list[str] | None = None):
    profile = ProfileData(
        username="someone",
        bio=bio,
        recent_posts=[Post(content=text) for text in posts or []],
    )
    return estimate_age(profile, current_year=YEAR)


class TestDirectMention:
    """Explicit ages in the text."""

    @pytest.mark.parametrize(
        "bio,age",
        [
            ("25 years old", 25),
            ("tengo 31 años", 31),
            ("Age: 19", 19),
            ("22yo | london", 22),
            ("27 años, Sevilla", 27),
        ],
    )
    def test_patterns(self, bio, age):
        result = estimate(bio)
        assert result.estimated_age == age
        assert result.method == "direct_mention"
        assert result.confidence == 90
        assert result.confidence_level == "high"

    def test_implausible_age_ignored(self):
        assert estimate("10 years old") is None

    def test_experience_is_not_an_age(self):
        assert estimate("15 years experience in design") is None

    def test_takes_precedence(self):
        assert estimate("25 years old millennial").estimated_age == 25


class TestBirthYear:
    """Birth years turned into ages with the injected year."""

    def test_born_in(self):
        result = estimate("born in 1998")
        assert result.estimated_age == 28
        assert result.method == "birth_year"
        assert result.confidence == 85

    def test_spanish(self):
        assert estimate("nacida en 2001").estimated_age == 25

    def test_two_digit_year(self):
        assert estimate("born in '95").estimated_age == 31
        assert estimate("born '05").estimated_age == 21

    def test_year_before_word(self):
        assert estimate("a proud 1990 baby").estimated_age == 36

    def test_default_year_is_now(self):
        profile = ProfileData(username="someone", bio="born in 2000")
        assert estimate_age(profile).method == "birth_year"


class TestRanges:
    """Generation labels and life-stage markers."""

    def test_generation(self):
        result = estimate("proud millennial")
        assert result.estimated_age == 36
        assert result.age_range == (28, 43)
        assert result.method == "generation_marker"
        assert result.confidence_level == "medium"

    def test_midpoint_rounds_half_up(self):
        assert estimate("gen z forever").estimated_age == 23

    def test_life_stage_intersection(self):
        result = estimate("university student")
        assert result.method == "life_stage"
        assert result.age_range == (18, 25)
        assert result.estimated_age == 22
        assert result.confidence == 70

    def test_conflicting_life_stages(self):
        assert estimate("retired teen") is None

    def test_markers_match_word_starts_only(self):
        result = estimate("grandmother of four")
        assert result.age_range == (45, 85)
        assert result.estimated_age == 65

    def test_markers_are_whole_words(self):
        assert estimate("capturing moments") is None
        assert estimate("padres y madres") is not None

    def test_plural_markers(self):
        result = estimate("for dads who lift")
        assert result.method == "life_stage"
        assert result.age_range == (18, 60)


class TestPostContext:
    """Weak clues from recent posts."""

    def test_work(self):
        result = estimate(posts=["Back to work on Monday"])
        assert result.method == "work_context"
        assert result.estimated_age == 30
        assert result.confidence_level == "low"

    def test_education(self):
        result = estimate(posts=["Exam week at uni"])
        assert result.method == "education_context"
        assert result.estimated_age == 21

    def test_family(self):
        assert estimate(posts=["Weekend with the kids"]).method == "family_context"

    def test_word_inside_longer_word_ignored(self):
        assert estimate(posts=["sunday workout", "unicorn frappuccino"]) is None

    def test_nothing_found(self):
        assert estimate("Coffee lover", ["Latte art"]) is None
