"""Unit tests for niche alignment."""

from profilecheck.analysis.niche import NICHE_KEYWORDS, analyze_niche_alignment, keywords_for_niche
from profilecheck.models.profile import Post, ProfileData


def make_profile(bio: str = "", posts: list[str] | None = None) -> ProfileData:
    return ProfileData(
        username="someone",
        bio=bio,
        recent_posts=[Post(content=text) for text in posts or []],
    )


class TestKeywords:
    """Test keyword lookup."""

    def test_known_niches(self):
        assert set(NICHE_KEYWORDS) == {"home", "lifestyle", "fashion", "beauty", "fitness", "food", "travel", "tech"}

    def test_case_insensitive_lookup(self):
        assert keywords_for_niche(" Fitness ") == NICHE_KEYWORDS["fitness"]

    def test_unknown_niche_matches_own_name(self):
        assert keywords_for_niche("Gaming") == ("gaming",)

    def test_blank_niche(self):
        assert keywords_for_niche("  ") == ()


class TestNicheScore:
    """Test scoring and explanations."""

    def test_general_hits_worth_ten(self):
        result = analyze_niche_alignment(make_profile("Daily workout at the gym"), ["fitness"])
        assert result.score == 20
        assert result.matched_keywords == ["workout", "gym"]
        assert result.explanation == "Poor niche alignment - only 2 relevant keywords found"

    def test_posts_are_included(self):
        profile = make_profile("", ["Morning yoga", "Pilates class"])
        result = analyze_niche_alignment(profile, ["fitness"])
        assert result.matched_keywords == ["yoga", "pilates"]

    def test_case_insensitive_text(self):
        result = analyze_niche_alignment(make_profile("WORKOUT"), ["Fitness"])
        assert result.matched_keywords == ["workout"]

    def test_brand_hits_worth_fifteen(self):
        profile = make_profile("Nike running and training. Just do it!")
        result = analyze_niche_alignment(profile, [], brand_name="Nike")
        assert result.score == 60
        assert result.matched_keywords == ["nike", "running", "training", "just do it"]
        assert result.explanation == "Good niche alignment with 4 relevant keywords found"

    def test_moderate_band(self):
        result = analyze_niche_alignment(make_profile("fashion style outfit look"), ["fashion"])
        assert result.score == 40
        assert result.explanation.startswith("Moderate")

    def test_capped_at_hundred(self):
        bio = "fitness workout gym exercise health training muscle cardio yoga pilates"
        result = analyze_niche_alignment(make_profile(bio), ["fitness"], brand_name="nike")
        assert result.score == 100
        assert result.explanation.startswith("Excellent")

    def test_shared_keyword_counts_per_niche_but_listed_once(self):
        result = analyze_niche_alignment(make_profile("kitchen"), ["home", "food"])
        assert result.score == 20
        assert result.matched_keywords == ["kitchen"]

    def test_unknown_niche(self):
        result = analyze_niche_alignment(make_profile("gaming every night"), ["gaming"])
        assert result.score == 10
        assert result.matched_keywords == ["gaming"]

    def test_unknown_brand_adds_nothing(self):
        result = analyze_niche_alignment(make_profile("zara hauls"), [], brand_name="zara")
        assert result.score == 0

    def test_empty_profile(self):
        result = analyze_niche_alignment(ProfileData(username="empty"), ["fitness", "travel"])
        assert result.score == 0
        assert result.matched_keywords == []
        assert result.explanation == "Poor niche alignment - only 0 relevant keywords found"
