"""Age estimation from profile text."""

import math
import re
from dataclasses import dataclass, field
from datetime import datetime

from profilecheck.models.profile import ProfileData

MIN_PLAUSIBLE_AGE = 13
MAX_PLAUSIBLE_AGE = 80

DIRECT_AGE_PATTERNS = (
    re.compile(r"\btengo\s*(\d{1,2})\s*años\b"),
    re.compile(r"\b(\d{1,2})\s*(?:years?|yrs?)\s*old\b"),
    re.compile(r"\b(\d{1,2})\s*(?:años?\b|yo\b|y/o|y\.o\.?)"),
    re.compile(r"\bage\s*:?\s*(\d{1,2})\b"),
    re.compile(r"\b(\d{1,2})\s*(?:añitos|añita)\b"),
)

_YEAR = r"((?:19|20)\d{2})"
BIRTH_YEAR_PATTERNS = (
    re.compile(rf"\b(?:born|nacid[ao]|nací)\s*(?:in\s+|en\s+)?{_YEAR}\b"),
    re.compile(rf"\b(?:born|nacid[ao]|nací)\s*(?:in\s+|en\s+)?'(\d{{2}})\b"),
    re.compile(rf"\b{_YEAR}\s*(?:baby|kid|born|nacid[ao])\b"),
    re.compile(rf"\bsoy\s+de(?:l)?\s+{_YEAR}\b"),
    re.compile(rf"\bgeneración\s+{_YEAR}\b"),
)

GENERATION_MARKERS: dict[str, tuple[int, int]] = {
    "gen z": (18, 27),
    "generation z": (18, 27),
    "generación z": (18, 27),
    "millennial": (28, 43),
    "gen y": (28, 43),
    "zoomer": (18, 27),
    "boomer": (58, 77),
    "centennial": (18, 27),
}

LIFE_STAGE_MARKERS: dict[str, tuple[int, int]] = {
    "university": (18, 25),
    "universidad": (18, 25),
    "college": (18, 25),
    "student": (16, 25),
    "estudiante": (16, 25),
    "teenager": (13, 19),
    "teen": (13, 19),
    "adolescente": (13, 19),
    "high school": (14, 18),
    "instituto": (14, 18),
    "bachillerato": (16, 18),
    "married": (20, 60),
    "casada": (20, 60),
    "casado": (20, 60),
    "mom": (18, 55),
    "mother": (18, 55),
    "mama": (18, 55),
    "mamá": (18, 55),
    "madre": (18, 55),
    "dad": (18, 60),
    "father": (18, 60),
    "papa": (18, 60),
    "papá": (18, 60),
    "padre": (18, 60),
    "grandmother": (45, 85),
    "grandfather": (45, 85),
    "abuela": (45, 85),
    "abuelo": (45, 85),
    "retired": (60, 85),
    "jubilada": (60, 85),
    "jubilado": (60, 85),
}

# (method, words, age range, confidence, estimated age); checked in order
POST_CONTEXT_CLUES = (
    ("education_context", ("university", "universidad", "college", "uni"), (18, 25), 40, 21),
    ("work_context", ("work", "trabajo", "job", "career", "oficina", "empresa"), (22, 65), 30, 30),
    ("family_context", ("kids", "children", "family", "hijos", "familia", "niños"), (25, 50), 35, 35),
)


@dataclass
class AgeEstimate:
    """Result of the age cascade."""

    estimated_age: int
    confidence: int
    method: str
    age_range: tuple[int, int] | None = None
    indicators: list[str] = field(default_factory=list)

    @property
    def confidence_level(self) -> str:
        if self.confidence >= 80:
            return "high"
        if self.confidence >= 50:
            return "medium"
        return "low"


def _midpoint(low: int, high: int) -> int:
    return math.floor((low + high) / 2 + 0.5)


def _plausible(age: int) -> bool:
    return MIN_PLAUSIBLE_AGE <= age <= MAX_PLAUSIBLE_AGE


def _mentions(text: str, marker: str) -> bool:
    # whole words only, plurals included ("dads")
    return re.search(rf"(?<!\w){re.escape(marker)}(?:e?s)?(?!\w)", text) is not None


def _birth_year(digits: str) -> int:
    if len(digits) == 2:
        year = int(digits)
        return 1900 + year if year > 30 else 2000 + year
    return int(digits)


def _direct_mention(text: str) -> AgeEstimate | None:
    for pattern in DIRECT_AGE_PATTERNS:
        for match in pattern.finditer(text):
            age = int(match.group(1))
            if _plausible(age):
                return AgeEstimate(age, 90, "direct_mention", indicators=[f"Direct age mention: {age}"])
    return None


def _from_birth_year(text: str, current_year: int) -> AgeEstimate | None:
    for pattern in BIRTH_YEAR_PATTERNS:
        for match in pattern.finditer(text):
            birth_year = _birth_year(match.group(1))
            age = current_year - birth_year
            if _plausible(age):
                return AgeEstimate(
                    age, 85, "birth_year",
                    indicators=[f"Birth year: {birth_year}, calculated age: {age}"],
                )
    return None


def _generation(text: str) -> AgeEstimate | None:
    for marker, (low, high) in GENERATION_MARKERS.items():
        if _mentions(text, marker):
            return AgeEstimate(
                _midpoint(low, high), 60, "generation_marker", (low, high),
                [f"Generation marker: {marker} ({low}-{high})"],
            )
    return None


def _life_stage(text: str) -> AgeEstimate | None:
    matched = [(marker, bounds) for marker, bounds in LIFE_STAGE_MARKERS.items() if _mentions(text, marker)]
    if not matched:
        return None
    low = max(bounds[0] for _, bounds in matched)
    high = min(bounds[1] for _, bounds in matched)
    if low > high:
        return None
    return AgeEstimate(
        _midpoint(low, high),
        min(100, 50 + 10 * len(matched)),
        "life_stage",
        (low, high),
        [f"Life stage markers: {', '.join(marker for marker, _ in matched)}"],
    )


def _post_context(profile: ProfileData) -> AgeEstimate | None:
    text = " ".join(post.content for post in profile.recent_posts).lower()
    if not text.strip():
        return None
    for method, words, bounds, confidence, age in POST_CONTEXT_CLUES:
        if any(_mentions(text, word) for word in words):
            return AgeEstimate(age, confidence, method, bounds, [f"{method.replace('_', ' ')} in recent posts"])
    return None


def estimate_age(profile: ProfileData, current_year: int | None = None) -> AgeEstimate | None:
    """
    Estimate a profile owner's age; the first signal found wins.

    Order: direct mention, birth year, generation label, life-stage
    markers (ranges intersected), then weak context clues in recent
    posts. Ages outside 13-80 are ignored.

    Args:
        profile: Normalized profile
        current_year: Year used to turn birth years into ages (defaults to now)

    Returns:
        AgeEstimate, or None if nothing in the profile hints at an age
    """
    year = current_year or datetime.now().year
    text = profile.text_corpus(include_display_name=True).lower()

    return (
        _direct_mention(text)
        or _from_birth_year(text, year)
        or _generation(text)
        or _life_stage(text)
        or _post_context(profile)
    )
