"""Gender estimation from pronouns and role nouns (English and Spanish)."""

import re

from profilecheck.models.profile import ProfileData

FEMALE_WORDS = frozenset({
    "she", "her", "girl", "woman", "female", "mama", "mom", "mother", "wife", "lady",
    "daughter", "sister", "girlfriend", "bride", "queen", "princess", "goddess",
    "ella", "mujer", "chica", "niña", "señora", "señorita", "mamá", "madre", "esposa",
    "hija", "hermana", "novia", "reina", "princesa", "diosa", "femenina",
})

MALE_WORDS = frozenset({
    "he", "him", "boy", "man", "male", "dad", "father", "husband", "guy", "dude",
    "son", "brother", "boyfriend", "groom", "king", "prince", "god",
    "él", "hombre", "chico", "niño", "señor", "papá", "padre", "esposo",
    "hijo", "hermano", "novio", "rey", "príncipe", "dios", "masculino",
})

_WORD = re.compile(r"\w+")


def count_gender_words(text: str) -> tuple[int, int]:
    """(female, male) word counts in `text`."""
    female = male = 0
    for token in _WORD.findall(text.lower()):
        if token in FEMALE_WORDS:
            female += 1
        elif token in MALE_WORDS:
            male += 1
    return female, male


def estimate_gender(profile: ProfileData) -> tuple[str | None, int]:
    """
    Majority vote over gendered words in bio, display name and posts.

    Returns:
        ("female" | "male" | None, number of winning indicators); ties and
        zero hits give None
    """
    female, male = count_gender_words(profile.text_corpus(include_display_name=True))
    if female > male:
        return "female", female
    if male > female:
        return "male", male
    return None, 0
