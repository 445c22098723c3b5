"""Locale heuristics for location matching."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from profilecheck.models.profile import ProfileData

MATCH_THRESHOLD = 30

LOCATION_SEPARATORS = re.compile(r"[,\s/]+")
# Shorter location tokens ("CA", "LA") are never treated as partial place names
MIN_PARTIAL_TOKEN = 4


def _names_place(place: str, location: str, tokens: list[str]) -> bool:
    """Place appears in the location, or a location token is one of its words ("Palmas")."""
    return place in location or any(token in place.split() for token in tokens)


@dataclass
class LocaleDetection:
    """How strongly a profile appears to belong to a locale."""

    is_match: bool
    confidence: int
    indicators: list[str] = field(default_factory=list)
    detected_locations: list[str] = field(default_factory=list)


class LocaleHeuristicProvider(ABC):
    """
    Multi-signal detector for one target locale.

    Providers are looked up by target location string; the first provider
    whose `targets` accepts the string handles the match.
    """

    name: str

    @abstractmethod
    def targets(self, location: str) -> bool:
        """True if this provider handles the (lower-cased) target location."""
        ...

    @abstractmethod
    def detect(self, profile: ProfileData) -> LocaleDetection:
        """Score how likely the profile belongs to this locale."""
        ...


class SpanishLocaleProvider(LocaleHeuristicProvider):
    """Detects profiles based in Spain."""

    name = "es"

    CITIES = (
        "madrid", "barcelona", "valencia", "sevilla", "seville", "zaragoza", "málaga", "malaga",
        "murcia", "palma", "las palmas", "bilbao", "alicante", "córdoba", "cordoba", "valladolid",
        "vigo", "gijón", "gijon", "hospitalet", "vitoria", "granada", "oviedo", "badalona",
        "cartagena", "terrassa", "jerez", "sabadell", "móstoles", "mostoles", "santa cruz",
        "pamplona", "almería", "almeria", "fuenlabrada", "leganés", "leganes", "donostia",
        "san sebastián", "san sebastian", "burgos", "santander", "castellón", "castellon",
        "alcorcón", "alcorcon", "albacete", "getafe", "salamanca", "huelva", "logroño", "logrono",
        "badajoz", "tarragona", "lleida", "marbella", "león", "leon", "cádiz", "cadiz",
        "dos hermanas", "torrejon", "parla", "mataró", "mataro", "algeciras", "reus", "ourense",
        "santiago", "lugo", "girona", "cáceres", "caceres", "lorca", "coslada", "talavera",
        "el puerto", "cornellà", "cornella", "avilés", "aviles", "palencia", "galdakao",
        "torrent", "torrevieja", "chiclana", "manresa", "ferrol", "vélez", "velez", "gandía", "gandia",
    )
    REGIONS = (
        "andalucía", "andalucia", "cataluña", "catalunya", "madrid", "valencia", "galicia",
        "castilla y león", "castilla y leon", "país vasco", "pais vasco", "euskadi", "canarias",
        "castilla-la mancha", "murcia", "aragón", "aragon", "extremadura", "asturias",
        "navarra", "cantabria", "la rioja", "baleares", "ceuta", "melilla",
    )
    COUNTRY_NAMES = ("spain", "españa")
    LANGUAGE_MARKERS = (
        "español", "española", "spanish", "spain", "españa", "madrid", "barcelona",
        "hablo español", "de españa", "spanish girl", "spanish boy",
        "vivo en", "desde", "nacida en", "nacido en", "spanish influencer",
        "influencer española", "influencer español", "creadora española", "creador español",
    )
    CULTURAL_MARKERS = (
        "paella", "flamenco", "siesta", "tapas", "jamón", "jamon", "sangría", "sangria",
        "real madrid", "fc barcelona", "barça", "barca", "atletico", "sevilla fc",
        "la liga", "el clasico", "feria", "semana santa", "san fermin", "camino",
        "costa del sol", "costa brava", "islas baleares", "canary islands", "tenerife",
        "mallorca", "ibiza", "formentera", "gran canaria", "lanzarote", "fuerteventura",
        "churros", "gazpacho", "tortilla española", "patatas bravas", "romerías",
        "procesiones", "fallas", "la tomatina", "running of bulls", "corrida",
    )
    USERNAME_MARKERS = ("madrid", "barcelona", "valencia", "sevilla", "spain", "español", "española")
    HASHTAG_MARKERS = (
        "españa", "spain", "madrid", "barcelona", "valencia", "sevilla",
        "spanish", "española", "español", "influencerspain", "influencersesp",
    )
    PHONE_PATTERNS = (
        re.compile(r"\+34\s?\d{3}\s?\d{3}\s?\d{3}"),
        re.compile(r"\b[679]\d{8}\b"),
    )
    POSTAL_CODE = re.compile(r"\b\d{5}\b")

    CITY_POINTS = 40
    REGION_POINTS = 35
    COUNTRY_POINTS = 50
    LANGUAGE_POINTS = 10
    CULTURAL_POINTS = 5
    PHONE_POINTS = 20
    POSTAL_POINTS = 15
    MENTION_POINTS, MENTION_CAP = 3, 20
    USERNAME_POINTS = 15
    HASHTAG_POINTS, HASHTAG_CAP = 8, 25

    def __init__(self):
        places = "|".join(
            re.escape(place)
            for place in sorted(set(self.CITIES + self.REGIONS), key=len, reverse=True)
        )
        self._declared_origin = re.compile(
            rf"\b(?:based in|desde|from|de|en|in)\s+({places})\b"
        )

    def targets(self, location: str) -> bool:
        target = location.lower()
        if any(name in target for name in (*self.COUNTRY_NAMES, "spanish")):
            return True
        return any(place in target for place in (*self.CITIES, *self.REGIONS))

    def detect(self, profile: ProfileData) -> LocaleDetection:
        indicators: list[str] = []
        detected: list[str] = []
        confidence = 0
        text = profile.text_corpus(include_location=True, include_display_name=True).lower()

        location = (profile.location or "").strip().lower()
        if location:
            tokens = [t for t in LOCATION_SEPARATORS.split(location) if len(t) >= MIN_PARTIAL_TOKEN]
            cities = [c for c in self.CITIES if _names_place(c, location, tokens)]
            if cities:
                confidence += self.CITY_POINTS
                indicators.append(f"Location field contains Spanish city: {', '.join(cities)}")
                detected.extend(cities)

            regions = [r for r in self.REGIONS if _names_place(r, location, tokens)]
            if regions:
                confidence += self.REGION_POINTS
                indicators.append(f"Location field contains Spanish region: {', '.join(regions)}")
                detected.extend(regions)

            if any(name in location for name in self.COUNTRY_NAMES):
                confidence += self.COUNTRY_POINTS
                indicators.append("Location explicitly mentions Spain")
                detected.append("Spain")
        else:
            origin = self._declared_origin.search((profile.bio or "").lower())
            if origin:
                place = origin.group(1)
                points = self.CITY_POINTS if place in self.CITIES else self.REGION_POINTS
                confidence += points
                indicators.append(f"Bio declares Spanish origin: {origin.group(0)}")
                detected.append(place)

        language = [m for m in self.LANGUAGE_MARKERS if m in text]
        if language:
            confidence += len(language) * self.LANGUAGE_POINTS
            indicators.append(f"Spanish language indicators: {', '.join(language)}")

        cultural = [m for m in self.CULTURAL_MARKERS if m in text]
        if cultural:
            confidence += len(cultural) * self.CULTURAL_POINTS
            indicators.append(f"Spanish cultural markers: {', '.join(cultural)}")

        if any(pattern.search(text) for pattern in self.PHONE_PATTERNS):
            confidence += self.PHONE_POINTS
            indicators.append("Spanish phone number pattern detected")

        if self.POSTAL_CODE.search(text):
            confidence += self.POSTAL_POINTS
            indicators.append("Spanish postal code pattern detected")

        mentions = [p for p in (*self.CITIES, *self.REGIONS) if p in text]
        if mentions:
            confidence += min(len(mentions) * self.MENTION_POINTS, self.MENTION_CAP)
            indicators.append(f"Spanish locations mentioned in content: {', '.join(mentions[:5])}")
            detected.extend(mentions)

        username = profile.username.lower()
        in_username = [m for m in self.USERNAME_MARKERS if m in username]
        if in_username:
            confidence += self.USERNAME_POINTS
            indicators.append(f"Username contains Spanish indicators: {', '.join(in_username)}")

        hashtags = [
            tag
            for post in profile.recent_posts
            for tag in post.hashtags
            if any(marker in tag.lower() for marker in self.HASHTAG_MARKERS)
        ]
        if hashtags:
            confidence += min(len(hashtags) * self.HASHTAG_POINTS, self.HASHTAG_CAP)
            indicators.append(f"Spanish hashtags found: {', '.join(hashtags[:3])}")

        confidence = min(confidence, 100)
        return LocaleDetection(
            is_match=confidence >= MATCH_THRESHOLD,
            confidence=confidence,
            indicators=indicators,
            detected_locations=list(dict.fromkeys(detected)),
        )


LOCALE_PROVIDERS: dict[str, LocaleHeuristicProvider] = {}


def register_locale_provider(provider: LocaleHeuristicProvider) -> None:
    """Add (or replace) a provider under its `name`."""
    LOCALE_PROVIDERS[provider.name] = provider


def find_locale_provider(location: str | None) -> LocaleHeuristicProvider | None:
    """First registered provider that handles the target location."""
    if not location:
        return None
    for provider in LOCALE_PROVIDERS.values():
        if provider.targets(location):
            return provider
    return None


def substring_location_match(profile_location: str | None, target: str) -> bool:
    """Case-insensitive containment in either direction."""
    if not profile_location:
        return False
    have = profile_location.strip().lower()
    want = target.strip().lower()
    if not have or not want:
        return False
    return have in want or want in have


register_locale_provider(SpanishLocaleProvider())
