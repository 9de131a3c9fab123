"""
Personality classification

Reduces a score profile to a named personality type. Two-trait patterns
are tried first, in fixed order, against the three strongest traits;
otherwise the strongest trait alone picks the type.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .scoring import PersonalityProfile
from .traits import Trait, lookup_trait


UNIQUE_INDIVIDUAL = "The Unique Individual"


@dataclass(frozen=True)
class PersonalityPattern:
    """A personality type that requires all of its traits among the top three."""
    requires: frozenset
    personality: str

    def matches(self, traits: set) -> bool:
        return self.requires <= traits


# Checked in order; the first match wins.
PERSONALITY_PATTERNS: tuple[PersonalityPattern, ...] = (
    PersonalityPattern(frozenset({Trait.BOLDNESS, Trait.ARTISTIC_FLAIR}), "The Wild Maverick"),
    PersonalityPattern(frozenset({Trait.BOLDNESS, Trait.EXCITEMENT}), "The Untamed Explorer"),
    PersonalityPattern(frozenset({Trait.WHIMSY, Trait.SINCERITY}), "The Gentle Guardian"),
    PersonalityPattern(frozenset({Trait.WHIMSY, Trait.MINIMALISM}), "The Cosmic Dreamer"),
    PersonalityPattern(frozenset({Trait.NATURE_AFFINITY, Trait.ELEGANCE}), "The Nature Muse"),
    PersonalityPattern(frozenset({Trait.ELEGANCE, Trait.SOPHISTICATION}), "The Refined Connoisseur"),
    PersonalityPattern(frozenset({Trait.MINIMALISM, Trait.COMPETENCE}), "The Pragmatic Minimalist"),
    PersonalityPattern(frozenset({Trait.ARTISTIC_FLAIR, Trait.COLOR_PLAYFULNESS}), "The Creative Catalyst"),
)

BASIC_PERSONALITY_TYPES: Mapping[Trait, str] = MappingProxyType({
    Trait.BOLDNESS: "The Wild Maverick",
    Trait.ELEGANCE: "The Nature Muse",
    Trait.WHIMSY: "The Gentle Guardian",
    Trait.MINIMALISM: "The Cosmic Dreamer",
    Trait.ARTISTIC_FLAIR: "The Creative Catalyst",
    Trait.NATURE_AFFINITY: "The Nature Muse",
    Trait.EXCITEMENT: "The Untamed Explorer",
    Trait.SOPHISTICATION: "The Refined Connoisseur",
    Trait.COMPETENCE: "The Pragmatic Minimalist",
})


def basic_personality_type(primary_trait: Optional[str]) -> str:
    """Single-trait mapping, with a catch-all for unmapped or missing traits."""
    trait = lookup_trait(primary_trait)
    if trait is None:
        return UNIQUE_INDIVIDUAL
    return BASIC_PERSONALITY_TYPES.get(trait, UNIQUE_INDIVIDUAL)


class PersonalityClassifier:
    """Pure function of a profile; holds only its rule tables."""

    def __init__(self, patterns: tuple[PersonalityPattern, ...] = PERSONALITY_PATTERNS):
        self.patterns = patterns

    def match_pattern(self, profile: PersonalityProfile) -> Optional[PersonalityPattern]:
        top = {lookup_trait(t) for t in profile.dominant_traits[:3]}
        top.discard(None)
        for pattern in self.patterns:
            if pattern.matches(top):
                return pattern
        return None

    def classify(self, profile: PersonalityProfile) -> str:
        if len(profile.dominant_traits) < 2:
            return basic_personality_type(profile.primary_trait)

        pattern = self.match_pattern(profile)
        if pattern is not None:
            return pattern.personality
        return basic_personality_type(profile.primary_trait)
