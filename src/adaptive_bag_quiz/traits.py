"""
Trait vocabulary

Names of the style and brand-personality traits that the routing and
classification rule tables refer to. Graph documents declare their own
taxonomy as plain strings; traits that are not listed here still score,
they just never match a rule.
"""

from enum import Enum
from typing import Optional


class Trait(str, Enum):
    """Trait names referenced by the archetype and personality rules."""
    # Style dimensions
    BOLDNESS = "Boldness"
    ELEGANCE = "Elegance"
    WHIMSY = "Whimsy"
    MINIMALISM = "Minimalism"
    ARTISTIC_FLAIR = "Artistic Flair"
    COLOR_PLAYFULNESS = "Color Playfulness"
    NATURE_AFFINITY = "Nature Affinity"
    LUXURY_LEANING = "Luxury Leaning"
    VERSATILITY = "Versatility"

    # Aaker brand-personality dimensions
    SINCERITY = "Sincerity"
    EXCITEMENT = "Excitement"
    COMPETENCE = "Competence"
    SOPHISTICATION = "Sophistication"
    RUGGEDNESS = "Ruggedness"


def lookup_trait(name: Optional[str]) -> Optional[Trait]:
    """Map a trait name from a graph document to a Trait, or None if unknown."""
    if name is None:
        return None
    try:
        return Trait(name)
    except ValueError:
        return None
