"""
Trait scoring

Accumulates weighted answer deltas into per-trait scores and derives the
personality profile (total score and dominant traits) from them.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from .config import EngineConfig, config


def dominant_traits(
    scores: Mapping[str, float],
    order: Sequence[str],
    limit: int = 4,
) -> list[str]:
    """
    Rank positively scored traits.

    Traits sort by score descending; equal scores keep their position in
    `order` (the declared taxonomy order).

    Args:
        scores: Trait name to score
        order: Declared trait order used to break ties
        limit: Maximum traits to return

    Returns:
        Up to `limit` trait names with score > 0
    """
    position = {trait: i for i, trait in enumerate(order)}
    positive = [t for t in scores if scores[t] > 0]
    ranked = sorted(positive, key=lambda t: (-scores[t], position.get(t, len(position))))
    return ranked[:limit]


@dataclass(frozen=True)
class PersonalityProfile:
    """Snapshot of a session's scores. Computed on demand, never cached."""
    total_score: float
    dominant_traits: tuple[str, ...]
    scores: dict = field(default_factory=dict)

    @property
    def primary_trait(self) -> Optional[str]:
        return self.dominant_traits[0] if self.dominant_traits else None

    def to_dict(self) -> dict:
        return {
            "totalScore": self.total_score,
            "dominantTraits": list(self.dominant_traits),
            "scores": dict(self.scores),
        }


class ScoringAccumulator:
    """
    Applies answer weights to running trait scores.

    Only traits in the declared taxonomy are scored. Weight keys outside it
    are dropped without error so older engines survive newer content.
    """

    def __init__(self, traits: Sequence[str], engine_config: Optional[EngineConfig] = None):
        self.traits = tuple(traits)
        self._known = frozenset(self.traits)
        self.config = engine_config or config.engine

    def initial_scores(self) -> dict[str, float]:
        """All declared traits at zero, in declaration order."""
        return {trait: 0 for trait in self.traits}

    def apply_weights(self, scores: dict[str, float], weights: Optional[Mapping[str, float]]) -> None:
        """Add each known trait's delta to its running score."""
        if not weights:
            return
        for trait, delta in weights.items():
            if trait in self._known and trait in scores:
                scores[trait] += delta

    def profile(self, scores: Mapping[str, float]) -> PersonalityProfile:
        """Derive the current profile from a scores mapping."""
        return PersonalityProfile(
            total_score=sum(scores.values()),
            dominant_traits=tuple(
                dominant_traits(scores, self.traits, limit=self.config.max_dominant_traits)
            ),
            scores=dict(scores),
        )
