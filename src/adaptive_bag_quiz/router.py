"""
Adaptive routing

Chooses the next question. Each answer declares a default successor; once
a session is eligible for adaptation and a personality archetype has
emerged from the two strongest traits, the router swaps in that
archetype's variant of the default question when the graph defines one.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .config import EngineConfig, config
from .quiz.schema import AnswerOption, QuestionNode, QuizGraph
from .scoring import PersonalityProfile
from .traits import Trait, lookup_trait

logger = logging.getLogger(__name__)


MAJOR_BRANCH_POINTS = frozenset({
    "Q1", "Q2A", "Q2B", "Q2C", "Q2D", "Q3A", "Q3B", "Q3C", "Q3D",
})


class Archetype(str, Enum):
    """Coarse personality direction used for path selection."""
    WILD = "wild"
    ELEGANT = "elegant"
    CREATIVE = "creative"
    MINIMALIST = "minimalist"


@dataclass(frozen=True)
class ArchetypeRule:
    """An archetype, the traits that signal it, and its alternate questions."""
    archetype: Archetype
    traits: frozenset
    alternates: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def matches(self, primary: Optional[str], secondary: Optional[str]) -> bool:
        """Either of the two strongest traits belongs to this archetype."""
        return lookup_trait(primary) in self.traits or lookup_trait(secondary) in self.traits

    def alternate_for(self, default_next: Optional[str]) -> Optional[str]:
        if default_next is None:
            return None
        return self.alternates.get(default_next)


# Checked in order; the first match wins even if later rules also match.
ARCHETYPE_RULES: tuple[ArchetypeRule, ...] = (
    ArchetypeRule(
        archetype=Archetype.WILD,
        traits=frozenset({Trait.BOLDNESS, Trait.EXCITEMENT, Trait.RUGGEDNESS, Trait.COLOR_PLAYFULNESS}),
        alternates=MappingProxyType({"Q4": "Q4_WILD", "Q5": "Q5_WILD"}),
    ),
    ArchetypeRule(
        archetype=Archetype.ELEGANT,
        traits=frozenset({Trait.ELEGANCE, Trait.SOPHISTICATION, Trait.LUXURY_LEANING, Trait.MINIMALISM}),
        alternates=MappingProxyType({"Q4": "Q4_ELEGANT", "Q5": "Q5_ELEGANT"}),
    ),
    ArchetypeRule(
        archetype=Archetype.CREATIVE,
        traits=frozenset({Trait.ARTISTIC_FLAIR, Trait.WHIMSY, Trait.COLOR_PLAYFULNESS}),
        alternates=MappingProxyType({"Q4": "Q4_CREATIVE", "Q5": "Q5_CREATIVE"}),
    ),
    ArchetypeRule(
        archetype=Archetype.MINIMALIST,
        traits=frozenset({Trait.MINIMALISM, Trait.COMPETENCE, Trait.SINCERITY, Trait.VERSATILITY}),
        alternates=MappingProxyType({"Q4": "Q4_MINIMAL", "Q5": "Q5_MINIMAL"}),
    ),
)


@dataclass(frozen=True)
class RouteDecision:
    """Outcome of a routing call."""
    next_node_id: Optional[str]
    default_node_id: Optional[str]
    eligible: bool = False
    archetype: Optional[Archetype] = None

    @property
    def overridden(self) -> bool:
        return self.next_node_id != self.default_node_id


class AdaptiveRouter:
    """
    Decides which node follows an answer.

    Stateless apart from the shared read-only graph, so one router can
    serve every session built on that graph.
    """

    def __init__(
        self,
        graph: QuizGraph,
        engine_config: Optional[EngineConfig] = None,
        rules: tuple[ArchetypeRule, ...] = ARCHETYPE_RULES,
        branch_points: frozenset = MAJOR_BRANCH_POINTS,
    ):
        self.graph = graph
        self.config = engine_config or config.engine
        self.rules = rules
        self.branch_points = branch_points

    def is_eligible(self, node_id: str, profile: PersonalityProfile, question_number: int) -> bool:
        """Adaptation applies past the score threshold, at branch points, or after the opening questions."""
        return (
            profile.total_score > self.config.adaptation_threshold
            or node_id in self.branch_points
            or question_number > self.config.adaptive_after_question
        )

    def match_archetype(self, profile: PersonalityProfile) -> Optional[ArchetypeRule]:
        """First rule matching the top two dominant traits, or None with fewer than two."""
        if len(profile.dominant_traits) < 2:
            return None
        primary, secondary = profile.dominant_traits[:2]
        for rule in self.rules:
            if rule.matches(primary, secondary):
                return rule
        return None

    def route(
        self,
        node: QuestionNode,
        option: AnswerOption,
        profile: PersonalityProfile,
        question_number: int,
    ) -> RouteDecision:
        """
        Resolve the next node for an answered question.

        Args:
            node: Node that was just answered
            option: Option that was chosen
            profile: Profile after the option's weights were applied
            question_number: Session counter after recording the answer

        Returns:
            RouteDecision with the chosen and default next node IDs
        """
        default_next = option.next
        eligible = self.is_eligible(node.id, profile, question_number)

        if not eligible or not self.config.adaptive_routing:
            return RouteDecision(next_node_id=default_next, default_node_id=default_next, eligible=eligible)

        rule = self.match_archetype(profile)
        if rule is None:
            return RouteDecision(next_node_id=default_next, default_node_id=default_next, eligible=True)

        candidate = rule.alternate_for(default_next)
        if candidate is None:
            return RouteDecision(
                next_node_id=default_next, default_node_id=default_next,
                eligible=True, archetype=rule.archetype,
            )
        if not self.graph.has_node(candidate):
            logger.debug(f"Alternate node {candidate} for {rule.archetype.value} not in graph, keeping {default_next}")
            return RouteDecision(
                next_node_id=default_next, default_node_id=default_next,
                eligible=True, archetype=rule.archetype,
            )

        logger.debug(f"Adaptive override at {node.id}: {default_next} -> {candidate} ({rule.archetype.value})")
        return RouteDecision(
            next_node_id=candidate, default_node_id=default_next,
            eligible=True, archetype=rule.archetype,
        )

    def next_node(
        self,
        node: QuestionNode,
        option: AnswerOption,
        profile: PersonalityProfile,
        question_number: int,
    ) -> Optional[str]:
        """Next node ID for an answer; None means the option is terminal."""
        return self.route(node, option, profile, question_number).next_node_id
