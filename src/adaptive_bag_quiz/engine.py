"""
Adaptive Quiz Engine

Drives one quiz session turn by turn:
1. Validate the answered node and option
2. Record the answer and apply its trait weights
3. Route to the next question (default or archetype variant)
4. Classify the personality whenever asked

Performs no I/O. Bad input is logged and reported in the result, never raised.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .classifier import PersonalityClassifier
from .config import EngineConfig, config
from .quiz.schema import InvalidReferenceError, QuizGraph, is_terminal_ref
from .router import AdaptiveRouter, RouteDecision
from .scoring import PersonalityProfile, ScoringAccumulator
from .session import QuizResponse, QuizSession

logger = logging.getLogger(__name__)


class StepStatus(str, Enum):
    """Outcome of answering a question."""
    CONTINUE = "continue"
    COMPLETE = "complete"
    INVALID = "invalid"


@dataclass(frozen=True)
class StepResult:
    """Result of `AdaptiveQuizEngine.answer`."""
    status: StepStatus
    next_node_id: Optional[str] = None
    response: Optional[QuizResponse] = None
    decision: Optional[RouteDecision] = None
    error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status != StepStatus.INVALID

    @property
    def is_complete(self) -> bool:
        return self.status == StepStatus.COMPLETE

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "nextNodeId": self.next_node_id,
            "error": self.error,
        }


@dataclass
class PersonalityReport:
    """Classification plus the journey that produced it."""
    personality_type: str
    dominant_traits: list[str]
    all_scores: dict
    total_score: float
    quiz_journey: list[QuizResponse] = field(default_factory=list)
    adaptive_decisions: list[QuizResponse] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "personalityType": self.personality_type,
            "dominantTraits": list(self.dominant_traits),
            "allScores": dict(self.all_scores),
            "totalScore": self.total_score,
            "quizJourney": [r.to_dict() for r in self.quiz_journey],
            "adaptiveDecisions": [r.to_dict() for r in self.adaptive_decisions],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


class AdaptiveQuizEngine:
    """
    Branching personality quiz over a shared, read-only graph.

    Each engine owns exactly one session. Build one engine per quiz taker;
    the graph may be shared across all of them.
    """

    def __init__(
        self,
        graph: QuizGraph,
        engine_config: Optional[EngineConfig] = None,
    ):
        """
        Initialize engine.

        Args:
            graph: Question graph to walk
            engine_config: Optional override of the global engine config
        """
        self.graph = graph
        self.config = engine_config or config.engine
        self.accumulator = ScoringAccumulator(graph.traits, self.config)
        self.router = AdaptiveRouter(graph, self.config)
        self.classifier = PersonalityClassifier()
        self.session = QuizSession(traits=graph.traits, current_node_id=graph.root)

    @classmethod
    def from_dict(cls, data: dict, engine_config: Optional[EngineConfig] = None) -> "AdaptiveQuizEngine":
        return cls(QuizGraph.from_dict(data), engine_config)

    @property
    def scores(self) -> dict:
        return self.session.scores

    @property
    def history(self) -> tuple[QuizResponse, ...]:
        """Read-only view of the recorded answers."""
        return tuple(self.session.history)

    @property
    def question_number(self) -> int:
        return self.session.question_number

    @property
    def current_node_id(self) -> Optional[str]:
        return self.session.current_node_id

    @property
    def is_complete(self) -> bool:
        return bool(self.session.history) and self.session.current_node_id is None

    def answer(self, node_id: str, option_index: int) -> StepResult:
        """
        Answer a question and move on.

        Invalid node IDs or option indexes leave the session untouched and
        come back as StepStatus.INVALID.

        Args:
            node_id: ID of the node being answered
            option_index: Zero-based index of the chosen option

        Returns:
            StepResult with the next node ID when the quiz continues
        """
        try:
            node = self.graph.get_node(node_id)
            option = self.graph.get_option(node_id, option_index)
        except InvalidReferenceError as e:
            logger.error(f"Invalid node or option: {node_id!r} {option_index!r}: {e}")
            return StepResult(status=StepStatus.INVALID, error=str(e))

        response = self.session.record_response(node, option_index, option)
        self.accumulator.apply_weights(self.session.scores, option.weights)

        decision = self.router.route(node, option, self.get_profile(), self.session.question_number)
        if decision.eligible:
            self.session.mark_adaptive(response)

        next_id = decision.next_node_id
        if not is_terminal_ref(next_id) and not self.graph.has_node(next_id):
            logger.warning(f"Node {node.id} option {option_index} points to missing node {next_id!r}, ending quiz")
            next_id = None

        if is_terminal_ref(next_id):
            self.session.current_node_id = None
            return StepResult(status=StepStatus.COMPLETE, response=response, decision=decision)

        self.session.current_node_id = next_id
        return StepResult(
            status=StepStatus.CONTINUE,
            next_node_id=next_id,
            response=response,
            decision=decision,
        )

    def step(self, node_id: str, option_index: int) -> Optional[str]:
        """Next node ID, or None when the quiz is complete or the input was invalid."""
        return self.answer(node_id, option_index).next_node_id

    def get_profile(self) -> PersonalityProfile:
        return self.accumulator.profile(self.session.scores)

    def classify(self) -> str:
        """Personality type for the current scores."""
        return self.classifier.classify(self.get_profile())

    def get_personality_report(self) -> PersonalityReport:
        profile = self.get_profile()
        return PersonalityReport(
            personality_type=self.classifier.classify(profile),
            dominant_traits=list(profile.dominant_traits[: self.config.report_trait_limit]),
            all_scores=dict(profile.scores),
            total_score=profile.total_score,
            quiz_journey=list(self.session.history),
            adaptive_decisions=list(self.session.adaptive_decisions),
        )

    def reset(self) -> None:
        """Discard all answers and start again from the root."""
        self.session.reset(start_node_id=self.graph.root)
