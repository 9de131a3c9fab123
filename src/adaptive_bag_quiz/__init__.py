"""
adaptive-bag-quiz: adaptive personality quiz engine for handbag recommendations.

Walks a question graph, accumulates weighted trait scores, adapts the
question path to the emerging personality and classifies the result.
"""

__version__ = "0.1.0"

from .config import config
from .traits import Trait
from .quiz.schema import (
    AnswerOption,
    QuestionNode,
    TraitDimensions,
    QuizGraph,
    QuizError,
    GraphFormatError,
    InvalidReferenceError,
    validate_graph,
)
from .scoring import ScoringAccumulator, PersonalityProfile, dominant_traits
from .router import AdaptiveRouter, Archetype, RouteDecision
from .classifier import PersonalityClassifier
from .session import QuizSession, QuizResponse
from .engine import (
    AdaptiveQuizEngine,
    PersonalityReport,
    StepResult,
    StepStatus,
)
from .loader import GraphLoadError, load_quiz_graph, fetch_quiz_graph

__all__ = [
    # Config
    "config",
    # Graph
    "Trait",
    "AnswerOption",
    "QuestionNode",
    "TraitDimensions",
    "QuizGraph",
    "validate_graph",
    # Errors
    "QuizError",
    "GraphFormatError",
    "InvalidReferenceError",
    "GraphLoadError",
    # Engine parts
    "ScoringAccumulator",
    "PersonalityProfile",
    "dominant_traits",
    "AdaptiveRouter",
    "Archetype",
    "RouteDecision",
    "PersonalityClassifier",
    "QuizSession",
    "QuizResponse",
    # Engine
    "AdaptiveQuizEngine",
    "PersonalityReport",
    "StepResult",
    "StepStatus",
    # Loading
    "load_quiz_graph",
    "fetch_quiz_graph",
]
