"""
Quiz graph for adaptive-bag-quiz

Read-only question graph, trait taxonomy and the bundled sample graph.
"""

from .schema import (
    AnswerOption,
    QuestionNode,
    TraitDimensions,
    QuizGraph,
    QuizError,
    GraphFormatError,
    InvalidReferenceError,
    is_terminal_ref,
    validate_graph,
)
from .sample import SAMPLE_QUIZ, sample_graph

__all__ = [
    "AnswerOption",
    "QuestionNode",
    "TraitDimensions",
    "QuizGraph",
    "QuizError",
    "GraphFormatError",
    "InvalidReferenceError",
    "is_terminal_ref",
    "validate_graph",
    "SAMPLE_QUIZ",
    "sample_graph",
]
