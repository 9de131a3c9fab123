"""
Quiz session state

One session per quiz taker: running scores, the append-only answer
history and the question counter. Sessions share nothing with each
other; the graph they walk is read-only.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping, Optional

from .quiz.schema import AnswerOption, QuestionNode


@dataclass(frozen=True)
class QuizResponse:
    """A recorded answer."""
    node_id: str
    option_index: int
    question: str
    selected_text: str
    weights: Mapping[str, float]
    question_number: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "nodeId": self.node_id,
            "optionIndex": self.option_index,
            "question": self.question,
            "selectedText": self.selected_text,
            "weights": dict(self.weights),
            "questionNumber": self.question_number,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class QuizSession:
    """
    Mutable per-user state.

    Starts with every declared trait at zero, an empty history and
    question 1. `record_response` is the only way to add history.
    """
    traits: tuple[str, ...]
    scores: dict = field(default_factory=dict)
    history: list[QuizResponse] = field(default_factory=list)
    adaptive_decisions: list[QuizResponse] = field(default_factory=list)
    question_number: int = 1
    current_node_id: Optional[str] = None

    def __post_init__(self):
        if not self.scores:
            self.scores = {trait: 0 for trait in self.traits}

    @property
    def answered_count(self) -> int:
        return len(self.history)

    def record_response(self, node: QuestionNode, option_index: int, option: AnswerOption) -> QuizResponse:
        """Append an answer and advance the question counter."""
        response = QuizResponse(
            node_id=node.id,
            option_index=option_index,
            question=node.question,
            selected_text=option.text,
            weights=dict(option.weights),
            question_number=self.question_number,
        )
        self.history.append(response)
        self.question_number += 1
        return response

    def mark_adaptive(self, response: QuizResponse) -> None:
        """Note that adaptive routing was eligible when this answer was given."""
        self.adaptive_decisions.append(response)

    def reset(self, start_node_id: Optional[str] = None) -> None:
        """Back to the initial state: zero scores, no history, question 1."""
        self.scores = {trait: 0 for trait in self.traits}
        self.history = []
        self.adaptive_decisions = []
        self.question_number = 1
        self.current_node_id = start_node_id
