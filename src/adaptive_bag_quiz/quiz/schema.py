"""
Quiz graph schema and data structures

Defines the read-only question graph the engine walks: question nodes,
weighted answer options and the declared trait taxonomy.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional
import json


TERMINAL_MARKER = "END"
DEFAULT_ROOT = "Q1"


class QuizError(Exception):
    """Base exception for quiz engine errors."""
    pass


class GraphFormatError(QuizError):
    """Graph document cannot be turned into a QuizGraph."""
    pass


class InvalidReferenceError(QuizError):
    """Node ID not in the graph, or option index out of range."""

    def __init__(self, message: str, node_id: Any = None, option_index: Any = None):
        super().__init__(message)
        self.node_id = node_id
        self.option_index = option_index


def is_terminal_ref(next_id: Optional[str]) -> bool:
    """Does this `next` value end the quiz?"""
    return next_id is None or next_id == "" or next_id == TERMINAL_MARKER


def _freeze_weights(raw: Any, where: str) -> Mapping[str, float]:
    if raw is None:
        return MappingProxyType({})
    if not isinstance(raw, dict):
        raise GraphFormatError(f"{where}: weights must be an object, got {type(raw).__name__}")
    weights = {}
    for trait, delta in raw.items():
        if isinstance(delta, bool) or not isinstance(delta, (int, float)):
            raise GraphFormatError(f"{where}: weight for '{trait}' is not a number: {delta!r}")
        weights[str(trait)] = delta
    return MappingProxyType(weights)


@dataclass(frozen=True)
class AnswerOption:
    """One selectable answer and the trait deltas it carries."""
    text: str
    next: Optional[str] = None
    weights: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_terminal(self) -> bool:
        return is_terminal_ref(self.next)

    def to_dict(self) -> dict:
        result = {"text": self.text, "weights": dict(self.weights)}
        if self.next is not None:
            result["next"] = self.next
        return result

    @classmethod
    def from_dict(cls, data: dict, where: str = "option") -> "AnswerOption":
        if not isinstance(data, dict):
            raise GraphFormatError(f"{where}: option must be an object")
        next_id = data.get("next")
        return cls(
            text=str(data.get("text", "")),
            next=str(next_id) if next_id is not None else None,
            weights=_freeze_weights(data.get("weights"), where),
        )


@dataclass(frozen=True)
class QuestionNode:
    """A question and its ordered answer options."""
    id: str
    question: str
    options: tuple[AnswerOption, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "question": self.question,
            "options": [o.to_dict() for o in self.options],
        }

    @classmethod
    def from_dict(cls, node_id: str, data: dict) -> "QuestionNode":
        if not isinstance(data, dict):
            raise GraphFormatError(f"node '{node_id}': must be an object")
        raw_options = data.get("options", [])
        if not isinstance(raw_options, list):
            raise GraphFormatError(f"node '{node_id}': options must be a list")
        options = tuple(
            AnswerOption.from_dict(o, where=f"node '{node_id}' option {i}")
            for i, o in enumerate(raw_options)
        )
        return cls(id=node_id, question=str(data.get("question", "")), options=options)


@dataclass(frozen=True)
class TraitDimensions:
    """
    Declared trait taxonomy.

    Style traits come first, then Aaker brand-personality traits. The
    combined order is the tie-break order for dominant traits.
    """
    style: tuple[str, ...] = ()
    aaker: tuple[str, ...] = ()

    @property
    def all_traits(self) -> tuple[str, ...]:
        """Style then Aaker traits, duplicates keep their first position."""
        seen = []
        for trait in self.style + self.aaker:
            if trait not in seen:
                seen.append(trait)
        return tuple(seen)

    def to_dict(self) -> dict:
        return {"style": list(self.style), "aaker": list(self.aaker)}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "TraitDimensions":
        data = data or {}
        if not isinstance(data, dict):
            raise GraphFormatError("dimensions must be an object")
        for key in ("style", "aaker"):
            if not isinstance(data.get(key) or [], list):
                raise GraphFormatError(f"dimensions.{key} must be a list")
        return cls(
            style=tuple(str(t) for t in data.get("style") or []),
            aaker=tuple(str(t) for t in data.get("aaker") or []),
        )


@dataclass(frozen=True)
class QuizGraph:
    """
    Immutable question graph.

    Built once from a graph document and shared read-only by every
    session that walks it.
    """
    nodes: Mapping[str, QuestionNode]
    dimensions: TraitDimensions = field(default_factory=TraitDimensions)
    root: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.nodes, MappingProxyType):
            object.__setattr__(self, "nodes", MappingProxyType(dict(self.nodes)))
        if self.root is None and self.nodes:
            root = DEFAULT_ROOT if DEFAULT_ROOT in self.nodes else next(iter(self.nodes))
            object.__setattr__(self, "root", root)

    @property
    def traits(self) -> tuple[str, ...]:
        return self.dimensions.all_traits

    def has_node(self, node_id: Optional[str]) -> bool:
        return node_id is not None and node_id in self.nodes

    def get_node(self, node_id: str) -> QuestionNode:
        """Get a node by ID, raising InvalidReferenceError if it doesn't exist."""
        node = self.nodes.get(node_id) if isinstance(node_id, str) else None
        if node is None:
            raise InvalidReferenceError(f"Unknown node: {node_id!r}", node_id=node_id)
        return node

    def get_option(self, node_id: str, option_index: int) -> AnswerOption:
        """Get an option of a node, raising InvalidReferenceError on bad input."""
        node = self.get_node(node_id)
        if (
            isinstance(option_index, bool)
            or not isinstance(option_index, int)
            or not 0 <= option_index < len(node.options)
        ):
            raise InvalidReferenceError(
                f"Invalid option {option_index!r} for node {node_id!r} "
                f"({len(node.options)} options)",
                node_id=node_id,
                option_index=option_index,
            )
        return node.options[option_index]

    def to_dict(self) -> dict:
        return {
            "dimensions": self.dimensions.to_dict(),
            "graph": {
                "root": self.root,
                "nodes": {
                    node_id: {k: v for k, v in node.to_dict().items() if k != "id"}
                    for node_id, node in self.nodes.items()
                },
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuizGraph":
        """Build from a parsed `{dimensions, graph: {root?, nodes}}` document."""
        if not isinstance(data, dict):
            raise GraphFormatError("Graph document must be an object")
        graph = data.get("graph")
        if not isinstance(graph, dict) or not isinstance(graph.get("nodes"), dict):
            raise GraphFormatError("Graph document has no graph.nodes object")

        nodes = {
            str(node_id): QuestionNode.from_dict(str(node_id), node_data)
            for node_id, node_data in graph["nodes"].items()
        }
        root = graph.get("root")
        return cls(
            nodes=nodes,
            dimensions=TraitDimensions.from_dict(data.get("dimensions")),
            root=str(root) if root is not None else None,
        )

    @classmethod
    def from_json(cls, text: str) -> "QuizGraph":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise GraphFormatError(f"Graph document is not valid JSON: {e}") from e
        return cls.from_dict(data)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def validate_graph(graph: QuizGraph) -> tuple[bool, list[str]]:
    """
    Check a graph for authoring mistakes.

    The engine tolerates all of these, so this is advisory.

    Args:
        graph: Graph to check

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors = []
    known_traits = set(graph.traits)

    if not graph.nodes:
        errors.append("Graph has no nodes")
    elif not graph.has_node(graph.root):
        errors.append(f"Root node '{graph.root}' does not exist")

    if not known_traits:
        errors.append("No traits declared in dimensions")

    for node_id, node in graph.nodes.items():
        if not node.options:
            errors.append(f"Node '{node_id}' has no options")
        for i, option in enumerate(node.options):
            if not option.is_terminal and not graph.has_node(option.next):
                errors.append(f"Node '{node_id}' option {i} points to missing node '{option.next}'")
            unknown = [t for t in option.weights if t not in known_traits]
            if known_traits and unknown:
                errors.append(
                    f"Node '{node_id}' option {i} weights unknown traits: {', '.join(unknown)}"
                )

    return (len(errors) == 0, errors)
