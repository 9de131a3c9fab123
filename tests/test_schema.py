"""
Tests for the quiz graph schema.
"""

import dataclasses

import pytest

from adaptive_bag_quiz.quiz.schema import (
    AnswerOption,
    GraphFormatError,
    InvalidReferenceError,
    QuestionNode,
    QuizGraph,
    TraitDimensions,
    is_terminal_ref,
    validate_graph,
)
from graph_helpers import option, question


class TestAnswerOption:
    """Tests for AnswerOption."""

    def test_from_dict(self):
        """Test deserialization."""
        opt = AnswerOption.from_dict({"text": "Bold", "next": "Q2", "weights": {"Boldness": 10}})

        assert opt.text == "Bold"
        assert opt.next == "Q2"
        assert opt.weights["Boldness"] == 10
        assert opt.is_terminal is False

    def test_missing_weights_and_next(self):
        """Test absent weights and next."""
        opt = AnswerOption.from_dict({"text": "Done"})

        assert dict(opt.weights) == {}
        assert opt.next is None
        assert opt.is_terminal is True

    def test_non_numeric_weight(self):
        """Test non-numeric weight is rejected."""
        with pytest.raises(GraphFormatError):
            AnswerOption.from_dict({"text": "x", "weights": {"Boldness": "lots"}})

    def test_weights_read_only(self):
        """Test weights cannot be mutated."""
        opt = AnswerOption.from_dict({"text": "x", "weights": {"Boldness": 1}})

        with pytest.raises(TypeError):
            opt.weights["Boldness"] = 99


class TestTerminalRefs:
    """Tests for terminal next values."""

    @pytest.mark.parametrize("value", [None, "", "END"])
    def test_terminal(self, value):
        assert is_terminal_ref(value) is True

    def test_node_id_not_terminal(self):
        assert is_terminal_ref("Q4") is False


class TestTraitDimensions:
    """Tests for TraitDimensions."""

    def test_style_before_aaker(self):
        """Test combined order."""
        dims = TraitDimensions.from_dict({"style": ["Boldness", "Whimsy"], "aaker": ["Sincerity"]})

        assert dims.all_traits == ("Boldness", "Whimsy", "Sincerity")

    @pytest.mark.parametrize("key", ["style", "aaker"])
    def test_trait_list_must_be_list(self, key):
        """Test a bare string is rejected rather than split into characters."""
        with pytest.raises(GraphFormatError, match=key):
            TraitDimensions.from_dict({key: "Boldness"})

    def test_duplicates_keep_first_position(self):
        """Test duplicate trait names."""
        dims = TraitDimensions(style=("Minimalism", "Boldness"), aaker=("Boldness", "Competence"))

        assert dims.all_traits == ("Minimalism", "Boldness", "Competence")


class TestQuizGraph:
    """Tests for QuizGraph."""

    def test_from_dict(self, make_graph):
        """Test graph construction."""
        graph = make_graph({
            "Q1": question("First?", option("A", "Q2", Boldness=5)),
            "Q2": question("Second?", option("B")),
        })

        assert set(graph.nodes) == {"Q1", "Q2"}
        assert graph.nodes["Q1"].id == "Q1"
        assert graph.root == "Q1"
        assert "Boldness" in graph.traits

    def test_explicit_root(self, make_graph):
        """Test root from document."""
        graph = make_graph({"Q1": question("?", option("a")), "start": question("?", option("b"))}, root="start")

        assert graph.root == "start"

    def test_root_falls_back_to_first_node(self, make_graph):
        """Test root without Q1."""
        graph = make_graph({"intro": question("?", option("a")), "next": question("?", option("b"))})

        assert graph.root == "intro"

    def test_missing_nodes(self):
        """Test document without graph.nodes."""
        with pytest.raises(GraphFormatError):
            QuizGraph.from_dict({"dimensions": {}, "graph": {}})

    def test_options_not_list(self):
        """Test malformed options."""
        with pytest.raises(GraphFormatError):
            QuizGraph.from_dict({"graph": {"nodes": {"Q1": {"question": "?", "options": "nope"}}}})

    def test_invalid_json(self):
        """Test from_json with bad input."""
        with pytest.raises(GraphFormatError):
            QuizGraph.from_json("{not json")

    def test_immutable(self, make_graph):
        """Test graph cannot be mutated."""
        graph = make_graph({"Q1": question("?", option("a"))})

        with pytest.raises(TypeError):
            graph.nodes["Q2"] = QuestionNode(id="Q2", question="?")
        with pytest.raises(dataclasses.FrozenInstanceError):
            graph.root = "Q2"

    def test_get_option(self, make_graph):
        """Test option lookup."""
        graph = make_graph({"Q1": question("?", option("a", "Q2"), option("b"))})

        assert graph.get_option("Q1", 1).text == "b"

    def test_get_option_unknown_node(self, make_graph):
        """Test unknown node."""
        graph = make_graph({"Q1": question("?", option("a"))})

        with pytest.raises(InvalidReferenceError) as exc_info:
            graph.get_option("Q9", 0)
        assert exc_info.value.node_id == "Q9"

    @pytest.mark.parametrize("index", [2, -1, True, "0", None])
    def test_get_option_bad_index(self, make_graph, index):
        """Test out of range and non-integer indexes."""
        graph = make_graph({"Q1": question("?", option("a"), option("b"))})

        with pytest.raises(InvalidReferenceError):
            graph.get_option("Q1", index)

    def test_round_trip(self, sample):
        """Test to_dict output can rebuild the same graph."""
        rebuilt = QuizGraph.from_dict(sample.to_dict())

        assert rebuilt == sample


class TestValidation:
    """Tests for graph validation."""

    def test_sample_is_valid(self, sample):
        """Test bundled sample passes."""
        is_valid, errors = validate_graph(sample)

        assert is_valid is True
        assert errors == []

    def test_dangling_next(self, make_graph):
        """Test missing successor is reported."""
        graph = make_graph({"Q1": question("?", option("a", "Q7"))})

        is_valid, errors = validate_graph(graph)

        assert is_valid is False
        assert any("Q7" in e for e in errors)

    def test_unknown_trait(self, make_graph):
        """Test undeclared trait is reported."""
        graph = make_graph({"Q1": question("?", option("a", Warmth=3))})

        is_valid, errors = validate_graph(graph)

        assert is_valid is False
        assert any("Warmth" in e for e in errors)

    def test_node_without_options(self, make_graph):
        """Test empty node is reported."""
        graph = make_graph({"Q1": question("?", option("a", "Q2")), "Q2": question("Empty?")})

        is_valid, errors = validate_graph(graph)

        assert is_valid is False
        assert any("no options" in e for e in errors)

    def test_missing_root(self, make_graph):
        """Test root that does not exist."""
        graph = make_graph({"Q1": question("?", option("a"))}, root="START")

        is_valid, errors = validate_graph(graph)

        assert is_valid is False
        assert any("START" in e for e in errors)
