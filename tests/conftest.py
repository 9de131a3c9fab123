"""
Shared fixtures for quiz engine tests.
"""

import pytest

from adaptive_bag_quiz.quiz.sample import AAKER_TRAITS, STYLE_TRAITS, sample_graph
from adaptive_bag_quiz.quiz.schema import QuizGraph


@pytest.fixture
def make_graph():
    """Factory building a QuizGraph from a nodes mapping with the standard taxonomy."""
    def _make(nodes, root=None, style=None, aaker=None):
        graph = {"nodes": nodes}
        if root is not None:
            graph["root"] = root
        return QuizGraph.from_dict({
            "dimensions": {
                "style": STYLE_TRAITS if style is None else style,
                "aaker": AAKER_TRAITS if aaker is None else aaker,
            },
            "graph": graph,
        })
    return _make


@pytest.fixture
def sample():
    """The bundled sample graph."""
    return sample_graph()
