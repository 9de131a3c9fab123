"""
Tests for graph loading from files and HTTP.
"""

import json

import httpx
import pytest

from adaptive_bag_quiz.config import config
from adaptive_bag_quiz.loader import (
    GraphLoadError,
    fetch_quiz_graph,
    load_default_graph,
    load_quiz_graph,
)
from adaptive_bag_quiz.quiz.sample import SAMPLE_QUIZ
from adaptive_bag_quiz.quiz.schema import GraphFormatError


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(SAMPLE_QUIZ), encoding="utf-8")
    return path


def client_for(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestLoadQuizGraph:
    """Tests for load_quiz_graph."""

    def test_load(self, graph_file):
        graph = load_quiz_graph(graph_file)

        assert graph.root == "Q1"
        assert "Q4_WILD" in graph.nodes

    def test_missing_file(self, tmp_path):
        with pytest.raises(GraphLoadError):
            load_quiz_graph(tmp_path / "missing.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{oops", encoding="utf-8")

        with pytest.raises(GraphFormatError):
            load_quiz_graph(path)


class TestFetchQuizGraph:
    """Tests for fetch_quiz_graph."""

    def test_fetch(self):
        def handler(request):
            assert request.url.path == "/adaptive_personality_only_GRAPH.json"
            return httpx.Response(200, json=SAMPLE_QUIZ)

        with client_for(handler) as client:
            graph = fetch_quiz_graph("https://shop.test/adaptive_personality_only_GRAPH.json", client=client)

        assert len(graph.nodes) == len(SAMPLE_QUIZ["graph"]["nodes"])

    def test_http_error_status(self):
        with client_for(lambda request: httpx.Response(404)) as client:
            with pytest.raises(GraphLoadError, match="404"):
                fetch_quiz_graph("https://shop.test/graph.json", client=client)

    def test_not_json(self):
        with client_for(lambda request: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(GraphLoadError):
                fetch_quiz_graph("https://shop.test/graph.json", client=client)

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with client_for(handler) as client:
            with pytest.raises(GraphLoadError):
                fetch_quiz_graph("https://shop.test/graph.json", client=client)

    def test_json_but_not_graph(self):
        with client_for(lambda request: httpx.Response(200, json={"nodes": []})) as client:
            with pytest.raises(GraphFormatError):
                fetch_quiz_graph("https://shop.test/graph.json", client=client)


class TestLoadDefaultGraph:
    """Tests for load_default_graph."""

    def test_sample_when_unconfigured(self, monkeypatch):
        monkeypatch.setattr(config.loader, "graph_path", "")
        monkeypatch.setattr(config.loader, "graph_url", "")

        graph = load_default_graph()

        assert graph.root == "Q1"

    def test_configured_path(self, monkeypatch, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({
            "dimensions": {"style": ["Boldness"], "aaker": []},
            "graph": {"root": "start", "nodes": {"start": {"question": "?", "options": [{"text": "a"}]}}},
        }), encoding="utf-8")
        monkeypatch.setattr(config.loader, "graph_path", str(path))

        graph = load_default_graph()

        assert graph.root == "start"
