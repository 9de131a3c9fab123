"""
Graph loading

Reads graph documents from disk or over HTTP. This is the only part of the
package outside the CLI that performs I/O.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from .config import config
from .quiz.sample import sample_graph
from .quiz.schema import QuizError, QuizGraph

logger = logging.getLogger(__name__)


class GraphLoadError(QuizError):
    """Graph document could not be read or fetched."""
    pass


def load_quiz_graph(path: Union[str, Path]) -> QuizGraph:
    """
    Load a graph document from a JSON file.

    Raises:
        GraphLoadError: File missing or unreadable
        GraphFormatError: File is not a valid graph document
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise GraphLoadError(f"Could not read graph file {file_path}: {e}") from e

    graph = QuizGraph.from_json(text)
    logger.info(f"Loaded {len(graph.nodes)} nodes from {file_path}")
    return graph


def fetch_quiz_graph(
    url: str,
    timeout: Optional[float] = None,
    client: Optional[httpx.Client] = None,
) -> QuizGraph:
    """
    Fetch a graph document over HTTP.

    Args:
        url: Document URL
        timeout: Request timeout in seconds (defaults to config)
        client: Optional pre-configured client (closed by the caller)

    Raises:
        GraphLoadError: Transport error, non-2xx status or non-JSON body
        GraphFormatError: Body is JSON but not a graph document
    """
    timeout = timeout if timeout is not None else config.loader.http_timeout_seconds
    owns_client = client is None
    http = client or httpx.Client(timeout=timeout)

    try:
        response = http.get(url)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        raise GraphLoadError(f"Graph request failed with status {e.response.status_code}: {url}") from e
    except httpx.HTTPError as e:
        raise GraphLoadError(f"Graph request failed: {url}: {e}") from e
    except json.JSONDecodeError as e:
        raise GraphLoadError(f"Graph response is not JSON: {url}") from e
    finally:
        if owns_client:
            http.close()

    graph = QuizGraph.from_dict(data)
    logger.info(f"Fetched {len(graph.nodes)} nodes from {url}")
    return graph


def load_default_graph() -> QuizGraph:
    """Configured file, then configured URL, then the bundled sample."""
    if config.loader.graph_path:
        return load_quiz_graph(config.loader.graph_path)
    if config.loader.graph_url:
        return fetch_quiz_graph(config.loader.graph_url)
    logger.debug("No graph source configured, using bundled sample")
    return sample_graph()
