"""
Command-line interface for adaptive-bag-quiz

Take the personality quiz in the terminal, replay a scripted set of
answers, or check a graph document for authoring mistakes.
"""

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional

from .config import config
from .engine import AdaptiveQuizEngine, PersonalityReport, StepStatus
from .loader import fetch_quiz_graph, load_default_graph, load_quiz_graph
from .quiz.sample import sample_graph
from .quiz.schema import QuizError, QuizGraph, validate_graph


def resolve_graph(args: argparse.Namespace) -> QuizGraph:
    """Pick the graph source from command-line flags, falling back to config."""
    if getattr(args, "graph", None):
        return load_quiz_graph(args.graph)
    if getattr(args, "url", None):
        return fetch_quiz_graph(args.url)
    if getattr(args, "sample", False):
        return sample_graph()
    return load_default_graph()


def format_report(report: PersonalityReport) -> str:
    """Format a personality report for terminal output."""
    lines = [
        "",
        "=" * 60,
        "YOUR PERSONALITY",
        "=" * 60,
        f"\n  {report.personality_type}",
        "",
    ]

    if report.dominant_traits:
        lines.append("  Dominant traits:")
        for i, trait in enumerate(report.dominant_traits, 1):
            lines.append(f"    {i}. {trait} ({report.all_scores.get(trait, 0):g})")
    else:
        lines.append("  No dominant traits yet")

    lines.append(f"\n  Total score: {report.total_score:g}")
    lines.append(f"  Questions answered: {len(report.quiz_journey)}")
    lines.append(f"  Adaptive decisions: {len(report.adaptive_decisions)}")
    lines.append("")
    return "\n".join(lines)


def print_report(report: PersonalityReport, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_report(report))


def play_quiz(engine: AdaptiveQuizEngine, input_fn: Optional[Callable[[str], str]] = None) -> bool:
    """
    Interactive loop: show each question, read an option number.

    Returns:
        True if the quiz was completed, False if the user quit
    """
    input_fn = input_fn or input
    node_id = engine.current_node_id
    while node_id is not None:
        node = engine.graph.get_node(node_id)
        print(f"\nQ{engine.question_number}. {node.question}")
        for i, option in enumerate(node.options, 1):
            print(f"  {i}) {option.text}")

        try:
            raw = input_fn("Your choice (q to quit): ").strip()
        except EOFError:
            return False
        if raw.lower() in ("q", "quit", "exit"):
            return False
        if not raw.isdecimal() or not raw.isascii():
            print("Please enter an option number.")
            continue

        result = engine.answer(node_id, int(raw) - 1)
        if result.status == StepStatus.INVALID:
            print(f"Invalid choice: {raw}")
            continue
        node_id = result.next_node_id

    return True


def run_answers(engine: AdaptiveQuizEngine, answers: List[int]) -> Optional[str]:
    """
    Replay answer indexes from the root.

    Returns:
        Error message if an answer was invalid, else None
    """
    node_id = engine.current_node_id
    for n, option_index in enumerate(answers, 1):
        if node_id is None:
            return f"Quiz ended after {n - 1} answers; {len(answers) - n + 1} left over"
        result = engine.answer(node_id, option_index)
        if result.status == StepStatus.INVALID:
            return f"Answer {n}: {result.error}"
        node_id = result.next_node_id
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adaptive-bag-quiz",
        description="Adaptive handbag personality quiz",
        epilog="Example: adaptive-bag-quiz run --sample --answers 0 0 0 1 0",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log routing decisions"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_source(sub: argparse.ArgumentParser) -> None:
        source = sub.add_mutually_exclusive_group()
        source.add_argument("--graph", help="Path to a graph JSON document")
        source.add_argument("--url", help="URL of a graph JSON document")
        source.add_argument("--sample", action="store_true", help="Use the bundled sample graph")

    # Play command
    play_parser = subparsers.add_parser("play", help="Take the quiz interactively")
    add_source(play_parser)
    play_parser.add_argument("--json", action="store_true", help="Output report as JSON")

    # Run command
    run_parser = subparsers.add_parser("run", help="Replay scripted answers")
    add_source(run_parser)
    run_parser.add_argument(
        "--answers",
        nargs="+",
        type=int,
        required=True,
        help="Zero-based option index for each question in turn"
    )
    run_parser.add_argument("--json", action="store_true", help="Output report as JSON")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check a graph document")
    add_source(validate_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else config.logging.level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        graph = resolve_graph(args)
    except QuizError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "validate":
        is_valid, errors = validate_graph(graph)
        if is_valid:
            print(f"OK: {len(graph.nodes)} nodes, {len(graph.traits)} traits, root {graph.root}")
            return 0
        print(f"{len(errors)} problem(s) found:")
        for error in errors:
            print(f"  - {error}")
        return 1

    if not graph.has_node(graph.root):
        print(f"Error: graph has no start node (root {graph.root!r})", file=sys.stderr)
        return 1

    engine = AdaptiveQuizEngine(graph)

    if args.command == "play":
        if not play_quiz(engine):
            print("\nQuiz not finished.")
            return 1
        print_report(engine.get_personality_report(), as_json=args.json)
        return 0

    if args.command == "run":
        error = run_answers(engine, args.answers)
        if error:
            print(f"Error: {error}", file=sys.stderr)
            return 2
        print_report(engine.get_personality_report(), as_json=args.json)
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
