"""
Bundled sample graph

A small adaptive personality graph in the same document shape the web
front end serves. Used by the CLI when no graph source is configured.
"""

from .schema import QuizGraph


STYLE_TRAITS = [
    "Boldness",
    "Elegance",
    "Whimsy",
    "Minimalism",
    "Artistic Flair",
    "Color Playfulness",
    "Nature Affinity",
    "Luxury Leaning",
    "Versatility",
]

AAKER_TRAITS = [
    "Sincerity",
    "Excitement",
    "Competence",
    "Sophistication",
    "Ruggedness",
]


def _option(text: str, next_id, **weights) -> dict:
    return {
        "text": text,
        "next": next_id,
        "weights": {k.replace("_", " "): v for k, v in weights.items()},
    }


SAMPLE_QUIZ = {
    "dimensions": {"style": STYLE_TRAITS, "aaker": AAKER_TRAITS},
    "graph": {
        "root": "Q1",
        "nodes": {
            "Q1": {
                "question": "Which of these qualities feels most aligned with who you truly are?",
                "options": [
                    _option("Adventurous", "Q2A", Boldness=15, Excitement=12, Ruggedness=8),
                    _option("Creative and Artistic", "Q2B", Artistic_Flair=15, Whimsy=10, Color_Playfulness=8),
                    _option("Calm and Grounded", "Q2C", Sincerity=12, Minimalism=10, Nature_Affinity=8),
                    _option("Polished and Refined", "Q2D", Elegance=15, Sophistication=12, Luxury_Leaning=8),
                ],
            },
            "Q2A": {
                "question": "When you picture a perfect day, is it vibrant and bold or serene and tranquil?",
                "options": [
                    _option("Vibrant, bold experiences", "Q3", Boldness=12, Excitement=10, Color_Playfulness=6),
                    _option("Serene, tranquil moments", "Q3", Elegance=12, Sincerity=8, Minimalism=6),
                ],
            },
            "Q2B": {
                "question": "Do you gravitate toward abstract or realistic designs in art?",
                "options": [
                    _option("Abstract", "Q3", Artistic_Flair=12, Whimsy=10, Boldness=6),
                    _option("Realistic", "Q3", Competence=10, Sophistication=8, Artistic_Flair=6),
                ],
            },
            "Q2C": {
                "question": "Where do you recharge best?",
                "options": [
                    _option("A quiet forest trail", "Q3", Nature_Affinity=12, Sincerity=8, Ruggedness=6),
                    _option("A tidy, light-filled room", "Q3", Minimalism=12, Competence=8, Versatility=6),
                ],
            },
            "Q2D": {
                "question": "Which evening sounds most like you?",
                "options": [
                    _option("A gallery opening", "Q3", Sophistication=12, Artistic_Flair=8, Elegance=6),
                    _option("A candlelit dinner", "Q3", Elegance=12, Luxury_Leaning=10, Sincerity=4),
                ],
            },
            "Q3": {
                "question": "How do you choose what to carry each day?",
                "options": [
                    _option("Whatever makes a statement", "Q4", Boldness=8, Color_Playfulness=8),
                    _option("One piece that goes with everything", "Q4", Versatility=10, Minimalism=6),
                    _option("Something with a story behind it", "Q4", Whimsy=8, Nature_Affinity=6),
                ],
            },
            "Q4": {
                "question": "Pick a texture.",
                "options": [
                    _option("Smooth leather", "Q5", Elegance=6, Competence=4),
                    _option("Woven canvas", "Q5", Ruggedness=6, Versatility=4),
                ],
            },
            "Q4_WILD": {
                "question": "Pick a print that matches your energy.",
                "options": [
                    _option("Leopard", "Q5", Boldness=8, Excitement=6),
                    _option("Neon stripes", "Q5", Color_Playfulness=8, Excitement=4),
                ],
            },
            "Q4_ELEGANT": {
                "question": "Which finish feels most like you?",
                "options": [
                    _option("Satin", "Q5", Elegance=8, Luxury_Leaning=6),
                    _option("Matte", "Q5", Minimalism=8, Sophistication=4),
                ],
            },
            "Q4_CREATIVE": {
                "question": "Which artwork would you wear?",
                "options": [
                    _option("A cosmic swirl", "Q5", Whimsy=8, Artistic_Flair=6),
                    _option("A botanical sketch", "Q5", Nature_Affinity=8, Artistic_Flair=4),
                ],
            },
            "Q4_MINIMAL": {
                "question": "What matters most in a bag?",
                "options": [
                    _option("Clean lines", "Q5", Minimalism=8, Competence=4),
                    _option("Smart compartments", "Q5", Competence=8, Versatility=6),
                ],
            },
            "Q5": {
                "question": "Last one: pick a size.",
                "options": [
                    _option("Crossbody", None, Versatility=4),
                    _option("Tote", None, Competence=4),
                    _option("Clutch", "END", Elegance=4),
                ],
            },
        },
    },
}


def sample_graph() -> QuizGraph:
    """Build the sample graph."""
    return QuizGraph.from_dict(SAMPLE_QUIZ)
