"""
Builders for graph documents used across tests.
"""


def option(text, next_id=None, **weights):
    """Option dict with trait names written as keyword args (underscores become spaces)."""
    return {
        "text": text,
        "next": next_id,
        "weights": {k.replace("_", " "): v for k, v in weights.items()},
    }


def question(text, *options):
    return {"question": text, "options": list(options)}
