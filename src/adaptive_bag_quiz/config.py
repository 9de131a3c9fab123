"""
adaptive-bag-quiz configuration

Engine tunables, graph sources and logging settings live here.
Environment variables override defaults for deployment flexibility.
"""

import os
from dataclasses import dataclass, field


@dataclass
class EngineConfig:
    """Adaptive routing and classification"""
    adaptation_threshold: float = float(os.getenv("QUIZ_ADAPTATION_THRESHOLD", "25"))
    adaptive_after_question: int = int(os.getenv("QUIZ_ADAPTIVE_AFTER", "2"))
    max_dominant_traits: int = int(os.getenv("QUIZ_MAX_DOMINANT_TRAITS", "4"))
    report_trait_limit: int = int(os.getenv("QUIZ_REPORT_TRAIT_LIMIT", "5"))
    adaptive_routing: bool = os.getenv("QUIZ_ADAPTIVE_ROUTING", "true").lower() == "true"


@dataclass
class LoaderConfig:
    """Where the question graph comes from"""
    graph_path: str = os.getenv("QUIZ_GRAPH_PATH", "")
    graph_url: str = os.getenv("QUIZ_GRAPH_URL", "")
    http_timeout_seconds: float = float(os.getenv("QUIZ_HTTP_TIMEOUT", "10.0"))


@dataclass
class LoggingConfig:
    """Log output for the CLI"""
    level: str = os.getenv("QUIZ_LOG_LEVEL", "WARNING")


@dataclass
class Config:
    """Master config — import this"""
    engine: EngineConfig = field(default_factory=EngineConfig)
    loader: LoaderConfig = field(default_factory=LoaderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Quick presets
    @classmethod
    def linear_mode(cls) -> "Config":
        """Every answer follows its declared next node"""
        cfg = cls()
        cfg.engine.adaptive_routing = False
        return cfg

    @classmethod
    def debug_mode(cls) -> "Config":
        """Verbose logging of routing decisions"""
        cfg = cls()
        cfg.logging.level = "DEBUG"
        return cfg


# Singleton
config = Config()
