from .blacklist import BlacklistFilter
from .errors import ConfigurationError, ModerationError, TransportError, UnknownLanguageError
from .languages import LanguageEntry, LanguageRegistry, default_registry
from .moderate import TextModerate
from .sentiment import AnalysisResult, SentimentAnalyzer
from .tokenizer import tokenize
from .toxicity import PerspectiveClient

__all__ = [
    "AnalysisResult",
    "BlacklistFilter",
    "ConfigurationError",
    "LanguageEntry",
    "LanguageRegistry",
    "ModerationError",
    "PerspectiveClient",
    "SentimentAnalyzer",
    "TextModerate",
    "TransportError",
    "UnknownLanguageError",
    "default_registry",
    "tokenize",
]
