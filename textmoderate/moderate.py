"""
TextModerate: word filtering + sentiment analysis behind one object.

Usage:
    tm = TextModerate(words=["badword"], exclude=["hell"])
    tm.is_profane("what the badword")      # True
    tm.clean("what the badword")           # "what the *******"
    tm.analyze_sentiment("not good").score # -2
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Union

from .blacklist import (
    DEFAULT_PLACEHOLDER,
    DEFAULT_REGEX,
    DEFAULT_REPLACE_REGEX,
    DEFAULT_SPLIT_REGEX,
    BlacklistFilter,
    PatternLike,
)
from .languages import LanguageEntry, LanguageRegistry, default_registry
from .sentiment import AnalysisResult, SentimentAnalyzer
from .toxicity import DEFAULT_ATTRIBUTES, PerspectiveClient
from .wordlists import default_words


class TextModerate:
    def __init__(
        self,
        empty_list: bool = False,
        words: Optional[Iterable[str]] = None,
        exclude: Optional[Iterable[str]] = None,
        placeholder: str = DEFAULT_PLACEHOLDER,
        regex: PatternLike = DEFAULT_REGEX,
        replace_regex: PatternLike = DEFAULT_REPLACE_REGEX,
        split_regex: PatternLike = DEFAULT_SPLIT_REGEX,
        sentiment_options: Optional[Mapping[str, Any]] = None,
        registry: Optional[LanguageRegistry] = None,
        toxicity_client: Optional[PerspectiveClient] = None,
    ):
        base = [] if empty_list else default_words()
        self.filter = BlacklistFilter(
            words=base + list(words or []),
            exclude=exclude or (),
            placeholder=placeholder,
            regex=regex,
            replace_regex=replace_regex,
            split_regex=split_regex,
        )
        self.registry = registry or default_registry()
        self.sentiment = SentimentAnalyzer(self.registry)
        self.sentiment_options: Dict[str, Any] = dict(sentiment_options or {})
        self.toxicity = toxicity_client or PerspectiveClient()
        self._owns_toxicity = toxicity_client is None

    # Filter
    def is_profane(self, text: str) -> bool:
        return self.filter.is_profane(text)

    def replace_word(self, text: str) -> str:
        return self.filter.replace_word(text)

    def clean(self, text: str) -> str:
        return self.filter.clean(text)

    def add_words(self, *words: str):
        self.filter.add_words(*words)

    def remove_words(self, *words: str):
        self.filter.remove_words(*words)

    # Sentiment
    def register_language(self, code: str, entry: Union[LanguageEntry, Mapping]):
        self.registry.register_language(code, entry)

    def get_labels(self, code: str) -> Mapping[str, int]:
        return self.registry.get_labels(code)

    def _sentiment_args(self, language: Optional[str], extras: Optional[Mapping[str, int]]):
        language = language or self.sentiment_options.get("language")
        defaults = self.sentiment_options.get("extras")
        if isinstance(defaults, Mapping):
            extras = {**defaults, **(extras or {})}
        return language, extras

    def analyze_sentiment(
        self,
        phrase: Optional[str] = None,
        language: Optional[str] = None,
        extras: Optional[Mapping[str, int]] = None,
    ) -> AnalysisResult:
        language, extras = self._sentiment_args(language, extras)
        return self.sentiment.analyze(phrase, language, extras)

    async def analyze_sentiment_async(
        self,
        phrase: Optional[str] = None,
        language: Optional[str] = None,
        extras: Optional[Mapping[str, int]] = None,
    ) -> AnalysisResult:
        language, extras = self._sentiment_args(language, extras)
        return await self.sentiment.analyze_async(phrase, language, extras)

    # Toxicity (remote)
    async def analyze_toxicity(self, text: str, api_key: str, attributes: Sequence[str] = DEFAULT_ATTRIBUTES) -> Dict[str, Any]:
        return await self.toxicity.analyze(text, api_key, attributes)

    async def aclose(self):
        """Release the HTTP client of a toxicity client this facade created."""
        if self._owns_toxicity:
            await self.toxicity.aclose()

    async def __aenter__(self) -> "TextModerate":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
