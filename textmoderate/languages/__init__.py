"""
Language strategy registry.

Maps a language code to a LanguageEntry (label mapping + scoring strategy).
Each registry owns its entries; default_registry() builds one holding the
built-in English and French entries.
"""

import logging, threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Union

from ..errors import ConfigurationError, UnknownLanguageError

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

# (tokens, index, base_score) -> adjusted score
ScoringStrategy = Callable[[Sequence[str], int, int], int]


def passthrough(tokens: Sequence[str], index: int, score: int) -> int:
    return score


@dataclass(frozen=True)
class LanguageEntry:
    labels: Mapping[str, int]
    scoring_strategy: Optional[ScoringStrategy] = None

    def __post_init__(self):
        if not isinstance(self.labels, Mapping):
            raise ConfigurationError("language labels must be a mapping")
        if self.scoring_strategy is not None and not callable(self.scoring_strategy):
            raise ConfigurationError("scoring_strategy must be callable")
        # freeze a private copy so later edits by the caller don't leak in
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def score(self, tokens: Sequence[str], index: int, base: int) -> int:
        strategy = self.scoring_strategy or passthrough
        return strategy(tokens, index, base)


class LanguageRegistry:
    def __init__(self, entries: Optional[Mapping[str, LanguageEntry]] = None):
        self._lock = threading.Lock()
        self._entries: Dict[str, LanguageEntry] = {}
        for code, entry in (entries or {}).items():
            self.register_language(code, entry)

    def register_language(self, code: str, entry: Union[LanguageEntry, Mapping]):
        """Insert or overwrite the entry for `code`. Last writer wins."""
        if not isinstance(code, str) or not code:
            raise ConfigurationError(f"language code must be a non-empty string, got {code!r}")
        if not isinstance(entry, LanguageEntry):
            if not isinstance(entry, Mapping) or "labels" not in entry:
                raise ConfigurationError(f"language {code!r} must define labels")
            entry = LanguageEntry(entry["labels"], entry.get("scoring_strategy"))
        with self._lock:
            self._entries[code] = entry
        logger.debug("registered language %s (%d labels)", code, len(entry.labels))

    def get_entry(self, code: str) -> LanguageEntry:
        try:
            return self._entries[code]
        except KeyError:
            raise UnknownLanguageError(code) from None

    def get_labels(self, code: str) -> Mapping[str, int]:
        return self.get_entry(code).labels

    def apply_scoring_strategy(self, code: str, tokens: Sequence[str], index: int, score: int) -> int:
        if not isinstance(tokens, tuple):
            tokens = tuple(tokens)
        return self.get_entry(code).score(tokens, index, score)

    def languages(self) -> List[str]:
        return sorted(self._entries)

    def __contains__(self, code) -> bool:
        return code in self._entries


def default_registry() -> LanguageRegistry:
    from . import en, fr
    return LanguageRegistry({"en": en.entry(), "fr": fr.entry()})


def adjacent_token_strategy(negators: Sequence[str], intensifiers: Sequence[str] = ()) -> ScoringStrategy:
    """
    Build a strategy that looks one (or two) tokens back:
      "not good" flips the sign, "very good" adds one to the magnitude,
      "not very good" does both.
    """
    negators = frozenset(negators)
    intensifiers = frozenset(intensifiers)

    def apply(tokens: Sequence[str], index: int, score: int) -> int:
        if index <= 0:
            return score
        prev = tokens[index - 1]
        if prev in intensifiers:
            if score > 0:
                score += 1
            elif score < 0:
                score -= 1
            if index > 1 and tokens[index - 2] in negators:
                score = -score
            return score
        if prev in negators:
            return -score
        return score

    return apply
