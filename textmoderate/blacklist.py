"""
Blacklist filter: whole-word detection and placeholder masking.

WHAT:
  - plain entries (word characters only) live in a lower-cased set and are
    matched against the text's \\w+ tokens.
  - entries with other characters ("a$$", "blow job") are compiled into one
    case-insensitive alternation guarded by word boundaries; it is rebuilt
    only when such an entry or its exclusion changes.
  - the exclude list always wins over the word list.

WHY:
  - one set lookup per token instead of one regex per blacklist entry per call.
"""

import logging, re, threading
from typing import FrozenSet, Iterable, List, Optional, Pattern, Set, Tuple, Union

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Strips everything that is not a word character, "|", "$" or "@" (plus "_" and "^") before masking.
DEFAULT_REGEX = r"[^\w$@|]|[_^]"
DEFAULT_REPLACE_REGEX = r"\w"
DEFAULT_SPLIT_REGEX = r"\b"
DEFAULT_PLACEHOLDER = "*"

_TOKEN_RE = re.compile(r"\w+")

PatternLike = Union[str, Pattern]


def _compile(pattern: PatternLike, name: str) -> Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as e:
        raise ConfigurationError(f"Invalid {name} pattern {pattern!r}: {e}") from e


def _is_plain(word: str) -> bool:
    return _TOKEN_RE.fullmatch(word) is not None


class BlacklistFilter:
    def __init__(
        self,
        words: Iterable[str] = (),
        exclude: Iterable[str] = (),
        placeholder: str = DEFAULT_PLACEHOLDER,
        regex: PatternLike = DEFAULT_REGEX,
        replace_regex: PatternLike = DEFAULT_REPLACE_REGEX,
        split_regex: PatternLike = DEFAULT_SPLIT_REGEX,
    ):
        placeholder = placeholder or DEFAULT_PLACEHOLDER
        if not isinstance(placeholder, str) or len(placeholder) != 1:
            raise ConfigurationError(f"placeholder must be a single character, got {placeholder!r}")
        self.placeholder = placeholder
        self.regex = _compile(regex or DEFAULT_REGEX, "sanitize")
        self.replace_regex = _compile(replace_regex or DEFAULT_REPLACE_REGEX, "replace")
        self.split_regex = _compile(split_regex or DEFAULT_SPLIT_REGEX, "split")

        self._lock = threading.Lock()
        self._words: List[str] = []
        self._plain: Set[str] = set()
        self._phrases: Set[str] = set()
        self._exclude: Set[str] = {w.lower() for w in exclude}
        self._phrase_re: Optional[Pattern] = None
        self._index(words)
        self._rebuild_phrases()

    # ----- list state -----
    @property
    def words(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._words)

    @property
    def excluded(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._exclude)

    def _index(self, words: Iterable[str]) -> bool:
        """Append to the word list; True if a non-plain entry was added."""
        touched = False
        for w in words:
            self._words.append(w)
            lw = w.lower()
            if not lw:
                continue
            if _is_plain(lw):
                self._plain.add(lw)
            else:
                self._phrases.add(lw)
                touched = True
        return touched

    def _rebuild_phrases(self):
        live = sorted((p for p in self._phrases if p not in self._exclude), key=len, reverse=True)
        if not live:
            self._phrase_re = None
            return
        alts = "|".join(re.escape(p) for p in live)
        self._phrase_re = re.compile(rf"(?<!\w)(?:{alts})(?!\w)", re.IGNORECASE)

    def add_words(self, *words: str):
        """Blacklist words; also lifts any earlier whitelisting of them."""
        with self._lock:
            touched = self._index(words)
            for w in words:
                lw = w.lower()
                if lw in self._exclude:
                    self._exclude.discard(lw)
                    touched = touched or lw in self._phrases
            if touched:
                self._rebuild_phrases()
        logger.debug("add_words: %d word(s), list size now %d", len(words), len(self._words))

    def remove_words(self, *words: str):
        """Whitelist words. The word list itself is left untouched."""
        with self._lock:
            lowered = [w.lower() for w in words]
            self._exclude.update(lowered)
            if any(lw in self._phrases for lw in lowered):
                self._rebuild_phrases()
        logger.debug("remove_words: %d word(s), %d excluded", len(words), len(self._exclude))

    # ----- matching -----
    def is_profane(self, text: str) -> bool:
        plain, exclude = self._plain, self._exclude
        for tok in _TOKEN_RE.findall(text):
            lt = tok.lower()
            if lt in plain and lt not in exclude:
                return True
        phrase_re = self._phrase_re
        return bool(phrase_re and phrase_re.search(text))

    def replace_word(self, text: str) -> str:
        stripped = self.regex.sub("", text)
        return self.replace_regex.sub(lambda _m: self.placeholder, stripped)

    def clean(self, text: str) -> str:
        """
        Mask profane fragments. Every fragment is rejoined with the first
        delimiter the split pattern matched, not the one that was really there.
        """
        m = self.split_regex.search(text)
        joiner = m.group(0) if m else ""
        out = []
        for frag in self.split_regex.split(text):
            frag = frag or ""
            out.append(self.replace_word(frag) if self.is_profane(frag) else frag)
        return joiner.join(out)
