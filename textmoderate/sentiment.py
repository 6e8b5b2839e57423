"""
Lexicon sentiment scoring.

Tokens are walked from last to first; words/positive/negative/calculation
come out in that order and callers rely on it.
"""

import asyncio
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Mapping, Optional

from .languages import DEFAULT_LANGUAGE, LanguageRegistry
from .tokenizer import tokenize


@dataclass
class AnalysisResult:
    score: int = 0
    comparative: float = 0
    tokens: List[str] = field(default_factory=list)
    words: List[str] = field(default_factory=list)
    positive: List[str] = field(default_factory=list)
    negative: List[str] = field(default_factory=list)
    calculation: List[Dict[str, int]] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


class SentimentAnalyzer:
    def __init__(self, registry: LanguageRegistry):
        self.registry = registry

    def analyze(
        self,
        phrase: Optional[str] = None,
        language: Optional[str] = None,
        extras: Optional[Mapping[str, int]] = None,
    ) -> AnalysisResult:
        code = language or DEFAULT_LANGUAGE
        labels = self.registry.get_labels(code)
        if isinstance(extras, Mapping):
            labels = {**labels, **extras}

        tokens = tokenize(phrase or "")
        frozen = tuple(tokens)
        res = AnalysisResult(tokens=tokens)
        for i in range(len(tokens) - 1, -1, -1):
            tok = tokens[i]
            if tok not in labels:
                continue
            res.words.append(tok)
            s = self.registry.apply_scoring_strategy(code, frozen, i, labels[tok])
            if s > 0:
                res.positive.append(tok)
            elif s < 0:
                res.negative.append(tok)
            res.score += s
            res.calculation.append({tok: s})

        res.comparative = res.score / len(tokens) if tokens else 0
        return res

    async def analyze_async(
        self,
        phrase: Optional[str] = None,
        language: Optional[str] = None,
        extras: Optional[Mapping[str, int]] = None,
    ) -> AnalysisResult:
        """Same as analyze(), but never finishes in the turn that scheduled it."""
        await asyncio.sleep(0)
        return self.analyze(phrase, language, extras)
