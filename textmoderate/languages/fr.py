"""
Built-in French entry.

Besides the adjacent-token rules, an elided "n'" token followed by a negator
is negated ("je n'aime pas" -> -2).
"""

from typing import Sequence

from . import LanguageEntry, adjacent_token_strategy
from ..wordlists import load_labels

NEGATORS = ("pas", "jamais", "plus", "rien", "sans", "aucun", "aucune", "guère")
INTENSIFIERS = ("très", "vraiment", "trop", "tellement", "si", "hyper", "extrêmement")

_adjacent = adjacent_token_strategy(NEGATORS, INTENSIFIERS)


def score(tokens: Sequence[str], index: int, base: int) -> int:
    tok = tokens[index]
    if tok.startswith("n'") and index + 1 < len(tokens) and tokens[index + 1] in NEGATORS:
        return -base
    return _adjacent(tokens, index, base)


def entry() -> LanguageEntry:
    return LanguageEntry(load_labels("labels_fr"), score)
