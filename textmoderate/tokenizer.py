"""
Tokenizer used by sentiment scoring.

WHAT:
  - lowercasing, newline -> space, punctuation -> space, whitespace split.
  - apostrophes and hyphens stay inside tokens ("don't", "well-being") so
    negators survive tokenization.

WHY:
  - The blacklist filter splits text its own way; this one only feeds the
    label lookup, so it can be aggressive about punctuation.
"""

import re
from typing import List

NEWLINE_RE = re.compile(r"[\r\n]+")
PUNCT_RE = re.compile(r"[.,/#!?$%^&*;:{}=_`\"~()]")


def tokenize(text: str) -> List[str]:
    t = (text or "").lower()
    t = NEWLINE_RE.sub(" ", t)
    t = PUNCT_RE.sub(" ", t)
    return t.split()
