"""Packaged word lists and label mappings (built via training/merge_wordlists)."""

import json, os
from typing import Dict, List

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")

DEFAULT_LISTS = ("badwords_en", "badwords_fr")


def _load(name: str) -> Dict:
    path = os.path.join(DATA_DIR, f"{name}.json")
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Word list not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_wordlist(name: str) -> List[str]:
    return [w for w in _load(name).get("words", []) if isinstance(w, str) and w.strip()]


def default_words() -> List[str]:
    """English + French lists, in that order. Duplicates are kept."""
    words: List[str] = []
    for name in DEFAULT_LISTS:
        words.extend(load_wordlist(name))
    return words


def load_labels(name: str) -> Dict[str, int]:
    return {k.lower(): int(v) for k, v in _load(name).get("labels", {}).items()}
