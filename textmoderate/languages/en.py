"""Built-in English entry: labels_en.json + negation/intensifier heuristics."""

from . import LanguageEntry, adjacent_token_strategy
from ..wordlists import load_labels

NEGATORS = (
    "not", "no", "never", "none", "nobody", "nothing", "neither", "nor", "without",
    "cannot", "can't", "cant", "don't", "dont", "doesn't", "doesnt", "didn't", "didnt",
    "isn't", "isnt", "aren't", "arent", "wasn't", "wasnt", "weren't", "werent",
    "won't", "wont", "wouldn't", "wouldnt", "shouldn't", "shouldnt", "couldn't", "couldnt",
    "haven't", "havent", "hasn't", "hasnt", "hadn't", "hadnt", "ain't", "aint",
)

INTENSIFIERS = (
    "very", "really", "so", "extremely", "totally", "absolutely", "incredibly",
    "too", "truly", "completely", "utterly",
)

score = adjacent_token_strategy(NEGATORS, INTENSIFIERS)


def entry() -> LanguageEntry:
    return LanguageEntry(load_labels("labels_en"), score)
