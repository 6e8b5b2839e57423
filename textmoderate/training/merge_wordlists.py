"""
Merge raw blacklist files into the packaged word-list JSON.

Works with .txt / .csv / .tsv / .gz, header or no header; one entry per row
(first non-empty cell, or the "word"/"term" column when there is a header).
Usage:
  python -m textmoderate.training.merge_wordlists raw/en.txt raw/extra.csv.gz --out textmoderate/data/badwords_en.json
"""
import os, json, argparse, csv, gzip, io, sys
from typing import Iterable, List

HEADER_NAMES = ("word", "words", "term", "terms", "lemma", "badword")

def _open_any(path: str):
    if path.endswith(".gz"):
        return io.TextIOWrapper(gzip.open(path, "rb"), encoding="utf-8", errors="ignore")
    return open(path, "r", encoding="utf-8", errors="ignore")

def _sniff(sample: str) -> str:
    try:
        return csv.Sniffer().sniff(sample, delimiters="\t,;").delimiter
    except csv.Error:
        if "\t" in sample: return "\t"
        if "," in sample: return ","
        return ";"

def read_word_file(path: str) -> List[str]:
    with _open_any(path) as f:
        sample = f.read(4096)
        f.seek(0)
        rows = [r for r in csv.reader(f, delimiter=_sniff(sample)) if any((c or "").strip() for c in r)]

    col = 0
    if rows:
        header = [c.strip().lower() for c in rows[0]]
        for i, name in enumerate(header):
            if name in HEADER_NAMES:
                col = i
                rows = rows[1:]
                break

    out = []
    for r in rows:
        cell = (r[col] if col < len(r) else "").strip()
        if not cell:
            cells = [c.strip() for c in r if (c or "").strip()]
            if not cells: continue
            cell = cells[0]
        if cell.startswith("#"): continue
        out.append(cell.lower())
    return out

def merge(paths: Iterable[str]) -> List[str]:
    """First-seen order, duplicates across files dropped."""
    seen, words = set(), []
    for p in paths:
        for w in read_word_file(p):
            if w not in seen:
                seen.add(w)
                words.append(w)
    return words

def build_wordlist(words: List[str]):
    return {"kind": "wordlist", "version": 1, "words": words}

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("inputs", nargs="+", help="Raw word lists (.txt/.csv/.tsv, optionally .gz)")
    ap.add_argument("--out", default=os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "badwords_custom.json"))
    ap.add_argument("--min-words", type=int, default=20)
    ap.add_argument("--force", action="store_true", help="Write even if fewer than --min-words entries")
    args = ap.parse_args(argv)

    words = merge(args.inputs)
    print(f"Merged {len(words)} words from {len(args.inputs)} file(s).")

    if len(words) < args.min_words and not args.force:
        sys.exit(f"Merged <{args.min_words} words; pass --force if this is intended, or check the input paths/format.")

    os.makedirs(os.path.dirname(os.path.abspath(args.out)), exist_ok=True)
    with open(args.out, "w", encoding="utf-8") as f:
        json.dump(build_wordlist(words), f, ensure_ascii=False, indent=2)
    print(f"Saved {args.out}")

if __name__ == "__main__":
    main()
