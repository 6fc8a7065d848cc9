#!/usr/bin/env python3
"""Report dictionary entries whose phoneme pairs are missing from the kana table."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from tqdm import tqdm

from kana.mapping import find_uncovered_pairs
from pronunciation.dictionary import DictionaryLoadError, load_pronunciation_dictionary

LOGGER = logging.getLogger("check_coverage")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("dictionary", help="Pronunciation dictionary file")
    parser.add_argument("--encoding", default="utf-8", help="File encoding (default: utf-8)")
    parser.add_argument(
        "--show",
        type=int,
        default=20,
        help="Number of uncovered words to print (default: 20)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s %(message)s")

    try:
        entries = load_pronunciation_dictionary(Path(args.dictionary), encoding=args.encoding)
    except DictionaryLoadError as exc:
        LOGGER.error("%s", exc)
        return 2

    uncovered: dict[str, list[tuple[str, str | None]]] = {}
    pair_counts: Counter[tuple[str, str | None]] = Counter()
    for word, phonemes in tqdm(entries.items(), total=len(entries), desc="Checking", unit="word"):
        missing = find_uncovered_pairs(phonemes)
        if missing:
            uncovered[word] = missing
            pair_counts.update(missing)

    print("\n=== Coverage ===")
    print(f"Entries  : {len(entries)}")
    print(f"Uncovered: {len(uncovered)}")
    for (outer, inner), count in pair_counts.most_common():
        print(f"  ({outer}, {inner or '<isolated>'}) x{count}")
    for word in sorted(uncovered)[: max(0, args.show)]:
        print(f"  {word}: {' '.join(entries[word])}")

    return 1 if uncovered else 0


if __name__ == "__main__":
    raise SystemExit(main())
