#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fuzzyspell.corpus.reader import read_corpus
from fuzzyspell.spellcheck.engine import SpellChecker
from fuzzyspell.spellcheck.model import Model

logging.basicConfig(level=logging.INFO)


def _parse_check(raw: str) -> tuple[str, str]:
    word, sep, expected = raw.partition("=")
    if not sep or not word or not expected:
        raise argparse.ArgumentTypeError(f"expected INPUT=EXPECTED, got {raw!r}")
    return word, expected


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Train a spelling model from a text corpus and correct words."
    )
    parser.add_argument("corpus", help="Path to a plain-text training corpus")
    parser.add_argument("words", nargs="*", help="Words to correct")
    parser.add_argument("--depth", type=int, default=None, help="Deletion rounds to index")
    parser.add_argument("--threshold", type=int, default=None, help="Count at which a term is indexed")
    parser.add_argument(
        "--check",
        action="append",
        type=_parse_check,
        default=[],
        metavar="INPUT=EXPECTED",
        help="Compare the best guess for INPUT against EXPECTED",
    )
    args = parser.parse_args()

    model = Model(depth=args.depth, threshold=args.threshold)
    model.train_many(read_corpus(args.corpus))
    checker = SpellChecker(model)

    for word in args.words:
        print(f"{word} -> {checker.spell_check(word) or '?'}")

    if args.check:
        correct = sum(1 for word, expected in args.check if checker.check_known(word, expected))
        print(f"{correct}/{len(args.check)} known corrections matched")


if __name__ == "__main__":
    main()
