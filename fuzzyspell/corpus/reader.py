import logging
from pathlib import Path
from typing import Iterable, Iterator

from nltk.tokenize import WhitespaceTokenizer

from fuzzyspell.spellcheck.model import Model

logger = logging.getLogger(__name__)

TRIM_CHARS = "=+'|_,-!;:\"?."

_tokenizer = WhitespaceTokenizer()


def normalize_token(token: str) -> str:
    return token.strip(TRIM_CHARS).lower()


def iter_corpus_words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        for token in _tokenizer.tokenize(line):
            word = normalize_token(token)
            if word:
                yield word


def read_corpus(path: str | Path) -> list[str]:
    with open(path, encoding="utf-8", errors="ignore") as handle:
        words = list(iter_corpus_words(handle))
    logger.info("read %s words from %s", len(words), path)
    return words


def load_model(path: str | Path, *, depth: int | None = None, threshold: int | None = None) -> Model:
    model = Model(depth=depth, threshold=threshold)
    corpus = Path(path)
    if not corpus.exists():
        logger.warning("training corpus %s not found; serving an empty model", corpus)
        return model
    model.train_many(read_corpus(corpus))
    return model
