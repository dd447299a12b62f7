import logging
from typing import Iterable

from fuzzyspell.common.config import settings
from fuzzyspell.spellcheck.deletes import edits_multi

logger = logging.getLogger(__name__)

MIN_INDEXED_LENGTH = 2


def _validated(name: str, value: int) -> int:
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


class Model:
    """Term counts plus the deletion index built from frequent terms.

    A term is indexed once, at the moment its count reaches ``threshold``:
    every variant of length >= 2 in its ``depth``-round deletion closure maps
    back to it. The index only grows.
    """

    def __init__(self, *, depth: int | None = None, threshold: int | None = None) -> None:
        self.data: dict[str, int] = {}
        self._max_count = 0
        self._suggest: dict[str, list[str]] = {}
        self._indexed: set[str] = set()
        self._depth = _validated("depth", settings.depth if depth is None else depth)
        self._threshold = _validated("threshold", settings.threshold if threshold is None else threshold)

    @property
    def depth(self) -> int:
        return self._depth

    @depth.setter
    def depth(self, value: int) -> None:
        # Changing this after indexing has started leaves older entries at the old depth.
        self._depth = _validated("depth", value)

    @property
    def threshold(self) -> int:
        return self._threshold

    @threshold.setter
    def threshold(self, value: int) -> None:
        self._threshold = _validated("threshold", value)

    @property
    def max_count(self) -> int:
        return self._max_count

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, term: object) -> bool:
        return term in self.data

    def score(self, term: str) -> int:
        return self.data.get(term, 0)

    def index_entries(self, variant: str) -> list[str]:
        return list(self._suggest.get(variant, ()))

    def is_indexed(self, term: str) -> bool:
        return term in self._indexed

    def train(self, term: str) -> None:
        before = self.data.get(term, 0)
        after = before + 1
        self.data[term] = after
        if after > self._max_count:
            self._max_count = after

        if before < self._threshold <= after and term not in self._indexed:
            self._index_term(term)

    def train_many(self, terms: Iterable[str]) -> None:
        trained = 0
        for term in terms:
            self.train(term)
            trained += 1

        logger.info(
            "trained %s tokens: dictionary_terms=%s indexed_terms=%s index_keys=%s",
            trained,
            len(self.data),
            len(self._indexed),
            len(self._suggest),
        )

    def _index_term(self, term: str) -> None:
        for edit in edits_multi(term, self._depth):
            if len(edit) < MIN_INDEXED_LENGTH:
                continue
            bucket = self._suggest.setdefault(edit, [])
            if term not in bucket:
                bucket.append(term)
        self._indexed.add(term)
        logger.debug("indexed %r at count=%s depth=%s", term, self.data[term], self._depth)
