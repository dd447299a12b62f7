import logging
from pathlib import Path

from fastapi import FastAPI, Query
from pydantic import BaseModel

from fuzzyspell.common.config import settings
from fuzzyspell.corpus.reader import load_model
from fuzzyspell.spellcheck.engine import SpellChecker, normalize_word

logger = logging.getLogger(__name__)

app = FastAPI(title="Spellcheck API")


class SpellcheckResponse(BaseModel):
    suggestion: str | None


class SuggestionsResponse(BaseModel):
    suggestions: list[str]


class SpellcheckService:
    def __init__(self, *, corpus_path: Path | None = None, checker: SpellChecker | None = None) -> None:
        self.corpus_path = corpus_path or Path(settings.corpus_path)
        self._checker = checker

    @property
    def checker(self) -> SpellChecker:
        if self._checker is None:
            logger.info("training spellcheck model from %s", self.corpus_path)
            self._checker = SpellChecker(load_model(self.corpus_path))
        return self._checker

    def suggest(self, q: str) -> SpellcheckResponse:
        word = normalize_word(q.strip())
        best = self.checker.spell_check(word)
        if not best or best == word:
            return SpellcheckResponse(suggestion=None)
        return SpellcheckResponse(suggestion=best)

    def candidates(self, q: str, exhaustive: bool) -> SuggestionsResponse:
        return SuggestionsResponse(suggestions=self.checker.suggestions(q.strip(), exhaustive))


spellcheck_service = SpellcheckService()


@app.get("/spellcheck", response_model=SpellcheckResponse)
def spellcheck(
    q: str = Query(..., min_length=1),
) -> SpellcheckResponse:
    return spellcheck_service.suggest(q)


@app.get("/suggestions", response_model=SuggestionsResponse)
def suggestions(
    q: str = Query(..., min_length=1),
    exhaustive: bool = Query(False),
) -> SuggestionsResponse:
    return spellcheck_service.candidates(q, exhaustive)
