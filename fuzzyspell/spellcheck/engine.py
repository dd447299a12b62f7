import logging
from dataclasses import dataclass

from fuzzyspell.spellcheck.deletes import edits_multi
from fuzzyspell.spellcheck.distance import levenshtein
from fuzzyspell.spellcheck.model import Model
from fuzzyspell.spellcheck.ranker import (
    METHOD_DELETE_INDEX,
    METHOD_INDEX,
    METHOD_INPUT_DELETE,
    METHOD_KNOWN,
    Potential,
    best,
)

logger = logging.getLogger(__name__)

KNOWN_TERM_MIN_SCORE = 5
MIN_DELETE_TERM_LENGTH = 3


def normalize_word(word: str) -> str:
    return (word or "").lower()


def suggest_potential(model: Model, query: str, exhaustive: bool) -> dict[str, Potential]:
    """Collect scored candidates for ``query`` through four cascading lookups.

    0. the query is itself a frequent dictionary term
    1. the query is a deletion-index key
    2. a deletion of the query is a dictionary term
    3. a deletion of the query is an index key, re-checked by edit distance

    Unless ``exhaustive``, the first lookup that finds anything ends the
    search. A term found by an earlier lookup is never replaced.
    """
    query = normalize_word(query)
    suggestions: dict[str, Potential] = {}

    score = model.score(query)
    if score > KNOWN_TERM_MIN_SCORE:
        suggestions[query] = Potential(term=query, score=score, leven=0, method=METHOD_KNOWN)
        if not exhaustive:
            return suggestions

    hits = model.index_entries(query)
    if hits:
        for term in hits:
            if term not in suggestions:
                suggestions[term] = Potential(
                    term=term,
                    score=model.score(term),
                    leven=levenshtein(query, term),
                    method=METHOD_INDEX,
                )
        if not exhaustive:
            return suggestions

    edits = list(dict.fromkeys(edits_multi(query, model.depth)))
    max_score = 0
    for edit in edits:
        score = model.score(edit)
        if score > 0 and len(edit) >= MIN_DELETE_TERM_LENGTH:
            if edit not in suggestions:
                suggestions[edit] = Potential(
                    term=edit,
                    score=score,
                    leven=levenshtein(query, edit),
                    method=METHOD_INPUT_DELETE,
                )
            max_score = max(max_score, score)
    if max_score > 0 and not exhaustive:
        return suggestions

    # The index over-approximates here (e.g. "levals" reaches "valves"), so
    # every hit is re-verified against the real distance.
    max_distance = model.depth + 1
    for edit in edits:
        for term in model.index_entries(edit):
            if term in suggestions:
                continue
            distance = levenshtein(query, term)
            if distance <= max_distance:
                suggestions[term] = Potential(
                    term=term,
                    score=model.score(term),
                    leven=distance,
                    method=METHOD_DELETE_INDEX,
                )

    return suggestions


@dataclass(frozen=True)
class KnownCheck:
    query: str
    expected: str
    best: str
    correct: bool
    expected_in_candidates: bool
    expected_score: int

    def __bool__(self) -> bool:
        return self.correct


class SpellChecker:
    """Query operations over a trained :class:`Model`."""

    def __init__(self, model: Model, *, first_letter_bonus: int | None = None) -> None:
        if first_letter_bonus is not None and first_letter_bonus < 0:
            raise ValueError(f"first_letter_bonus must not be negative, got {first_letter_bonus}")
        self.model = model
        self.first_letter_bonus = first_letter_bonus

    def suggestions(self, query: str, exhaustive: bool = False) -> list[str]:
        return list(suggest_potential(self.model, query, exhaustive))

    def spell_check(self, query: str) -> str:
        """Return the most likely correction, or ``""`` if there is none."""
        potentials = suggest_potential(self.model, query, False)
        return best(normalize_word(query), potentials, first_letter_bonus=self.first_letter_bonus)

    def check_known(self, query: str, expected: str) -> KnownCheck:
        """Compare the best guess for ``query`` against a known answer and log why it missed."""
        potentials = suggest_potential(self.model, query, True)
        guess = best(normalize_word(query), potentials, first_letter_bonus=self.first_letter_bonus)
        expected_score = self.model.score(expected)
        result = KnownCheck(
            query=query,
            expected=expected,
            best=guess,
            correct=guess == expected,
            expected_in_candidates=expected in potentials,
            expected_score=expected_score,
        )

        if result.correct:
            logger.info("%r correctly maps to %r", query, expected)
        elif result.expected_in_candidates:
            logger.warning(
                "%r - %s suggested, should however be %s",
                query,
                potentials.get(guess),
                potentials[expected],
            )
        elif expected_score > 0:
            logger.warning(
                "%r - %r (%s) not in the suggestions, %r best option; candidates: %s",
                query,
                expected,
                expected_score,
                guess,
                list(potentials.values()),
            )
        else:
            logger.warning("%r - not in dictionary", expected)

        return result
