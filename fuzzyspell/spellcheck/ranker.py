from dataclasses import dataclass
from typing import Mapping

from fuzzyspell.common.config import settings

MAX_RANKED_DISTANCE = 3

METHOD_KNOWN = 0
METHOD_INDEX = 1
METHOD_INPUT_DELETE = 2
METHOD_DELETE_INDEX = 3


@dataclass(frozen=True)
class Potential:
    term: str
    score: int
    leven: int
    method: int


def best(
    query: str,
    potentials: Mapping[str, Potential],
    *,
    first_letter_bonus: int | None = None,
) -> str:
    """Pick the most likely correction, or ``""`` when nothing scores.

    Distances are tried from 0 upward; within a distance the highest score
    wins, and a term sharing the query's first letter has its score boosted
    by ``first_letter_bonus`` times. Equal scores go to the lexically
    smallest term.
    """
    bonus = settings.first_letter_bonus if first_letter_bonus is None else first_letter_bonus
    if bonus < 0:
        raise ValueError(f"first_letter_bonus must not be negative, got {bonus}")
    ordered = [potentials[term] for term in sorted(potentials)]
    initial = query[:1]

    best_term = ""
    best_score = 0
    for distance in range(MAX_RANKED_DISTANCE + 1):
        for pot in ordered:
            if pot.leven == 0:
                return pot.term
            if pot.leven != distance:
                continue
            score = pot.score
            if initial and pot.term[:1] == initial:
                score += score * bonus
            if score > best_score:
                best_score = score
                best_term = pot.term
        if best_score > 0:
            return best_term

    return best_term
