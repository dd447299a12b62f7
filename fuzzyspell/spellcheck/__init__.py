from .deletes import edits1, edits_multi
from .distance import levenshtein
from .engine import KnownCheck, SpellChecker, normalize_word, suggest_potential
from .model import Model
from .ranker import Potential, best

__all__ = [
    "KnownCheck",
    "Model",
    "Potential",
    "SpellChecker",
    "best",
    "edits1",
    "edits_multi",
    "levenshtein",
    "normalize_word",
    "suggest_potential",
]
