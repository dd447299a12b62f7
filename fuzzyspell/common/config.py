import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    depth: int = int(os.getenv("FUZZY_DEPTH", "2"))
    threshold: int = int(os.getenv("FUZZY_THRESHOLD", "4"))
    first_letter_bonus: int = int(os.getenv("FUZZY_FIRST_LETTER_BONUS", "100"))
    corpus_path: str = os.getenv("FUZZY_CORPUS_PATH", "data/big.txt")


settings = Settings()
