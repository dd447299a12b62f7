from pathlib import Path

from fastapi.testclient import TestClient

from fuzzyspell.api import main
from fuzzyspell.spellcheck.engine import SpellChecker
from fuzzyspell.spellcheck.model import Model


def _client(monkeypatch) -> TestClient:
    model = Model(depth=2, threshold=4)
    model.train_many(["hello"] * 10 + ["help"] * 10)
    monkeypatch.setattr(main, "spellcheck_service", main.SpellcheckService(checker=SpellChecker(model)))
    return TestClient(main.app)


def test_spellcheck_suggests_correction(monkeypatch) -> None:
    response = _client(monkeypatch).get("/spellcheck", params={"q": "Helo"})

    assert response.status_code == 200
    assert response.json() == {"suggestion": "hello"}


def test_spellcheck_known_word_has_no_suggestion(monkeypatch) -> None:
    response = _client(monkeypatch).get("/spellcheck", params={"q": "hello"})

    assert response.json() == {"suggestion": None}


def test_spellcheck_requires_query(monkeypatch) -> None:
    response = _client(monkeypatch).get("/spellcheck")

    assert response.status_code == 422


def test_suggestions_lists_candidates(monkeypatch) -> None:
    client = _client(monkeypatch)

    quick = client.get("/suggestions", params={"q": "helo"}).json()["suggestions"]
    full = client.get("/suggestions", params={"q": "helo", "exhaustive": "true"}).json()["suggestions"]

    assert quick == ["hello"]
    assert set(full) == {"hello", "help"}


def test_service_trains_lazily_from_corpus(tmp_path: Path) -> None:
    corpus = tmp_path / "big.txt"
    corpus.write_text("spelling " * 8)
    service = main.SpellcheckService(corpus_path=corpus)

    assert service.suggest("speling").suggestion == "spelling"
    assert service.checker.model.score("spelling") == 8
