from pathlib import Path

from fuzzyspell.corpus.reader import iter_corpus_words, load_model, read_corpus


def test_iter_corpus_words_trims_punctuation_and_case() -> None:
    lines = ["Hello, world!", "  'Quoted' -- text.", "", "it's \"done\"?"]

    assert list(iter_corpus_words(lines)) == ["hello", "world", "quoted", "text", "it's", "done"]


def test_read_corpus(tmp_path: Path) -> None:
    corpus = tmp_path / "big.txt"
    corpus.write_text("The quick brown fox.\nThe lazy dog;\n")

    assert read_corpus(corpus) == ["the", "quick", "brown", "fox", "the", "lazy", "dog"]


def test_load_model_trains_from_file(tmp_path: Path) -> None:
    corpus = tmp_path / "big.txt"
    corpus.write_text("hello " * 6 + "world")

    model = load_model(corpus, depth=2, threshold=4)

    assert model.score("hello") == 6
    assert model.score("world") == 1
    assert model.index_entries("helo") == ["hello"]


def test_load_model_missing_file_is_empty(tmp_path: Path) -> None:
    model = load_model(tmp_path / "missing.txt")

    assert len(model) == 0
