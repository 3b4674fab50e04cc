import pytest

from writecheck.services.analysis import STOPWORDS, rank_word_frequency


def test_ranking_scenario():
    report = rank_word_frequency("testing testing coding coding coding python")

    assert report.status == "ok"
    assert [(e.word, e.count) for e in report.entries] == [
        ("coding", 3),
        ("testing", 2),
        ("python", 1),
    ]
    assert report.entries[0].percentage == 100.0
    assert report.entries[1].percentage == pytest.approx(200 / 3)


def test_empty_draft_is_distinguished_from_no_words():
    assert rank_word_frequency("").status == "empty"
    assert rank_word_frequency("  ").status == "empty"

    report = rank_word_frequency("The cat is on a mat.")
    assert report.status == "no_words"
    assert report.entries == ()


def test_normalization_strips_non_letters_and_lowercases():
    report = rank_word_frequency("Python, PYTHON! python's 3python")
    assert [(e.word, e.count) for e in report.entries] == [("python", 3), ("pythons", 1)]


def test_short_words_and_stopwords_are_dropped():
    report = rank_word_frequency("should could would there their this that cats dogs")
    assert [e.word for e in report.entries] == ["cats", "dogs"]


def test_ties_keep_first_occurrence_order():
    report = rank_word_frequency("zebra apple mango apple zebra mango kiwis")
    assert [e.word for e in report.entries] == ["zebra", "apple", "mango", "kiwis"]


def test_limited_to_top_ten():
    words = [f"word{chr(ord('a') + i)}" for i in range(15)]
    report = rank_word_frequency(" ".join(words))
    assert len(report.entries) == 10
    assert report.entries[0].word == "worda"


def test_stopword_list_size():
    assert len(STOPWORDS) == 50
    assert "the" in STOPWORDS
    assert "should" in STOPWORDS
