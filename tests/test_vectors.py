import numpy as np
import pytest

from trendwords.vectors import normalize, normalize_dataset, word_to_vector


def test_normalize_lowercases_and_strips_punctuation():
    assert normalize('"Кот!"') == "кот"
    assert normalize("(DATA).") == "data"


def test_normalize_strips_whitespace_after_punctuation():
    # Leading/trailing spaces shield the punctuation from the first strip.
    assert normalize("  Hello! ") == "hello!"


def test_normalize_keeps_inner_punctuation():
    assert normalize("e-mail") == "e-mail"


def test_normalize_of_only_punctuation_is_empty():
    assert normalize("?!...") == ""


def test_word_to_vector_empty_is_zero():
    vector = word_to_vector("")
    assert vector.shape == (60,)
    assert not vector.any()


@pytest.mark.parametrize("word", ["кот", "программа", "data", "ai", "ёжик", "mixсмесь"])
def test_word_to_vector_invariants(word):
    vector = word_to_vector(word)
    assert vector.shape == (60,)
    assert np.all(vector >= 0.0)
    assert np.all(vector <= 1.0)
    assert vector[:59].max() == 1.0


def test_word_to_vector_positions():
    vector = word_to_vector("кот")
    hot = np.flatnonzero(vector[:59])
    assert hot.tolist() == [10, 14, 18]


def test_word_to_vector_yo_and_latin_positions():
    assert word_to_vector("ё")[32] == 1.0
    assert word_to_vector("a")[33] == 1.0
    assert word_to_vector("z")[58] == 1.0


def test_word_to_vector_scales_by_most_frequent_letter():
    vector = word_to_vector("aab")
    assert vector[33] == 1.0
    assert vector[34] == 0.5


def test_word_to_vector_length_feature_is_capped():
    assert word_to_vector("x" * 50)[59] == 1.0


def test_word_to_vector_length_uses_utf8_bytes():
    latin = word_to_vector("ab")[59]
    cyrillic = word_to_vector("аб")[59]
    assert cyrillic == pytest.approx(2 * latin)


def test_word_to_vector_ignores_other_characters():
    assert not word_to_vector("123")[:59].any()


def test_normalize_dataset_scales_columns():
    result = normalize_dataset([[1.0, 5.0], [3.0, 5.0], [2.0, 5.0]])
    assert result[:, 0].min() == 0.0
    assert result[:, 0].max() == 1.0
    assert result[2, 0] == pytest.approx(0.5)
    assert result[:, 1].tolist() == [5.0, 5.0, 5.0]


def test_normalize_dataset_does_not_modify_input():
    data = np.array([[0.0, 2.0], [4.0, 6.0]])
    original = data.copy()
    normalize_dataset(data)
    assert np.array_equal(data, original)


def test_normalize_dataset_rejects_empty():
    with pytest.raises(ValueError):
        normalize_dataset([])