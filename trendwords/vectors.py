"""Word normalisation and conversion of words to feature vectors."""

from __future__ import annotations

import numpy as np

VECTOR_SIZE = 60
LETTER_FEATURES = 59

_PUNCTUATION = ".,!?-\"'()"
_CYRILLIC_FIRST = "а"
_CYRILLIC_LAST = "я"
_CYRILLIC_YO = "ё"
_YO_INDEX = 32
_LATIN_OFFSET = 33


def normalize(word: str) -> str:
    """Lower-case a word and strip surrounding punctuation and whitespace."""
    return word.lower().strip(_PUNCTUATION).strip()


def normalize_dataset(dataset) -> np.ndarray:
    """Min-max scale every column to [0, 1]; constant columns are kept as is."""
    data = np.asarray(dataset, dtype=float)
    if data.ndim != 2 or data.shape[0] == 0:
        raise ValueError("dataset must be a non-empty two-dimensional collection")
    mins = data.min(axis=0)
    maxs = data.max(axis=0)
    spread = maxs - mins
    varying = maxs > mins
    safe_spread = np.where(varying, spread, 1.0)
    return np.where(varying, (data - mins) / safe_spread, data)


def word_to_vector(word: str) -> np.ndarray:
    """Turn a word into a 60-element vector of letter frequencies and length.

    Elements 0-31 count Cyrillic а..я, 32 counts ё, 33-58 count Latin a..z;
    the counts are scaled by the largest one. Element 59 is the word's UTF-8
    length divided by 20, capped at 1.
    """
    vector = np.zeros(VECTOR_SIZE, dtype=float)
    if not word:
        return vector

    for char in word:
        if _CYRILLIC_FIRST <= char <= _CYRILLIC_LAST:
            vector[ord(char) - ord(_CYRILLIC_FIRST)] += 1
        elif char == _CYRILLIC_YO:
            vector[_YO_INDEX] += 1
        elif "a" <= char <= "z":
            vector[_LATIN_OFFSET + ord(char) - ord("a")] += 1

    peak = max(1.0, float(vector[:LETTER_FEATURES].max()))
    vector[:LETTER_FEATURES] /= peak
    vector[LETTER_FEATURES] = min(len(word.encode("utf-8")) / 20.0, 1.0)
    return vector