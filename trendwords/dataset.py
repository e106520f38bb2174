"""Loading labelled word datasets from CSV files."""

from __future__ import annotations

import csv
import logging

import numpy as np

from .vectors import VECTOR_SIZE, normalize, word_to_vector

logger = logging.getLogger(__name__)

_PREVIEW_RECORDS = 5


class DatasetError(ValueError):
    """Raised when a dataset file cannot be parsed."""


def is_non_informative(word: str) -> bool:
    """True when the word holds no Cyrillic (а..я, ё) or Latin (a..z) letter."""
    return not any(
        "а" <= char <= "я" or char == "ё" or "a" <= char <= "z" for char in word
    )


def load_dataset(filename) -> tuple[np.ndarray, np.ndarray]:
    """Read ``word,label`` rows and return (vectors, labels).

    Rows whose word is empty or non-informative after normalisation are
    skipped. Raises OSError if the file cannot be opened and DatasetError for
    malformed CSV or labels.
    """
    vectors: list[np.ndarray] = []
    labels: list[float] = []

    with open(filename, newline="", encoding="utf-8") as handle:
        try:
            rows = [row for row in csv.reader(handle) if row]
        except csv.Error as exc:
            raise DatasetError(f"malformed CSV in {filename}: {exc}") from exc

    expected_fields = len(rows[0]) if rows else 0
    for index, record in enumerate(rows):
        if len(record) != expected_fields:
            raise DatasetError(
                f"record {index}: wrong number of fields "
                f"(expected {expected_fields}, got {len(record)})"
            )
        if len(record) < 2:
            raise DatasetError(f"record {index}: expected a word and a label")

    for index, record in enumerate(rows):
        word = normalize(record[0])
        if not word or is_non_informative(word):
            logger.info("skipping non-informative word %r in record %d", record[0], index)
            continue

        vector = word_to_vector(word)
        try:
            label = float(record[1])
        except ValueError as exc:
            raise DatasetError(f"record {index}: invalid label {record[1]!r}") from exc

        if index < _PREVIEW_RECORDS:
            logger.debug("word %d: %r, vector: %s, label: %s", index, word, vector, label)
        vectors.append(vector)
        labels.append(label)

    if not vectors:
        return np.zeros((0, VECTOR_SIZE)), np.zeros(0)
    return np.vstack(vectors), np.asarray(labels, dtype=float)