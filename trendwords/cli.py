"""Command-line entry points: training a network and scoring words."""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from .dataset import DatasetError, load_dataset
from .network import NetworkError, load_network, new_network, save_network
from .train import DEFAULT_BEST_PATH, TrainMode, train
from .vectors import normalize, word_to_vector

DATA_FILE = "data/data.csv"
TEST_FILE = "data/test.csv"
NETWORK_FILE = "data/network.npz"

INPUT_SIZE = 60
HIDDEN_SIZE1 = 128
HIDDEN_SIZE2 = 64
OUTPUT_SIZE = 1

DEFAULT_TEST_WORDS = (
    "кот", "программа", "база", "данные", "it", "идти", "ai", "бегун",
    "лететь", "data", "воздух", "ленивый", "ноутбук", "главные", "метров", "стране",
)


def _percent(part: int, whole: int) -> float:
    return part / whole * 100


def main(argv=None) -> int:
    """Train a network on a CSV dataset and save it."""
    parser = argparse.ArgumentParser(description="Train the trend-word network.")
    parser.add_argument("--data", default=DATA_FILE, help="training CSV file")
    parser.add_argument("--test", default=TEST_FILE, help="validation CSV file")
    parser.add_argument("--output", default=NETWORK_FILE, help="where to save the network")
    parser.add_argument("--best", default=DEFAULT_BEST_PATH, help="where to save the best network")
    parser.add_argument("--mode", choices=[m.value for m in TrainMode], default=TrainMode.BY_EPOCHS.value)
    parser.add_argument("--epochs", type=int, default=5000)
    parser.add_argument("--target-accuracy", type=float, default=95.0)
    parser.add_argument("--learning-rate", type=float, default=0.001)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        vectors, labels = load_dataset(args.data)
    except (OSError, DatasetError) as exc:
        print(f"error loading dataset: {exc}", file=sys.stderr)
        return 1
    print(f"loaded {len(vectors)} samples")

    try:
        val_vectors, val_labels = load_dataset(args.test)
    except (OSError, DatasetError) as exc:
        print(f"error loading validation data: {exc}", file=sys.stderr)
        return 1
    print(f"loaded {len(val_vectors)} validation samples")

    if not len(vectors) or not len(val_vectors):
        print("error: training and validation sets must not be empty", file=sys.stderr)
        return 1

    train_ones = int(np.count_nonzero(labels == 1))
    print(
        f"training set balance: {_percent(train_ones, len(vectors)):.2f}% trends, "
        f"{_percent(len(vectors) - train_ones, len(vectors)):.2f}% non-trends"
    )
    val_ones = int(np.count_nonzero(val_labels == 1))
    print(f"validation set: {_percent(val_ones, len(val_labels)):.2f}% trend words")

    rng = np.random.default_rng(args.seed)
    network = new_network(INPUT_SIZE, HIDDEN_SIZE1, HIDDEN_SIZE2, OUTPUT_SIZE, rng)
    train(
        network, vectors, val_vectors, labels, val_labels, TrainMode(args.mode),
        args.epochs, args.target_accuracy, args.learning_rate, args.best, rng,
    )

    try:
        save_network(network, args.output)
    except OSError as exc:
        print(f"error saving network: {exc}", file=sys.stderr)
        return 1

    print(f"done. the network was saved: {args.output}")
    return 0


def trends_main(argv=None) -> int:
    """Load a saved network and report whether each word is trendy."""
    parser = argparse.ArgumentParser(description="Score words with a trained network.")
    parser.add_argument("words", nargs="*", help="words to score (a built-in list if none)")
    parser.add_argument("--network", default=NETWORK_FILE, help="saved network file")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        network = load_network(args.network)
    except NetworkError as exc:
        print(f"error loading network: {exc}", file=sys.stderr)
        return 1

    rng = np.random.default_rng(args.seed)
    for word in args.words or DEFAULT_TEST_WORDS:
        is_trend = network.is_trendy(word, rng)
        _, _, output = network.forward(word_to_vector(normalize(word)), rng)
        verdict = "is trend" if is_trend else "not trend"
        print(f"word '{word}': {verdict} (accuracy: {output[0] * 100:.2f}%)")
    return 0


if __name__ == "__main__":
    sys.exit(main())