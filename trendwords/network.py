"""A three-layer feed-forward network that scores words as trendy or not."""

from __future__ import annotations

import zipfile
from dataclasses import dataclass

import numpy as np

from .activation import relu, sigmoid
from .dataset import is_non_informative
from .vectors import normalize, word_to_vector

DROPOUT_RATE = 0.1


class NetworkError(ValueError):
    """Raised for malformed networks, inputs or network files."""


@dataclass(eq=False)
class Network:
    """Layer sizes, weight matrices (rows: inputs) and bias vectors."""

    input_size: int
    hidden_size1: int
    hidden_size2: int
    output_size: int
    w1: np.ndarray
    w2: np.ndarray
    w3: np.ndarray
    b1: np.ndarray
    b2: np.ndarray
    b3: np.ndarray

    def forward(self, input, rng=None):
        """Run one pass with dropout; return (hidden1, hidden2, output)."""
        rng = rng if rng is not None else np.random.default_rng()
        x = np.asarray(input, dtype=float)
        if x.shape != (self.input_size,):
            raise NetworkError(
                f"incorrect input vector size: expected {self.input_size}, got {x.size}"
            )
        if len(self.b3) != self.output_size:
            raise NetworkError(
                f"incorrect B3 size: expected {self.output_size}, got {len(self.b3)}"
            )

        hidden1 = _dropout(relu(x @ self.w1 + self.b1), rng)
        hidden2 = _dropout(relu(hidden1 @ self.w2 + self.b2), rng)
        output = sigmoid(hidden2 @ self.w3 + self.b3)
        return hidden1, hidden2, output

    def is_trendy(self, word: str, rng=None) -> bool:
        """True when the network scores the word above 0.5."""
        normalized = normalize(word)
        if not normalized or is_non_informative(normalized):
            return False
        _, _, output = self.forward(word_to_vector(normalized), rng)
        return bool(output[0] > 0.5)

    def copy(self) -> "Network":
        """Return an independent deep copy."""
        return Network(
            self.input_size,
            self.hidden_size1,
            self.hidden_size2,
            self.output_size,
            self.w1.copy(),
            self.w2.copy(),
            self.w3.copy(),
            self.b1.copy(),
            self.b2.copy(),
            self.b3.copy(),
        )


def _dropout(layer: np.ndarray, rng) -> np.ndarray:
    dropped = rng.random(layer.shape) < DROPOUT_RATE
    return np.where(dropped, 0.0, layer / (1 - DROPOUT_RATE))


def new_network(input_size, hidden_size1, hidden_size2, output_size, rng=None) -> Network:
    """Create a network with He-initialised hidden weights and scaled-normal output weights."""
    rng = rng if rng is not None else np.random.default_rng()
    he_w1 = np.sqrt(2.0 / input_size)
    he_w2 = np.sqrt(2.0 / hidden_size1)
    xavier_w3 = np.sqrt(6.0 / (hidden_size2 + output_size))
    return Network(
        input_size=input_size,
        hidden_size1=hidden_size1,
        hidden_size2=hidden_size2,
        output_size=output_size,
        w1=rng.standard_normal((input_size, hidden_size1)) * he_w1,
        w2=rng.standard_normal((hidden_size1, hidden_size2)) * he_w2,
        w3=rng.standard_normal((hidden_size2, output_size)) * xavier_w3,
        b1=rng.standard_normal(hidden_size1) * 0.1,
        b2=rng.standard_normal(hidden_size2) * 0.1,
        b3=rng.standard_normal(output_size) * 0.1,
    )


_ARRAY_FIELDS = ("w1", "w2", "w3", "b1", "b2", "b3")
_SIZE_FIELDS = ("input_size", "hidden_size1", "hidden_size2", "output_size")


def save_network(network: Network, filename) -> None:
    """Write the network to ``filename`` as a NumPy .npz archive."""
    arrays = {name: np.asarray(getattr(network, name), dtype=float) for name in _ARRAY_FIELDS}
    sizes = {name: np.int64(getattr(network, name)) for name in _SIZE_FIELDS}
    with open(filename, "wb") as handle:
        np.savez(handle, **sizes, **arrays)


def load_network(filename) -> Network:
    """Read a network written by save_network and check its dimensions."""
    try:
        handle = open(filename, "rb")
    except OSError as exc:
        raise NetworkError(f"open error: {exc}") from exc

    with handle:
        try:
            archive = np.load(handle, allow_pickle=False)
            if not hasattr(archive, "files"):
                raise NetworkError("decode error: not a network archive")
            with archive:
                sizes = {name: int(archive[name]) for name in _SIZE_FIELDS}
                arrays = {name: np.array(archive[name], dtype=float) for name in _ARRAY_FIELDS}
        except (ValueError, KeyError, EOFError, TypeError, zipfile.BadZipFile) as exc:
            if isinstance(exc, NetworkError):
                raise
            raise NetworkError(f"decode error: {exc}") from exc

    network = Network(**sizes, **arrays)

    if min(sizes.values()) <= 0:
        raise NetworkError(
            "incorrect network size: "
            + ", ".join(f"{name}={value}" for name, value in sizes.items())
        )
    if len(network.b3) != network.output_size:
        raise NetworkError(
            f"incorrect network size: B3: expected {network.output_size}, got {len(network.b3)}"
        )
    if network.w3.ndim != 2 or network.w3.shape != (network.hidden_size2, network.output_size):
        raise NetworkError(
            f"incorrect network size W3: expected "
            f"{network.hidden_size2}x{network.output_size}, got {network.w3.shape}"
        )
    return network