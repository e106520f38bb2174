"""Training of a Network with class-weighted cross-entropy and Adam."""

from __future__ import annotations

import enum
import logging
import math

import numpy as np

from .activation import relu_derivative
from .network import Network, save_network
from .vectors import normalize_dataset

logger = logging.getLogger(__name__)

DEFAULT_BEST_PATH = "data/best_network.npz"
PATIENCE = 100
VALIDATION_PATIENCE = 100
L2_LAMBDA = 0.001
BETA1 = 0.9
BETA2 = 0.999
EPSILON = 1e-8
_LOG_GUARD = 1e-10

_PARAMS = ("w3", "b3", "w2", "b2", "w1", "b1")


class TrainMode(str, enum.Enum):
    """When training stops: after the epoch budget, or at a target accuracy."""

    BY_EPOCHS = "epochs"
    BY_ERROR = "error"


def _class_weight(total: float, count: float) -> float:
    return total / (2 * count) if count else math.inf


def _is_correct(score: float, target: float) -> bool:
    return (score > 0.5 and target == 1) or (score <= 0.5 and target == 0)


def _accuracy(network: Network, inputs: np.ndarray, labels: np.ndarray, rng) -> float:
    correct = sum(
        _is_correct(float(network.forward(x, rng)[2][0]), target)
        for x, target in zip(inputs, labels)
    )
    return correct / len(inputs) * 100


def train(
    network: Network,
    dataset,
    val_dataset,
    labels,
    val_labels,
    mode=TrainMode.BY_EPOCHS,
    max_epochs: int = 5000,
    target_accuracy: float = 95.0,
    learning_rate: float = 0.001,
    best_path=DEFAULT_BEST_PATH,
    rng=None,
) -> tuple[float, int]:
    """Train ``network`` in place and leave it holding the best weights seen.

    The best network (by validation accuracy) is written to ``best_path``
    whenever it improves, unless ``best_path`` is None. Returns the best
    validation accuracy in percent and the number of epochs run.
    """
    mode = TrainMode(mode)
    rng = rng if rng is not None else np.random.default_rng()
    logger.info("starting training...")

    train_x = normalize_dataset(dataset)
    val_x = normalize_dataset(val_dataset)
    train_y = np.asarray(labels, dtype=float)
    val_y = np.asarray(val_labels, dtype=float)
    if len(train_y) != len(train_x):
        raise ValueError(
            f"got {len(train_y)} labels for {len(train_x)} training samples"
        )
    if len(val_y) != len(val_x):
        raise ValueError(
            f"got {len(val_y)} labels for {len(val_x)} validation samples"
        )

    n_samples = len(train_x)
    total = float(n_samples)
    trend_count = float(np.count_nonzero(train_y == 1))
    trend_weight = _class_weight(total, trend_count)
    non_trend_weight = _class_weight(total, total - trend_count)

    first_moment = {name: np.zeros_like(getattr(network, name)) for name in _PARAMS}
    second_moment = {name: np.zeros_like(getattr(network, name)) for name in _PARAMS}

    best = network.copy()
    best_loss = math.inf
    best_val_accuracy = 0.0
    no_improvement = 0
    no_val_improvement = 0
    epochs_run = 0

    for epoch in range(max_epochs):
        epochs_run = epoch + 1
        total_loss = 0.0
        correct = 0

        for idx in rng.permutation(n_samples):
            x = train_x[idx]
            target = float(train_y[idx])
            hidden1, hidden2, output = network.forward(x, rng)
            score = float(output[0])

            weight = non_trend_weight if target == 0 else trend_weight
            total_loss += weight * -(
                target * math.log(score + _LOG_GUARD)
                + (1 - target) * math.log(1 - score + _LOG_GUARD)
            )
            if _is_correct(score, target):
                correct += 1

            delta_out = output - target
            delta_h2 = (network.w3 @ delta_out) * relu_derivative(hidden2)
            delta_h1 = (network.w2 @ delta_h2) * relu_derivative(hidden1)

            grads = {
                "w3": np.outer(hidden2, delta_out) + L2_LAMBDA * network.w3,
                "b3": delta_out,
                "w2": np.outer(hidden1, delta_h2) + L2_LAMBDA * network.w2,
                "b2": delta_h2,
                "w1": np.outer(x, delta_h1) + L2_LAMBDA * network.w1,
                "b1": delta_h1,
            }

            step = epoch * n_samples + int(idx) + 1
            m_correction = 1 - BETA1**step
            v_correction = 1 - BETA2**step
            for name, grad in grads.items():
                m = first_moment[name]
                v = second_moment[name]
                m *= BETA1
                m += (1 - BETA1) * grad
                v *= BETA2
                v += (1 - BETA2) * grad * grad
                param = getattr(network, name)
                param -= learning_rate * (m / m_correction) / (
                    np.sqrt(v / v_correction) + EPSILON
                )

        avg_loss = total_loss / n_samples
        accuracy = correct / n_samples * 100
        val_accuracy = _accuracy(network, val_x, val_y, rng)

        if mode is TrainMode.BY_ERROR:
            logger.info(
                "epoch %d, average loss: %.6f, accuracy (train): %.2f%%, "
                "accuracy (validation): %.2f%%",
                epoch + 1, avg_loss, accuracy, val_accuracy,
            )
        else:
            logger.info(
                "epoch %d of %d, average loss: %.6f, accuracy (train): %.2f%%, "
                "accuracy (validation): %.2f%%",
                epoch + 1, max_epochs, avg_loss, accuracy, val_accuracy,
            )

        if val_accuracy > best_val_accuracy:
            best_val_accuracy = val_accuracy
            best = network.copy()
            if best_path is not None:
                try:
                    save_network(network, best_path)
                except OSError as exc:
                    logger.error("save error: %s", exc)
            no_val_improvement = 0
        else:
            no_val_improvement += 1

        if mode is TrainMode.BY_ERROR and accuracy >= target_accuracy:
            logger.info("reached accuracy %.2f%% (train). stop.", accuracy)
            break

        if avg_loss < best_loss:
            best_loss = avg_loss
            no_improvement = 0
        else:
            no_improvement += 1
            if no_improvement >= PATIENCE:
                logger.info("loss did not improve for %d epochs. stop.", PATIENCE)
                break

        if no_val_improvement >= VALIDATION_PATIENCE:
            logger.info(
                "validation accuracy did not improve for %d epochs. stop.",
                VALIDATION_PATIENCE,
            )
            break

    for name in _PARAMS:
        setattr(network, name, getattr(best, name).copy())

    logger.info("finished. best validation accuracy: %.2f%%", best_val_accuracy)
    return best_val_accuracy, epochs_run