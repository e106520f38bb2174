import logging

import numpy as np
import pytest

from trendwords.network import load_network, new_network
from trendwords.train import TrainMode, train


def _data(seed, n_train=8, n_val=20):
    rng = np.random.default_rng(seed)
    x = rng.random((n_train, 60))
    y = np.array([i % 2 for i in range(n_train)], dtype=float)
    vx = rng.random((n_val, 60))
    vy = np.array([i % 2 for i in range(n_val)], dtype=float)
    return x, vx, y, vy


def _net(seed=0):
    return new_network(60, 6, 4, 1, np.random.default_rng(seed))


def test_epochs_mode_runs_all_epochs(tmp_path):
    x, vx, y, vy = _data(1)
    best, epochs = train(
        _net(), x, vx, y, vy, TrainMode.BY_EPOCHS, 3, 95.0, 0.001,
        tmp_path / "best.npz", np.random.default_rng(2),
    )
    assert epochs == 3
    assert 0.0 <= best <= 100.0


def test_error_mode_stops_when_target_reached(tmp_path, caplog):
    x, vx, y, vy = _data(3)
    with caplog.at_level(logging.INFO, logger="trendwords.train"):
        _, epochs = train(
            _net(), x, vx, y, vy, TrainMode.BY_ERROR, 50, 0.0, 0.001,
            tmp_path / "best.npz", np.random.default_rng(4),
        )
    assert epochs == 1
    assert "stop" in caplog.text


def test_mode_accepts_plain_string(tmp_path):
    x, vx, y, vy = _data(5)
    _, epochs = train(
        _net(), x, vx, y, vy, "error", 50, 0.0, 0.001,
        tmp_path / "best.npz", np.random.default_rng(6),
    )
    assert epochs == 1


def test_zero_learning_rate_keeps_weights(tmp_path):
    x, vx, y, vy = _data(7)
    network = _net(8)
    original = network.copy()
    train(
        network, x, vx, y, vy, TrainMode.BY_EPOCHS, 3, 95.0, 0.0,
        tmp_path / "best.npz", np.random.default_rng(9),
    )
    for name in ("w1", "w2", "w3", "b1", "b2", "b3"):
        np.testing.assert_array_equal(getattr(network, name), getattr(original, name))


def test_network_ends_with_best_saved_weights(tmp_path):
    x, vx, y, vy = _data(10)
    network = _net(11)
    best_path = tmp_path / "best.npz"
    best, _ = train(
        network, x, vx, y, vy, TrainMode.BY_EPOCHS, 5, 95.0, 0.01,
        best_path, np.random.default_rng(12),
    )
    assert best > 0.0
    saved = load_network(best_path)
    for name in ("w1", "w2", "w3", "b1", "b2", "b3"):
        np.testing.assert_allclose(getattr(saved, name), getattr(network, name))


def test_training_stops_on_plateau(tmp_path):
    x, vx, y, vy = _data(13, n_train=4, n_val=2)
    _, epochs = train(
        _net(14), x, vx, y, vy, TrainMode.BY_EPOCHS, 10000, 95.0, 0.0,
        tmp_path / "best.npz", np.random.default_rng(15),
    )
    assert 100 <= epochs < 10000


def test_progress_is_logged(tmp_path, caplog):
    x, vx, y, vy = _data(16)
    with caplog.at_level(logging.INFO, logger="trendwords.train"):
        train(
            _net(), x, vx, y, vy, TrainMode.BY_EPOCHS, 2, 95.0, 0.001,
            tmp_path / "best.npz", np.random.default_rng(17),
        )
    assert "epoch 1 of 2" in caplog.text
    assert "epoch 2 of 2" in caplog.text


def test_save_failure_does_not_stop_training(tmp_path, caplog):
    x, vx, y, vy = _data(18)
    with caplog.at_level(logging.INFO, logger="trendwords.train"):
        _, epochs = train(
            _net(), x, vx, y, vy, TrainMode.BY_EPOCHS, 2, 95.0, 0.001,
            tmp_path / "missing" / "best.npz", np.random.default_rng(19),
        )
    assert epochs == 2
    assert "save error" in caplog.text


def test_empty_validation_set_raises(tmp_path):
    x, _, y, _ = _data(20)
    with pytest.raises(ValueError):
        train(
            _net(), x, [], y, [], TrainMode.BY_EPOCHS, 1, 95.0, 0.001,
            tmp_path / "best.npz", np.random.default_rng(21),
        )


def test_label_count_mismatch_raises(tmp_path):
    x, vx, y, vy = _data(22)
    with pytest.raises(ValueError):
        train(
            _net(), x, vx, y[:-1], vy, TrainMode.BY_EPOCHS, 1, 95.0, 0.001,
            tmp_path / "best.npz", np.random.default_rng(23),
        )