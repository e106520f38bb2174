"""Activation functions used by the network layers."""

from __future__ import annotations

import numpy as np


def _as_result(values: np.ndarray):
    """Return a plain float for scalar input, the array otherwise."""
    if values.ndim == 0:
        return float(values)
    return values


def sigmoid(x):
    """Logistic function 1 / (1 + e^-x), element-wise for arrays."""
    arr = np.asarray(x, dtype=float)
    with np.errstate(over="ignore"):
        result = 1.0 / (1.0 + np.exp(-arr))
    return _as_result(result)


def relu(x):
    """Rectified linear unit: x where x > 0, otherwise 0."""
    arr = np.asarray(x, dtype=float)
    return _as_result(np.where(arr > 0, arr, 0.0))


def relu_derivative(x):
    """Derivative of relu: 1 where x > 0, otherwise 0."""
    arr = np.asarray(x, dtype=float)
    return _as_result(np.where(arr > 0, 1.0, 0.0))