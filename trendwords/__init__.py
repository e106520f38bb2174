"""A small neural network that classifies words as trending or not: word vectors, CSV datasets, training and commands."""

__version__ = "0.1.0"