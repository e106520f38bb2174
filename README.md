# trendwords

`trendwords` trains a small neural network to guess whether a word is
"trendy". Each word is turned into a 60-value vector: counts of the Russian
letters `а`–`я`, of `ё` and of the Latin letters `a`–`z`, scaled by the
count of the most frequent letter, plus a length feature (the word's UTF-8
byte length divided by 20, capped at 1). The network has two ReLU hidden
layers with 10% dropout and a sigmoid output. It is trained with Adam,
L2 regularisation and class-weighted cross-entropy for unbalanced data.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Data

Training and validation data are CSV files (UTF-8) with no header. Each
row holds the word and its label (`1` for a trending word, `0` otherwise):

```
нейросеть,1
стол,0
ai,1
```

Words are lower-cased and stripped of surrounding punctuation
(`.,!?-"'()`) and whitespace. Records whose word is then empty or holds no
Russian or Latin letter are skipped (and logged). Blank lines are ignored.
Every row must have the same number of fields, and at least two; a label
that is not a number raises `trendwords.dataset.DatasetError`.

## Commands

### `trendwords-train`

Loads the training and validation CSV files, prints their sizes and class
balance, builds a 60-128-64-1 network, trains it and saves it.

```
trendwords-train
```

Options:

| option | default | meaning |
| --- | --- | --- |
| `--data` | `data/data.csv` | training CSV file |
| `--test` | `data/test.csv` | validation CSV file |
| `--output` | `data/network.npz` | where the final network is saved |
| `--best` | `data/best_network.npz` | where the best network is saved during training |
| `--mode` | `epochs` | `epochs` or `error` (see `TrainMode` below) |
| `--epochs` | `5000` | maximum number of epochs |
| `--target-accuracy` | `95.0` | training accuracy (percent) that stops `error` mode |
| `--learning-rate` | `0.001` | Adam learning rate |
| `--seed` | none | seed for the random generator |

Per-epoch progress is written through `logging`. The command exits with
status 1 if a dataset cannot be read, if either set is empty, or if the
network cannot be saved.

### `trendwords-trends`

Loads a saved network and prints, for each word, the verdict and the
network's output score as a percentage:

```
trendwords-trends
trendwords-trends нейросеть стол --network data/best_network.npz
```

With no words it scores a built-in list of sample words. Options are
`--network` (default `data/network.npz`) and `--seed`. It exits with
status 1 if the network file cannot be loaded.

Dropout is applied on every forward pass, including when scoring, so
results vary between runs unless `--seed` is given. The verdict and the
printed score come from two separate passes.

## Library use

```python
import numpy as np

from trendwords.dataset import load_dataset
from trendwords.network import load_network, new_network, save_network
from trendwords.train import TrainMode, train

rng = np.random.default_rng(0)

vectors, labels = load_dataset("data/data.csv")
val_vectors, val_labels = load_dataset("data/test.csv")

net = new_network(60, 128, 64, 1, rng)
best_accuracy, epochs = train(
    net,
    vectors,
    val_vectors,
    labels,
    val_labels,
    TrainMode.BY_EPOCHS,
    5000,
    95.0,
    0.001,
    "data/best_network.npz",
    rng,
)
save_network(net, "data/network.npz")

restored = load_network("data/network.npz")
print(restored.is_trendy("нейросеть", rng))
```

- `trendwords.vectors`: `normalize`, `word_to_vector`, `normalize_dataset`
  (per-column min-max scaling; constant columns are left unchanged).
- `trendwords.dataset`: `load_dataset` returns `(vectors, labels)` as NumPy
  arrays; `is_non_informative`; `DatasetError`.
- `trendwords.network`: the `Network` dataclass with `forward` (returns the
  two hidden layers and the output), `is_trendy` and `copy`;
  `new_network` (He-scaled hidden weights, small random biases);
  `save_network` / `load_network`, which use a NumPy `.npz` archive;
  `NetworkError`, raised for bad input sizes and for files that cannot be
  opened, decoded or have wrong dimensions.
- `trendwords.train`: `train` and `TrainMode`.

`train` normalises both datasets with `normalize_dataset`, trains the
network in place and returns the best validation accuracy (percent) and
the number of epochs run. `TrainMode.BY_EPOCHS` runs up to `max_epochs`;
`TrainMode.BY_ERROR` also stops once training accuracy reaches
`target_accuracy`. In either mode training stops early when the loss or
the validation accuracy has not improved for 100 epochs. Whenever the
validation accuracy improves the network is written to `best_path`
(pass `None` to skip this), and at the end the network keeps the weights
that scored best on validation.

## What it does not do

The package ships no training data and no pre-trained network: both
commands expect files under `data/` (or the paths given as options).
Networks are stored only in the `.npz` format written by `save_network`.