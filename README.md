# dreamnet

NumPy implementations of a set of small neural-network operators with their
gradients, two self-contained example trainings, and the size, naming and
layout arithmetic used by image dreaming and image-classifier training runs.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
dreamnet-regression [--steps N] [--seed S]
dreamnet-intro [--rounds N] [--runs N] [--seed S]
```

`dreamnet-regression` fits a linear model `y = x @ W.T + B` to batches of 64
samples drawn from the line with `W = [2.0, 1.5]`, `B = 0.5` plus unit
Gaussian noise. It uses gradient descent with a step learning-rate schedule
(base rate 0.1, multiplied by 0.9 every 20 steps). It prints the weights
before training, one line with the first weight, bias and loss every ten
steps, and then the weights after training next to the ground truth.
`--steps` defaults to 100.

`dreamnet-intro` builds a fully-connected layer followed by a sigmoid and a
softmax with cross-entropy loss, feeds it fresh random batches of 16 rows of
100 features with labels from 0 to 9, and runs the forward and backward pass
`--runs` times (default 10) on each of `--rounds` batches (default 100). The
gradients are computed but no update is applied, so the parameters keep
their initial values. It prints a random 4 x 3 x 2 tensor, then the final
softmax and loss.

The same trainings are available from Python:

```python
from dreamnet.regression import train_toy_regression
from dreamnet.intro import train_intro

result = train_toy_regression(steps=100, seed=0)
print(result.w, result.b, result.history[-1])

intro = train_intro(rounds=100, runs_per_round=10, seed=0)
print(intro.loss)
```

## Operators

Each operator takes array-likes, works in `float32`, and treats the first
axis as the batch.

| Module | Functions |
| --- | --- |
| `dreamnet.affine_scale` | `affine_scale`, `affine_scale_gradient`: per-item `x * scale + mean`, or with `inverse=True` `(x - mean) / (scale + 1e-8)` |
| `dreamnet.back_mean` | `back_mean`, `back_mean_gradient`: mean over the last `count` axes |
| `dreamnet.diagonal` | `diagonal`, `diagonal_gradient`: the diagonal stepping along every axis at once, starting at an offset |
| `dreamnet.mean_stdev` | `mean_stdev`: mean and population standard deviation of each batch item |
| `dreamnet.show_worst` | `find_worst`: the least certain correct item and the most certain incorrect item, as `WorstPicks` with `titles()` |
| `dreamnet.time_plot` | `TimePlot`: collects scalars and emits a `PlotPoint` (mean ± stdev) every `step` values |
| `dreamnet.cout` | `format_tensor`: a printable line of up to `limit` values, with min and max when cut off |

```python
import numpy as np
from dreamnet.mean_stdev import mean_stdev
from dreamnet.affine_scale import affine_scale

x = np.arange(12, dtype=np.float32).reshape(2, 6)
mean, stdev = mean_stdev(x)
normalized = affine_scale(x, mean, stdev, inverse=True)
```

## Helpers

- `dreamnet.nn`: `fc`, `sigmoid`, `softmax_with_loss`,
  `squared_l2_distance` and `averaged_loss`, with `fc_gradient`,
  `sigmoid_gradient`, `softmax_with_loss_gradient` and
  `squared_l2_distance_gradient`, plus `step_learning_rate`.
- `dreamnet.classify`: `top_predictions` returns the classes above a
  probability threshold as `Prediction` records (whole percent, index,
  label), lowest first; `format_predictions` renders them; `read_classes`
  reads class names one per line; `fit_size`, `center_crop_box` and
  `to_nchw` give the resize, centre crop and tensor layout for a square
  network input.
- `dreamnet.digits`: `render_digit` draws a digit image as text, two
  characters per pixel; `predict_label` picks the most likely class.
- `dreamnet.dream`: image-size schedule (`start_image_size`,
  `grow_image_size`), `output_prefix` for written images, and
  `window_layout` for placing the loss and dream windows.
- `dreamnet.train_paths`: `safe_model_name`, `path_prefix`, `db_paths` and
  `model_output_prefix` for naming cached databases and saved models.

## What the package does not do

The package has no network runtime: it does not load or run pre-trained
models, read images or image databases, open windows or draw plots. There is
no command for image classification, digit training, deep dreaming or
training on an image folder; for those, only the helper arithmetic listed
above is provided. There is no squared-L2 or zero-one operator and no
character-level text model.