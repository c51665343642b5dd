import math

import numpy as np
import pytest

from dreamnet.nn import (
    averaged_loss,
    fc,
    fc_gradient,
    sigmoid,
    sigmoid_gradient,
    softmax_with_loss,
    softmax_with_loss_gradient,
    squared_l2_distance,
    squared_l2_distance_gradient,
    step_learning_rate,
)


def _numeric(fn, array, eps=1e-2):
    grad = np.zeros_like(array, dtype=np.float64)
    for idx in np.ndindex(array.shape):
        up = array.copy()
        down = array.copy()
        up[idx] += eps
        down[idx] -= eps
        grad[idx] = (fn(up) - fn(down)) / (2 * eps)
    return grad


@pytest.fixture
def rng():
    return np.random.default_rng(3)


def test_fc_shape_and_bias_only():
    x = np.zeros((3, 4), dtype=np.float32)
    w = np.ones((2, 4), dtype=np.float32)
    b = np.array([0.5, -1.0], dtype=np.float32)
    out = fc(x, w, b)
    assert out.shape == (3, 2)
    assert np.allclose(out, np.tile(b, (3, 1)))


def test_fc_flattens_items(rng):
    x = rng.standard_normal((2, 2, 3)).astype(np.float32)
    w = rng.standard_normal((5, 6)).astype(np.float32)
    b = np.zeros(5, dtype=np.float32)
    assert np.allclose(fc(x, w, b), fc(x.reshape(2, 6), w, b))


def test_fc_shape_mismatch():
    with pytest.raises(ValueError):
        fc(np.zeros((2, 3)), np.zeros((4, 5)), np.zeros(4))
    with pytest.raises(ValueError):
        fc(np.zeros((2, 3)), np.zeros((4, 3)), np.zeros(2))


def test_fc_gradient_matches_numeric(rng):
    x = rng.standard_normal((3, 4)).astype(np.float32)
    w = rng.standard_normal((2, 4)).astype(np.float32)
    b = rng.standard_normal(2).astype(np.float32)
    dy = rng.standard_normal((3, 2)).astype(np.float32)
    dw, db, dx = fc_gradient(x, w, dy)

    def objective_w(wv):
        return float((fc(x, wv, b) * dy).sum())

    def objective_b(bv):
        return float((fc(x, w, bv) * dy).sum())

    def objective_x(xv):
        return float((fc(xv, w, b) * dy).sum())

    assert np.allclose(dw, _numeric(objective_w, w), atol=1e-2)
    assert np.allclose(db, _numeric(objective_b, b), atol=1e-2)
    assert np.allclose(dx, _numeric(objective_x, x), atol=1e-2)


def test_sigmoid_zero_and_symmetry(rng):
    assert float(sigmoid(0.0)) == 0.5
    x = rng.standard_normal(10).astype(np.float32)
    assert np.allclose(sigmoid(x) + sigmoid(-x), 1.0, atol=1e-6)


def test_sigmoid_gradient_matches_numeric(rng):
    x = rng.standard_normal(5).astype(np.float32)
    dy = rng.standard_normal(5).astype(np.float32)
    grad = sigmoid_gradient(sigmoid(x), dy)
    numeric = _numeric(lambda v: float((sigmoid(v) * dy).sum()), x)
    assert np.allclose(grad, numeric, atol=1e-3)


def test_sigmoid_gradient_shape_mismatch():
    with pytest.raises(ValueError):
        sigmoid_gradient(np.zeros(3), np.zeros(4))


def test_softmax_rows_sum_to_one(rng):
    logits = rng.standard_normal((4, 6)).astype(np.float32)
    probs, loss = softmax_with_loss(logits, [0, 1, 2, 5])
    assert probs.shape == (4, 6)
    assert np.allclose(probs.sum(axis=1), 1.0, atol=1e-6)
    assert loss > 0


def test_softmax_uniform_loss_is_log_classes():
    probs, loss = softmax_with_loss(np.zeros((2, 10)), [3, 7])
    assert np.allclose(probs, 0.1)
    assert loss == pytest.approx(math.log(10), rel=1e-5)


def test_softmax_bad_labels():
    with pytest.raises(ValueError):
        softmax_with_loss(np.zeros((2, 3)), [0, 3])
    with pytest.raises(ValueError):
        softmax_with_loss(np.zeros((2, 3)), [0])


def test_softmax_gradient_matches_numeric(rng):
    logits = rng.standard_normal((3, 4)).astype(np.float32)
    labels = [1, 0, 3]
    probs, _ = softmax_with_loss(logits, labels)
    grad = softmax_with_loss_gradient(probs, labels, 1.0)
    numeric = _numeric(lambda v: softmax_with_loss(v, labels)[1], logits)
    assert np.allclose(grad, numeric, atol=1e-3)
    assert np.allclose(grad.sum(axis=1), 0.0, atol=1e-6)


def test_squared_l2_distance_zero_for_equal(rng):
    a = rng.standard_normal((5, 2)).astype(np.float32)
    assert np.allclose(squared_l2_distance(a, a), 0.0)
    assert squared_l2_distance(a, a).shape == (5,)


def test_squared_l2_distance_symmetric(rng):
    a = rng.standard_normal((4, 3)).astype(np.float32)
    b = rng.standard_normal((4, 3)).astype(np.float32)
    assert np.allclose(squared_l2_distance(a, b), squared_l2_distance(b, a))


def test_squared_l2_distance_gradient(rng):
    a = rng.standard_normal((3, 2)).astype(np.float32)
    b = rng.standard_normal((3, 2)).astype(np.float32)
    dy = rng.standard_normal(3).astype(np.float32)
    da, db = squared_l2_distance_gradient(a, b, dy)
    assert np.allclose(da, -db)
    numeric = _numeric(lambda v: float((squared_l2_distance(v, b) * dy).sum()), a)
    assert np.allclose(da, numeric, atol=1e-2)


def test_squared_l2_distance_shape_mismatch():
    with pytest.raises(ValueError):
        squared_l2_distance(np.zeros((2, 2)), np.zeros((2, 3)))


def test_averaged_loss():
    assert averaged_loss(np.full((4, 4), 2.5)) == pytest.approx(2.5)
    with pytest.raises(ValueError):
        averaged_loss([])


def test_step_learning_rate():
    assert step_learning_rate(-0.1, 19, 20, 0.9) == pytest.approx(-0.1)
    assert step_learning_rate(-0.1, 20, 20, 0.9) == pytest.approx(-0.1 * 0.9)
    assert step_learning_rate(0.5, 7, 1, 1.0) == pytest.approx(0.5)
    with pytest.raises(ValueError):
        step_learning_rate(0.1, 1, 0, 0.9)