import numpy as np
import pytest

from dreamnet.affine_scale import affine_scale, affine_scale_gradient


@pytest.fixture
def batch():
    rng = np.random.default_rng(3)
    return rng.normal(size=(3, 2, 4)).astype(np.float32)


def test_forward_worked_example():
    x = np.array([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32)
    y = affine_scale(x, [10.0, 0.0], [2.0, 0.5])
    np.testing.assert_allclose(y, [[12.0, 14.0], [1.5, 2.0]])


def test_inverse_undoes_forward(batch):
    mean = [0.5, -1.0, 2.0]
    scale = [1.5, 3.0, 0.25]
    forward = affine_scale(batch, mean, scale)
    back = affine_scale(forward, mean, scale, inverse=True)
    np.testing.assert_allclose(back, batch, rtol=1e-5, atol=1e-5)


def test_identity_parameters(batch):
    y = affine_scale(batch, np.zeros(3), np.ones(3))
    np.testing.assert_allclose(y, batch)
    assert y.shape == batch.shape


def test_gradient_matches_forward_without_mean(batch):
    scale = [1.5, 3.0, 0.25]
    dy = np.ones_like(batch) * 2
    for inverse in (False, True):
        grad = affine_scale_gradient(batch, scale, dy, inverse)
        expected = affine_scale(dy, np.zeros(3), scale, inverse)
        np.testing.assert_allclose(grad, expected)


def test_gradient_matches_finite_difference(batch):
    mean = [0.5, -1.0, 2.0]
    scale = [1.5, 3.0, 0.25]
    weights = np.random.default_rng(5).normal(size=batch.shape)
    grad = affine_scale_gradient(batch, scale, weights, inverse=True)
    eps = 1e-2
    bumped = batch.copy()
    bumped[1, 0, 2] += eps
    delta = (
        np.sum(affine_scale(bumped, mean, scale, inverse=True) * weights)
        - np.sum(affine_scale(batch, mean, scale, inverse=True) * weights)
    ) / eps
    assert delta == pytest.approx(grad[1, 0, 2], rel=1e-2)


def test_mismatched_mean_length(batch):
    with pytest.raises(ValueError):
        affine_scale(batch, [0.0, 1.0], [1.0, 1.0, 1.0])


def test_scalar_input_rejected():
    with pytest.raises(ValueError):
        affine_scale(1.0, [0.0], [1.0])


def test_gradient_size_mismatch(batch):
    with pytest.raises(ValueError):
        affine_scale_gradient(batch, [1.0, 1.0, 1.0], np.ones(5))